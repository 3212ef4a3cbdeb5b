"""
Exceptions raised by the automaton engine and the reference automata.

Construction-time errors (bad declaration, bad transition rule, bad numeric
parameter) and operation-time errors (unknown symbol, unknown reset target)
subclass ValueError. Ordering bugs in a concrete automaton subclass
RuntimeError.
"""

from __future__ import annotations

from typing import Any, Hashable


class AutomatonError(Exception):
    """Base exception for all pyfsm errors."""


class InvalidConfiguration(AutomatonError, ValueError):
    """Raised when (Q, Σ, q0, F) violates a construction invariant."""


class InvalidTransition(AutomatonError, ValueError):
    """Raised when a transition rule yields a state outside Q."""

    def __init__(self, state: Hashable, symbol: Hashable, result: Any, reason: str = "") -> None:
        self.state = state
        self.symbol = symbol
        self.result = result
        message = f"rule maps ({state!r}, {symbol!r}) to {result!r}, which is not in states"
        if reason:
            message = f"rule failed on ({state!r}, {symbol!r}): {reason}"
        super().__init__(message)


class InvalidParameter(AutomatonError, ValueError):
    """Raised when a concrete automaton's numeric parameter is unusable."""

    parameter = "parameter"

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"{self.parameter} must be a positive integer, got {value!r}")


class InvalidModulus(InvalidParameter):
    parameter = "modulus"


class InvalidStreakLength(InvalidParameter):
    parameter = "streak length"


class SymbolNotInAlphabet(AutomatonError, ValueError):
    """Raised when transitioning on a symbol outside Σ."""

    def __init__(self, symbol: Any) -> None:
        self.symbol = symbol
        super().__init__(f"symbol {symbol!r} is not in alphabet")


class InvalidState(AutomatonError, ValueError):
    """Raised when resetting to a state outside Q."""

    def __init__(self, state: Any) -> None:
        self.state = state
        super().__init__(f"state {state!r} is not in states")


class TransitionsNotGenerated(AutomatonError, RuntimeError):
    """Raised when the automaton is driven before its table exists."""

    def __init__(self) -> None:
        super().__init__("transitions not generated; call generate_transitions() first")


class TransitionsAlreadyGenerated(AutomatonError, RuntimeError):
    """Raised when generate_transitions() is called a second time."""

    def __init__(self) -> None:
        super().__init__("transitions already generated; the table is immutable")
