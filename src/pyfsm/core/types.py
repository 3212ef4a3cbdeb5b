"""
Core types for pyfsm: State, Symbol, TransitionRule, AutomatonSpec.

AutomatonSpec is the validated declaration (Q, Σ, q0, F) of an automaton.
It holds no transition table and no mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Hashable, Iterable

from pyfsm.core.errors import InvalidConfiguration

State = Hashable
Symbol = Hashable
TransitionRule = Callable[[State, Symbol], State]

BINARY_ALPHABET: tuple[str, ...] = ("0", "1")


def _as_ordered(values: Iterable[Hashable]) -> tuple[Hashable, ...]:
    # Sets carry no order of their own; sort them when the elements allow it.
    if isinstance(values, (set, frozenset)):
        try:
            return tuple(sorted(values))
        except TypeError:
            return tuple(values)
    return tuple(values)


@dataclass(frozen=True)
class AutomatonSpec:
    """
    Declaration of a DFA without its transition function.

    states and alphabet are normalized to tuples; their order fixes the
    row/column layout of the transition table.
    """

    states: tuple[State, ...]
    alphabet: tuple[Symbol, ...]
    initial_state: State
    accept_states: frozenset[State]

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "states", _as_ordered(self.states))
            object.__setattr__(self, "alphabet", _as_ordered(self.alphabet))
            object.__setattr__(self, "accept_states", frozenset(self.accept_states))
            state_set = set(self.states)
            symbol_set = set(self.alphabet)
            hash(self.initial_state)
        except TypeError as exc:
            raise InvalidConfiguration(f"states and symbols must be hashable: {exc}") from exc

        if not self.states:
            raise InvalidConfiguration("states must not be empty")
        if not self.alphabet:
            raise InvalidConfiguration("alphabet must not be empty")
        if len(state_set) != len(self.states):
            raise InvalidConfiguration("states must be unique")
        if len(symbol_set) != len(self.alphabet):
            raise InvalidConfiguration("alphabet symbols must be unique")

        if self.initial_state not in state_set:
            raise InvalidConfiguration(
                f"initial_state {self.initial_state!r} must be in states"
            )
        unknown = self.accept_states - state_set
        if unknown:
            raise InvalidConfiguration(
                f"accept_states must be a subset of states, unknown: {sorted(map(repr, unknown))}"
            )
