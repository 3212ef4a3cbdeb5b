"""
Modulo-N automaton: remainder of a binary number, one bit at a time.

Reading bit b after a prefix with value v gives value 2v + b, so the
remainder follows r -> (2r + b) mod N. Each step is O(1) and the state is
bounded by N, whatever the length of the input.
"""

from __future__ import annotations

from functools import partial

from pyfsm.automata.params import require_positive_int
from pyfsm.core.automaton import Automaton
from pyfsm.core.errors import InvalidModulus
from pyfsm.core.types import BINARY_ALPHABET


def modulo_rule(modulus: int, remainder: int, symbol: str) -> int:
    """Next remainder after appending bit symbol to a number with this remainder."""
    bit = 1 if symbol == "1" else 0
    return (remainder * 2 + bit) % modulus


class ModuloAutomaton(Automaton):
    """
    Accepts binary strings whose value is divisible by modulus.

    States are the remainders 0..modulus-1; q0 = F = {0}. The empty string
    has value 0 and is therefore accepted.
    """

    def __init__(self, modulus: int) -> None:
        self._modulus = require_positive_int(modulus, InvalidModulus)
        super().__init__(
            states=range(self._modulus),
            alphabet=BINARY_ALPHABET,
            initial_state=0,
            accept_states={0},
        )
        self.generate_transitions(partial(modulo_rule, self._modulus))

    @property
    def modulus(self) -> int:
        return self._modulus

    @property
    def remainder(self) -> int:
        return self.current_state
