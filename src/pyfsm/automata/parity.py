"""Two-state parity automaton: even number of "1"s seen so far."""

from __future__ import annotations

from pyfsm.core.automaton import Automaton
from pyfsm.core.types import BINARY_ALPHABET

EVEN = "even"
ODD = "odd"


def parity_rule(state: str, symbol: str) -> str:
    if symbol == "0":
        return state
    return ODD if state == EVEN else EVEN


class ParityAutomaton(Automaton):
    def __init__(self) -> None:
        super().__init__(
            states=(EVEN, ODD),
            alphabet=BINARY_ALPHABET,
            initial_state=EVEN,
            accept_states={EVEN},
        )
        self.generate_transitions(parity_rule)
