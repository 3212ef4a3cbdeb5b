"""
Streak automaton: were the last N symbols all "1"?

The state counts trailing ones, saturating at N. A "0" resets the count,
and any run of ones longer than N stays in the accepting state N, so an
unbounded run fits in N + 1 states.
"""

from __future__ import annotations

from functools import partial

from pyfsm.automata.params import require_positive_int
from pyfsm.core.automaton import Automaton
from pyfsm.core.errors import InvalidStreakLength
from pyfsm.core.types import BINARY_ALPHABET


def streak_rule(length: int, count: int, symbol: str) -> int:
    if symbol == "0":
        return 0
    return min(count + 1, length)


class StreakAutomaton(Automaton):
    """Accepts binary strings ending in at least length consecutive "1"s."""

    def __init__(self, length: int) -> None:
        self._length = require_positive_int(length, InvalidStreakLength)
        super().__init__(
            states=range(self._length + 1),
            alphabet=BINARY_ALPHABET,
            initial_state=0,
            accept_states={self._length},
        )
        self.generate_transitions(partial(streak_rule, self._length))

    @property
    def length(self) -> int:
        return self._length

    @property
    def count(self) -> int:
        return self.current_state
