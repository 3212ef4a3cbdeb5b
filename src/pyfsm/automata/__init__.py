"""Reference automata built on the core engine."""

from pyfsm.automata.modulo import ModuloAutomaton, modulo_rule
from pyfsm.automata.parity import ParityAutomaton, parity_rule
from pyfsm.automata.streak import StreakAutomaton, streak_rule

__all__ = [
    "ModuloAutomaton",
    "ParityAutomaton",
    "StreakAutomaton",
    "modulo_rule",
    "parity_rule",
    "streak_rule",
]
