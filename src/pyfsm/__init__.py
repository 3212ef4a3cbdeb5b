"""
pyfsm: deterministic finite automata.

An engine for (Q, Σ, q0, F, δ) automata with a validated, precomputed
transition table, plus the modulo-N, streak and parity reference automata.
"""

__version__ = "0.1.0"

from pyfsm.automata.modulo import ModuloAutomaton
from pyfsm.automata.parity import ParityAutomaton
from pyfsm.automata.streak import StreakAutomaton
from pyfsm.core.automaton import Automaton, build_automaton
from pyfsm.core.errors import (
    AutomatonError,
    InvalidConfiguration,
    InvalidModulus,
    InvalidParameter,
    InvalidState,
    InvalidStreakLength,
    InvalidTransition,
    SymbolNotInAlphabet,
    TransitionsAlreadyGenerated,
    TransitionsNotGenerated,
)

__all__ = [
    "Automaton",
    "AutomatonError",
    "InvalidConfiguration",
    "InvalidModulus",
    "InvalidParameter",
    "InvalidState",
    "InvalidStreakLength",
    "InvalidTransition",
    "ModuloAutomaton",
    "ParityAutomaton",
    "StreakAutomaton",
    "SymbolNotInAlphabet",
    "TransitionsAlreadyGenerated",
    "TransitionsNotGenerated",
    "build_automaton",
]
