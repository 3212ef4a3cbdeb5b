"""
Property checks of the reference automata against independent oracles.

Random words come from seeded generators so failures are reproducible.
"""

import pytest

from pyfsm.automata.modulo import ModuloAutomaton
from pyfsm.automata.parity import ParityAutomaton
from pyfsm.automata.streak import StreakAutomaton
from pyfsm.core.rng import make_rng, random_binary_strings, spawn_rngs
from pyfsm.measures.equivalence import agreement, disagreements


def _trailing_ones(word, cap):
    return min(len(word) - len(word.rstrip("1")), cap)


def test_totality_for_all_reference_automata():
    """Every (state, symbol) pair maps into Q."""
    for automaton in (ModuloAutomaton(9), StreakAutomaton(6), ParityAutomaton()):
        delta = automaton.transitions()
        assert len(delta) == len(automaton.states) * len(automaton.alphabet)
        assert set(delta.values()) <= set(automaton.states)


def test_modulo_matches_integer_arithmetic():
    """Random moduli and words agree with int(word, 2) % N."""
    mod_rng, word_rng = spawn_rngs(make_rng(2024), 2)
    for modulus in mod_rng.integers(1, 101, size=100):
        automaton = ModuloAutomaton(int(modulus))
        words = random_binary_strings(word_rng, 5, min_length=1, max_length=50)
        mismatches = disagreements(automaton, lambda w: int(w, 2) % int(modulus), words)
        assert mismatches == [], f"modulus={modulus}"


def test_modulo_long_input_matches_bigint(deterministic_rng):
    """1000-bit words need no big-integer state in the automaton."""
    automaton = ModuloAutomaton(123)
    word = random_binary_strings(deterministic_rng, 1, 1000, 1000)[0]
    automaton.feed(word)
    assert automaton.remainder == int(word, 2) % 123


@pytest.mark.parametrize("length", [1, 2, 3, 7])
def test_streak_matches_trailing_ones(length, deterministic_rng):
    """Final count is the all-ones suffix length capped at N."""
    words = random_binary_strings(deterministic_rng, 200, min_length=0, max_length=30)
    automaton = StreakAutomaton(length)
    assert agreement(automaton, lambda w: _trailing_ones(w, length), words) == 1.0
    for word in words:
        assert automaton.accepts(word) is (_trailing_ones(word, length) == length)


def test_modulo_one_accepts_everything(deterministic_rng):
    automaton = ModuloAutomaton(1)
    for word in random_binary_strings(deterministic_rng, 50, 0, 40):
        assert automaton.run(word) is True


def test_reset_is_idempotent(deterministic_rng):
    """reset() returns to q0 whatever happened before."""
    automaton = ModuloAutomaton(11)
    for word in random_binary_strings(deterministic_rng, 20):
        automaton.feed(word)
        automaton.reset()
        assert automaton.current_state == automaton.initial_state
        automaton.reset()
        assert automaton.current_state == automaton.initial_state
