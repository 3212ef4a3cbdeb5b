from __future__ import annotations

from typing import Callable, Hashable, Sequence

import numpy as np

from pyfsm.core.automaton import Automaton
from pyfsm.core.types import State


def final_states(automaton: Automaton, words: Sequence[str]) -> list[State]:
    """State reached from q0 on each word. The automaton is not mutated."""
    return [automaton.trace(word)[-1] for word in words]


def agreement(
    automaton: Automaton,
    oracle: Callable[[str], State],
    words: Sequence[str],
) -> float:
    """
    Fraction of words on which the automaton's final state equals oracle(word).

    Raises:
        ValueError: If words is empty.
    """
    if not words:
        raise ValueError("words must not be empty")

    predicted = final_states(automaton, words)
    correct = sum(1 for word, state in zip(words, predicted) if state == oracle(word))
    return float(correct) / float(len(words))


def disagreements(
    automaton: Automaton,
    oracle: Callable[[str], State],
    words: Sequence[str],
) -> list[tuple[str, State, State]]:
    """(word, automaton state, oracle state) for every mismatching word."""
    mismatches = []
    for word, state in zip(words, final_states(automaton, words)):
        expected = oracle(word)
        if state != expected:
            mismatches.append((word, state, expected))
    return mismatches


def state_confusion_matrix(
    predicted_states: Sequence[Hashable],
    true_states: Sequence[Hashable],
) -> tuple[np.ndarray, list[Hashable]]:
    """
    Count matrix of true (rows) vs predicted (columns) states.

    Returns:
        (matrix, labels) where labels orders both axes.
    """
    if len(predicted_states) != len(true_states):
        raise ValueError("predicted_states and true_states must have same length")
    if not predicted_states:
        raise ValueError("predicted_states must not be empty")

    seen = set(predicted_states) | set(true_states)
    try:
        labels = sorted(seen)
    except TypeError:
        labels = sorted(seen, key=repr)
    state_to_idx = {state: idx for idx, state in enumerate(labels)}

    matrix = np.zeros((len(labels), len(labels)), dtype=np.int64)
    for pred, true in zip(predicted_states, true_states):
        matrix[state_to_idx[true], state_to_idx[pred]] += 1

    return matrix, labels
