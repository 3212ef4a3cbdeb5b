"""
Graph measures over an automaton's transition table.

The table is viewed as a directed graph on state indices with an edge
q -> δ(q, σ) for every symbol. Traversals use scipy.sparse.csgraph.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from scipy.sparse import coo_matrix, csr_matrix
from scipy.sparse.csgraph import breadth_first_order, connected_components

from pyfsm.core.automaton import Automaton
from pyfsm.core.errors import InvalidState
from pyfsm.core.types import State


def transition_graph(automaton: Automaton) -> csr_matrix:
    """(|Q|, |Q|) adjacency matrix; entry [i, j] counts symbols taking i to j."""
    table = automaton.transition_table
    n_states, n_symbols = table.shape

    row = np.repeat(np.arange(n_states, dtype=np.int64), n_symbols)
    col = table.reshape(-1)
    data = np.ones(row.size, dtype=np.int64)
    coo = coo_matrix((data, (row, col)), shape=(n_states, n_states))
    return csr_matrix(coo)


def _bfs_indices(graph: csr_matrix, start: int) -> np.ndarray:
    return breadth_first_order(graph, start, directed=True, return_predecessors=False)


def reachable_states(automaton: Automaton, start: Optional[State] = None) -> list[State]:
    """
    States reachable from start (default q0), in breadth-first order.

    start itself is always included.
    """
    if start is None:
        start = automaton.initial_state
    if start not in automaton.states:
        raise InvalidState(start)

    graph = transition_graph(automaton)
    start_idx = automaton.states.index(start)
    return [automaton.states[i] for i in _bfs_indices(graph, start_idx)]


def unreachable_states(automaton: Automaton) -> list[State]:
    """States that no input can lead to from q0, in declaration order."""
    reachable = set(reachable_states(automaton))
    return [state for state in automaton.states if state not in reachable]


def dead_states(automaton: Automaton) -> list[State]:
    """States from which no accepting state can be reached."""
    reverse = transition_graph(automaton).T.tocsr()
    alive = np.zeros(len(automaton.states), dtype=bool)
    for state in automaton.accept_states:
        alive[_bfs_indices(reverse, automaton.states.index(state))] = True
    return [state for idx, state in enumerate(automaton.states) if not alive[idx]]


def is_strongly_connected(automaton: Automaton) -> bool:
    """True when every state can reach every other state."""
    n_components, _ = connected_components(
        transition_graph(automaton), directed=True, connection="strong"
    )
    return int(n_components) == 1
