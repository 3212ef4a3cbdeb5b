"""
Automaton engine: the formal 5-tuple (Q, Σ, q0, F, δ) and its execution.

Declaration and table generation are separate steps:
- Automaton(...) validates (Q, Σ, q0, F) and leaves δ empty
- generate_transitions(rule) evaluates rule(q, σ) over Q × Σ once and
  stores the result as a read-only index table
- build_automaton(...) does both in one call

States and symbols are arbitrary hashables at the API boundary. Internally
each is replaced by its position in spec.states / spec.alphabet, so the hot
path is two dict lookups and one array read.

Instances are not thread-safe: callers sharing one instance must serialize
transition() and reset() themselves.
"""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from pyfsm.core.errors import (
    InvalidConfiguration,
    InvalidState,
    InvalidTransition,
    SymbolNotInAlphabet,
    TransitionsAlreadyGenerated,
    TransitionsNotGenerated,
)
from pyfsm.core.types import AutomatonSpec, State, Symbol, TransitionRule
from pyfsm.utils.logging import get_logger

logger = get_logger("core.automaton")


class Automaton:
    """
    Deterministic finite automaton over a validated, total transition table.

    Subclasses declare (Q, Σ, q0, F) through __init__ and then call
    generate_transitions() exactly once with their rule.
    """

    def __init__(
        self,
        states: Iterable[State],
        alphabet: Iterable[Symbol],
        initial_state: State,
        accept_states: Iterable[State],
    ) -> None:
        try:
            self._spec = AutomatonSpec(
                states=states,
                alphabet=alphabet,
                initial_state=initial_state,
                accept_states=accept_states,
            )
        except InvalidConfiguration as exc:
            logger.warning("automaton_config_rejected", error=str(exc))
            raise

        spec = self._spec
        self._state_index = {state: idx for idx, state in enumerate(spec.states)}
        self._symbol_index = {symbol: idx for idx, symbol in enumerate(spec.alphabet)}
        self._initial = self._state_index[spec.initial_state]

        accepting = np.zeros(len(spec.states), dtype=bool)
        accepting[np.array([self._state_index[s] for s in spec.accept_states], dtype=np.intp)] = True
        accepting.flags.writeable = False
        self._accepting = accepting

        self._table: Optional[np.ndarray] = None
        self._current = self._initial

        logger.debug(
            "automaton_declared",
            automaton=type(self).__name__,
            n_states=len(spec.states),
            n_symbols=len(spec.alphabet),
        )

    @staticmethod
    def build(
        states: Iterable[State],
        alphabet: Iterable[Symbol],
        initial_state: State,
        accept_states: Iterable[State],
        rule: TransitionRule,
    ) -> "Automaton":
        """
        Declare an automaton and generate its table in one step.

        Always returns a plain Automaton, also when called through a
        subclass whose constructor takes its own parameters.
        """
        automaton = Automaton(states, alphabet, initial_state, accept_states)
        automaton.generate_transitions(rule)
        return automaton

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------

    @property
    def spec(self) -> AutomatonSpec:
        return self._spec

    @property
    def states(self) -> tuple[State, ...]:
        return self._spec.states

    @property
    def alphabet(self) -> tuple[Symbol, ...]:
        return self._spec.alphabet

    @property
    def initial_state(self) -> State:
        return self._spec.initial_state

    @property
    def accept_states(self) -> frozenset[State]:
        return self._spec.accept_states

    # ------------------------------------------------------------------
    # Transition table
    # ------------------------------------------------------------------

    def generate_transitions(self, rule: TransitionRule) -> None:
        """
        Evaluate rule over every (state, symbol) pair and store the table.

        Args:
            rule: Pure function (state, symbol) -> state.

        Raises:
            TransitionsAlreadyGenerated: If called more than once.
            InvalidTransition: If rule returns a state outside Q, returns an
                unhashable value, or raises. No table is stored in that case.
        """
        if self._table is not None:
            raise TransitionsAlreadyGenerated()

        spec = self._spec
        table = np.empty((len(spec.states), len(spec.alphabet)), dtype=np.int64)

        for i, state in enumerate(spec.states):
            for j, symbol in enumerate(spec.alphabet):
                try:
                    result = rule(state, symbol)
                except Exception as exc:
                    logger.warning(
                        "transition_rule_failed",
                        automaton=type(self).__name__,
                        state=repr(state),
                        symbol=repr(symbol),
                        error=repr(exc),
                    )
                    raise InvalidTransition(state, symbol, None, reason=repr(exc)) from exc

                try:
                    target = self._state_index.get(result)
                except TypeError:
                    target = None
                if target is None:
                    logger.warning(
                        "transition_out_of_states",
                        automaton=type(self).__name__,
                        state=repr(state),
                        symbol=repr(symbol),
                        result=repr(result),
                    )
                    raise InvalidTransition(state, symbol, result)
                table[i, j] = target

        table.flags.writeable = False
        self._table = table

        logger.debug(
            "transitions_generated",
            automaton=type(self).__name__,
            n_entries=int(table.size),
        )

    @property
    def transitions_generated(self) -> bool:
        return self._table is not None

    @property
    def transition_table(self) -> np.ndarray:
        """Read-only (|Q|, |Σ|) array of next-state indices into states."""
        return self._require_table()

    def transitions(self) -> dict[tuple[State, Symbol], State]:
        """δ as a dict keyed by (state, symbol)."""
        table = self._require_table()
        states = self._spec.states
        return {
            (state, symbol): states[table[i, j]]
            for i, state in enumerate(states)
            for j, symbol in enumerate(self._spec.alphabet)
        }

    def next_state(self, state: State, symbol: Symbol) -> State:
        """Look up δ(state, symbol) without touching the current state."""
        table = self._require_table()
        i = self._index_of_state(state)
        j = self._index_of_symbol(symbol)
        return self._spec.states[table[i, j]]

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    @property
    def current_state(self) -> State:
        return self._spec.states[self._current]

    def get_state(self) -> State:
        return self.current_state

    def is_accepting(self) -> bool:
        return bool(self._accepting[self._current])

    def transition(self, symbol: Symbol) -> State:
        """
        Advance on one symbol and return the new current state.

        Raises:
            TransitionsNotGenerated: If the table has not been generated.
            SymbolNotInAlphabet: If symbol is not in Σ; state is unchanged.
        """
        table = self._require_table()
        j = self._index_of_symbol(symbol)
        self._current = int(table[self._current, j])
        return self._spec.states[self._current]

    def reset(self, state: Optional[State] = None) -> None:
        """
        Set the current state to state, or to q0 when state is None.

        Raises:
            InvalidState: If state is not in Q; current state is unchanged.
        """
        if state is None:
            self._current = self._initial
        else:
            self._current = self._index_of_state(state)
        logger.debug("automaton_reset", automaton=type(self).__name__, state=repr(self.current_state))

    def feed(self, symbols: Iterable[Symbol]) -> State:
        """
        Transition on each symbol in order and return the final state.

        Stops at the first failing symbol and re-raises; the automaton is
        then left at the last state it successfully reached.
        """
        for symbol in symbols:
            self.transition(symbol)
        return self.current_state

    def run(self, symbols: Iterable[Symbol]) -> bool:
        """Reset to q0, feed symbols, and report whether the result is accepting."""
        self.reset()
        self.feed(symbols)
        return self.is_accepting()

    def trace(self, symbols: Iterable[Symbol]) -> list[State]:
        """States visited from q0 over symbols, q0 included. Does not mutate."""
        table = self._require_table()
        states = self._spec.states
        current = self._initial
        visited = [states[current]]
        for symbol in symbols:
            current = int(table[current, self._index_of_symbol(symbol)])
            visited.append(states[current])
        return visited

    def accepts(self, symbols: Iterable[Symbol]) -> bool:
        """Whether δ*(q0, symbols) is accepting. Does not mutate."""
        table = self._require_table()
        current = self._initial
        for symbol in symbols:
            current = int(table[current, self._index_of_symbol(symbol)])
        return bool(self._accepting[current])

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_table(self) -> np.ndarray:
        if self._table is None:
            raise TransitionsNotGenerated()
        return self._table

    def _index_of_symbol(self, symbol: Symbol) -> int:
        try:
            return self._symbol_index[symbol]
        except (KeyError, TypeError):
            raise SymbolNotInAlphabet(symbol) from None

    def _index_of_state(self, state: State) -> int:
        try:
            return self._state_index[state]
        except (KeyError, TypeError):
            raise InvalidState(state) from None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n_states={len(self._spec.states)}, "
            f"alphabet={self._spec.alphabet!r}, current={self.current_state!r})"
        )


def build_automaton(
    states: Iterable[State],
    alphabet: Iterable[Symbol],
    initial_state: State,
    accept_states: Iterable[State],
    rule: TransitionRule,
) -> Automaton:
    """
    Declare, validate and generate an automaton in a single call.

    The returned automaton is ready for use; there is no intermediate
    declared-but-not-generated instance for the caller to misuse.

    Example:
        >>> dfa = build_automaton(
        ...     states=("even", "odd"),
        ...     alphabet=("0", "1"),
        ...     initial_state="even",
        ...     accept_states={"even"},
        ...     rule=lambda q, s: q if s == "0" else ("odd" if q == "even" else "even"),
        ... )
        >>> dfa.run("11")
        True
    """
    return Automaton.build(states, alphabet, initial_state, accept_states, rule)
