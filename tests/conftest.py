"""
Pytest configuration and fixtures for pyfsm tests.

Provides deterministic RNG, the reference automata, and a clean logging setup.
"""

import pytest


@pytest.fixture
def deterministic_rng():
    """
    Create a deterministic RNG seeded with 12345.

    Used throughout test suite to ensure reproducible random inputs.
    """
    from pyfsm.core.rng import make_rng
    return make_rng(12345)


@pytest.fixture
def mod3():
    """Modulo-3 automaton, the classic divisibility-by-three DFA."""
    from pyfsm.automata.modulo import ModuloAutomaton
    return ModuloAutomaton(3)


@pytest.fixture
def streak3():
    """Streak automaton accepting words that end in three ones."""
    from pyfsm.automata.streak import StreakAutomaton
    return StreakAutomaton(3)


@pytest.fixture
def parity():
    """Two-state parity automaton."""
    from pyfsm.automata.parity import ParityAutomaton
    return ParityAutomaton()


@pytest.fixture(autouse=True)
def default_logging():
    """
    Reset structlog around every test.

    CLI invocations reconfigure logging onto the runner's temporary stderr,
    which is closed once the invocation returns.
    """
    from pyfsm.utils.logging import configure_logging
    configure_logging()
    yield
    configure_logging()


@pytest.fixture
def debug_logging(default_logging):
    """Enable debug-level logging for the test."""
    from pyfsm.utils.logging import configure_logging
    configure_logging("debug")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep PYFSM_* variables from the outer environment out of tests."""
    for name in ("PYFSM_LOG_LEVEL", "PYFSM_LOG_FORMAT", "PYFSM_DEFAULT_N"):
        monkeypatch.delenv(name, raising=False)
