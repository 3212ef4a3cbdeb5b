"""
Smoke test: verify pyfsm package is importable and has correct version.
"""

import pyfsm


def test_version():
    """Test that pyfsm package exports __version__ correctly."""
    assert pyfsm.__version__ == "0.1.0"


def test_public_exports():
    """Top-level package re-exports the engine and reference automata."""
    assert pyfsm.ModuloAutomaton(3).modulus == 3
    assert pyfsm.StreakAutomaton(2).length == 2
    assert pyfsm.ParityAutomaton().is_accepting()
    assert issubclass(pyfsm.InvalidModulus, pyfsm.AutomatonError)
