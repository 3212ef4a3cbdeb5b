"""Core automaton engine: types, errors, the engine itself and RNG helpers."""
