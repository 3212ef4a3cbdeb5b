"""Structural and behavioral measures over automata."""
