"""Helpers for presenting binary input and automaton states."""

from __future__ import annotations

import re
from typing import Hashable

_BINARY_RE = re.compile(r"[01]+")


def is_binary_string(text: str) -> bool:
    """True for a non-empty string made only of "0" and "1"."""
    return bool(_BINARY_RE.fullmatch(text))


def to_decimal(text: str) -> str:
    """Decimal value of a binary string, or "" if it is not one."""
    if not text or not is_binary_string(text):
        return ""
    return str(int(text, 2))


def state_label(state: Hashable) -> str:
    """Display label for a state: "S3" for integer states, str() otherwise."""
    if isinstance(state, int) and not isinstance(state, bool):
        return f"S{state}"
    return str(state)
