"""
Tests for binary-string presentation helpers.
"""

import pytest

from pyfsm.binary import is_binary_string, state_label, to_decimal


class TestIsBinaryString:

    @pytest.mark.parametrize("text", ["0", "1", "0101", "1" * 500])
    def test_accepts_binary(self, text):
        assert is_binary_string(text) is True

    @pytest.mark.parametrize("text", ["", "2", "01a", " 01", "01\n", "back"])
    def test_rejects_non_binary(self, text):
        assert is_binary_string(text) is False


class TestToDecimal:

    def test_small_values(self):
        assert to_decimal("110") == "6"
        assert to_decimal("101") == "5"
        assert to_decimal("0") == "0"

    def test_arbitrary_precision(self):
        assert to_decimal("1" + "0" * 100) == str(2 ** 100)

    def test_invalid_returns_empty(self):
        assert to_decimal("") == ""
        assert to_decimal("12") == ""


class TestStateLabel:

    def test_integer_states(self):
        assert state_label(0) == "S0"
        assert state_label(42) == "S42"

    def test_other_states(self):
        assert state_label("even") == "even"
        assert state_label(True) == "True"
