from __future__ import annotations

from typing import Any

import numpy as np

from pyfsm.core.errors import InvalidParameter
from pyfsm.utils.logging import get_logger

logger = get_logger("automata.params")


def _as_whole_number(value: Any):
    # bool is an int subclass; True is not a meaningful size
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return int(value)
    return None


def require_positive_int(value: Any, error: type[InvalidParameter]) -> int:
    """
    Return value as int, or raise error if it is not a positive whole number.

    Integral floats such as 3.0 are accepted and converted; 1.5, bools,
    strings and None are rejected.
    """
    number = _as_whole_number(value)
    if number is None or number <= 0:
        logger.warning("parameter_rejected", parameter=error.parameter, value=repr(value))
        raise error(value)
    return number
