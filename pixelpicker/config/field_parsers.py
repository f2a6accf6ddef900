"""
Tolerant extraction helpers for reading loosely typed JSON values.

Each helper returns None when the value does not have the expected shape so
callers can substitute the field's default.
"""

from typing import Any, Optional

MAX_UINT = 2 ** 64 - 1


def parse_bool(value: Any) -> Optional[bool]:
    """Return value if it is a JSON boolean."""
    if isinstance(value, bool):
        return value
    return None


def parse_uint(value: Any) -> Optional[int]:
    """Return value if it is a JSON integer that fits an unsigned 64-bit word."""
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if not (0 <= value <= MAX_UINT):
        return None
    return value


def parse_uint_in_range(value: Any, low: int, high: int) -> Optional[int]:
    """Return an unsigned integer satisfying low < value < high."""
    number = parse_uint(value)
    if number is None or not (low < number < high):
        return None
    return number
