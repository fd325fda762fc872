# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Safe extraction helpers for schemaless JSON values.

Trace files come from many Chrome versions and field types drift between
them, so every accessor here returns a default instead of raising when a
value has an unexpected type.
"""

import math
from typing import Any, Union

Number = Union[int, float]


def value_to_string(value: Any) -> str:
    """
    Return value if it is a string, otherwise an empty string.

    Args:
        value: Any JSON value

    Returns:
        The string itself, or "" for any other type (including None)

    Examples:
        >>> value_to_string("Renderer")
        'Renderer'
        >>> value_to_string(42)
        ''
    """
    if isinstance(value, str):
        return value
    return ""


def get_arg(args: Any, key: str) -> Any:
    """Look up key in an event's args, returning None if args is not an object."""
    if isinstance(args, dict):
        return args.get(key)
    return None


def as_int(value: Any, default: int = 0) -> int:
    """
    Coerce a JSON value to an int.

    Accepts ints, integral floats and decimal (zero-padded included) or
    0x/0o/0b prefixed strings. bool is rejected because JSON true/false
    are never process or thread ids.

    Args:
        value: Any JSON value
        default: Returned when value cannot be converted

    Returns:
        Converted integer or default
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return default
    if isinstance(value, str):
        text = value.strip()
        # Decimal first so zero-padded ids such as "0300" keep their value
        for base in (10, 0):
            try:
                return int(text, base)
            except ValueError:
                continue
        return default
    return default


def as_number(value: Any, default: Number = 0) -> Number:
    """
    Coerce a JSON value to a number, keeping fractional timestamps.

    Integral floats become ints so that 1000.0 and 1000 compare and
    serialize the same way.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return default
        return int(value) if value.is_integer() else value
    if isinstance(value, str):
        try:
            return as_number(float(value), default)
        except ValueError:
            return default
    return default


def as_id(value: Any, default: Union[str, int] = "") -> Union[str, int]:
    """
    Keep an id-like field (id, s, scope) in its source representation.

    Only strings and integers are accepted; integral floats collapse to int.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, (str, int)):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return default


def as_string_id(value: Union[str, int]) -> str:
    """
    Normalize a string-or-integer id to its string form.

    Examples:
        >>> as_string_id(42)
        '42'
        >>> as_string_id("0x2a")
        '0x2a'
    """
    if isinstance(value, str):
        return value
    return str(value)
