"""Primitive type vocabulary.

The closed set of tags naming the atomic shapes an untyped value can take,
and the matcher deciding whether a value has a given shape. No coercion is
ever applied: a value either has the shape or it does not.
"""

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any


class Type(str, Enum):
    """Primitive type tags."""
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"


def is_number(value: Any) -> bool:
    """Check for a numeric value. Booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_whole_number(value: Any) -> bool:
    """Check for a number without a fractional component (1 and 1.0 alike)."""
    if not is_number(value):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value) and value.is_integer()


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_array(value: Any) -> bool:
    # str/bytes are sequences too but never arrays
    return isinstance(value, (list, tuple))


def matches_primitive(tag: Type, value: Any, strict_float: bool = False) -> bool:
    """Decide whether value has the primitive shape named by tag.

    Args:
        tag: Primitive type tag
        value: Candidate value
        strict_float: Reject int values for Type.FLOAT

    Returns:
        True if the value matches the tag's rule

    Raises:
        ValueError: If tag is not a primitive type tag
    """
    tag = Type(tag)

    if tag is Type.STRING:
        return isinstance(value, str)
    if tag is Type.INTEGER:
        return is_whole_number(value)
    if tag is Type.FLOAT:
        if strict_float:
            return isinstance(value, float)
        return is_number(value)
    if tag is Type.BOOLEAN:
        return isinstance(value, bool)
    if tag is Type.OBJECT:
        return is_object(value)
    if tag is Type.ARRAY:
        return is_array(value)

    raise ValueError(f"No matching rule for type tag: {tag!r}")


def describe_kind(value: Any) -> str:
    """Name the runtime kind of a value for diagnostics."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if is_object(value):
        return "object"
    if is_array(value):
        return "array"
    return type(value).__name__
