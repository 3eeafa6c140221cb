"""Combinators for building composite schema nodes.

All combinators are pure constructors. They validate their arguments
eagerly, so a malformed schema fails where it is declared rather than on
the first check.
"""

from collections.abc import Sequence
from typing import Any

from .declarations import (
    ArrayNode,
    ConstantsNode,
    OptionalNode,
    Schema,
    TupleNode,
    UnionNode,
)
from .exceptions import SchemaDeclarationError
from .types import Type, matches_primitive


def simple(tag: Type, value: Any) -> bool:
    """Check a value against a single primitive tag."""
    return matches_primitive(tag, value)


def optional(inner: Schema) -> OptionalNode:
    """Allow the value to be absent (MISSING); None is still rejected."""
    return OptionalNode(inner)


def union_or(*alternatives: Schema) -> UnionNode:
    """Match if at least one alternative matches.

    Alternatives are tried in the order given. The union does not tolerate
    absence on its own; wrap it in optional() for that.
    """
    return UnionNode(alternatives)


def array(element: Schema) -> ArrayNode:
    """Match an array of any length whose items all match element."""
    return ArrayNode(element)


def tuple_of(elements: Sequence[Schema]) -> TupleNode:
    """Match an array with exactly one item per element schema, in order.

    Args:
        elements: Element schemas by position

    Raises:
        SchemaDeclarationError: If elements is not a list or tuple of schemas
    """
    if not isinstance(elements, (list, tuple)):
        raise SchemaDeclarationError(
            f"tuple_of expects a list of schemas, got {type(elements).__name__}"
        )
    return TupleNode(tuple(elements))


def any_of_constants(values: Sequence[Any]) -> ConstantsNode:
    """Match a value equal to one of the given constants."""
    if not isinstance(values, (list, tuple)):
        raise SchemaDeclarationError(
            f"any_of_constants expects a list of values, got {type(values).__name__}"
        )
    return ConstantsNode(tuple(values))
