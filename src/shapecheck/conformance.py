"""Conformance checker.

Walks a value against a schema in lock-step with its shape and stops at the
first mismatch. Mismatches are returned as ValidationMismatch values, never
raised; only a malformed schema raises (SchemaDeclarationError).

The checker is a pure function of (value, schema, config): it never writes
to the schema or the value and keeps no state between calls, so a schema
can be shared freely between threads.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .config import CheckConfig
from .declarations import (
    MISSING,
    ArrayNode,
    ConstantsNode,
    OptionalNode,
    Schema,
    TupleNode,
    UnionNode,
    freeze_declaration,
)
from .exceptions import SchemaDeclarationError, SchemaMismatchError
from .types import Type, describe_kind, is_array, is_object, matches_primitive

logger = logging.getLogger(__name__)

ROOT_PATH = "$"

_DEFAULT_CONFIG = CheckConfig()


@dataclass(frozen=True)
class ValidationMismatch:
    """The first mismatch found between a value and a schema."""
    path: str
    message: str
    expected: str | None = None
    actual: str | None = None

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "path": self.path,
            "message": self.message,
            "expected": self.expected,
            "actual": self.actual,
        }


def describe_schema(schema: Schema) -> str:
    """Short human-readable name of a schema node for diagnostics."""
    if isinstance(schema, Type):
        return schema.value
    if isinstance(schema, OptionalNode):
        return f"optional {describe_schema(schema.inner)}"
    if isinstance(schema, UnionNode):
        return " | ".join(describe_schema(alt) for alt in schema.alternatives)
    if isinstance(schema, TupleNode):
        return f"tuple[{', '.join(describe_schema(e) for e in schema.elements)}]"
    if isinstance(schema, ArrayNode):
        return f"array of {describe_schema(schema.element)}"
    if isinstance(schema, ConstantsNode):
        return f"one of {list(schema.values)!r}"
    if isinstance(schema, Mapping):
        return "object"
    return type(schema).__name__


def _describe_value(value: Any) -> str:
    if value is MISSING:
        return "missing"
    if value is None:
        return "null"
    if isinstance(value, (bool, int, float, str)):
        return f"{describe_kind(value)} {value!r}"
    return describe_kind(value)


def _mismatch(path: str, schema: Schema, value: Any, message: str | None = None) -> ValidationMismatch:
    expected = describe_schema(schema)
    actual = _describe_value(value)
    if message is None:
        if value is MISSING:
            message = f"required value is missing (expected {expected})"
        else:
            message = f"expected {expected}, got {actual}"
    return ValidationMismatch(path=path, message=message, expected=expected, actual=actual)


def _check(value: Any, schema: Schema, path: str, config: CheckConfig) -> ValidationMismatch | None:
    if isinstance(schema, Type):
        if value is not MISSING and matches_primitive(schema, value, strict_float=config.strict_float):
            return None
        return _mismatch(path, schema, value)

    if isinstance(schema, OptionalNode):
        if value is MISSING:
            return None
        return _check(value, schema.inner, path, config)

    if isinstance(schema, UnionNode):
        return _check_union(value, schema, path, config)

    if isinstance(schema, TupleNode):
        return _check_tuple(value, schema, path, config)

    if isinstance(schema, ArrayNode):
        return _check_array(value, schema, path, config)

    if isinstance(schema, ConstantsNode):
        if value is not MISSING and schema.accepts(value):
            return None
        return _mismatch(path, schema, value)

    if isinstance(schema, Mapping):
        return _check_mapping(value, schema, path, config)

    raise SchemaDeclarationError(
        f"Not a schema: {schema!r} ({type(schema).__name__})", path
    )


def _check_union(value: Any, schema: UnionNode, path: str, config: CheckConfig) -> ValidationMismatch | None:
    last = None
    for alternative in schema.alternatives:
        last = _check(value, alternative, path, config)
        if last is None:
            return None

    if value is MISSING:
        return _mismatch(path, schema, value)
    count = len(schema.alternatives)
    return _mismatch(
        path, schema, value,
        f"matches none of {count} alternative{'s' if count != 1 else ''} "
        f"(last: {last.message})"
    )


def _check_tuple(value: Any, schema: TupleNode, path: str, config: CheckConfig) -> ValidationMismatch | None:
    if value is MISSING or not is_array(value):
        return _mismatch(path, schema, value)

    expected_length = len(schema.elements)
    if len(value) != expected_length:
        return _mismatch(
            path, schema, value,
            f"expected tuple of length {expected_length}, got length {len(value)}"
        )

    for index, (item, element) in enumerate(zip(value, schema.elements)):
        mismatch = _check(item, element, f"{path}[{index}]", config)
        if mismatch is not None:
            return mismatch
    return None


def _check_array(value: Any, schema: ArrayNode, path: str, config: CheckConfig) -> ValidationMismatch | None:
    if value is MISSING or not is_array(value):
        return _mismatch(path, schema, value)

    for index, item in enumerate(value):
        mismatch = _check(item, schema.element, f"{path}[{index}]", config)
        if mismatch is not None:
            return mismatch
    return None


def _check_mapping(value: Any, schema: Mapping, path: str, config: CheckConfig) -> ValidationMismatch | None:
    if value is MISSING or not is_object(value):
        return _mismatch(path, schema, value)

    for key, field_schema in schema.items():
        mismatch = _check(value.get(key, MISSING), field_schema, f"{path}.{key}", config)
        if mismatch is not None:
            return mismatch

    if config.closed_objects:
        undeclared = sorted((key for key in value if key not in schema), key=str)
        if undeclared:
            key = undeclared[0]
            return ValidationMismatch(
                path=f"{path}.{key}",
                message="field is not declared in the schema",
                expected=None,
                actual=_describe_value(value[key]),
            )
    return None


def conforms_to_type(value: Any, schema: Schema, config: CheckConfig | None = None) -> ValidationMismatch | None:
    """Check whether value conforms to schema.

    Args:
        value: Candidate value, e.g. the result of json.loads. Pass MISSING
               to check an absent value.
        schema: Type tag, mapping declaration or combinator node
        config: Optional checking options (defaults: open objects, any
                number for FLOAT)

    Returns:
        None if the value conforms, otherwise the first mismatch found

    Raises:
        SchemaDeclarationError: If the schema is malformed
    """
    # hand-written mappings are validated as a whole before any value is read
    schema = freeze_declaration(schema)
    mismatch = _check(value, schema, ROOT_PATH, config or _DEFAULT_CONFIG)
    if mismatch is not None:
        logger.debug(f"Value does not conform: {mismatch}")
    return mismatch


def is_valid(value: Any, schema: Schema, config: CheckConfig | None = None) -> bool:
    """Boolean form of conforms_to_type."""
    return conforms_to_type(value, schema, config) is None


def ensure_conforms(value: Any, schema: Schema, config: CheckConfig | None = None) -> Any:
    """Return value unchanged if it conforms, raise SchemaMismatchError otherwise."""
    mismatch = conforms_to_type(value, schema, config)
    if mismatch is not None:
        raise SchemaMismatchError(mismatch)
    return value
