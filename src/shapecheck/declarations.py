"""Declaration model: the grammar of a schema.

A schema is one of:
    - a primitive Type tag,
    - a mapping of field name to schema (object shape),
    - a composite node built by a combinator (see shapecheck.fields).

Schema nodes are immutable once built, compare by value and are
unhashable. Mapping declarations handed to a combinator are copied into
read-only mappings, so a node never changes underneath a running check.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Union

from .exceptions import SchemaDeclarationError
from .types import Type, is_number


class _Missing:
    """Marker for an absent value (missing key or explicit absent element).

    Distinct from None: None is null, a present value that no primitive
    accepts. MISSING is only tolerated by an enclosing OptionalNode.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return "MISSING"


MISSING = _Missing()


@dataclass(frozen=True)
class OptionalNode:
    """Matches MISSING, otherwise delegates to inner."""
    inner: "Schema"

    __hash__ = None  # nodes may hold read-only mappings

    def __post_init__(self):
        object.__setattr__(self, "inner", freeze_declaration(self.inner, "$.inner"))


@dataclass(frozen=True)
class UnionNode:
    """Matches if any alternative matches, tried in declaration order."""
    alternatives: tuple

    __hash__ = None

    def __post_init__(self):
        if not isinstance(self.alternatives, Sequence) or isinstance(self.alternatives, str):
            raise SchemaDeclarationError("Union alternatives must be a sequence of schemas")
        if len(self.alternatives) == 0:
            raise SchemaDeclarationError("Union requires at least one alternative")
        frozen = tuple(
            freeze_declaration(alt, f"$.alternatives[{i}]")
            for i, alt in enumerate(self.alternatives)
        )
        object.__setattr__(self, "alternatives", frozen)


@dataclass(frozen=True)
class TupleNode:
    """Matches an array of exactly len(elements) items, position by position."""
    elements: tuple

    __hash__ = None

    def __post_init__(self):
        if not isinstance(self.elements, Sequence) or isinstance(self.elements, str):
            raise SchemaDeclarationError("Tuple elements must be a sequence of schemas")
        frozen = tuple(
            freeze_declaration(elem, f"$.elements[{i}]")
            for i, elem in enumerate(self.elements)
        )
        object.__setattr__(self, "elements", frozen)


@dataclass(frozen=True)
class ArrayNode:
    """Matches an array whose every item matches element."""
    element: "Schema"

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "element", freeze_declaration(self.element, "$.element"))


@dataclass(frozen=True)
class ConstantsNode:
    """Matches a value equal to one of the listed constants.

    Numbers compare by value (1 matches 1.0); every other kind must also
    match the constant's type, so True never matches 1.
    """
    values: tuple

    __hash__ = None

    def __post_init__(self):
        if not isinstance(self.values, Sequence) or isinstance(self.values, str):
            raise SchemaDeclarationError("Constants must be given as a sequence")
        if len(self.values) == 0:
            raise SchemaDeclarationError("Constants require at least one value")
        object.__setattr__(self, "values", tuple(self.values))

    def accepts(self, value: Any) -> bool:
        for constant in self.values:
            if is_number(value) and is_number(constant):
                if value == constant:
                    return True
            elif type(value) is type(constant) and value == constant:
                return True
        return False


COMPOSITE_NODES = (OptionalNode, UnionNode, TupleNode, ArrayNode, ConstantsNode)

Schema = Union[Type, Mapping, OptionalNode, UnionNode, TupleNode, ArrayNode, ConstantsNode]


def freeze_declaration(declaration: Any, path: str = "$") -> "Schema":
    """Validate a declaration and return an immutable equivalent.

    Type tags and composite nodes are returned as-is (nodes validate their
    own children on construction). Mappings are validated recursively and
    copied into read-only mappings.

    Raises:
        SchemaDeclarationError: If the declaration is not a schema
    """
    if isinstance(declaration, Type) or isinstance(declaration, COMPOSITE_NODES):
        return declaration

    if isinstance(declaration, Mapping):
        frozen = {}
        for key, sub_declaration in declaration.items():
            if not isinstance(key, str):
                raise SchemaDeclarationError(
                    f"Field names must be strings, got {type(key).__name__}", path
                )
            frozen[key] = freeze_declaration(sub_declaration, f"{path}.{key}")
        return MappingProxyType(frozen)

    raise SchemaDeclarationError(
        f"Not a schema: {declaration!r} ({type(declaration).__name__})", path
    )


def is_schema(declaration: Any) -> bool:
    """Check whether declaration is a well-formed schema node."""
    try:
        freeze_declaration(declaration)
    except SchemaDeclarationError:
        return False
    return True
