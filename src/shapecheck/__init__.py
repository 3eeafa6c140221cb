"""shapecheck - Structural runtime type validation for untyped data.

shapecheck checks values produced by parsing external data (JSON, YAML, ...)
against declarative schemas built from primitive type tags, nested mappings
and a handful of combinators, and reports the first mismatch it finds.

Basic usage:
    from shapecheck import Type, conforms_to_type, optional

    IMAGE = {
        "source": Type.STRING,
        "width": optional(Type.INTEGER),
        "height": optional(Type.INTEGER),
    }

    mismatch = conforms_to_type(payload, IMAGE)
    if mismatch is not None:
        print(mismatch)
"""

__version__ = "0.1.0"
__author__ = "rpapub"
__email__ = "contact@rpapub.dev"
__description__ = "Structural runtime type validation for untyped data"

from shapecheck.conformance import (
    ValidationMismatch,
    conforms_to_type,
    ensure_conforms,
    is_valid,
)
from shapecheck.config import CheckConfig, ShapecheckConfig, load_config
from shapecheck.declarations import (
    MISSING,
    ArrayNode,
    ConstantsNode,
    OptionalNode,
    Schema,
    TupleNode,
    UnionNode,
    is_schema,
)
from shapecheck.exceptions import (
    SchemaDeclarationError,
    SchemaMismatchError,
    SchemaReferenceError,
    ShapecheckError,
)
from shapecheck.fields import any_of_constants, array, optional, simple, tuple_of, union_or
from shapecheck.types import Type, matches_primitive

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__description__",

    # Type vocabulary
    "Type",
    "matches_primitive",

    # Declarations
    "MISSING",
    "Schema",
    "OptionalNode",
    "UnionNode",
    "TupleNode",
    "ArrayNode",
    "ConstantsNode",
    "is_schema",

    # Combinators
    "simple",
    "optional",
    "union_or",
    "array",
    "tuple_of",
    "any_of_constants",

    # Conformance checking
    "ValidationMismatch",
    "conforms_to_type",
    "is_valid",
    "ensure_conforms",

    # Configuration
    "CheckConfig",
    "ShapecheckConfig",
    "load_config",

    # Errors
    "ShapecheckError",
    "SchemaDeclarationError",
    "SchemaMismatchError",
    "SchemaReferenceError",
]
