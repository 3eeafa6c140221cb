"""Exception types raised by shapecheck.

Value mismatches are never raised by the checker itself; they are returned
as ValidationMismatch values. Exceptions are reserved for malformed schemas,
explicit boundary enforcement and schema lookup failures.
"""


class ShapecheckError(Exception):
    """Base class for shapecheck errors."""


class SchemaDeclarationError(ShapecheckError, TypeError):
    """Raised when a schema declaration is malformed."""

    def __init__(self, message: str, declaration_path: str = "$"):
        self.declaration_path = declaration_path
        super().__init__(f"{message} (at {declaration_path})")


class SchemaMismatchError(ShapecheckError, ValueError):
    """Raised by ensure_conforms when a value does not conform."""

    def __init__(self, mismatch):
        self.mismatch = mismatch
        super().__init__(str(mismatch))


class SchemaReferenceError(ShapecheckError, LookupError):
    """Raised when a 'module:attribute' schema reference cannot be resolved."""

    def __init__(self, reference: str, reason: str):
        self.reference = reference
        self.reason = reason
        super().__init__(f"Cannot resolve schema reference '{reference}': {reason}")
