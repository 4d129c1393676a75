"""Base exceptions for declcheck domain."""


class DeclCheckError(Exception):
    """Root exception for all declcheck errors.

    All domain exceptions inherit from this.
    Allows catching all declcheck-specific errors.
    """


class SchemaError(DeclCheckError):
    """Constraint schema is misconfigured.

    Structural errors abort the whole traversal: they describe a broken
    schema, not bad data, so they are raised immediately and never collected.

    Attributes:
        field_path: Composed path of the offending field
    """

    def __init__(self, field_path: str, message: str) -> None:
        # FAIL-FIRST: validate required parameters
        if not field_path:
            raise ValueError("field_path must not be empty")
        if not message:
            raise ValueError("message must not be empty")

        self.field_path = field_path
        super().__init__(message)
