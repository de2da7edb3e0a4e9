"""
Error types raised while resolving GraphQL operations
"""

from graphql import GraphQLError


class UnauthenticatedError(GraphQLError):
    """Raised by field resolvers that need an authenticated user."""

    code = "FORBIDDEN"

    def __init__(self, message: str = "An authenticated user is required."):
        super().__init__(message, extensions={"code": self.code})


class InvalidScalarError(ValueError):
    """Raised when a variable cannot be coerced into a custom scalar."""

    pass


class MockGenerationError(RuntimeError):
    """Raised when the mock generator cannot produce a schema-valid value."""

    pass


# Errors whose message is safe to send to clients as-is
CLIENT_SAFE_ERRORS = (GraphQLError, InvalidScalarError)


def should_mask_error(error: GraphQLError) -> bool:
    """Decide whether an execution error is replaced by an opaque message.

    Syntax, validation and coercion errors have no original error or carry a
    client-safe one. Anything else is an internal fault.
    """
    original = error.original_error
    if original is None:
        return False
    return not isinstance(original, CLIENT_SAFE_ERRORS)
