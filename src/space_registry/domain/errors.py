"""Domain error classes.

Protocol-agnostic errors raised by the registry use cases.
Protocol adapters (HTTP today) translate them into their own formats.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message, a stable error code and free-form
    context that adapters can serialize.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context (field names, offending values, ...)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class BadRequestError(DomainError):
    """Malformed or out-of-range input on a strictly validated operation.

    Raised by create, update, get-by-id and delete-by-id. Listing never
    raises it: invalid filter parameters are dropped instead.

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "BAD_REQUEST"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a bad request error.

        Args:
            message: Overall error message (optional if errors provided)
            errors: Field-specific errors, each with 'field', 'message' and 'code'
                   Example: [{"field": "speed", "message": "Must be < 0.99", "code": "INVALID_VALUE"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Bad request"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """The targeted resource is absent from the store.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Ship")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)
