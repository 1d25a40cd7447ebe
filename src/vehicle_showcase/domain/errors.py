"""Domain error classes.

Protocol-agnostic errors that represent business failures.
The HTTP entrypoint translates them into status codes and response bodies.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message plus free-form context that protocol
    adapters may use when rendering the error.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (e.g., resource, identifier)
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


class ValidationError(DomainError):
    """Input failed one or more validation rules.

    Holds every violated-rule message, in rule declaration order, so callers
    can report all problems at once instead of only the first.

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[str] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: Ordered violation messages
                   Example: ["page must not be less than 1", "limit must not be less than 1"]
            **context: Additional context
        """
        self.errors: list[str]
        if errors:
            self.errors = list(errors)
            msg = message or "Validation failed"
        else:
            msg = message or "Validation error"
            self.errors = [msg]

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        return {
            "message": self.message,
            "code": self.error_code,
            "errors": self.errors,
            **self.context,
        }


class QueryValidationError(ValidationError):
    """Raised when raw listing query parameters fail validation."""


class NotFoundError(DomainError):
    """Resource not found.

    Only raised at the protocol boundary: use cases and repositories
    signal absence by returning None.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Vehicle")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with id '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
