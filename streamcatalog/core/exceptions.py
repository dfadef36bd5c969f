"""
Custom exception hierarchy for centralized error handling.
Every error carries a stable error code so callers can inspect the kind
without parsing messages.
"""
from typing import Any, Dict, Optional, TypeVar

E = TypeVar("E", bound="AppException")


class AppException(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a serializable error payload."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }

    def with_context(self: E, context: str) -> E:
        """
        Return a copy of this error with its message prefixed by context.

        The copy keeps the concrete class, error code and details, so callers
        can still match on the original kind. Raise it with ``from self`` to
        keep the chain.
        """
        cls = type(self)
        wrapped = cls.__new__(cls)
        wrapped.__dict__.update(self.__dict__)
        wrapped.details = dict(self.details)
        wrapped.message = f"{context}: {self.message}"
        Exception.__init__(wrapped, wrapped.message)
        return wrapped


class NotFoundError(AppException):
    """Resource not found."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(
            message=f"{resource} not found: {identifier}",
            error_code="NOT_FOUND",
            details={"resource": resource, "identifier": identifier},
        )

    @property
    def resource(self) -> str:
        return self.details["resource"]


class UserNotFoundError(NotFoundError):
    """User absent from the user store."""

    def __init__(self, identifier: str) -> None:
        super().__init__("user", identifier)


class ItemNotFoundError(NotFoundError):
    """Media item absent from the item store."""

    def __init__(self, identifier: str) -> None:
        super().__init__("item", identifier)


class InvalidInputError(AppException):
    """Invalid input data."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            message=message,
            error_code="INVALID_INPUT",
            details=details,
        )


class AlreadyExistsError(InvalidInputError):
    """An entity with the same identifier is already stored."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(
            message=f"{resource} with id '{identifier}' already exists",
            details={"resource": resource, "identifier": identifier},
        )
        self.error_code = "ALREADY_EXISTS"


class UnauthorizedError(AppException):
    """Access denied. Reserved: no code path raises it yet."""

    def __init__(self, reason: str = "unauthorized access") -> None:
        super().__init__(
            message=reason,
            error_code="UNAUTHORIZED",
            details={"reason": reason},
        )
