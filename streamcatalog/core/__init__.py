"""Core infrastructure components."""
from .exceptions import (
    AlreadyExistsError,
    AppException,
    InvalidInputError,
    ItemNotFoundError,
    NotFoundError,
    UnauthorizedError,
    UserNotFoundError,
)
from .telemetry import get_tracer, setup_telemetry

__all__ = [
    "AlreadyExistsError",
    "AppException",
    "InvalidInputError",
    "ItemNotFoundError",
    "NotFoundError",
    "UnauthorizedError",
    "UserNotFoundError",
    "get_tracer",
    "setup_telemetry",
]
