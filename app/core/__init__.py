"""
Core module initialization
"""

from .config import Config, get_config
from .errors import (
    ErrorResponse,
    ErrorResponseModel,
    FieldError,
    ValidationError,
    AuthError,
    InvalidToken,
    NotFoundError,
    ConflictError,
    ServerError,
)
from .logger import logger

__all__ = [
    "Config",
    "get_config",
    "ErrorResponse",
    "ErrorResponseModel",
    "FieldError",
    "ValidationError",
    "AuthError",
    "InvalidToken",
    "NotFoundError",
    "ConflictError",
    "ServerError",
    "logger",
]
