"""
Core infrastructure for ratmat: configuration, logging and errors.
"""

from .config import Settings, get_settings, settings
from .errors import (
    DimensionMismatch,
    ErrorKind,
    IndexOutOfBounds,
    LinAlgError,
    NotSquareError,
    SingularMatrixError,
)
from .logging import get_context_logger, get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "ErrorKind",
    "LinAlgError",
    "NotSquareError",
    "DimensionMismatch",
    "IndexOutOfBounds",
    "SingularMatrixError",
    "setup_logging",
    "get_logger",
    "get_context_logger",
]
