"""
Library exceptions.

Every failure raised by the matrix and vector operations belongs to one of a
closed set of error kinds. Each kind has its own exception class that also
derives from the closest builtin exception, so callers can catch either.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Closed set of failure kinds raised by ratmat operations."""

    NOT_SQUARE = "not_square"
    DIMENSION_MISMATCH = "dimension_mismatch"
    INDEX_OUT_OF_BOUNDS = "index_out_of_bounds"
    SINGULAR_MATRIX = "singular_matrix"


class LinAlgError(Exception):
    """Base exception for ratmat errors"""

    kind: ErrorKind

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotSquareError(LinAlgError, ValueError):
    """Raised when a square, well-formed matrix is required"""

    kind = ErrorKind.NOT_SQUARE

    def __init__(self, shape: tuple[int, int], well_formed: bool = True):
        rows, cols = shape
        reason = "" if well_formed else " (rows have differing lengths)"
        super().__init__(
            message=f"Matrix is not square: {rows} x {cols}{reason}",
            details={"shape": shape, "well_formed": well_formed},
        )


class DimensionMismatch(LinAlgError, ValueError):
    """Raised when operand dimensions are incompatible"""

    kind = ErrorKind.DIMENSION_MISMATCH

    def __init__(self, operation: str, left: Any, right: Any):
        super().__init__(
            message=f"Incompatible dimensions for {operation}: {left} and {right}",
            details={"operation": operation, "left": left, "right": right},
        )


class IndexOutOfBounds(LinAlgError, IndexError):
    """Raised when a row or column index falls outside the matrix"""

    kind = ErrorKind.INDEX_OUT_OF_BOUNDS

    def __init__(self, axis: str, index: int, size: int):
        super().__init__(
            message=f"{axis.capitalize()} index {index} out of range (size {size})",
            details={"axis": axis, "index": index, "size": size},
        )


class SingularMatrixError(LinAlgError, ZeroDivisionError):
    """Raised when inverting a matrix whose determinant is zero"""

    kind = ErrorKind.SINGULAR_MATRIX

    def __init__(self, determinant: Any = 0):
        super().__init__(
            message="Matrix is singular (determinant is zero)",
            details={"determinant": determinant},
        )
