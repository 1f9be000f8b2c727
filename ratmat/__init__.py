"""
ratmat: exact-arithmetic matrices and vectors.

Determinants by cofactor expansion, adjugates, matrix products and inverses
with exact rational entries.
"""

from .core.errors import (
    DimensionMismatch,
    ErrorKind,
    IndexOutOfBounds,
    LinAlgError,
    NotSquareError,
    SingularMatrixError,
)
from .math import (
    LinearValue,
    Matrix,
    Outcome,
    Vector,
    capture,
    cofactor_sign,
    exact_reciprocal,
    identity,
    to_vector,
)

__version__ = "0.1.0"

__all__ = [
    # Values
    "LinearValue",
    "Vector",
    "Matrix",
    "to_vector",
    "identity",
    # Scalars
    "cofactor_sign",
    "exact_reciprocal",
    # Errors
    "ErrorKind",
    "LinAlgError",
    "NotSquareError",
    "DimensionMismatch",
    "IndexOutOfBounds",
    "SingularMatrixError",
    # Result channel
    "Outcome",
    "capture",
]
