"""
ratmat.math - exact linear-algebra value types

- Vector and Matrix as immutable pydantic models
- Cofactor-expansion determinant, adjugate and exact rational inverse
- Outcome/capture for reporting failures as values
"""

from .geometric import Matrix, Vector, identity, to_vector
from .outcome import Outcome, capture
from .scalar import Scalar, cofactor_sign, exact_reciprocal
from .value import LinearValue

__all__ = [
    "LinearValue",
    "Scalar",
    "Vector",
    "Matrix",
    "to_vector",
    "identity",
    "cofactor_sign",
    "exact_reciprocal",
    "Outcome",
    "capture",
]
