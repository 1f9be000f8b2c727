"""
Scalar domain for matrix and vector entries.

A scalar is any ``numbers.Number`` except ``bool``: int, Fraction, float,
Decimal, complex and NumPy scalars all qualify. Operations only need
addition, subtraction, negation and multiplication. The inverse additionally
needs an exact reciprocal, which is computed as a ``fractions.Fraction``.
"""

from __future__ import annotations

import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Any, Union

import numpy as np

from ..core.errors import SingularMatrixError

Scalar = Union[int, float, complex, Fraction, Decimal, numbers.Number]


def coerce_scalar(value: Any) -> Scalar:
    """
    Validate a single matrix or vector entry.

    NumPy scalars are unwrapped to the equivalent Python number.

    Raises:
        ValueError: If value is not a number (pydantic wraps this
            into a ValidationError at construction time)
    """
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        raise ValueError(f"Expected a numeric scalar, got {type(value).__name__}")
    return value


def cofactor_sign(k: int) -> int:
    """Sign of the k-th cofactor term: +1 for even k, -1 for odd k."""
    return 1 if k % 2 == 0 else -1


def to_exact(value: Scalar) -> Scalar:
    """
    Exact rational value of a float or Decimal; other scalars pass through.

    Decimal and Fraction do not multiply with each other, and float times
    Fraction falls back to float, so both are converted before they meet a
    Fraction.
    """
    if isinstance(value, (float, Decimal)):
        return Fraction(value)
    return value


def exact_reciprocal(value: Scalar) -> Fraction:
    """
    Return 1/value as an exact rational.

    Floats and Decimals are converted to their exact binary/decimal rational
    value first, so no rounding is introduced by the division itself.

    Raises:
        SingularMatrixError: If value is zero
        TypeError: If value has no rational representation (e.g. complex)
    """
    if value == 0:
        raise SingularMatrixError(value)
    if isinstance(value, (numbers.Rational, float, Decimal)):
        return 1 / Fraction(value)
    raise TypeError(f"Cannot take an exact reciprocal of {type(value).__name__}")
