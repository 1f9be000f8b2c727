"""
Linear-algebra value types: Vector, Matrix.

Both types are immutable pydantic models. Every operation returns a new value
and never mutates its operands, so instances may be shared freely.

Determinants are computed by cofactor expansion along the first row. This is
exponential in the dimension but exact for any scalar type supporting
+, - and *. Inverses are scaled by an exact rational reciprocal of the
determinant, so integer matrices invert to Fraction entries without rounding.
"""

from __future__ import annotations

import numbers
from fractions import Fraction
from typing import Any, Iterable

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.config import get_settings
from ..core.errors import (
    DimensionMismatch,
    IndexOutOfBounds,
    NotSquareError,
    SingularMatrixError,
)
from ..core.logging import get_context_logger
from .scalar import Scalar, coerce_scalar, cofactor_sign, exact_reciprocal, to_exact
from .value import LinearValue

logger = get_context_logger(__name__)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (numbers.Number, np.generic)) and not isinstance(value, bool)


def _scalar_tex(value: Scalar) -> str:
    if isinstance(value, Fraction) and value.denominator != 1:
        sign = "-" if value < 0 else ""
        return f"{sign}\\frac{{{abs(value.numerator)}}}{{{value.denominator}}}"
    return str(value)


class Vector(BaseModel, LinearValue):
    """
    Ordered, fixed-length sequence of scalars.

    Examples:
        >>> Vector([1, 2, 3]).scalar_product(Vector([4, 5, 6]))
        32
        >>> str(Vector([1, Fraction(1, 2)]))
        '(1, 1/2)'
    """

    model_config = ConfigDict(frozen=True)

    elements: tuple[Any, ...] = Field(default_factory=tuple)

    def __init__(self, elements: Iterable[Any] | np.ndarray = (), **kwargs: Any) -> None:
        super().__init__(elements=elements, **kwargs)

    @field_validator("elements", mode="before")
    @classmethod
    def _validate_elements(cls, value):
        if value is None:
            return ()
        if isinstance(value, Vector):
            return value.elements
        if isinstance(value, np.ndarray):
            if value.ndim != 1:
                raise ValueError(f"Vector requires a 1-D array, got {value.ndim}-D")
            value = value.tolist()
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise ValueError("Vector elements must be an iterable of scalars")
        return tuple(coerce_scalar(element) for element in value)

    @property
    def dimension(self) -> int:
        return len(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> Scalar:
        return self.elements[index]

    def same_dimension(self, other: Vector) -> bool:
        return self.dimension == other.dimension

    def scalar_product(self, other: Vector) -> Scalar:
        """
        Sum of the pairwise products of the elements.

        Raises:
            DimensionMismatch: If the vectors differ in length
        """
        if not self.same_dimension(other):
            raise DimensionMismatch("scalar product", self.dimension, other.dimension)
        return sum((a * b for a, b in zip(self.elements, other.elements)), 0)

    def __mul__(self, other: Any) -> Scalar:
        if isinstance(other, Vector):
            return self.scalar_product(other)
        return NotImplemented

    def to_string(self) -> str:
        return "(" + ", ".join(str(e) for e in self.elements) + ")"

    def to_tex(self) -> str:
        body = " \\\\ ".join(_scalar_tex(e) for e in self.elements)
        return f"\\begin{{pmatrix}} {body} \\end{{pmatrix}}"

    def to_python(self) -> list[Scalar]:
        return list(self.elements)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Vector({self.to_python()!r})"


def to_vector(sequence: Iterable[Any]) -> Vector:
    """Wrap a sequence of scalars into a Vector."""
    return Vector(sequence)


class Matrix(BaseModel, LinearValue):
    """
    Rectangular array of scalars stored row by row.

    Ragged rows are representable; operations that depend on the shape
    (determinant, adjugate, inverse, multiply) validate it before computing.

    Examples:
        >>> m = Matrix([[2, 1], [7, 4]])
        >>> m.determinant()
        1
        >>> m.inverse() == Matrix([[4, -1], [-7, 2]])
        True
    """

    model_config = ConfigDict(frozen=True)

    rows: tuple[tuple[Any, ...], ...] = Field(default_factory=tuple)

    def __init__(self, rows: Iterable[Iterable[Any]] | np.ndarray = (), **kwargs: Any) -> None:
        super().__init__(rows=rows, **kwargs)

    @field_validator("rows", mode="before")
    @classmethod
    def _validate_rows(cls, value):
        if value is None:
            return ()
        return cls._coerce_rows(value)

    @staticmethod
    def _coerce_rows(raw_rows: Any) -> tuple[tuple[Scalar, ...], ...]:
        """Convert raw row iterables into tuples of validated scalars."""
        if isinstance(raw_rows, Matrix):
            return raw_rows.rows

        if isinstance(raw_rows, np.ndarray):
            if raw_rows.size == 0 and raw_rows.ndim == 1:
                return ()
            if raw_rows.ndim != 2:
                raise ValueError(f"Matrix requires a 2-D array, got {raw_rows.ndim}-D")
            raw_rows = raw_rows.tolist()

        if isinstance(raw_rows, (str, bytes)) or not isinstance(raw_rows, Iterable):
            raise ValueError("Matrix rows must be iterable sequences")

        normalized = []
        for row in raw_rows:
            if isinstance(row, Vector):
                row = row.elements
            elif isinstance(row, np.ndarray):
                row = row.tolist()
            if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
                raise ValueError("Matrix rows must be iterable sequences")
            normalized.append(tuple(coerce_scalar(cell) for cell in row))
        return tuple(normalized)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix with integer entries."""
        if n < 0:
            raise ValueError(f"Identity dimension must be non-negative, got {n}")
        return cls([[1 if i == j else 0 for j in range(n)] for i in range(n)])

    # Shape queries

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def shape(self) -> tuple[int, int]:
        """Matrix dimensions (rows, cols)."""
        return (self.row_count, self.col_count)

    @property
    def dimension(self) -> str:
        return f"{self.row_count} x {self.col_count}"

    def is_well_formed(self) -> bool:
        """True if every row has as many entries as the first one."""
        cols = self.col_count
        return all(len(row) == cols for row in self.rows)

    def is_square(self) -> bool:
        return self.row_count == self.col_count and self.is_well_formed()

    def _require_square(self) -> None:
        if not self.is_square():
            raise NotSquareError(self.shape, self.is_well_formed())

    def __getitem__(self, index: tuple[int, int] | int) -> Any:
        """Get element by (row, col) or a row tuple by index."""
        if isinstance(index, tuple):
            row, col = index
            return self.rows[row][col]
        return self.rows[index]

    # Extraction

    def row(self, i: int) -> Vector:
        """Row i as a Vector."""
        if not 0 <= i < self.row_count:
            raise IndexOutOfBounds("row", i, self.row_count)
        return Vector(self.rows[i])

    def column(self, j: int) -> Vector:
        """Element j of every row, in row order, as a Vector."""
        if not 0 <= j < self.col_count:
            raise IndexOutOfBounds("column", j, self.col_count)
        for row in self.rows:
            if j >= len(row):
                raise IndexOutOfBounds("column", j, len(row))
        return Vector(row[j] for row in self.rows)

    def trim(self, i: int, j: int) -> Matrix:
        """
        Copy of the matrix without row i and column j.

        The source matrix is left untouched. Trimming a 1 x 1 matrix gives
        the empty matrix.
        """
        if not 0 <= i < self.row_count:
            raise IndexOutOfBounds("row", i, self.row_count)
        if not 0 <= j < self.col_count:
            raise IndexOutOfBounds("column", j, self.col_count)
        return Matrix(
            row[:j] + row[j + 1:]
            for r, row in enumerate(self.rows)
            if r != i
        )

    def transpose(self) -> Matrix:
        return Matrix(self.column(j).elements for j in range(self.col_count))

    # Determinant and cofactors

    def _warn_if_expensive(self, operation: str) -> None:
        limit = get_settings().COFACTOR_WARN_DIMENSION
        if self.row_count >= limit:
            logger.warning(
                f"Cofactor expansion on a {self.dimension} matrix is exponential",
                extra_data={"operation": operation, "dimension": self.row_count, "limit": limit},
            )

    def _expand(self) -> Scalar:
        # Callers guarantee squareness; trimmed submatrices stay square
        n = self.row_count
        if n == 0:
            return 1
        if n == 1:
            return self.rows[0][0]
        first = self.rows[0]
        return sum(
            (cofactor_sign(i) * first[i] * self.trim(0, i)._expand() for i in range(n)),
            0,
        )

    def determinant(self) -> Scalar:
        """
        Determinant by cofactor expansion along the first row.

        det = sum_i (-1)**i * m[0][i] * det(trim(0, i))

        The empty 0 x 0 matrix has determinant 1.

        Raises:
            NotSquareError: If the matrix is not square and well-formed
        """
        self._require_square()
        self._warn_if_expensive("determinant")
        det = self._expand()
        logger.debug("Computed determinant", extra_data={"dimension": self.dimension, "determinant": det})
        return det

    def cofactor(self, i: int, j: int) -> Scalar:
        """Signed minor (-1)**(i+j) * det(trim(i, j))."""
        self._require_square()
        return cofactor_sign(i + j) * self.trim(i, j)._expand()

    def adjugate(self) -> Matrix:
        """
        Transpose of the cofactor matrix.

        Entry (i, j) is the cofactor of (j, i), so no separate transpose
        step is needed.

        Raises:
            NotSquareError: If the matrix is not square and well-formed
        """
        self._require_square()
        self._warn_if_expensive("adjugate")
        n = self.row_count
        return Matrix(
            [cofactor_sign(i + j) * self.trim(j, i)._expand() for j in range(n)]
            for i in range(n)
        )

    # Products

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self x other.

        Entry (i, j) is the scalar product of row i of self with column j
        of other.

        Raises:
            DimensionMismatch: If either operand is ragged or
                self.col_count != other.row_count
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"Cannot multiply Matrix by {type(other).__name__}")
        if (
            not self.is_well_formed()
            or not other.is_well_formed()
            or self.col_count != other.row_count
        ):
            raise DimensionMismatch("multiply", self.dimension, other.dimension)

        columns = [other.column(j) for j in range(other.col_count)]
        return Matrix(
            [self.row(i).scalar_product(column) for column in columns]
            for i in range(self.row_count)
        )

    def scale(self, k: Scalar) -> Matrix:
        """New matrix with every entry multiplied by k."""
        k = coerce_scalar(k)
        return Matrix([entry * k for entry in row] for row in self.rows)

    def inverse(self) -> Matrix:
        """
        Exact inverse: adjugate scaled by 1/determinant.

        Integer, Fraction, float and Decimal matrices all produce Fraction
        entries; floats and Decimals are taken at their exact rational value.

        Raises:
            NotSquareError: If the matrix is not square and well-formed
            SingularMatrixError: If the determinant is zero
            TypeError: If the determinant has no rational value (complex)
        """
        self._require_square()
        det = self.determinant()
        if det == 0:
            raise SingularMatrixError(det)
        reciprocal = exact_reciprocal(det)
        adjugate = Matrix([to_exact(entry) for entry in row] for row in self.adjugate().rows)
        return adjugate.scale(reciprocal)

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.multiply(other)
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.multiply(other)
        return NotImplemented

    # Output formats

    def to_string(self) -> str:
        """One line per row, entries space separated inside parentheses."""
        return "\n".join("( " + " ".join(str(e) for e in row) + " )" for row in self.rows)

    def to_tex(self) -> str:
        """Convert to LaTeX (pmatrix)."""
        rows_tex = " \\\\ ".join(" & ".join(_scalar_tex(e) for e in row) for row in self.rows)
        return f"\\begin{{pmatrix}} {rows_tex} \\end{{pmatrix}}"

    def to_python(self) -> list[list[Scalar]]:
        return [list(row) for row in self.rows]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Matrix({self.to_python()!r})"


def identity(n: int) -> Matrix:
    """n x n identity matrix."""
    return Matrix.identity(n)
