"""Tests for the Vector value type."""

from fractions import Fraction

import numpy as np
import pytest
from pydantic import ValidationError

from ratmat.core.errors import DimensionMismatch, ErrorKind
from ratmat.math.geometric import Vector, to_vector


class TestVectorInstantiation:
    """Test construction from the supported input types."""

    def test_create_from_list(self):
        """Test creating a vector from a list keeps order and length."""
        v = Vector([1, 2, 3])
        assert len(v) == 3
        assert v.dimension == 3
        assert v.elements == (1, 2, 3)

    def test_create_from_generator(self):
        """Test any iterable of scalars is accepted."""
        v = Vector(x * x for x in range(4))
        assert v.elements == (0, 1, 4, 9)

    def test_create_empty_vector(self):
        """Test the empty vector has dimension zero."""
        assert Vector().dimension == 0
        assert Vector([]).elements == ()

    def test_create_from_numpy_array_unwraps_scalars(self):
        """Test numpy scalars become plain Python numbers."""
        v = Vector(np.array([1, 2, 3]))
        assert v.elements == (1, 2, 3)
        assert all(type(e) is int for e in v.elements)

    def test_create_from_2d_numpy_array_rejected(self):
        """Test a matrix-shaped array is not a vector."""
        with pytest.raises(ValidationError):
            Vector(np.array([[1, 2], [3, 4]]))

    def test_non_numeric_element_rejected(self):
        """Test non-numeric entries fail validation."""
        with pytest.raises(ValidationError):
            Vector([1, "two", 3])

    def test_bool_element_rejected(self):
        """Test booleans are not treated as scalars."""
        with pytest.raises(ValidationError):
            Vector([True, 0])

    def test_to_vector_factory(self):
        """Test the factory wraps a sequence into a Vector."""
        v = to_vector([Fraction(1, 2), 3])
        assert isinstance(v, Vector)
        assert v[0] == Fraction(1, 2)

    def test_vector_is_immutable(self):
        """Test elements cannot be reassigned after construction."""
        v = Vector([1, 2])
        with pytest.raises(ValidationError):
            v.elements = (3, 4)

    def test_equality_and_hash_follow_elements(self):
        """Test value semantics across int and Fraction entries."""
        assert Vector([1, 2]) == Vector([Fraction(1), Fraction(2)])
        assert hash(Vector([1, 2])) == hash(Vector([1, 2]))
        assert Vector([1, 2]) != Vector([2, 1])


class TestVectorScalarProduct:
    """Test the scalar (dot) product."""

    def test_integer_product(self):
        """Test sum of pairwise products."""
        assert Vector([1, 2, 3]).scalar_product(Vector([4, 5, 6])) == 32

    def test_fraction_product_is_exact(self):
        """Test Fractions stay exact."""
        result = Vector([Fraction(1, 3), Fraction(1, 6)]).scalar_product(Vector([1, 2]))
        assert result == Fraction(2, 3)
        assert isinstance(result, Fraction)

    def test_empty_product_is_zero(self):
        """Test the product of two empty vectors is zero."""
        assert Vector([]).scalar_product(Vector([])) == 0

    def test_multiplication_operator_is_scalar_product(self):
        """Test v1 * v2 delegates to scalar_product."""
        assert Vector([2, -1]) * Vector([3, 4]) == 2

    def test_product_is_symmetric(self):
        """Test u.v == v.u."""
        u, v = Vector([3, -2, 7]), Vector([1, 5, Fraction(1, 7)])
        assert u.scalar_product(v) == v.scalar_product(u)

    def test_same_dimension(self):
        """Test vectors compare by length only."""
        assert Vector([1, 2]).same_dimension(Vector([Fraction(3), 4]))
        assert not Vector([1, 2]).same_dimension(Vector([1, 2, 3]))
        assert Vector([]).same_dimension(Vector([]))

    def test_dimension_mismatch(self, assert_linalg_error):
        """Test vectors of different length are rejected."""
        error = assert_linalg_error(
            ErrorKind.DIMENSION_MISMATCH,
            Vector([1, 2]).scalar_product,
            Vector([1, 2, 3]),
            left=2,
            right=3,
        )
        assert isinstance(error, DimensionMismatch)
        assert isinstance(error, ValueError)

    def test_operands_unchanged(self):
        """Test the product has no side effects."""
        u, v = Vector([1, 2]), Vector([3, 4])
        u.scalar_product(v)
        assert u.elements == (1, 2)
        assert v.elements == (3, 4)

    def test_multiplying_by_non_vector_raises_type_error(self):
        """Test unsupported operands fall through to TypeError."""
        with pytest.raises(TypeError):
            _ = Vector([1, 2]) * "x"


class TestVectorConversions:
    """Test output formats."""

    def test_to_string_comma_separated_in_parentheses(self):
        """Test the human-readable rendering."""
        assert Vector([1, 2, 3]).to_string() == "(1, 2, 3)"
        assert str(Vector([Fraction(1, 2), -4])) == "(1/2, -4)"

    def test_empty_vector_string(self):
        """Test rendering of the empty vector."""
        assert str(Vector([])) == "()"

    def test_repr_names_type(self):
        """Test repr shows the class and elements."""
        assert repr(Vector([1, 2])) == "Vector([1, 2])"

    def test_to_tex_column_vector(self):
        """Test LaTeX output uses a pmatrix column."""
        tex = Vector([1, Fraction(-3, 4)]).to_tex()
        assert tex == "\\begin{pmatrix} 1 \\\\ -\\frac{3}{4} \\end{pmatrix}"

    def test_to_numpy_keeps_fractions(self):
        """Test the numpy array uses object dtype and exact entries."""
        arr = Vector([Fraction(1, 3), 2]).to_numpy()
        assert arr.dtype == object
        assert arr[0] == Fraction(1, 3)

    def test_to_python_returns_list(self):
        """Test conversion to a native list."""
        assert Vector((4, 5)).to_python() == [4, 5]
