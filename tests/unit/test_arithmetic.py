"""
Тесты для модуля Arithmetic

Проверяет:
1. Поэлементное сложение и DimensionMismatch
2. Умножение на скаляр
3. Матричное умножение, identity и IncompatibleShape
4. Деление матрицы на скаляр
5. Неизменность операндов
"""

import pytest

from matrix_calc.core.domain import (
    Dimension,
    DimensionMismatch,
    IncompatibleShape,
    Matrix,
)
from matrix_calc.core.math import add, divide, matrices_close, multiply, scale


@pytest.fixture
def a() -> Matrix:
    return Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


@pytest.fixture
def b() -> Matrix:
    return Matrix.from_rows([[0.5, -2.0, 1.0], [10.0, 0.0, -6.0]])


# =============================================================================
# ADD
# =============================================================================


class TestAdd:
    """Тесты для add"""

    def test_elementwise(self, a: Matrix, b: Matrix) -> None:
        result = add(a, b)
        for row, col, value in result.iterate():
            assert value == a[row, col] + b[row, col]

    def test_commutative(self, a: Matrix, b: Matrix) -> None:
        assert add(a, b) == add(b, a)

    def test_associative(self, a: Matrix, b: Matrix) -> None:
        c = Matrix.from_rows([[0.1, 0.2, 0.3], [0.4, 0.5, 0.6]])
        assert matrices_close(add(add(a, b), c), add(a, add(b, c)))

    def test_operands_unchanged(self, a: Matrix, b: Matrix) -> None:
        a_before, b_before = a.copy(), b.copy()
        add(a, b)
        assert a == a_before
        assert b == b_before

    def test_dimension_mismatch(self) -> None:
        """2×2 + 2×3 → DimensionMismatch с обеими формами"""
        left = Matrix(Dimension.of(2, 2))
        right = Matrix(Dimension.of(2, 3))
        with pytest.raises(DimensionMismatch) as exc_info:
            add(left, right)
        assert exc_info.value.left == Dimension.of(2, 2)
        assert exc_info.value.right == Dimension.of(2, 3)
        assert exc_info.value.kind == "dimension_mismatch"
        assert "2x2 vs 2x3" in str(exc_info.value)


# =============================================================================
# SCALE
# =============================================================================


class TestScale:
    """Тесты для scale"""

    def test_scale(self, a: Matrix) -> None:
        assert scale(2.0, a).to_rows() == [[2.0, 4.0, 6.0], [8.0, 10.0, 12.0]]

    def test_scale_by_zero(self, a: Matrix) -> None:
        assert scale(0.0, a) == Matrix(a.dim)

    def test_scale_negative(self, a: Matrix) -> None:
        assert scale(-1.5, a)[1, 2] == -9.0


# =============================================================================
# MULTIPLY
# =============================================================================


class TestMultiply:
    """Тесты для multiply"""

    def test_product(self, a: Matrix) -> None:
        """(2×3) × (3×2) → 2×2"""
        other = Matrix.from_rows([[7.0, 8.0], [9.0, 10.0], [11.0, 12.0]])
        result = multiply(a, other)
        assert result.dim == Dimension.of(2, 2)
        assert result.to_rows() == [[58.0, 64.0], [139.0, 154.0]]

    def test_right_identity(self, a: Matrix) -> None:
        assert multiply(a, Matrix.identity(3)) == a

    def test_left_identity(self, a: Matrix) -> None:
        assert multiply(Matrix.identity(2), a) == a

    def test_row_times_column(self) -> None:
        """(1×3) × (3×1) → 1×1 скалярное произведение"""
        row = Matrix.from_rows([[1.0, 2.0, 3.0]])
        column = Matrix.from_rows([[4.0], [5.0], [6.0]])
        assert multiply(row, column).to_rows() == [[32.0]]

    def test_operands_unchanged(self, a: Matrix) -> None:
        other = Matrix.identity(3)
        a_before = a.copy()
        multiply(a, other)
        assert a == a_before
        assert other == Matrix.identity(3)

    def test_incompatible_shape(self) -> None:
        """(2×3) × (2×2) → IncompatibleShape с обеими формами"""
        left = Matrix(Dimension.of(2, 3))
        right = Matrix(Dimension.of(2, 2))
        with pytest.raises(IncompatibleShape, match=r"A columns \(3\) != B rows \(2\)") as exc_info:
            multiply(left, right)
        assert exc_info.value.left == Dimension.of(2, 3)
        assert exc_info.value.right == Dimension.of(2, 2)
        assert exc_info.value.kind == "incompatible_shape"


# =============================================================================
# DIVIDE
# =============================================================================


class TestDivide:
    """Тесты для divide"""

    def test_divide(self, a: Matrix) -> None:
        assert divide(a, 2.0).to_rows() == [[0.5, 1.0, 1.5], [2.0, 2.5, 3.0]]

    def test_divide_by_zero(self, a: Matrix) -> None:
        with pytest.raises(ZeroDivisionError):
            divide(a, 0.0)
