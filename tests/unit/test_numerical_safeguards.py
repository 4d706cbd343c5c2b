"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf проверки
2. Epsilon-сравнения float и матриц
3. Точную и толерантную проверку на ноль
4. Нормализацию отрицательного нуля
"""

import math

import pytest

from matrix_calc.core.domain import Dimension, Matrix
from matrix_calc.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    is_zero,
    matrices_close,
    normalize_zero,
    validate_finite,
)


# =============================================================================
# NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float / validate_finite"""

    def test_finite_values(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)
        assert is_valid_float(5e-324)

    def test_non_finite_values(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_validate_finite_passes(self) -> None:
        validate_finite(1.0, "value")

    def test_validate_finite_raises(self) -> None:
        with pytest.raises(ValueError, match="scalar must be a valid float"):
            validate_finite(float("nan"), "scalar")


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_close_values(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.0, 1e-13)

    def test_far_values(self) -> None:
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-6)


class TestIsZero:
    """Тесты для is_zero"""

    def test_exact_by_default(self) -> None:
        """Без tolerance сравнение точное"""
        assert is_zero(0.0)
        assert is_zero(-0.0)
        assert not is_zero(1e-300)

    def test_with_tolerance(self) -> None:
        assert is_zero(1e-10, tol=1e-9)
        assert is_zero(-1e-10, tol=1e-9)
        assert not is_zero(1e-8, tol=1e-9)

    def test_negative_tolerance_raises(self) -> None:
        with pytest.raises(ValueError, match="tol must be non-negative"):
            is_zero(0.0, tol=-1e-9)


class TestNormalizeZero:
    """Тесты для normalize_zero"""

    def test_negative_zero(self) -> None:
        result = normalize_zero(-0.0)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_other_values_unchanged(self) -> None:
        assert normalize_zero(-2.5) == -2.5
        assert normalize_zero(3.0) == 3.0


class TestMatricesClose:
    """Тесты для matrices_close"""

    def test_close(self) -> None:
        a = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        b = Matrix.from_rows([[1.0 + 1e-12, 2.0], [3.0, 4.0 - 1e-12]])
        assert matrices_close(a, b)

    def test_not_close(self) -> None:
        a = Matrix.from_rows([[1.0, 2.0]])
        b = Matrix.from_rows([[1.0, 2.1]])
        assert not matrices_close(a, b)

    def test_different_dims(self) -> None:
        assert not matrices_close(Matrix(Dimension.of(2, 1)), Matrix(Dimension.of(1, 2)))

    def test_custom_tolerance(self) -> None:
        a = Matrix.from_rows([[1.0]])
        b = Matrix.from_rows([[1.001]])
        assert matrices_close(a, b, abs_tol=1e-2)
