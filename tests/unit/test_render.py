"""
Тесты для модуля Render

Проверяет:
1. Формат "#.##": округление, без хвостовых нулей
2. Нормализацию -0.0
3. Выравнивание по столбцам
4. RenderConfig (знаки, разделитель, перевод строки)
"""

from decimal import ROUND_HALF_UP

import pytest

from matrix_calc.core.domain import Matrix
from matrix_calc.core.math import inverse
from matrix_calc.formatting import DEFAULT_RENDER_CONFIG, RenderConfig, format_value, render


# =============================================================================
# FORMAT VALUE
# =============================================================================


class TestFormatValue:
    """Тесты для format_value"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (3.0, "3"),
            (3.5, "3.5"),
            (3.50001, "3.5"),
            (10.333, "10.33"),
            (-2.456, "-2.46"),
            (0.004, "0"),
            (100.0, "100"),
            (1e20, "100000000000000000000"),
            (0.1 + 0.2, ".3"),
            (0.5, ".5"),
            (-0.25, "-.25"),
            (-0.999, "-1"),
        ],
    )
    def test_pattern(self, value: float, expected: str) -> None:
        assert format_value(value) == expected

    def test_negative_zero(self) -> None:
        assert format_value(-0.0) == "0"

    def test_negative_rounding_to_zero(self) -> None:
        """-0.001 округляется до нуля и печатается без знака"""
        assert format_value(-0.001) == "0"

    def test_negative_zero_kept_when_disabled(self) -> None:
        config = RenderConfig(normalize_negative_zero=False)
        assert format_value(-0.0, config) == "-0"

    def test_small_negative_keeps_sign_when_disabled(self) -> None:
        """Без нормализации -0.001 сохраняет знак минуса"""
        config = RenderConfig(normalize_negative_zero=False)
        assert format_value(-0.001, config) == "-0"

    def test_leading_zero_optional(self) -> None:
        config = RenderConfig(leading_zero=True)
        assert format_value(0.5, config) == "0.5"
        assert format_value(-0.25, config) == "-0.25"
        assert format_value(1.5, config) == "1.5"

    def test_half_even_on_exact_binary_value(self) -> None:
        """0.125 точно представимо: ROUND_HALF_EVEN → .12, ROUND_HALF_UP → .13"""
        assert format_value(0.125) == ".12"
        assert format_value(0.125, RenderConfig(rounding=ROUND_HALF_UP)) == ".13"

    def test_decimal_places(self) -> None:
        assert format_value(3.14159, RenderConfig(decimal_places=4)) == "3.1416"
        assert format_value(2.7, RenderConfig(decimal_places=0)) == "3"

    def test_negative_decimal_places_rejected(self) -> None:
        with pytest.raises(ValueError, match="decimal_places"):
            format_value(1.0, RenderConfig(decimal_places=-1))

    def test_non_finite(self) -> None:
        assert format_value(float("nan")) == "NaN"
        assert format_value(float("inf")) == "Infinity"
        assert format_value(float("-inf")) == "-Infinity"


# =============================================================================
# RENDER
# =============================================================================


class TestRender:
    """Тесты для render"""

    def test_aligned_grid(self) -> None:
        """[[1.0, -0.0], [2.5, 10.333]] → выравнивание по правому краю"""
        m = Matrix.from_rows([[1.0, -0.0], [2.5, 10.333]])
        assert render(m) == "  1     0\n2.5 10.33\n"

    def test_every_row_terminated(self) -> None:
        text = render(Matrix.identity(3))
        assert text == "1 0 0\n0 1 0\n0 0 1\n"
        assert text.endswith("\n")
        assert text.count("\n") == 3

    def test_column_widths_independent(self) -> None:
        m = Matrix.from_rows([[1, 200], [-30, 4]])
        assert render(m) == "  1 200\n-30   4\n"

    def test_single_element(self) -> None:
        assert render(Matrix.from_rows([[-1.234]])) == "-1.23\n"

    def test_inverse_fractions(self) -> None:
        """Дроби без целой части сужают столбец"""
        m = inverse(Matrix.from_rows([[1, 2], [3, 4]]))
        assert render(m) == " -2   1\n1.5 -.5\n"

    def test_custom_separator_and_terminator(self) -> None:
        config = RenderConfig(column_separator=" | ", line_terminator="\r\n")
        m = Matrix.from_rows([[1, 22], [333, 4]])
        assert render(m, config) == "  1 | 22\r\n333 |  4\r\n"

    def test_default_config(self) -> None:
        assert DEFAULT_RENDER_CONFIG == RenderConfig()
        m = Matrix.from_rows([[1.005, 2]])
        assert render(m) == render(m, DEFAULT_RENDER_CONFIG)

    def test_config_immutable(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_RENDER_CONFIG.decimal_places = 3  # type: ignore
