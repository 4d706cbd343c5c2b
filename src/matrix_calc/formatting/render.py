"""
Render — Текстовое представление матрицы

Формат каждой ячейки соответствует шаблону "#.##":
- округление до decimal_places знаков (default 2)
- без хвостовых нулей и висящей точки: 3, 3.5, 10.33
- без нуля в целой части дробных значений: 0.5 → ".5", -0.25 → "-.25"
- -0.0 (и отрицательные значения, округлившиеся до нуля) → "0"

Ячейки выравниваются по правому краю на ширину самой длинной ячейки
столбца и разделяются одним пробелом; каждая строка (включая последнюю)
завершается переводом строки.

Пример для [[1.0, -0.0], [2.5, 10.333]]:

      1     0
    2.5 10.33
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal
from typing import Optional

from matrix_calc.core.domain.matrix import Matrix
from matrix_calc.core.math.numerical_safeguards import normalize_zero

# Минимальная точность decimal-контекста (значение по умолчанию в stdlib)
_MIN_DECIMAL_PRECISION = 28


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RenderConfig:
    """Конфигурация форматирования матрицы."""

    decimal_places: int = 2
    rounding: str = ROUND_HALF_EVEN
    column_separator: str = " "
    line_terminator: str = "\n"
    normalize_negative_zero: bool = True
    # "#.##" не требует цифр в целой части; True даёт "0.5" вместо ".5"
    leading_zero: bool = False


DEFAULT_RENDER_CONFIG = RenderConfig()


# =============================================================================
# FORMATTING
# =============================================================================


def format_value(value: float, config: Optional[RenderConfig] = None) -> str:
    """
    Форматирование одного значения по шаблону "#.##".

    Округляется точное двоичное значение float (2.675 хранится как
    2.67499999..., поэтому даёт "2.67").

    Args:
        value: Значение
        config: Конфигурация (default: DEFAULT_RENDER_CONFIG)

    Returns:
        Строка без хвостовых нулей; NaN/Inf → "NaN", "Infinity", "-Infinity"

    Raises:
        ValueError: Если config.decimal_places < 0

    Examples:
        >>> format_value(3.0)
        '3'
        >>> format_value(10.333)
        '10.33'
        >>> format_value(-0.0)
        '0'
        >>> format_value(-0.25)
        '-.25'
    """
    if config is None:
        config = DEFAULT_RENDER_CONFIG
    if config.decimal_places < 0:
        raise ValueError(
            f"decimal_places must be non-negative, got {config.decimal_places}"
        )

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if config.normalize_negative_zero:
        value = normalize_zero(value)

    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-config.decimal_places)
    # quantize падает с InvalidOperation, если цифр больше, чем prec
    precision = max(_MIN_DECIMAL_PRECISION, exact.adjusted() + config.decimal_places + 2)
    rounded = exact.quantize(
        quantum, rounding=config.rounding, context=Context(prec=precision)
    )

    if config.normalize_negative_zero and rounded.is_zero():
        rounded = rounded.copy_abs()

    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")

    if not config.leading_zero:
        if text.startswith("0."):
            text = text[1:]
        elif text.startswith("-0."):
            text = "-" + text[2:]
    return text


def render(matrix: Matrix, config: Optional[RenderConfig] = None) -> str:
    """
    Матрица → выровненная по столбцам текстовая сетка.

    Args:
        matrix: Матрица
        config: Конфигурация (default: DEFAULT_RENDER_CONFIG)

    Returns:
        Текст из matrix.rows строк, каждая завершена config.line_terminator
    """
    if config is None:
        config = DEFAULT_RENDER_CONFIG

    cells = [
        [format_value(matrix.get(row, col), config) for col in range(matrix.cols)]
        for row in range(matrix.rows)
    ]
    widths = [
        max(len(cells[row][col]) for row in range(matrix.rows))
        for col in range(matrix.cols)
    ]

    lines = []
    for row_cells in cells:
        padded = [cell.rjust(widths[col]) for col, cell in enumerate(row_cells)]
        lines.append(config.column_separator.join(padded) + config.line_terminator)
    return "".join(lines)
