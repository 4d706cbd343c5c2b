"""
Parsing — Разбор текстового ввода в Dimension / Matrix

Формат (как в консольном калькуляторе):
- размер:  "rows cols"            например "2 3"
- строка:  "v0 v1 ... v(cols-1)"  токены через пробельные символы
- скаляр:  одно число

Любой некорректный ввод → MalformedInput до обращения к ядру: ядро
рассчитывает на уже корректные числовые данные.
"""

from typing import Iterable, Optional

from pydantic import ValidationError

from matrix_calc.core.domain.dimension import Dimension
from matrix_calc.core.domain.matrix import Matrix
from matrix_calc.core.math.numerical_safeguards import is_valid_float


class MalformedInput(ValueError):
    """Текстовый ввод не соответствует ожидаемому формату."""

    def __init__(self, message: str, row: Optional[int] = None):
        self.row = row
        super().__init__(message)


def _parse_float(token: str, row: Optional[int] = None) -> float:
    try:
        value = float(token)
    except ValueError:
        raise MalformedInput(f"not a number: {token!r}", row=row) from None
    if not is_valid_float(value):
        raise MalformedInput(f"value must be finite, got {token!r}", row=row)
    return value


def parse_dimension(text: str) -> Dimension:
    """
    "rows cols" → Dimension.

    Raises:
        MalformedInput: Если токенов не два, они не целые или не положительные
    """
    tokens = text.split()
    if len(tokens) != 2:
        raise MalformedInput(f"expected 'rows cols' but got {text.strip()!r}")
    try:
        rows, cols = (int(token) for token in tokens)
    except ValueError:
        raise MalformedInput(f"dimension must be two integers: {text.strip()!r}") from None

    try:
        return Dimension.of(rows, cols)
    except ValidationError:
        raise MalformedInput(f"dimension must be positive: {rows}x{cols}") from None


def parse_scalar(text: str) -> float:
    """Одно конечное число."""
    tokens = text.split()
    if len(tokens) != 1:
        raise MalformedInput(f"expected a single number but got {text.strip()!r}")
    return _parse_float(tokens[0])


def parse_row(text: str, cols: int, row: Optional[int] = None) -> list[float]:
    """
    Одна строка матрицы.

    Args:
        text: Строка ввода
        cols: Ожидаемое количество значений
        row: Индекс строки (для сообщения об ошибке)

    Returns:
        Список из cols значений

    Raises:
        MalformedInput: Если количество токенов != cols или токен не число
    """
    tokens = text.split()
    if len(tokens) != cols:
        label = f"row[{row}]" if row is not None else "row"
        raise MalformedInput(
            f"expected {label} size is {cols} but was {len(tokens)}: {tokens}",
            row=row,
        )
    return [_parse_float(token, row=row) for token in tokens]


def parse_matrix(lines: Iterable[str], dim: Dimension) -> Matrix:
    """
    dim.rows строк текста → Matrix формы dim.

    Лишние строки после dim.rows не читаются.

    Raises:
        MalformedInput: Если строк меньше dim.rows или строка некорректна
    """
    matrix = Matrix(dim)
    iterator = iter(lines)
    for row in range(dim.rows):
        line = next(iterator, None)
        if line is None:
            raise MalformedInput(
                f"expected {dim.rows} rows but input ended after {row}", row=row
            )
        for col, value in enumerate(parse_row(line, dim.cols, row=row)):
            matrix[row, col] = value
    return matrix
