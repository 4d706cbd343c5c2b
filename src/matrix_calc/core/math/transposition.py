"""
Transpose — Четыре варианта отражения матрицы

| Вид        | Форма результата | result(r, c)                 |
|------------|------------------|------------------------------|
| MAIN       | cols × rows      | A(c, r)                      |
| SIDE       | cols × rows      | A(rows-c-1, cols-r-1)        |
| VERTICAL   | rows × cols      | A(r, cols-c-1)               |
| HORIZONTAL | rows × cols      | A(rows-r-1, c)               |

Все функции тотальные (не падают) и возвращают новую матрицу.
"""

from enum import Enum

from matrix_calc.core.domain.matrix import Matrix


# =============================================================================
# ENUMS
# =============================================================================


class TransposeKind(int, Enum):
    """Вид транспонирования; значения совпадают с номерами пунктов меню."""

    MAIN = 1
    SIDE = 2
    VERTICAL = 3
    HORIZONTAL = 4

    @classmethod
    def from_choice(cls, choice: int) -> "TransposeKind":
        """
        Номер пункта меню → вид транспонирования.

        Raises:
            ValueError: Если номера нет среди 1-4
        """
        try:
            return cls(choice)
        except ValueError:
            raise ValueError(f"Invalid transpose option: {choice}") from None


# =============================================================================
# TRANSPOSES
# =============================================================================


def transpose_main(a: Matrix) -> Matrix:
    """Отражение относительно главной диагонали."""
    return Matrix(a.dim.transpose(), lambda row, col: a.get(col, row))


def transpose_side(a: Matrix) -> Matrix:
    """
    Отражение относительно побочной диагонали.

    Для неквадратной A индекс строки источника берётся по A.rows, столбца
    по A.cols; для квадратной это совпадает с A(n-c-1, n-r-1).
    """
    rows, cols = a.rows, a.cols
    return Matrix(
        a.dim.transpose(),
        lambda row, col: a.get(rows - col - 1, cols - row - 1),
    )


def transpose_vertical(a: Matrix) -> Matrix:
    """Отражение относительно вертикальной оси (слева направо)."""
    cols = a.cols
    return Matrix(a.dim, lambda row, col: a.get(row, cols - col - 1))


def transpose_horizontal(a: Matrix) -> Matrix:
    """Отражение относительно горизонтальной оси (сверху вниз)."""
    rows = a.rows
    return Matrix(a.dim, lambda row, col: a.get(rows - row - 1, col))


_TRANSPOSES = {
    TransposeKind.MAIN: transpose_main,
    TransposeKind.SIDE: transpose_side,
    TransposeKind.VERTICAL: transpose_vertical,
    TransposeKind.HORIZONTAL: transpose_horizontal,
}


def transpose(a: Matrix, kind: TransposeKind = TransposeKind.MAIN) -> Matrix:
    """Транспонирование заданного вида."""
    return _TRANSPOSES[TransposeKind(kind)](a)
