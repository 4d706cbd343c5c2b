"""
Determinant — Minor, Cofactor и Determinant через разложение по строке

ФОРМУЛЫ:
    minor(A, r, c)    = det(A без строки r и столбца c)
    cofactor(A, r, c) = (-1)^(r+c) · minor(A, r, c)

    det(A) = A(0,0)                                    n = 1
           = A(0,0)·A(1,1) - A(0,1)·A(1,0)             n = 2
           = Σ_c A(0,c) · cofactor(A, 0, c)            n ≥ 3

Сложность O(n!): разложение Лапласа без оптимизаций, рассчитано на
небольшие матрицы. Для n > FACTORIAL_WARNING_SIZE пишется warning в лог.
"""

import logging
from typing import Final

from matrix_calc.core.domain.dimension import Dimension
from matrix_calc.core.domain.errors import NotSquare, UndefinedDeterminant
from matrix_calc.core.domain.matrix import Matrix

logger = logging.getLogger(__name__)

# Начиная с этого размера (не включая) разложение заметно медленное: 9! ≈ 3.6e5
FACTORIAL_WARNING_SIZE: Final[int] = 8


def _require_square(a: Matrix) -> None:
    if not a.dim.is_square:
        raise NotSquare(a.dim)


def submatrix(a: Matrix, target_row: int, target_col: int) -> Matrix:
    """
    Матрица без строки target_row и столбца target_col.

    Индексы оставшихся элементов сдвигаются: всё, что после удалённой
    строки (столбца), смещается на одну позицию назад.

    Raises:
        IndexError: Если (target_row, target_col) вне границ A
        UndefinedDeterminant: Если результат был бы пустым (A из одной
            строки или одного столбца)
    """
    if not (0 <= target_row < a.rows and 0 <= target_col < a.cols):
        raise IndexError(
            f"index ({target_row}, {target_col}) is out of bounds for matrix {a.dim}"
        )
    if a.rows < 2 or a.cols < 2:
        raise UndefinedDeterminant(a.rows - 1, a.cols - 1)

    def element(row: int, col: int) -> float:
        source_row = row if row < target_row else row + 1
        source_col = col if col < target_col else col + 1
        return a.get(source_row, source_col)

    return Matrix(Dimension.of(a.rows - 1, a.cols - 1), element)


def minor(a: Matrix, target_row: int, target_col: int) -> float:
    """
    Minor элемента (target_row, target_col).

    Raises:
        NotSquare: Если A неквадратная
        UndefinedDeterminant: Если A имеет размер 1×1
        IndexError: Если индекс вне границ
    """
    _require_square(a)
    return _expand(submatrix(a, target_row, target_col))


def cofactor(a: Matrix, target_row: int, target_col: int) -> float:
    """Алгебраическое дополнение: (-1)^(r+c) · minor."""
    sign = 1 if (target_row + target_col) % 2 == 0 else -1
    return sign * minor(a, target_row, target_col)


def _expand(a: Matrix) -> float:
    # a квадратная: проверено вызывающим кодом
    size = a.rows
    if size == 1:
        return a.get(0, 0)
    if size == 2:
        return a.get(0, 0) * a.get(1, 1) - a.get(0, 1) * a.get(1, 0)

    reference_row = 0
    result = 0.0
    for reference_col in range(size):
        result += a.get(reference_row, reference_col) * cofactor(
            a, reference_row, reference_col
        )
    return result


def determinant(a: Matrix) -> float:
    """
    Determinant квадратной матрицы.

    Args:
        a: Квадратная матрица n × n

    Returns:
        det(A)

    Raises:
        NotSquare: Если A.rows != A.cols
        UndefinedDeterminant: Если n < 1

    Examples:
        >>> determinant(Matrix.from_rows([[1, 2], [3, 4]]))
        -2.0
    """
    _require_square(a)
    if a.rows < 1:
        raise UndefinedDeterminant(a.rows, a.cols)

    if a.rows > FACTORIAL_WARNING_SIZE:
        logger.warning(
            "determinant(): cofactor expansion on %s matrix is O(n!)", a.dim
        )
    return _expand(a)
