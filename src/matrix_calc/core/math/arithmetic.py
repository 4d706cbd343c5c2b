"""
Arithmetic — Поэлементные операции и матричное умножение

- add(A, B):       A + B, требует A.dim == B.dim
- scale(k, A):     k · A, всегда успешна
- multiply(A, B):  A × B, требует A.cols == B.rows
- divide(A, d):    A / d (используется inverse)

Все операции возвращают новую матрицу, операнды не изменяются.
"""

from matrix_calc.core.domain.dimension import Dimension
from matrix_calc.core.domain.errors import DimensionMismatch, IncompatibleShape
from matrix_calc.core.domain.matrix import Matrix


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Поэлементная сумма.

    Raises:
        DimensionMismatch: Если формы операндов различаются
    """
    if a.dim != b.dim:
        raise DimensionMismatch(a.dim, b.dim)
    return Matrix(a.dim, lambda row, col: a.get(row, col) + b.get(row, col))


def scale(scalar: float, a: Matrix) -> Matrix:
    """Умножение матрицы на скаляр."""
    return Matrix(a.dim, lambda row, col: scalar * a.get(row, col))


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Матричное произведение A × B.

    Результат формы A.rows × B.cols:
        result(r, c) = Σ_{k=0}^{A.cols-1} A(r, k) · B(k, c)

    Сумма накапливается начиная с 0.0, по одному слагаемому на k
    в порядке возрастания k.

    Args:
        a: Левый операнд
        b: Правый операнд

    Returns:
        Новая матрица A.rows × B.cols

    Raises:
        IncompatibleShape: Если A.cols != B.rows (несёт обе формы)

    Examples:
        >>> a = Matrix.from_rows([[1, 2], [3, 4]])
        >>> multiply(a, Matrix.identity(2)) == a
        True
    """
    if a.cols != b.rows:
        raise IncompatibleShape(a.dim, b.dim)

    result = Matrix(Dimension.of(a.rows, b.cols))
    for row in range(a.rows):
        for col in range(b.cols):
            for inner in range(a.cols):
                result[row, col] += a.get(row, inner) * b.get(inner, col)
    return result


def divide(a: Matrix, divisor: float) -> Matrix:
    """
    Деление каждого элемента на divisor.

    Raises:
        ZeroDivisionError: Если divisor == 0.0
    """
    if divisor == 0.0:
        raise ZeroDivisionError("matrix division by zero")
    return Matrix(a.dim, lambda row, col: a.get(row, col) / divisor)
