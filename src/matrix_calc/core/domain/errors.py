"""
Ошибки матричных операций

Каждая доменная ошибка имеет стабильный `kind` (используется в
CalculationResult.error_kind) и хранит операнды для диагностики.

IndexError (выход за границы) и ValueError (невалидная конфигурация)
не входят в эту иерархию: это ошибки программиста, а не входных данных.
"""

from matrix_calc.core.domain.dimension import Dimension


class MatrixOperationError(Exception):
    """Базовый класс доменных ошибок матричных операций."""

    kind: str = "matrix_operation_error"


class DimensionMismatch(MatrixOperationError):
    """Сложение матриц разной формы."""

    kind = "dimension_mismatch"

    def __init__(self, left: Dimension, right: Dimension):
        self.left = left
        self.right = right
        super().__init__(f"dimensions don't match: {left} vs {right}")


class IncompatibleShape(MatrixOperationError):
    """Умножение A × B при A.cols != B.rows."""

    kind = "incompatible_shape"

    def __init__(self, left: Dimension, right: Dimension):
        self.left = left
        self.right = right
        super().__init__(
            f"matrices A({left.rows}, {left.cols}) and B({right.rows}, {right.cols}) "
            f"are not compatible: A columns ({left.cols}) != B rows ({right.rows})"
        )


class NotSquare(MatrixOperationError):
    """Determinant/adjoint/inverse для неквадратной матрицы."""

    kind = "not_square"

    def __init__(self, dim: Dimension):
        self.dim = dim
        super().__init__(f"non-square matrices don't have determinants: {dim}")


class UndefinedDeterminant(MatrixOperationError):
    """
    Determinant не определён для формы меньше 1×1.

    Для матриц, построенных через Dimension, недостижимо; возникает только
    при попытке взять minor у матрицы 1×1 (подматрица была бы 0×0).
    """

    kind = "undefined_determinant"

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        super().__init__(f"determinant can't be computed for dimension: {rows}x{cols}")


class SingularMatrix(MatrixOperationError):
    """Обратной матрицы нет: determinant равен нулю."""

    kind = "singular"

    def __init__(self, determinant: float):
        self.determinant = determinant
        super().__init__(f"matrix has no inverse (determinant = {determinant!r})")
