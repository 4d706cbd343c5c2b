"""
Inverse — Присоединённая (adjoint) и обратная матрица

ФОРМУЛЫ:
    adj(A)  = (C(A))^T,  C(r, c) = cofactor(A, r, c)
    A^{-1}  = adj(A) / det(A),  det(A) != 0

Проверка вырожденности по умолчанию точная (det == 0.0), без epsilon.
Близкий к нулю, но ненулевой determinant даёт огромные элементы обратной
матрицы; InverseConfig.singular_tolerance включает проверку |det| <= tol.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from matrix_calc.core.domain.errors import NotSquare, SingularMatrix
from matrix_calc.core.domain.matrix import Matrix
from matrix_calc.core.math.arithmetic import divide
from matrix_calc.core.math.cofactor_expansion import cofactor, determinant
from matrix_calc.core.math.numerical_safeguards import is_zero
from matrix_calc.core.math.transposition import transpose_main

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class InverseConfig:
    """Конфигурация обращения матрицы."""

    # 0.0 → точное сравнение det == 0.0; отрицательное значение → ValueError
    singular_tolerance: float = 0.0


# =============================================================================
# ADJOINT / INVERSE
# =============================================================================


def adjoint(a: Matrix) -> Matrix:
    """
    Присоединённая матрица (adjugate).

    Квадратность проверяется один раз на входе. Для 1×1 результат [[1.0]]
    (cofactor матрицы 1×1 равен determinant пустой матрицы, т.е. 1).

    Raises:
        NotSquare: Если A неквадратная
    """
    if not a.dim.is_square:
        raise NotSquare(a.dim)
    if a.rows == 1:
        return Matrix.identity(1)

    cofactors = Matrix(a.dim, lambda row, col: cofactor(a, row, col))
    return transpose_main(cofactors)


def inverse(a: Matrix, config: Optional[InverseConfig] = None) -> Matrix:
    """
    Обратная матрица методом присоединённой матрицы.

    Args:
        a: Квадратная матрица
        config: Конфигурация (default: точная проверка det == 0.0)

    Returns:
        A^{-1} = adj(A) / det(A)

    Raises:
        NotSquare: Если A неквадратная
        SingularMatrix: Если det(A) == 0 (или |det| <= singular_tolerance)
    """
    if config is None:
        config = InverseConfig()

    det = determinant(a)
    if is_zero(det, tol=config.singular_tolerance):
        logger.debug("inverse(): %s matrix is singular (det=%r)", a.dim, det)
        raise SingularMatrix(det)

    return divide(adjoint(a), det)
