"""
Numerical Safeguards — Float-примитивы для матричных операций

Модуль собирает в одном месте работу с особенностями IEEE-754:
- NaN/Inf проверки входных значений
- Epsilon-сравнения float (скаляры и матрицы поэлементно)
- Нормализация отрицательного нуля (-0.0 → 0.0)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ядро операций не использует epsilon неявно: точные сравнения остаются
   точными, tolerance всегда передаётся явно
2. Все функции детерминированы и не имеют состояния
"""

import math
from typing import Final

from matrix_calc.core.domain.matrix import Matrix

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Нужна для сравнений с нулём, где относительная толерантность бесполезна
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN или Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = 0.0) -> bool:
    """
    Проверка на ноль.

    При tol == 0.0 (default) сравнение точное: value == 0.0.

    Raises:
        ValueError: Если tol отрицательный
    """
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")
    if tol == 0.0:
        return value == 0.0
    return abs(value) <= tol


def normalize_zero(value: float) -> float:
    """
    -0.0 → 0.0, остальные значения без изменений.

    Examples:
        >>> str(normalize_zero(-0.0))
        '0.0'
    """
    if value == 0.0:
        return 0.0
    return value


def matrices_close(
    a: Matrix,
    b: Matrix,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Поэлементное сравнение матриц с толерантностью.

    Returns:
        False если формы различаются, иначе True только если все элементы
        близки (см. is_close)
    """
    if a.dim != b.dim:
        return False
    return all(
        is_close(value, b.get(row, col), rel_tol=rel_tol, abs_tol=abs_tol)
        for row, col, value in a.iterate()
    )
