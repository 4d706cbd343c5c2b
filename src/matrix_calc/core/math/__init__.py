"""
Core math modules для matrix-calc

Линейная алгебра над Matrix: сложение, умножение, транспонирование,
determinant, adjoint, inverse. Все функции чистые и не делают I/O.
"""

# Numerical Safeguards
from matrix_calc.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf
    is_valid_float,
    validate_finite,
    # Epsilon comparisons
    is_close,
    is_zero,
    matrices_close,
    # Utilities
    normalize_zero,
)

# Arithmetic
from matrix_calc.core.math.arithmetic import add, divide, multiply, scale

# Transpose
from matrix_calc.core.math.transposition import (
    TransposeKind,
    transpose,
    transpose_horizontal,
    transpose_main,
    transpose_side,
    transpose_vertical,
)

# Determinant
from matrix_calc.core.math.cofactor_expansion import (
    FACTORIAL_WARNING_SIZE,
    cofactor,
    determinant,
    minor,
    submatrix,
)

# Inverse
from matrix_calc.core.math.inversion import InverseConfig, adjoint, inverse

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Functions
    "is_valid_float",
    "validate_finite",
    "is_close",
    "is_zero",
    "matrices_close",
    "normalize_zero",
    # Arithmetic
    "add",
    "scale",
    "multiply",
    "divide",
    # Transpose — Types
    "TransposeKind",
    # Transpose — Functions
    "transpose",
    "transpose_main",
    "transpose_side",
    "transpose_vertical",
    "transpose_horizontal",
    # Determinant — Constants
    "FACTORIAL_WARNING_SIZE",
    # Determinant — Functions
    "submatrix",
    "minor",
    "cofactor",
    "determinant",
    # Inverse — Config
    "InverseConfig",
    # Inverse — Functions
    "adjoint",
    "inverse",
]
