"""
matrix-calc — плотные матрицы и линейная алгебра для небольших N

Public API:
- Domain:      Dimension, Matrix, ошибки операций
- Math:        add, scale, multiply, transpose_*, minor, cofactor,
               determinant, adjoint, inverse
- Formatting:  RenderConfig, format_value, render
- Calculator:  MatrixCalculator, CalculationResult, Operation

Пример:
    >>> from matrix_calc import Matrix, determinant, render
    >>> a = Matrix.from_rows([[1, 2], [3, 4]])
    >>> determinant(a)
    -2.0
    >>> print(render(a), end="")
    1 2
    3 4
"""

from matrix_calc.core.domain import (
    Dimension,
    DimensionMismatch,
    IncompatibleShape,
    Matrix,
    MatrixOperationError,
    NotSquare,
    SingularMatrix,
    UndefinedDeterminant,
)
from matrix_calc.core.math import (
    InverseConfig,
    TransposeKind,
    add,
    adjoint,
    cofactor,
    determinant,
    divide,
    inverse,
    minor,
    multiply,
    scale,
    submatrix,
    transpose,
    transpose_horizontal,
    transpose_main,
    transpose_side,
    transpose_vertical,
)
from matrix_calc.formatting import RenderConfig, format_value, render
from matrix_calc.calculator import (
    CalculationResult,
    CalculatorConfig,
    MatrixCalculator,
    Operation,
)

__version__ = "1.0.0"

__all__ = [
    # Domain
    "Dimension",
    "Matrix",
    # Errors
    "MatrixOperationError",
    "DimensionMismatch",
    "IncompatibleShape",
    "NotSquare",
    "UndefinedDeterminant",
    "SingularMatrix",
    # Math
    "add",
    "scale",
    "multiply",
    "divide",
    "TransposeKind",
    "transpose",
    "transpose_main",
    "transpose_side",
    "transpose_vertical",
    "transpose_horizontal",
    "submatrix",
    "minor",
    "cofactor",
    "determinant",
    "InverseConfig",
    "adjoint",
    "inverse",
    # Formatting
    "RenderConfig",
    "format_value",
    "render",
    # Calculator
    "Operation",
    "CalculatorConfig",
    "CalculationResult",
    "MatrixCalculator",
]
