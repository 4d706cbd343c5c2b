"""
Domain models and value objects.

Contains the matrix shape (Dimension), the dense Matrix grid and the
typed failures raised by matrix operations.
"""

from matrix_calc.core.domain.dimension import Dimension
from matrix_calc.core.domain.errors import (
    DimensionMismatch,
    IncompatibleShape,
    MatrixOperationError,
    NotSquare,
    SingularMatrix,
    UndefinedDeterminant,
)
from matrix_calc.core.domain.matrix import ElementGenerator, Matrix

__all__ = [
    # Shape
    "Dimension",
    # Matrix
    "Matrix",
    "ElementGenerator",
    # Errors
    "MatrixOperationError",
    "DimensionMismatch",
    "IncompatibleShape",
    "NotSquare",
    "UndefinedDeterminant",
    "SingularMatrix",
]
