"""
Contract Validation Module

Валидация входных данных на границе ядра: JSON Schema контракт,
Pydantic модель MatrixPayload и разбор текстового ввода.
"""

from .parsing import (
    MalformedInput,
    parse_dimension,
    parse_matrix,
    parse_row,
    parse_scalar,
)
from .payload import MatrixPayload
from .validators import SchemaLoader, validate_matrix_payload

__all__ = [
    # Classes
    "SchemaLoader",
    "MatrixPayload",
    # Errors
    "MalformedInput",
    # Functions
    "validate_matrix_payload",
    "parse_dimension",
    "parse_row",
    "parse_matrix",
    "parse_scalar",
]
