"""
MatrixPayload — Валидированные входные данные матрицы

Immutable Pydantic модель: объявленная форма (rows, cols) + данные по строкам.
Совместима с JSON Schema (contracts/schema/matrix_payload.json) и
дополнительно проверяет то, что схема выразить не может:
- len(data) == rows, len(data[r]) == cols
- все значения конечные (не NaN/Inf)
"""

import json
from typing import Any, Mapping, Union

from pydantic import BaseModel, Field, field_validator

from matrix_calc.contracts.validators import validate_matrix_payload
from matrix_calc.core.domain.dimension import Dimension
from matrix_calc.core.domain.matrix import Matrix
from matrix_calc.core.math.numerical_safeguards import is_valid_float


class MatrixPayload(BaseModel):
    """
    Матрица на границе ядра.

    Внешний код (shell, JSON API) строит MatrixPayload из пользовательского
    ввода; ядро получает уже корректную Matrix через to_matrix().
    """

    rows: int = Field(..., gt=0, description="Количество строк")
    cols: int = Field(..., gt=0, description="Количество столбцов")
    data: list[list[float]] = Field(..., min_length=1, description="Строки матрицы")

    model_config = {"frozen": True}

    @field_validator("data")
    @classmethod
    def validate_shape(cls, v: list[list[float]], info) -> list[list[float]]:
        """Проверка, что data совпадает с объявленной формой и конечна"""
        if "rows" in info.data and len(v) != info.data["rows"]:
            raise ValueError(f"expected {info.data['rows']} rows but got {len(v)}")

        if "cols" in info.data:
            cols = info.data["cols"]
            for index, row in enumerate(v):
                if len(row) != cols:
                    raise ValueError(
                        f"expected row[{index}] size is {cols} but was {len(row)}"
                    )

        for index, row in enumerate(v):
            for value in row:
                if not is_valid_float(value):
                    raise ValueError(f"row[{index}] contains NaN/Inf: {value}")
        return v

    def dimension(self) -> Dimension:
        return Dimension.of(self.rows, self.cols)

    def to_matrix(self) -> Matrix:
        """Новая Matrix с копией данных."""
        return Matrix(self.dimension(), lambda row, col: self.data[row][col])

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> "MatrixPayload":
        return cls(rows=matrix.rows, cols=matrix.cols, data=matrix.to_rows())

    @classmethod
    def from_json(cls, data: Union[str, bytes, Mapping[str, Any]]) -> "MatrixPayload":
        """
        Разбор внешнего JSON: сначала JSON Schema, затем pydantic.

        Args:
            data: JSON-текст или уже декодированный объект

        Raises:
            json.JSONDecodeError: Текст не является JSON
            jsonschema.ValidationError: Нарушена структура или типы
            pydantic.ValidationError: rows/cols не совпадают с data, NaN/Inf
        """
        if isinstance(data, (str, bytes)):
            data = json.loads(data)
        validate_matrix_payload(data)
        return cls.model_validate(data)
