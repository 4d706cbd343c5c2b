"""
Dimension — Форма матрицы (rows × cols)

Immutable Pydantic модель: пара положительных целых (rows, cols).
Любая операция, меняющая форму, возвращает новый экземпляр.
"""

from pydantic import BaseModel, Field


class Dimension(BaseModel):
    """
    Форма матрицы.

    Оба размера строго положительные: Dimension(0, n) не существует,
    поэтому матрица нулевого размера не может быть построена.
    """

    rows: int = Field(..., gt=0, description="Количество строк")
    cols: int = Field(..., gt=0, description="Количество столбцов")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, rows: int, cols: int) -> "Dimension":
        """Позиционный конструктор: Dimension.of(2, 3)"""
        return cls(rows=rows, cols=cols)

    def transpose(self) -> "Dimension":
        """Новая форма с переставленными rows/cols (оригинал не меняется)."""
        return Dimension(rows=self.cols, cols=self.rows)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def size(self) -> int:
        """Количество элементов (rows × cols)"""
        return self.rows * self.cols

    def __str__(self) -> str:
        return f"{self.rows}x{self.cols}"
