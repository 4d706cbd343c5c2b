"""
Matrix — Плотная матрица вещественных чисел

Матрица владеет сеткой rows × cols из float (row-major). Форма фиксирована
при создании и совпадает с `dim` всё время жизни объекта.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(grid) == dim.rows, len(grid[r]) == dim.cols для любого r
2. Строки/столбцы не добавляются и не удаляются после создания
3. Две матрицы никогда не разделяют storage (нет aliasing)
4. Индексы (row, col) zero-based; выход за границы → IndexError
   (отрицательные индексы тоже вне границ)
"""

from typing import Callable, Iterator, Optional, Sequence

from matrix_calc.core.domain.dimension import Dimension

ElementGenerator = Callable[[int, int], float]


class Matrix:
    """
    Матрица формы `dim`.

    Создание:
        Matrix(dim)             → заполнена 0.0
        Matrix(dim, generator)  → element(row, col) = generator(row, col),
                                  порядок заполнения row-major

    Examples:
        >>> m = Matrix(Dimension.of(2, 2), lambda r, c: r * 2 + c)
        >>> m[1, 0]
        2.0
    """

    __slots__ = ("_dim", "_grid")

    def __init__(self, dim: Dimension, generator: Optional[ElementGenerator] = None):
        self._dim = dim
        self._grid = [[0.0] * dim.cols for _ in range(dim.rows)]

        if generator is not None:
            for row in range(dim.rows):
                for col in range(dim.cols):
                    self._grid[row][col] = float(generator(row, col))

    # =========================================================================
    # ALTERNATIVE CONSTRUCTORS
    # =========================================================================

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """
        Построение матрицы из прямоугольной последовательности строк.

        Args:
            rows: Строки матрицы (все одинаковой длины)

        Returns:
            Новая матрица (данные копируются)

        Raises:
            ValueError: Если rows пустой или строки разной длины
        """
        if len(rows) == 0 or len(rows[0]) == 0:
            raise ValueError("matrix must have at least one row and one column")

        cols = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != cols:
                raise ValueError(
                    f"expected row[{index}] size is {cols} but was {len(row)}"
                )

        return cls(Dimension.of(len(rows), cols), lambda r, c: rows[r][c])

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """Единичная матрица size × size."""
        return cls(Dimension.of(size, size), lambda r, c: 1.0 if r == c else 0.0)

    # =========================================================================
    # ACCESS
    # =========================================================================

    @property
    def dim(self) -> Dimension:
        return self._dim

    @property
    def rows(self) -> int:
        return self._dim.rows

    @property
    def cols(self) -> int:
        return self._dim.cols

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self._dim.rows and 0 <= col < self._dim.cols):
            raise IndexError(
                f"index ({row}, {col}) is out of bounds for matrix {self._dim}"
            )

    def get(self, row: int, col: int) -> float:
        self._check_index(row, col)
        return self._grid[row][col]

    def set(self, row: int, col: int, value: float) -> None:
        self._check_index(row, col)
        self._grid[row][col] = float(value)

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.get(row, col)

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = index
        self.set(row, col, value)

    # =========================================================================
    # ITERATION / CONVERSION
    # =========================================================================

    def iterate(self) -> Iterator[tuple[int, int, float]]:
        """Итератор (row, col, value) в порядке row-major."""
        for row in range(self._dim.rows):
            for col in range(self._dim.cols):
                yield row, col, self._grid[row][col]

    def row(self, row: int) -> list[float]:
        """Копия строки `row`."""
        self._check_index(row, 0)
        return list(self._grid[row])

    def to_rows(self) -> list[list[float]]:
        """Глубокая копия сетки."""
        return [list(r) for r in self._grid]

    def copy(self) -> "Matrix":
        return Matrix(self._dim, lambda r, c: self._grid[r][c])

    # =========================================================================
    # DUNDER
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._dim == other._dim and self._grid == other._grid

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Matrix({self._dim}, {self._grid!r})"

    def __str__(self) -> str:
        from matrix_calc.formatting.render import render

        return render(self)
