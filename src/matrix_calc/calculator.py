"""
Calculator — Фасад операций консольного калькулятора

Шесть операций меню (номера совпадают с пунктами меню):
1. Add matrices
2. Multiply matrix to a constant
3. Multiply matrices
4. Transpose matrix (main / side / vertical / horizontal)
5. Calculate a determinant
6. Inverse matrix

Функции ядра сигнализируют об ошибках исключениями (MatrixOperationError).
Фасад переводит их в явный CalculationResult(ok=False, error_kind=...),
поэтому вызывающий цикл всегда может сообщить об ошибке и продолжить.
IndexError/TypeError (ошибки программиста) не перехватываются.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Union

from matrix_calc.core.domain.errors import MatrixOperationError
from matrix_calc.core.domain.matrix import Matrix
from matrix_calc.core.math.arithmetic import add, multiply, scale
from matrix_calc.core.math.cofactor_expansion import determinant
from matrix_calc.core.math.inversion import InverseConfig, inverse
from matrix_calc.core.math.transposition import TransposeKind, transpose
from matrix_calc.formatting.render import RenderConfig, render

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Operation(int, Enum):
    """Операция калькулятора."""

    ADD = 1
    SCALE = 2
    MULTIPLY = 3
    TRANSPOSE = 4
    DETERMINANT = 5
    INVERSE = 6


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора."""

    render: RenderConfig = field(default_factory=RenderConfig)
    inverse: InverseConfig = field(default_factory=InverseConfig)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CalculationResult:
    """Результат операции калькулятора."""

    ok: bool
    operation: Operation

    # Ровно одно из двух заполнено при ok=True
    matrix: Optional[Matrix]
    scalar: Optional[float]

    # Пусто при ok=True, иначе MatrixOperationError.kind
    error_kind: str

    # Детали
    details: str

    render_config: RenderConfig = field(default_factory=RenderConfig, repr=False)

    def rendered(self) -> str:
        """Текст для вывода: матрица, скаляр или сообщение об ошибке."""
        if not self.ok:
            return self.details
        if self.matrix is not None:
            return render(self.matrix, self.render_config)
        return repr(self.scalar)


# =============================================================================
# CALCULATOR
# =============================================================================


class MatrixCalculator:
    """
    Калькулятор матриц без I/O.

    Порядок обработки каждой операции:
    1. Вызов функции ядра
    2. Matrix / float → CalculationResult(ok=True)
    3. MatrixOperationError → CalculationResult(ok=False, error_kind=e.kind)
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or CalculatorConfig()

    def add(self, a: Matrix, b: Matrix) -> CalculationResult:
        return self._run(Operation.ADD, lambda: add(a, b))

    def scale(self, scalar: float, a: Matrix) -> CalculationResult:
        return self._run(Operation.SCALE, lambda: scale(scalar, a))

    def multiply(self, a: Matrix, b: Matrix) -> CalculationResult:
        return self._run(Operation.MULTIPLY, lambda: multiply(a, b))

    def transpose(
        self, a: Matrix, kind: TransposeKind = TransposeKind.MAIN
    ) -> CalculationResult:
        return self._run(Operation.TRANSPOSE, lambda: transpose(a, kind))

    def determinant(self, a: Matrix) -> CalculationResult:
        return self._run(Operation.DETERMINANT, lambda: determinant(a))

    def inverse(self, a: Matrix) -> CalculationResult:
        return self._run(Operation.INVERSE, lambda: inverse(a, self.config.inverse))

    def evaluate(
        self,
        operation: Union[Operation, int],
        a: Matrix,
        b: Optional[Matrix] = None,
        scalar: Optional[float] = None,
        kind: Union[TransposeKind, int] = TransposeKind.MAIN,
    ) -> CalculationResult:
        """
        Диспетчеризация по номеру операции меню.

        Args:
            operation: Операция (или её номер 1-6)
            a: Первый (или единственный) операнд
            b: Второй операнд для ADD / MULTIPLY
            scalar: Скаляр для SCALE
            kind: Вид транспонирования для TRANSPOSE (или номер 1-4)

        Returns:
            CalculationResult

        Raises:
            ValueError: Неизвестная операция / вид транспонирования, или не
                передан операнд, который нужен операции
        """
        operation = Operation(operation)

        if operation in (Operation.ADD, Operation.MULTIPLY) and b is None:
            raise ValueError(f"{operation.name} requires a second matrix")
        if operation == Operation.SCALE and scalar is None:
            raise ValueError("SCALE requires a scalar")

        if operation == Operation.ADD:
            return self.add(a, b)
        if operation == Operation.SCALE:
            return self.scale(scalar, a)
        if operation == Operation.MULTIPLY:
            return self.multiply(a, b)
        if operation == Operation.TRANSPOSE:
            return self.transpose(a, TransposeKind.from_choice(kind))
        if operation == Operation.DETERMINANT:
            return self.determinant(a)
        return self.inverse(a)

    def _run(
        self,
        operation: Operation,
        compute: Callable[[], Union[Matrix, float]],
    ) -> CalculationResult:
        logger.debug("calculator: %s", operation.name)
        try:
            value = compute()
        except MatrixOperationError as e:
            logger.info("calculator: %s failed (%s): %s", operation.name, e.kind, e)
            return CalculationResult(
                ok=False,
                operation=operation,
                matrix=None,
                scalar=None,
                error_kind=e.kind,
                details=f"ERROR, {e}",
                render_config=self.config.render,
            )

        if isinstance(value, Matrix):
            return CalculationResult(
                ok=True,
                operation=operation,
                matrix=value,
                scalar=None,
                error_kind="",
                details=f"PASS: {operation.name} → {value.dim} matrix",
                render_config=self.config.render,
            )

        return CalculationResult(
            ok=True,
            operation=operation,
            matrix=None,
            scalar=value,
            error_kind="",
            details=f"PASS: {operation.name} → {value!r}",
            render_config=self.config.render,
        )
