"""
Matrix — плотная двумерная матрица float

Immutable Pydantic модель. Значения хранятся в одном плоском буфере
(row-major) длиной rows * cols, поэтому строки разной длины
непредставимы после конструирования.

Операции (transpose, add, multiply) не изменяют операнды и всегда
возвращают новый экземпляр.

Сериализация: to_dict() / from_dict() в формате контракта matrix.json
    {"rows": 2, "cols": 2, "data": [[1.0, 2.0], [3.0, 4.0]]}
"""

import logging
from typing import Any, Dict, Iterable, Sequence

from pydantic import BaseModel, Field, ValidationError, model_validator

from src.core.contracts.validators import validate_matrix
from src.core.math.errors import MatrixConstructionError, MatrixDimensionError
from src.core.math.numerical_safeguards import validate_non_negative_int

logger = logging.getLogger(__name__)


class Matrix(BaseModel):
    """
    Плотная матрица rows × cols.

    Инвариант: len(values) == rows * cols. Элемент (i, j) хранится
    по индексу i * cols + j.

    Конструирование:
        Matrix.new(rows, cols, data)       — из вложенных строк
        Matrix.from_flat(rows, cols, values) — из плоского буфера
        Matrix.identity(size)              — единичная матрица
    """

    rows: int = Field(..., ge=0, description="Количество строк")
    cols: int = Field(..., ge=0, description="Количество столбцов")
    values: tuple[float, ...] = Field(..., description="Значения row-major")

    model_config = {"frozen": True, "strict": True}  # Immutable

    @model_validator(mode="after")
    def validate_buffer_length(self) -> "Matrix":
        expected = self.rows * self.cols
        if len(self.values) != expected:
            raise ValueError(
                f"values length {len(self.values)} does not match "
                f"{self.rows}x{self.cols} = {expected}"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, rows: int, cols: int, data: Sequence[Sequence[float]]) -> "Matrix":
        """
        Создание матрицы из вложенных строк.

        Args:
            rows: Количество строк
            cols: Количество столбцов
            data: Последовательность строк, каждая из cols элементов

        Raises:
            MatrixConstructionError: Если len(data) != rows, какая-либо
                строка не содержит ровно cols элементов или значения
                не являются числами
        """
        if len(data) != rows:
            raise MatrixConstructionError(
                f"Number of rows does not match data length: {rows} != {len(data)}"
            )
        for index, row in enumerate(data):
            if len(row) != cols:
                raise MatrixConstructionError(
                    f"Row {index} has {len(row)} columns, expected {cols}"
                )

        return cls.from_flat(rows, cols, [value for row in data for value in row])

    @classmethod
    def from_flat(cls, rows: int, cols: int, values: Iterable[float]) -> "Matrix":
        """
        Создание матрицы из плоского row-major буфера.

        Raises:
            MatrixConstructionError: Если длина буфера != rows * cols или
                значения невалидны
        """
        try:
            return cls(rows=rows, cols=cols, values=tuple(values))
        except ValidationError as e:
            raise MatrixConstructionError(str(e)) from e

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """
        Единичная матрица size × size (1.0 на диагонали, 0.0 вне).

        size == 0 даёт пустую матрицу 0 × 0.

        Raises:
            ValueError: Если size не целое или size < 0
        """
        validate_non_negative_int(size, "size")

        values = [0.0] * (size * size)
        for i in range(size):
            values[i * size + i] = 1.0
        return cls._trusted(size, size, values)

    @classmethod
    def _trusted(cls, rows: int, cols: int, values: list[float]) -> "Matrix":
        # Результаты внутренних операций уже удовлетворяют инварианту
        return cls.model_construct(rows=rows, cols=cols, values=tuple(values))

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def get(self, i: int, j: int) -> float:
        """Элемент (i, j); IndexError вне диапазона."""
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"index ({i}, {j}) out of range for {self.rows}x{self.cols}")
        return self.values[i * self.cols + j]

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return self.get(i, j)

    def row(self, i: int) -> tuple[float, ...]:
        if not 0 <= i < self.rows:
            raise IndexError(f"row {i} out of range for {self.rows} rows")
        start = i * self.cols
        return self.values[start:start + self.cols]

    def column(self, j: int) -> tuple[float, ...]:
        if not 0 <= j < self.cols:
            raise IndexError(f"column {j} out of range for {self.cols} columns")
        return self.values[j::self.cols]

    def to_rows(self) -> tuple[tuple[float, ...], ...]:
        """Вложенное представление (кортеж строк)."""
        return tuple(self.row(i) for i in range(self.rows))

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def transpose(self) -> "Matrix":
        """
        Транспонирование: result[j][i] = self[i][j].

        Returns:
            Новая матрица cols × rows
        """
        transposed = [0.0] * len(self.values)
        for i in range(self.rows):
            for j in range(self.cols):
                transposed[j * self.rows + i] = self.values[i * self.cols + j]
        return self._trusted(self.cols, self.rows, transposed)

    def add(self, other: "Matrix") -> "Matrix":
        """
        Поэлементная сумма.

        Raises:
            MatrixDimensionError: Если размеры матриц не совпадают
        """
        if self.shape != other.shape:
            logger.debug("add rejected: %s vs %s", self.shape, other.shape)
            raise MatrixDimensionError("addition", self.shape, other.shape)

        summed = [a + b for a, b in zip(self.values, other.values)]
        return self._trusted(self.rows, self.cols, summed)

    def multiply(self, other: "Matrix") -> "Matrix":
        """
        Матричное произведение (наивный тройной цикл).

        result[i][j] = Σ_k self[i][k] * other[k][j]

        Returns:
            Новая матрица self.rows × other.cols

        Raises:
            MatrixDimensionError: Если self.cols != other.rows
        """
        if self.cols != other.rows:
            logger.debug("multiply rejected: %s vs %s", self.shape, other.shape)
            raise MatrixDimensionError("multiplication", self.shape, other.shape)

        n, m, p = self.rows, self.cols, other.cols
        left, right = self.values, other.values
        product = [0.0] * (n * p)
        for i in range(n):
            for j in range(p):
                acc = 0.0
                for k in range(m):
                    acc += left[i * m + k] * right[k * p + j]
                product[i * p + j] = acc
        return self._trusted(n, p, product)

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Представление в формате контракта matrix."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "data": [list(row) for row in self.to_rows()],
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Matrix":
        """
        Создание матрицы из payload контракта matrix.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме
            MatrixConstructionError: Если data не согласуется с rows/cols
        """
        validate_matrix(payload)
        return cls.new(payload["rows"], payload["cols"], payload["data"])
