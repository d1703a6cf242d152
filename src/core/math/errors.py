"""
Иерархия исключений math-библиотеки.

Все исключения наследуют MathError и одновременно встроенный тип Python,
поэтому существующий код, ловящий OverflowError / ZeroDivisionError /
ValueError, продолжает работать.
"""


class MathError(Exception):
    """Базовое исключение math-библиотеки."""


class ArithmeticOverflowError(MathError, OverflowError):
    """
    Результат целочисленной операции вышел за пределы разрядности.

    Возникает только в STRICT режиме. В PERMISSIVE режиме результат
    приводится по модулю 2^bits.
    """

    def __init__(self, operation: str, limit: int, message: str | None = None):
        self.operation = operation
        self.limit = limit
        super().__init__(
            message or f"{operation}: result exceeds representable limit {limit}"
        )


class DegenerateInputError(MathError, ZeroDivisionError):
    """Вырожденный вход, приводящий к делению на ноль (h=0, n=0, a=0)."""


class MatrixError(MathError, ValueError):
    """Базовое исключение для операций с Matrix."""


class MatrixConstructionError(MatrixError):
    """Данные не соответствуют заявленным размерам матрицы."""


class MatrixDimensionError(MatrixError):
    """
    Размерности операндов несовместимы для операции.

    Attributes:
        operation: имя операции ("addition" / "multiplication")
        left_shape: (rows, cols) левого операнда
        right_shape: (rows, cols) правого операнда
    """

    def __init__(
        self,
        operation: str,
        left_shape: tuple[int, int],
        right_shape: tuple[int, int],
    ):
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
        super().__init__(
            f"Matrices dimensions do not match for {operation}: "
            f"{left_shape[0]}x{left_shape[1]} vs {right_shape[0]}x{right_shape[1]}"
        )
