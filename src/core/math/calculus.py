"""
Calculus — численное дифференцирование и интегрирование

ФОРМУЛЫ:
    derivative:  f'(x) ≈ (f(x + h) - f(x - h)) / (2h)     (central difference)
    integral:    h = (b - a) / n
                 S = 0.5 * (f(a) + f(b)) + Σ_{i=1}^{n-1} f(a + i*h)
                 ∫_a^b f ≈ S * h                          (trapezoidal rule)

Вырожденные входы (h == 0, n == 0):
- STRICT → DegenerateInputError
- PERMISSIVE → результат IEEE-754 (inf / nan), предупреждение в лог

Исключения, брошенные самой функцией f, пробрасываются без изменений.
"""

import logging
from typing import Callable

from src.core.math.config import MathConfig, resolve_config
from src.core.math.errors import DegenerateInputError
from src.core.math.numerical_safeguards import (
    ieee_divide,
    is_valid_float,
    validate_non_negative_int,
)

logger = logging.getLogger(__name__)

RealFunction = Callable[[float], float]


def derivative(
    func: RealFunction,
    x: float,
    h: float,
    config: MathConfig | None = None,
) -> float:
    """
    Производная func в точке x методом центральной разности.

    Погрешность O(h²). Слишком малый h увеличивает ошибку округления.

    Args:
        func: Функция одной вещественной переменной
        x: Точка дифференцирования
        h: Шаг (не проверяется на "разумность", только на ноль)
        config: Режим обработки h == 0

    Returns:
        Приближённое значение f'(x)

    Raises:
        DegenerateInputError: STRICT и h == 0

    Examples:
        >>> round(derivative(lambda t: t * t, 1.0, 0.01), 6)
        2.0
    """
    cfg = resolve_config(config)

    if h == 0 and cfg.strict:
        raise DegenerateInputError(f"derivative step h must be non-zero, got {h}")

    result = ieee_divide(func(x + h) - func(x - h), 2.0 * h)
    if h == 0 and not is_valid_float(result):
        logger.warning("derivative called with h=0, result %r is not finite", result)
    return result


def integral(
    func: RealFunction,
    a: float,
    b: float,
    n: int,
    config: MathConfig | None = None,
) -> float:
    """
    Определённый интеграл func на [a, b] методом трапеций.

    Args:
        func: Функция одной вещественной переменной
        a: Нижний предел
        b: Верхний предел
        n: Количество подынтервалов (>= 1)
        config: Режим обработки n == 0

    Returns:
        Приближённое значение интеграла

    Raises:
        ValueError: Если n не целое или n < 0
        DegenerateInputError: STRICT и n == 0
    """
    validate_non_negative_int(n, "n")
    cfg = resolve_config(config)

    if n == 0 and cfg.strict:
        raise DegenerateInputError("integral requires at least one subinterval, got n=0")

    h = ieee_divide(b - a, n)
    total = 0.5 * (func(a) + func(b))

    for i in range(1, n):
        total += func(a + i * h)

    result = total * h
    if n == 0 and not is_valid_float(result):
        logger.warning("integral called with n=0, result %r is not finite", result)
    return result
