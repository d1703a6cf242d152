"""
Algebra — скалярные целочисленные функции

Функции:
- factorial(n): n! в беззнаковом диапазоне MathConfig.unsigned_bits
- fibonacci(n): n-е число Фибоначчи (итеративно, O(n))
- power(base, exp): base^exp последовательным умножением
- log10(n): десятичный логарифм, nan для n <= 0

ПЕРЕПОЛНЕНИЕ:
    Результаты factorial/fibonacci ограничены u64 (по умолчанию):
    factorial(20) — последний представимый, fibonacci(93) — последний
    представимый. Для целого основания power ограничен i64.

    STRICT → ArithmeticOverflowError
    PERMISSIVE → результат по модулю 2^bits (как машинная арифметика),
                 предупреждение в лог
"""

import logging
import math

from src.core.math.config import MathConfig, resolve_config
from src.core.math.errors import ArithmeticOverflowError
from src.core.math.numerical_safeguards import (
    validate_non_negative_int,
    wrap_signed,
    wrap_unsigned,
)

logger = logging.getLogger(__name__)


def _overflow(operation: str, limit: int, cfg: MathConfig) -> None:
    if cfg.strict:
        raise ArithmeticOverflowError(operation, limit)
    logger.warning("%s overflowed limit %d, result wrapped", operation, limit)


def factorial(n: int, config: MathConfig | None = None) -> int:
    """
    Факториал n: произведение 1..=n.

    Args:
        n: Неотрицательное целое
        config: Режим обработки переполнения (default: STRICT, u64)

    Returns:
        n! (1 для n ∈ {0, 1})

    Raises:
        ValueError: Если n не целое или n < 0
        ArithmeticOverflowError: STRICT и n! > unsigned_max (n > 20 для u64)

    Examples:
        >>> factorial(5)
        120
        >>> factorial(0)
        1
    """
    validate_non_negative_int(n, "n")
    cfg = resolve_config(config)

    result = 1
    overflowed = False
    for k in range(2, n + 1):
        result *= k
        if result > cfg.unsigned_max:
            if not overflowed:
                _overflow(f"factorial({n})", cfg.unsigned_max, cfg)
                overflowed = True
            result = wrap_unsigned(result, cfg.unsigned_bits)

    return result


def fibonacci(n: int, config: MathConfig | None = None) -> int:
    """
    n-е число Фибоначчи: fib(0)=0, fib(1)=1, fib(n)=fib(n-1)+fib(n-2).

    Вычисляется итеративно: линейное время, без рекурсии. Значения совпадают
    с прямым рекурсивным определением.

    Raises:
        ValueError: Если n не целое или n < 0
        ArithmeticOverflowError: STRICT и fib(n) > unsigned_max (n > 93 для u64)

    Examples:
        >>> fibonacci(10)
        55
    """
    validate_non_negative_int(n, "n")
    cfg = resolve_config(config)

    previous, current = 0, 1
    if n == 0:
        return previous

    overflowed = False
    for _ in range(n - 1):
        previous, current = current, previous + current
        if current > cfg.unsigned_max:
            if not overflowed:
                _overflow(f"fibonacci({n})", cfg.unsigned_max, cfg)
                overflowed = True
            current = wrap_unsigned(current, cfg.unsigned_bits)

    return current


def power(base: int | float, exp: int, config: MathConfig | None = None) -> int | float:
    """
    Возведение в неотрицательную целую степень последовательным умножением.

    Выполняется ровно exp умножений. Для целого base результат ограничен
    знаковым диапазоном signed_bits; для float base действует IEEE-754
    (переполнение → inf).

    Args:
        base: Основание (int или float)
        exp: Неотрицательный целый показатель
        config: Режим обработки переполнения

    Returns:
        base^exp (1 для exp == 0)

    Raises:
        ValueError: Если exp не целое или exp < 0
        ArithmeticOverflowError: STRICT, целое base и результат вне i64

    Examples:
        >>> power(2, 3)
        8
        >>> power(5, 0)
        1
        >>> power(2.0, 10)
        1024.0
    """
    validate_non_negative_int(exp, "exp")
    cfg = resolve_config(config)

    if isinstance(base, float):
        result = 1.0
        for _ in range(exp):
            result *= base
        return result

    result = 1
    overflowed = False
    for _ in range(exp):
        result *= base
        if not cfg.signed_min <= result <= cfg.signed_max:
            if not overflowed:
                _overflow(f"power({base}, {exp})", cfg.signed_max, cfg)
                overflowed = True
            result = wrap_signed(result, cfg.signed_bits)

    return result


def log10(n: float) -> float:
    """
    Десятичный логарифм.

    Никогда не бросает исключение: для n <= 0 (и nan) возвращает nan.

    Examples:
        >>> log10(1000.0)
        3.0
        >>> math.isnan(log10(0.0))
        True
    """
    if not n > 0:
        return math.nan
    return math.log10(n)
