"""
Numerical Safeguards — общие численные примитивы

Модуль содержит примитивы, на которые опираются все остальные math-модули:
- Проверка конечности float (is_valid_float)
- IEEE-754 деление без ZeroDivisionError (permissive режим)
- Эмуляция переполнения фиксированной разрядности (wrap unsigned/signed)
- Валидация целочисленных аргументов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ieee_divide никогда не бросает исключение (x/0 → ±inf, 0/0 → nan)
2. wrap_* детерминированы и совпадают с арифметикой по модулю 2^bits
3. bool не принимается как целое число
"""

import math


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE-754.

    Python бросает ZeroDivisionError для float / 0.0, тогда как IEEE-754
    определяет результат. Функция возвращает этот результат:

    - x / ±0 при x != 0 → ±inf (знак = sign(x) * sign(denominator))
    - 0 / 0 → nan
    - nan / 0 → nan

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator по IEEE-754

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> math.isnan(ieee_divide(0.0, 0.0))
        True
    """
    if denominator != 0:
        return numerator / denominator

    if numerator == 0 or math.isnan(numerator):
        return math.nan

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, float(denominator))
    return math.copysign(math.inf, sign)


# =============================================================================
# ПЕРЕПОЛНЕНИЕ ФИКСИРОВАННОЙ РАЗРЯДНОСТИ
# =============================================================================


def wrap_unsigned(value: int, bits: int) -> int:
    """
    Приведение целого к беззнаковому диапазону [0, 2^bits) по модулю.

    Examples:
        >>> wrap_unsigned(2**64 + 5, 64)
        5
        >>> wrap_unsigned(-1, 8)
        255
    """
    return value % (1 << bits)


def wrap_signed(value: int, bits: int) -> int:
    """
    Приведение целого к знаковому диапазону [-2^(bits-1), 2^(bits-1))
    в дополнительном коде.

    Examples:
        >>> wrap_signed(2**63, 64)
        -9223372036854775808
        >>> wrap_signed(128, 8)
        -128
    """
    modulus = 1 << bits
    half = modulus >> 1
    return ((value + half) % modulus) - half


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_int(value: int, name: str) -> None:
    """
    Валидация, что значение является целым числом (bool не допускается).

    Raises:
        ValueError: Если value не int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение является неотрицательным целым числом.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или value < 0
    """
    validate_int(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
