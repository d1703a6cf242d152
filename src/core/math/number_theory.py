"""
Number theory — наибольший общий делитель последовательности целых

Алгоритм Евклида применяется попарно слева направо:
    gcd([a, b, c]) = gcd_two(gcd_two(a, b), c)

Граничные случаи:
- [] → 0
- [x] → x
- [0, 0, 0] → 0
"""

from functools import reduce
from typing import Iterable

from src.core.math.numerical_safeguards import validate_non_negative_int


def gcd_two(a: int, b: int) -> int:
    """
    НОД двух неотрицательных целых (алгоритм Евклида).

    Остаток берётся до тех пор, пока он не станет нулём; ненулевой
    операнд в этот момент и есть НОД.
    """
    while b != 0:
        a, b = b, a % b
    return a


def gcd(numbers: Iterable[int]) -> int:
    """
    НОД всех элементов последовательности.

    Args:
        numbers: Неотрицательные целые (любой iterable)

    Returns:
        НОД всех элементов; 0 для пустой последовательности

    Raises:
        ValueError: Если элемент не целое или отрицательный

    Examples:
        >>> gcd([48, 18, 30])
        6
        >>> gcd([101, 103, 107])
        1
        >>> gcd([])
        0
    """
    values = list(numbers)
    for index, value in enumerate(values):
        validate_non_negative_int(value, f"numbers[{index}]")

    # gcd_two(0, x) == x: 0 нейтральный начальный элемент
    return reduce(gcd_two, values, 0)
