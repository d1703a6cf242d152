"""
Тесты для Number theory — gcd

Проверяет:
1. НОД последовательности (попарная редукция Евклида)
2. Граничные случаи: пустая последовательность, один элемент, нули
3. Валидацию элементов
"""

import math

import pytest

from src.core.math.number_theory import gcd, gcd_two


class TestGcdTwo:
    """Тесты gcd_two (алгоритм Евклида)."""

    def test_basic(self):
        assert gcd_two(48, 18) == 6
        assert gcd_two(18, 48) == 6

    def test_with_zero(self):
        assert gcd_two(0, 7) == 7
        assert gcd_two(7, 0) == 7
        assert gcd_two(0, 0) == 0

    def test_coprime(self):
        assert gcd_two(17, 31) == 1


class TestGcd:
    """Тесты gcd над последовательностью."""

    def test_known_values(self):
        assert gcd([48, 18, 30]) == 6
        assert gcd([90, 20, 30]) == 10

    def test_primes(self):
        assert gcd([101, 103, 107]) == 1

    def test_all_zeros(self):
        assert gcd([0, 0, 0]) == 0

    def test_single_element(self):
        assert gcd([48]) == 48
        assert gcd([0]) == 0

    def test_empty(self):
        assert gcd([]) == 0

    def test_accepts_any_iterable(self):
        assert gcd(x * 12 for x in (2, 3, 5)) == 12
        assert gcd((8, 12)) == 4

    def test_zeros_ignored_in_reduction(self):
        assert gcd([0, 12, 0, 18]) == 6

    def test_matches_math_gcd(self):
        values = [2**10 * 3**4, 2**7 * 3**9 * 5, 2**12 * 3**5 * 7]
        assert gcd(values) == math.gcd(*values)

    @pytest.mark.parametrize("bad", [[4, -2], [4, 2.0], [True, 2]])
    def test_invalid_elements(self, bad):
        with pytest.raises(ValueError, match=r"numbers\[\d\]"):
            gcd(bad)
