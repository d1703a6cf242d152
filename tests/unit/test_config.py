"""
Тесты для MathConfig и numerical safeguards

Проверяет:
1. Значения по умолчанию и производные лимиты
2. Валидацию параметров и immutability
3. ieee_divide и wrap_* примитивы
"""

import math
from dataclasses import FrozenInstanceError

import pytest

from src.core.math.config import (
    DEFAULT_MATH_CONFIG,
    PERMISSIVE_MATH_CONFIG,
    ComputeMode,
    MathConfig,
    resolve_config,
)
from src.core.math.numerical_safeguards import (
    ieee_divide,
    is_valid_float,
    validate_int,
    validate_non_negative_int,
    wrap_signed,
    wrap_unsigned,
)


# =============================================================================
# ТЕСТЫ: MathConfig
# =============================================================================


class TestMathConfig:
    """Тесты MathConfig."""

    def test_defaults(self):
        cfg = MathConfig()
        assert cfg.mode is ComputeMode.STRICT
        assert cfg.strict
        assert cfg.unsigned_max == 2**64 - 1
        assert cfg.signed_min == -(2**63)
        assert cfg.signed_max == 2**63 - 1

    def test_permissive_constant(self):
        assert not PERMISSIVE_MATH_CONFIG.strict
        assert PERMISSIVE_MATH_CONFIG.mode is ComputeMode.PERMISSIVE

    def test_resolve_config(self):
        assert resolve_config(None) is DEFAULT_MATH_CONFIG
        assert resolve_config(PERMISSIVE_MATH_CONFIG) is PERMISSIVE_MATH_CONFIG

    def test_mode_from_string_value(self):
        assert MathConfig(mode=ComputeMode("permissive")).mode is ComputeMode.PERMISSIVE

    def test_frozen(self):
        cfg = MathConfig()
        with pytest.raises(FrozenInstanceError):
            cfg.mode = ComputeMode.PERMISSIVE

    @pytest.mark.parametrize("bits", [0, 1, -8, 16.0, True])
    def test_invalid_bits(self, bits):
        with pytest.raises(ValueError):
            MathConfig(unsigned_bits=bits)

    def test_invalid_mode(self):
        with pytest.raises(ValueError):
            MathConfig(mode="strict")


# =============================================================================
# ТЕСТЫ: numerical safeguards
# =============================================================================


class TestIeeeDivide:
    """Тесты ieee_divide."""

    def test_regular_division(self):
        assert ieee_divide(10.0, 4.0) == 2.5

    def test_signed_infinities(self):
        assert ieee_divide(1.0, 0.0) == math.inf
        assert ieee_divide(-1.0, 0.0) == -math.inf
        assert ieee_divide(1.0, -0.0) == -math.inf
        assert ieee_divide(-3.0, -0.0) == math.inf

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(ieee_divide(0.0, 0.0))
        assert math.isnan(ieee_divide(math.nan, 0.0))

    def test_integer_zero_denominator(self):
        assert ieee_divide(2.0, 0) == math.inf


class TestWrap:
    """Тесты wrap_unsigned / wrap_signed."""

    def test_unsigned(self):
        assert wrap_unsigned(2**64 + 5, 64) == 5
        assert wrap_unsigned(255, 8) == 255
        assert wrap_unsigned(256, 8) == 0

    def test_signed(self):
        assert wrap_signed(127, 8) == 127
        assert wrap_signed(128, 8) == -128
        assert wrap_signed(-129, 8) == 127
        assert wrap_signed(2**63, 64) == -(2**63)


class TestValidation:
    """Тесты валидаторов и сравнений."""

    def test_validate_int(self):
        validate_int(-5, "x")
        with pytest.raises(ValueError, match="x must be an integer"):
            validate_int(1.0, "x")
        with pytest.raises(ValueError):
            validate_int(False, "x")

    def test_validate_non_negative_int(self):
        validate_non_negative_int(0, "n")
        with pytest.raises(ValueError, match="n must be non-negative"):
            validate_non_negative_int(-1, "n")

    def test_is_valid_float(self):
        assert is_valid_float(1.0)
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
