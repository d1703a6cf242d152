"""
Compute configuration — режим обработки вырожденных случаев

Два режима:
- STRICT: переполнение и деление на ноль → исключение из errors
- PERMISSIVE: воспроизводится поведение машинной арифметики
  (wrap по модулю 2^bits, IEEE-754 inf/nan), с предупреждением в лог

Конфигурация передаётся явно в каждую операцию. Глобального изменяемого
состояния нет.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class ComputeMode(str, Enum):
    """Режим обработки переполнений и деления на ноль"""

    STRICT = "strict"
    PERMISSIVE = "permissive"


# =============================================================================
# CONFIG
# =============================================================================

# Разрядность по умолчанию (u64 / i64)
DEFAULT_INT_BITS: Final[int] = 64


@dataclass(frozen=True)
class MathConfig:
    """Конфигурация скалярных вычислений.

    Attributes:
        mode: режим обработки переполнений и деления на ноль
        unsigned_bits: разрядность результата factorial/fibonacci
        signed_bits: разрядность результата power для целого основания
    """

    mode: ComputeMode = ComputeMode.STRICT
    unsigned_bits: int = DEFAULT_INT_BITS
    signed_bits: int = DEFAULT_INT_BITS

    def __post_init__(self) -> None:
        if not isinstance(self.mode, ComputeMode):
            raise ValueError(f"mode must be a ComputeMode, got {self.mode!r}")
        for name in ("unsigned_bits", "signed_bits"):
            bits = getattr(self, name)
            if isinstance(bits, bool) or not isinstance(bits, int) or bits < 2:
                raise ValueError(f"{name} must be an integer >= 2, got {bits!r}")

    @property
    def strict(self) -> bool:
        return self.mode is ComputeMode.STRICT

    @property
    def unsigned_max(self) -> int:
        """Максимум беззнакового диапазона: 2^unsigned_bits - 1"""
        return (1 << self.unsigned_bits) - 1

    @property
    def signed_min(self) -> int:
        return -(1 << (self.signed_bits - 1))

    @property
    def signed_max(self) -> int:
        return (1 << (self.signed_bits - 1)) - 1


DEFAULT_MATH_CONFIG: Final[MathConfig] = MathConfig()

PERMISSIVE_MATH_CONFIG: Final[MathConfig] = MathConfig(mode=ComputeMode.PERMISSIVE)


def resolve_config(config: MathConfig | None) -> MathConfig:
    """Конфигурация вызова: явная или DEFAULT_MATH_CONFIG."""
    return config or DEFAULT_MATH_CONFIG
