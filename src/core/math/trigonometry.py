"""
Trigonometry — тригонометрические функции и конверсия углов

Все углы в радианах, если не указано иное.

- sine / cosine / tangent: обёртки над math, область определения
  не ограничена (±inf → nan, как в IEEE-754)
- arcsine / arccosine: None вне [-1, 1]
- arctangent: главное значение в [-π/2, π/2]
- radians_to_degrees / degrees_to_radians
"""

import logging
import math
from typing import Callable, Final, Optional

from src.core.math.numerical_safeguards import is_valid_float

logger = logging.getLogger(__name__)

DEGREES_PER_RADIAN: Final[float] = 180.0 / math.pi
RADIANS_PER_DEGREE: Final[float] = math.pi / 180.0


def _periodic(name: str, func: Callable[[float], float], angle_rad: float) -> float:
    # math.sin/cos/tan бросают ValueError для ±inf, IEEE-754 даёт nan
    if not is_valid_float(angle_rad):
        if math.isinf(angle_rad):
            logger.warning("%s called with infinite angle, returning nan", name)
        return math.nan
    return func(angle_rad)


def sine(angle_rad: float) -> float:
    """Синус угла в радианах."""
    return _periodic("sine", math.sin, angle_rad)


def cosine(angle_rad: float) -> float:
    """Косинус угла в радианах."""
    return _periodic("cosine", math.cos, angle_rad)


def tangent(angle_rad: float) -> float:
    """Тангенс угла в радианах."""
    return _periodic("tangent", math.tan, angle_rad)


def arcsine(value: float) -> Optional[float]:
    """
    Арксинус.

    Returns:
        Угол в [-π/2, π/2] или None, если value вне [-1, 1]

    Examples:
        >>> arcsine(2.0) is None
        True
    """
    if value < -1.0 or value > 1.0:
        return None
    return math.asin(value)


def arccosine(value: float) -> Optional[float]:
    """
    Арккосинус.

    Returns:
        Угол в [0, π] или None, если value вне [-1, 1]
    """
    if value < -1.0 or value > 1.0:
        return None
    return math.acos(value)


def arctangent(value: float) -> float:
    """Арктангенс, главное значение в [-π/2, π/2]."""
    return math.atan(value)


def radians_to_degrees(radians: float) -> float:
    """
    Конверсия радиан → градусы.

    Examples:
        >>> radians_to_degrees(math.pi)
        180.0
    """
    return radians * DEGREES_PER_RADIAN


def degrees_to_radians(degrees: float) -> float:
    """Конверсия градусы → радианы."""
    return degrees * RADIANS_PER_DEGREE
