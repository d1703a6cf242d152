"""
Quadratic — решение квадратного уравнения ax² + bx + c = 0

ФОРМУЛЫ:
    D = b² - 4ac
    x1 = (-b + √D) / (2a)
    x2 = (-b - √D) / (2a)

D < 0 → None (вещественных корней нет).
a == 0 → STRICT: DegenerateInputError; PERMISSIVE: IEEE-754 деление.
"""

import logging
import math
from typing import NamedTuple, Optional

from src.core.math.config import MathConfig, resolve_config
from src.core.math.errors import DegenerateInputError
from src.core.math.numerical_safeguards import ieee_divide, is_valid_float

logger = logging.getLogger(__name__)


class QuadraticRoots(NamedTuple):
    """Два вещественных корня; root1 соответствует ветке +√D."""

    root1: float
    root2: float


def discriminant(a: float, b: float, c: float) -> float:
    """Дискриминант b² - 4ac."""
    return b * b - 4.0 * a * c


def solve_quadratic(
    a: float,
    b: float,
    c: float,
    config: MathConfig | None = None,
) -> Optional[QuadraticRoots]:
    """
    Вещественные корни квадратного уравнения.

    Args:
        a: Коэффициент при x²
        b: Коэффициент при x
        c: Свободный член
        config: Режим обработки a == 0

    Returns:
        QuadraticRoots(root1, root2) или None, если D < 0.
        Для кратного корня (D == 0) root1 == root2.

    Raises:
        DegenerateInputError: STRICT и a == 0

    Examples:
        >>> solve_quadratic(1.0, -3.0, 2.0)
        QuadraticRoots(root1=2.0, root2=1.0)
        >>> solve_quadratic(1.0, 2.0, 5.0) is None
        True
    """
    cfg = resolve_config(config)

    d = discriminant(a, b, c)
    if d < 0.0:
        return None

    if a == 0 and cfg.strict:
        raise DegenerateInputError(
            "leading coefficient a must be non-zero for a quadratic equation"
        )

    sqrt_d = math.sqrt(d)
    denominator = 2.0 * a

    roots = QuadraticRoots(
        root1=ieee_divide(-b + sqrt_d, denominator),
        root2=ieee_divide(-b - sqrt_d, denominator),
    )
    if not all(is_valid_float(root) for root in roots):
        logger.warning("solve_quadratic(%r, %r, %r) produced non-finite roots %r", a, b, c, roots)
    return roots
