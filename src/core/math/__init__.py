"""
Core math modules

Скалярные функции, численный анализ, тригонометрия и решение квадратных
уравнений. Все функции чистые и не хранят состояния между вызовами.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    ieee_divide,
    is_valid_float,
    validate_int,
    validate_non_negative_int,
    wrap_signed,
    wrap_unsigned,
)

# Configuration
from src.core.math.config import (
    DEFAULT_MATH_CONFIG,
    PERMISSIVE_MATH_CONFIG,
    ComputeMode,
    MathConfig,
)

# Errors
from src.core.math.errors import (
    ArithmeticOverflowError,
    DegenerateInputError,
    MathError,
    MatrixConstructionError,
    MatrixDimensionError,
    MatrixError,
)

# Algebra
from src.core.math.algebra import factorial, fibonacci, log10, power

# Number theory
from src.core.math.number_theory import gcd, gcd_two

# Calculus
from src.core.math.calculus import derivative, integral

# Trigonometry
from src.core.math.trigonometry import (
    arccosine,
    arcsine,
    arctangent,
    cosine,
    degrees_to_radians,
    radians_to_degrees,
    sine,
    tangent,
)

# Quadratic
from src.core.math.quadratic import QuadraticRoots, discriminant, solve_quadratic

__all__ = [
    # Numerical Safeguards
    "ieee_divide",
    "is_valid_float",
    "validate_int",
    "validate_non_negative_int",
    "wrap_signed",
    "wrap_unsigned",
    # Configuration
    "DEFAULT_MATH_CONFIG",
    "PERMISSIVE_MATH_CONFIG",
    "ComputeMode",
    "MathConfig",
    # Errors
    "ArithmeticOverflowError",
    "DegenerateInputError",
    "MathError",
    "MatrixConstructionError",
    "MatrixDimensionError",
    "MatrixError",
    # Algebra
    "factorial",
    "fibonacci",
    "log10",
    "power",
    # Number theory
    "gcd",
    "gcd_two",
    # Calculus
    "derivative",
    "integral",
    # Trigonometry
    "arccosine",
    "arcsine",
    "arctangent",
    "cosine",
    "degrees_to_radians",
    "radians_to_degrees",
    "sine",
    "tangent",
    # Quadratic
    "QuadraticRoots",
    "discriminant",
    "solve_quadratic",
]
