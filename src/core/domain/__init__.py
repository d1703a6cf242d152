"""
Domain models and value objects.

Contains the dense Matrix value type.
"""

from src.core.domain.matrix import Matrix

__all__ = [
    "Matrix",
]
