"""
Contract Validation Module

Модуль для валидации JSON контрактов (jsonschema).
"""

from .validators import (
    ContractValidator,
    MatrixValidator,
    SchemaLoader,
    validate_matrix,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixValidator",
    # Functions
    "validate_matrix",
]
