"""
Contract Validation Module

Модуль для валидации JSON контрактов ds_exercises.
"""

from .validators import (
    ContractValidator,
    IntervalsValidator,
    MatrixValidator,
    SchemaLoader,
    validate_intervals,
    validate_matrix,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixValidator",
    "IntervalsValidator",
    # Functions
    "validate_matrix",
    "validate_intervals",
]
