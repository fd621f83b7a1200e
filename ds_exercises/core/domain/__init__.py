"""
Domain models and value objects.

Contains Interval and MatrixState models shared by matrix and vector modules.
"""

from ds_exercises.core.domain.interval import Interval, IntervalLike
from ds_exercises.core.domain.matrix_state import MatrixState

__all__ = [
    # Interval model
    "Interval",
    "IntervalLike",
    # Matrix state model
    "MatrixState",
]
