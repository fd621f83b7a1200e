"""
Vector-based algorithm exercises.
"""

from ds_exercises.vector.exercises import (
    max_product,
    max_product_functional,
    merge_intervals,
    parse_intervals,
    sliding_window_maximum,
)

__all__ = [
    "sliding_window_maximum",
    "merge_intervals",
    "parse_intervals",
    "max_product",
    "max_product_functional",
]
