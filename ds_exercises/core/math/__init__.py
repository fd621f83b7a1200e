"""
Core math modules для ds_exercises

Численные примитивы, общие для matrix и vector модулей.
"""

from ds_exercises.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Config
    ToleranceConfig,
    # Checks and comparisons
    is_close,
    is_close_with,
    is_valid_float,
    # Validation
    validate_dimension,
    validate_tolerance,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Config
    "ToleranceConfig",
    # Numerical Safeguards — Comparisons
    "is_close",
    "is_close_with",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_dimension",
    "validate_tolerance",
]
