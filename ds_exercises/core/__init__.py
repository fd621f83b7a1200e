"""
Core errors, numerical primitives, domain models and contracts.

This package contains the foundational building blocks shared by the
matrix, vector and array exercise modules.
"""
