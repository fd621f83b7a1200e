"""
ds_exercises — алгоритмические упражнения над массивами, векторами и матрицами

Subpackages:
- ds_exercises.matrix  : Matrix, staircase search в Young tableau
- ds_exercises.vector  : sliding window maximum, merge intervals, max product
- ds_exercises.array   : линейный поиск
- ds_exercises.core    : ошибки, численные примитивы, модели, JSON контракты

Библиотека не настраивает logging: на корневой logger пакета
вешается только NullHandler.
"""

import logging as _logging

from ds_exercises.core.errors import ExerciseError, InvalidInput

__version__ = "0.1.0"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "ExerciseError",
    "InvalidInput",
]
