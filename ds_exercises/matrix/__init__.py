"""
Matrix — плотная матрица и поиск в упорядоченной квадратной матрице.

ElementNotFound существует в двух вариантах: matrix (линейный поиск)
и search (поиск в Young tableau). Оба являются LookupError.
"""

from ds_exercises.matrix.matrix import (
    DimensionMismatch,
    ElementNotFound,
    IndexOutOfBounds,
    InvalidCreation,
    Matrix,
    MatrixError,
)
from ds_exercises.matrix.search import ElementNotFound as SearchElementNotFound
from ds_exercises.matrix.search import (
    MatrixAccessError,
    NotSquareMatrix,
    SearchError,
    find_position_sorted_square_matrix,
    find_position_sorted_square_matrix_naive,
)

__all__ = [
    # Matrix
    "Matrix",
    # Matrix — Exceptions
    "MatrixError",
    "InvalidCreation",
    "DimensionMismatch",
    "IndexOutOfBounds",
    "ElementNotFound",
    # Search — Exceptions
    "SearchError",
    "NotSquareMatrix",
    "SearchElementNotFound",
    "MatrixAccessError",
    # Search — Functions
    "find_position_sorted_square_matrix",
    "find_position_sorted_square_matrix_naive",
]
