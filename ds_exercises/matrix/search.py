"""
Sorted Square Matrix Search — поиск в Young tableau

Young tableau — квадратная матрица, где:
1. Каждая строка не убывает слева направо
2. Каждый столбец не убывает сверху вниз

Пример:
    [1.0, 2.0, 3.0]
    [4.0, 5.0, 6.0]
    [7.0, 8.0, 9.0]

Две реализации:
- find_position_sorted_square_matrix — staircase search, O(rows + cols)
- find_position_sorted_square_matrix_naive — полный перебор, O(rows * cols)

Для матриц без дубликатов обе дают одинаковый результат.
При дубликатах staircase возвращает ЛЮБУЮ подходящую координату
(ту, что лежит на пути обхода), naive — первую в row-major порядке.

Упорядоченность матрицы НЕ проверяется: для неупорядоченной матрицы
staircase может не найти присутствующий элемент.
"""

import logging

from ds_exercises.core.errors import ExerciseError
from ds_exercises.matrix.matrix import Matrix, MatrixError

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SearchError(ExerciseError):
    """Базовый класс ошибок поиска в упорядоченной матрице."""

    pass


class NotSquareMatrix(SearchError, ValueError):
    """Матрица не квадратная."""

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        super().__init__(f"Matrix must be square, got dimensions {rows}x{cols}")


class ElementNotFound(SearchError, LookupError):
    """Значение отсутствует в упорядоченной матрице."""

    def __init__(self, el: float):
        self.el = el
        super().__init__(f"Element {el} not found in sorted matrix")


class MatrixAccessError(SearchError):
    """
    Ошибка Matrix, возникшая внутри поиска.

    Исходная ошибка доступна как .source и как __cause__.
    """

    def __init__(self, source: MatrixError):
        self.source = source
        super().__init__(f"Matrix error: {source}")


# =============================================================================
# HELPERS
# =============================================================================


def _require_square(m: Matrix) -> int:
    if m.rows != m.cols:
        raise NotSquareMatrix(rows=m.rows, cols=m.cols)
    return m.rows


def _get(m: Matrix, row: int, col: int) -> float:
    try:
        return m.get(row, col)
    except MatrixError as err:
        raise MatrixAccessError(err) from err


# =============================================================================
# SEARCH
# =============================================================================


def find_position_sorted_square_matrix(m: Matrix, value: float) -> tuple[int, int]:
    """
    Staircase search в Young tableau.

    Старт в правом верхнем углу (0, n - 1):
    - current == value → найдено
    - current > value  → весь остаток столбца ещё больше, шаг влево
    - current < value  → весь остаток строки ещё меньше, шаг вниз
    Остановка при col < 0 или row == n.

    Args:
        m: Квадратная матрица, упорядоченная по строкам и столбцам
        value: Искомое значение (точное сравнение ==)

    Returns:
        (row, col) одной из подходящих ячеек

    Raises:
        NotSquareMatrix: Если m.rows != m.cols (независимо от value)
        ElementNotFound: Если значение не найдено (в т.ч. для матрицы 0x0)
        MatrixAccessError: Если доступ к элементу завершился ошибкой Matrix

    Examples:
        >>> m = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        >>> find_position_sorted_square_matrix(m, 5.0)
        (1, 1)
    """
    n = _require_square(m)

    row, col = 0, n - 1
    steps = 0
    while row < n and col >= 0:
        current = _get(m, row, col)
        if current == value:
            logger.debug("staircase: found %s at (%d, %d) after %d steps", value, row, col, steps)
            return (row, col)
        if current > value:
            col -= 1
        else:
            row += 1
        steps += 1

    logger.debug("staircase: %s not found in %dx%d matrix after %d steps", value, n, n, steps)
    raise ElementNotFound(el=value)


def find_position_sorted_square_matrix_naive(m: Matrix, value: float) -> tuple[int, int]:
    """
    Полный перебор квадратной матрицы, O(n²).

    Возвращает первую в row-major порядке координату.
    Ошибки те же, что у find_position_sorted_square_matrix.
    """
    n = _require_square(m)

    for i in range(n):
        for j in range(n):
            if _get(m, i, j) == value:
                return (i, j)

    raise ElementNotFound(el=value)
