"""
Matrix — плотная row-major матрица float

Модуль обеспечивает:
- Создание матрицы (zeros, from_buffer, from_rows) с проверкой размеров
- Доступ к элементам get/set с проверкой границ
- Transpose, сложение и умножение с проверкой размерностей
- Линейный поиск элемента (точный и приближённый)
- Сериализацию через MatrixState и JSON контракт matrix.json

ИНВАРИАНТЫ:
1. len(data) == rows * cols всегда
2. Элемент (row, col) хранится в data[row * cols + col]
3. Размеры не меняются после создания; set меняет ровно один элемент
4. Любой выход за границы → IndexOutOfBounds (отрицательные индексы тоже)
5. Операции, кроме set, не мутируют receiver и возвращают новую матрицу
"""

from typing import Any, Dict, Iterable, Optional, Sequence

from ds_exercises.core.contracts import validate_matrix
from ds_exercises.core.domain import MatrixState
from ds_exercises.core.errors import ExerciseError
from ds_exercises.core.math import ToleranceConfig, is_close_with, validate_dimension


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixError(ExerciseError):
    """Базовый класс ошибок Matrix."""

    pass


class InvalidCreation(MatrixError, ValueError):
    """Длина буфера не совпадает с rows * cols."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid dimensions: expected {expected} elements, got {actual}"
        )


class DimensionMismatch(MatrixError, ValueError):
    """Несовместимые размерности операндов арифметической операции."""

    def __init__(
        self,
        operation: str,
        left_dims: tuple[int, int],
        right_dims: tuple[int, int],
    ):
        self.operation = operation
        self.left_dims = left_dims
        self.right_dims = right_dims
        super().__init__(
            f"Cannot {operation} matrices: left matrix is {left_dims}, "
            f"right matrix is {right_dims}"
        )


class IndexOutOfBounds(MatrixError, IndexError):
    """Координата (row, col) вне матрицы rows x cols."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Index out of bounds: tried to access ({row}, {col}) "
            f"in a {rows}x{cols} matrix"
        )


class ElementNotFound(MatrixError, LookupError):
    """Значение отсутствует в матрице."""

    def __init__(self, el: float):
        self.el = el
        super().__init__(f"Element ({el}) not found")


def _is_index(value: object) -> bool:
    # bool — подкласс int, но индексом не считается
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# MATRIX
# =============================================================================


class Matrix:
    """
    Плотная матрица float в row-major порядке.

    Matrix(rows, cols, data) эквивалентен Matrix.from_buffer: буфер
    проверяется и копируется. Остальные фабрики: Matrix.zeros,
    Matrix.from_rows, Matrix.from_state, Matrix.from_dict.

    Equality — по значению (размеры и поэлементное ==, NaN != NaN).
    Матрица мутабельна (set), поэтому не hashable.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int, data: Iterable[float]):
        """
        Матрица из плоского row-major буфера (см. from_buffer).

        Raises:
            InvalidCreation: Если len(data) != rows * cols
            InvalidInput: Если rows или cols отрицательные / не int
        """
        validate_dimension(rows, "rows")
        validate_dimension(cols, "cols")

        buffer = [float(x) for x in data]
        expected = rows * cols
        if len(buffer) != expected:
            raise InvalidCreation(expected=expected, actual=len(buffer))

        self._rows = rows
        self._cols = cols
        self._data = buffer

    @classmethod
    def _from_trusted(cls, rows: int, cols: int, data: list[float]) -> "Matrix":
        # data уже собран внутри класса: len(data) == rows * cols, владелец один
        m = cls.__new__(cls)
        m._rows = rows
        m._cols = cols
        m._data = data
        return m

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        """
        Матрица rows x cols, заполненная 0.0.

        Raises:
            InvalidInput: Если rows или cols отрицательные / не int
        """
        validate_dimension(rows, "rows")
        validate_dimension(cols, "cols")
        return cls._from_trusted(rows, cols, [0.0] * (rows * cols))

    @classmethod
    def from_buffer(cls, rows: int, cols: int, buffer: Iterable[float]) -> "Matrix":
        """
        Матрица из плоского row-major буфера.

        Буфер копируется: последующие изменения исходного списка
        не влияют на матрицу.

        Args:
            rows: Количество строк
            cols: Количество столбцов
            buffer: Элементы в row-major порядке (ровно rows * cols штук)

        Returns:
            Новая матрица

        Raises:
            InvalidCreation: Если len(buffer) != rows * cols
            InvalidInput: Если rows или cols отрицательные / не int

        Examples:
            >>> Matrix.from_buffer(2, 2, [1.0, 2.0, 3.0, 4.0]).get(1, 0)
            3.0
        """
        return cls(rows, cols, buffer)

    @classmethod
    def from_rows(cls, nested: Sequence[Sequence[float]]) -> "Matrix":
        """
        Матрица из списка строк.

        Количество столбцов берётся из первой строки; первая строка
        другой длины даёт InvalidCreation(expected=cols, actual=len(row)).
        """
        rows = len(nested)
        cols = len(nested[0]) if rows else 0
        for row in nested:
            if len(row) != cols:
                raise InvalidCreation(expected=cols, actual=len(row))
        return cls.from_buffer(rows, cols, [x for row in nested for x in row])

    @classmethod
    def from_state(cls, state: MatrixState) -> "Matrix":
        """
        Матрица из MatrixState.

        Raises:
            InvalidCreation: Если len(state.data) != rows * cols
        """
        if len(state.data) != state.expected_len:
            raise InvalidCreation(expected=state.expected_len, actual=len(state.data))
        return cls._from_trusted(state.rows, state.cols, list(state.data))

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Matrix":
        """
        Матрица из dict, соответствующего контракту matrix.json.

        Raises:
            ValidationError: Если payload не соответствует схеме (jsonschema)
            InvalidCreation: Если len(data) != rows * cols
        """
        validate_matrix(payload)
        return cls.from_state(MatrixState.model_validate(payload))

    # -------------------------------------------------------------------------
    # Размеры и экспорт
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)"""
        return (self._rows, self._cols)

    def to_list(self) -> list[float]:
        """Копия плоского row-major буфера."""
        return list(self._data)

    def to_rows(self) -> list[list[float]]:
        """Копия матрицы в виде списка строк."""
        return [
            self._data[i * self._cols:(i + 1) * self._cols]
            for i in range(self._rows)
        ]

    def to_state(self) -> MatrixState:
        """Снимок матрицы в MatrixState."""
        return MatrixState(rows=self._rows, cols=self._cols, data=tuple(self._data))

    def to_dict(self) -> Dict[str, Any]:
        """Dict, соответствующий контракту matrix.json."""
        return self.to_state().model_dump(mode="json")

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    def _check_bounds(self, row: int, col: int) -> None:
        if not (_is_index(row) and _is_index(col)) or not (
            0 <= row < self._rows and 0 <= col < self._cols
        ):
            raise IndexOutOfBounds(
                row=row, col=col, rows=self._rows, cols=self._cols
            )

    def get(self, row: int, col: int) -> float:
        """
        Элемент (row, col).

        Raises:
            IndexOutOfBounds: Если row >= rows, col >= cols или индекс < 0
        """
        self._check_bounds(row, col)
        return self._data[row * self._cols + col]

    def set(self, row: int, col: int, value: float) -> None:
        """
        Запись элемента (row, col). Меняет ровно один элемент.

        Raises:
            IndexOutOfBounds: Если координата вне матрицы (матрица не меняется)
        """
        self._check_bounds(row, col)
        self._data[row * self._cols + col] = float(value)

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def transpose(self) -> "Matrix":
        """Новая матрица cols x rows: result[j][i] = self[i][j]."""
        result = Matrix.zeros(self._cols, self._rows)
        for i in range(self._rows):
            for j in range(self._cols):
                result._data[j * self._rows + i] = self._data[i * self._cols + j]
        return result

    def add(self, other: "Matrix") -> "Matrix":
        """
        Поэлементная сумма.

        Raises:
            DimensionMismatch: Если shape операндов различается
        """
        if self.shape != other.shape:
            raise DimensionMismatch(
                operation="addition",
                left_dims=self.shape,
                right_dims=other.shape,
            )

        data = [a + b for a, b in zip(self._data, other._data)]
        return Matrix._from_trusted(self._rows, self._cols, data)

    def multiply(self, other: "Matrix") -> "Matrix":
        """
        Матричное произведение self · other.

        Тройной цикл с обычным накоплением в float (без compensated summation).

        Returns:
            Новая матрица self.rows x other.cols

        Raises:
            DimensionMismatch: Если self.cols != other.rows

        Examples:
            >>> a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
            >>> b = Matrix.from_rows([[7, 8], [9, 10], [11, 12]])
            >>> a.multiply(b).to_rows()
            [[58.0, 64.0], [139.0, 154.0]]
        """
        if self._cols != other._rows:
            raise DimensionMismatch(
                operation="multiplication",
                left_dims=self.shape,
                right_dims=other.shape,
            )

        result = Matrix.zeros(self._rows, other._cols)
        for i in range(self._rows):
            for j in range(other._cols):
                acc = 0.0
                for k in range(self._cols):
                    acc += self._data[i * self._cols + k] * other._data[k * other._cols + j]
                result._data[i * other._cols + j] = acc
        return result

    # -------------------------------------------------------------------------
    # Поиск
    # -------------------------------------------------------------------------

    def find_position(self, value: float) -> tuple[int, int]:
        """
        Первая в row-major порядке координата с data == value.

        ВНИМАНИЕ: сравнение точное (==). 0.1 + 0.2 не будет найдено
        при поиске 0.3; для таких случаев есть find_position_approx.

        Raises:
            ElementNotFound: Если значение отсутствует
        """
        for idx, x in enumerate(self._data):
            if x == value:
                return divmod(idx, self._cols)
        raise ElementNotFound(el=value)

    def find_position_approx(
        self,
        value: float,
        tolerance: Optional[ToleranceConfig] = None,
    ) -> tuple[int, int]:
        """
        Как find_position, но сравнение через is_close.

        Args:
            value: Искомое значение
            tolerance: Толерантности (default: ToleranceConfig())

        Raises:
            ElementNotFound: Если ни один элемент не близок к value
        """
        tolerance = tolerance or ToleranceConfig()
        for idx, x in enumerate(self._data):
            if is_close_with(x, value, tolerance):
                return divmod(idx, self._cols)
        raise ElementNotFound(el=value)

    def allclose(
        self,
        other: "Matrix",
        tolerance: Optional[ToleranceConfig] = None,
    ) -> bool:
        """Приближённое равенство; False при различии размеров."""
        if self.shape != other.shape:
            return False
        tolerance = tolerance or ToleranceConfig()
        return all(
            is_close_with(a, b, tolerance) for a, b in zip(self._data, other._data)
        )

    # -------------------------------------------------------------------------
    # Dunder
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        # поэлементно: NaN не равен ничему, в том числе себе
        return self.shape == other.shape and all(
            a == b for a, b in zip(self._data, other._data)
        )

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, data={self._data!r})"
