"""
MatrixState — сериализуемое состояние матрицы

Immutable Pydantic модель {rows, cols, data}: row-major буфер float
вместе с размерами. Соответствует JSON Schema contracts/schema/matrix.json.

Согласованность len(data) == rows * cols проверяется в Matrix.from_state,
чтобы ошибка имела тип InvalidCreation, как и при Matrix.from_buffer.
"""

from pydantic import BaseModel, Field


class MatrixState(BaseModel):
    """Снимок матрицы: размеры и row-major буфер."""

    rows: int = Field(..., ge=0, description="Количество строк")
    cols: int = Field(..., ge=0, description="Количество столбцов")
    data: tuple[float, ...] = Field(
        default=(), description="Элементы в row-major порядке"
    )

    model_config = {"frozen": True}  # Immutable

    @property
    def expected_len(self) -> int:
        """Ожидаемая длина буфера (rows * cols)."""
        return self.rows * self.cols
