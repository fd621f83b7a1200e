"""
Interval — Модель целочисленного интервала

Immutable Pydantic модель пары (start, end).
Инвариант start <= end моделью НЕ проверяется: корректность интервала
остаётся ответственностью вызывающего кода (как и для обычных tuple).
"""

from typing import Union

from pydantic import BaseModel, Field


# =============================================================================
# INTERVAL MODEL
# =============================================================================


class Interval(BaseModel):
    """
    Модель интервала [start, end].

    Immutable модель (frozen=True). Используется как типизированная
    альтернатива tuple[int, int] для merge_intervals и JSON контрактов.
    """

    start: int = Field(..., description="Начало интервала (включительно)")
    end: int = Field(..., description="Конец интервала (включительно)")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_pair(cls, pair: tuple[int, int]) -> "Interval":
        """Создание модели из пары (start, end)."""
        start, end = pair
        return cls(start=start, end=end)

    def as_tuple(self) -> tuple[int, int]:
        """Конверсия в пару (start, end)."""
        return (self.start, self.end)


IntervalLike = Union[Interval, tuple[int, int]]
