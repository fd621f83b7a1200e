"""
Numerical Safeguards — сравнение float и валидация размеров

Модуль обеспечивает численно аккуратные примитивы для matrix/vector модулей:
- NaN/Inf проверки
- Epsilon-сравнения float с учётом машинной точности
- ToleranceConfig — конфигурация толерантностей для приближённого поиска
- Валидация неотрицательных целых размеров

ИНВАРИАНТЫ:
1. Точное сравнение (==) используется только там, где это явно задокументировано
2. Приближённое сравнение всегда идёт через is_close
3. Все операции детерминированы и воспроизводимы
"""

import math
from dataclasses import dataclass
from typing import Final

from ds_exercises.core.errors import InvalidInput

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close (важна около нуля)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class ToleranceConfig:
    """Толерантности для приближённых сравнений float.

    Используется в Matrix.find_position_approx и Matrix.allclose.
    """

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self):
        validate_tolerance(self.rel_tol, "rel_tol")
        validate_tolerance(self.abs_tol, "abs_tol")


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_close_with(a: float, b: float, tolerance: ToleranceConfig) -> bool:
    """is_close с толерантностями из ToleranceConfig."""
    return is_close(a, b, rel_tol=tolerance.rel_tol, abs_tol=tolerance.abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_tolerance(value: float, name: str) -> None:
    """
    Валидация толерантности: finite и неотрицательная.

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_dimension(value: int, name: str) -> None:
    """
    Валидация размера (rows/cols/window_size): целое и неотрицательное.

    bool отвергается явно, хотя формально является подклассом int.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidInput: Если value не int или value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise InvalidInput(f"{name} must be non-negative, got {value}")
