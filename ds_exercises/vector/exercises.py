"""
Vector Exercises — алгоритмы над последовательностями

Модуль содержит:
- sliding_window_maximum — максимум каждого окна через monotonic deque, O(n)
- merge_intervals — слияние пересекающихся/касающихся интервалов, O(n log n)
- parse_intervals — интервалы из JSON (контракт intervals.json)
- max_product / max_product_functional — максимальное произведение подмассива

ИНВАРИАНТЫ:
1. Входные последовательности не мутируются
2. Результат — всегда новый список
3. Все функции детерминированы и reentrant
"""

import logging
from collections import deque
from functools import reduce
from typing import Iterable, Sequence

from ds_exercises.core.contracts import validate_intervals
from ds_exercises.core.domain import Interval, IntervalLike
from ds_exercises.core.errors import InvalidInput
from ds_exercises.core.math import validate_dimension

logger = logging.getLogger(__name__)


# =============================================================================
# SLIDING WINDOW MAXIMUM
# =============================================================================


def sliding_window_maximum(nums: Sequence[int], window_size: int) -> list[int]:
    """
    Максимум каждого окна длины window_size, слева направо.

    Deque хранит индексы кандидатов в строго убывающем порядке nums[index]:
    - с хвоста снимаются индексы со значением <= nums[i] (новый элемент
      переживёт их в окне и не меньше их)
    - с головы снимаются индексы, вышедшие за окно (index <= i - window_size)
    - голова deque — максимум текущего окна

    Каждый индекс входит и выходит из deque не более одного раза:
    O(n) по времени, O(window_size) дополнительной памяти.

    Args:
        nums: Последовательность целых
        window_size: Размер окна

    Returns:
        len(nums) - window_size + 1 максимумов;
        [] для пустого nums или window_size == 0

    Raises:
        InvalidInput: Если window_size < 0 или window_size > len(nums)

    Examples:
        >>> sliding_window_maximum([1, 3, -1, -3, 5, 3, 6, 7], 3)
        [3, 3, 5, 5, 6, 7]
    """
    validate_dimension(window_size, "window_size")

    if not nums or window_size == 0:
        return []
    if window_size == 1:
        return list(nums)
    if window_size > len(nums):
        raise InvalidInput(
            f"window_size {window_size} exceeds sequence length {len(nums)}"
        )

    result: list[int] = []
    window: deque[int] = deque()

    for i, value in enumerate(nums):
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(i)

        while window[0] <= i - window_size:
            window.popleft()

        if i >= window_size - 1:
            result.append(nums[window[0]])

    return result


# =============================================================================
# MERGE INTERVALS
# =============================================================================


def _as_pair(interval: IntervalLike) -> tuple[int, int]:
    if isinstance(interval, Interval):
        return interval.as_tuple()
    start, end = interval
    return (start, end)


def merge_intervals(intervals: Iterable[IntervalLike]) -> list[tuple[int, int]]:
    """
    Минимальный набор непересекающихся интервалов с тем же объединением.

    Алгоритм:
        1. Стабильная сортировка копии по start
        2. Свёртка слева направо: если start <= current_end — расширяем
           current до max(end), иначе выпускаем current и начинаем новый
        3. Выпуск последнего current

    Касающиеся интервалы ((1, 4), (4, 5)) сливаются.
    Результат отсортирован по start, идемпотентен.

    Args:
        intervals: Пары (start, end) или модели Interval, в любом порядке

    Returns:
        Список пар (start, end)

    Examples:
        >>> merge_intervals([(1, 3), (2, 6), (8, 10), (15, 18)])
        [(1, 6), (8, 10), (15, 18)]
    """
    pairs = sorted((_as_pair(iv) for iv in intervals), key=lambda p: p[0])
    if not pairs:
        return []

    merged: list[tuple[int, int]] = []
    cur_start, cur_end = pairs[0]

    for start, end in pairs[1:]:
        if start <= cur_end:
            cur_end = max(cur_end, end)
        else:
            merged.append((cur_start, cur_end))
            cur_start, cur_end = start, end

    merged.append((cur_start, cur_end))

    logger.debug("merge_intervals: %d intervals -> %d", len(pairs), len(merged))
    return merged


def parse_intervals(payload: list) -> list[Interval]:
    """
    Интервалы из JSON-списка пар [start, end].

    Raises:
        ValidationError: Если payload не соответствует контракту intervals.json
    """
    validate_intervals(payload)
    return [Interval.from_pair(pair) for pair in payload]


# =============================================================================
# MAXIMUM PRODUCT SUBARRAY
# =============================================================================


def max_product(nums: Sequence[int]) -> int:
    """
    Максимальное произведение непрерывного подмассива.

    Хранятся максимум и минимум произведений, заканчивающихся на текущем
    элементе: отрицательный элемент меняет их местами.

    Returns:
        Максимальное произведение; 0 для пустого nums

    Examples:
        >>> max_product([2, 3, -2, 4])
        6
        >>> max_product([-2, 3, -4])
        24
    """
    if not nums:
        return 0

    best = cur_max = cur_min = nums[0]
    for x in nums[1:]:
        if x < 0:
            cur_max, cur_min = cur_min, cur_max
        cur_max = max(x, cur_max * x)
        cur_min = min(x, cur_min * x)
        best = max(best, cur_max)

    return best


def max_product_functional(nums: Sequence[int]) -> int:
    """max_product через reduce по тройкам (best, cur_max, cur_min)."""
    if not nums:
        return 0

    def step(state: tuple[int, int, int], x: int) -> tuple[int, int, int]:
        best, hi, lo = state
        candidates = (x, hi * x, lo * x)
        hi, lo = max(candidates), min(candidates)
        return (max(best, hi), hi, lo)

    first = nums[0]
    best, _, _ = reduce(step, nums[1:], (first, first, first))
    return best
