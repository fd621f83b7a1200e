"""
Тесты для Vector Exercises

Проверяемые инварианты:
1. sliding_window_maximum: len(result) == len(nums) - k + 1 при 1 <= k <= len(nums)
2. sliding_window_maximum: совпадение с наивным max по каждому окну
3. merge_intervals: результат отсортирован, без пересечений и касаний, идемпотентен
4. max_product и max_product_functional согласованы
5. Входные последовательности не мутируются
"""

import pytest
from jsonschema import ValidationError

from ds_exercises import ExerciseError, InvalidInput
from ds_exercises.core.domain import Interval
from ds_exercises.vector import (
    max_product,
    max_product_functional,
    merge_intervals,
    parse_intervals,
    sliding_window_maximum,
)


# =============================================================================
# ТЕСТЫ: Sliding Window Maximum
# =============================================================================


class TestSlidingWindowMaximum:
    """Тесты sliding_window_maximum."""

    def test_typical_case(self):
        """Классический пример."""
        nums = [1, 3, -1, -3, 5, 3, 6, 7]
        assert sliding_window_maximum(nums, 3) == [3, 3, 5, 5, 6, 7]

    def test_empty_vector(self):
        """Пустой вход → []."""
        assert sliding_window_maximum([], 1) == []
        assert sliding_window_maximum([], 5) == []

    def test_window_zero(self):
        """window_size == 0 → []."""
        assert sliding_window_maximum([1, 2, 3], 0) == []

    def test_window_size_one(self):
        """window_size == 1 → копия входа."""
        nums = [1, -1, 2]
        result = sliding_window_maximum(nums, 1)
        assert result == nums
        assert result is not nums

    def test_window_equals_array_size(self):
        """Окно во весь массив → [max]."""
        assert sliding_window_maximum([1, 2, 3, 4, 5], 5) == [5]
        assert sliding_window_maximum([4, -2, 9, 1], 4) == [9]

    @pytest.mark.parametrize(
        "nums,k,expected",
        [
            ([5, 4, 3, 2, 1], 3, [5, 4, 3]),
            ([1, 2, 3, 4, 5], 3, [3, 4, 5]),
            ([1, 1, 1, 1], 2, [1, 1, 1]),
            ([-7, -8, 7, 5, -7, 3], 2, [-7, 7, 7, 5, 3]),
            ([1, -1], 2, [1]),
        ],
    )
    def test_sequences(self, nums, k, expected):
        """Убывающая, возрастающая, константная, отрицательные."""
        assert sliding_window_maximum(nums, k) == expected

    def test_window_larger_than_input(self):
        """window_size > len(nums) → InvalidInput."""
        with pytest.raises(InvalidInput, match="exceeds sequence length 3"):
            sliding_window_maximum([1, 2, 3], 4)

    def test_negative_window(self):
        """Отрицательное окно → InvalidInput."""
        with pytest.raises(InvalidInput):
            sliding_window_maximum([1, 2, 3], -1)
        with pytest.raises(ExerciseError):
            sliding_window_maximum([1, 2, 3], -1)

    def test_matches_naive_and_length(self):
        """Совпадение с наивным max по окнам для всех k."""
        nums = [3, -2, 8, 8, 1, -5, 0, 7, 7, 2, -9, 4]
        for k in range(1, len(nums) + 1):
            result = sliding_window_maximum(nums, k)
            assert len(result) == len(nums) - k + 1
            assert result == [max(nums[i:i + k]) for i in range(len(nums) - k + 1)]

    def test_input_not_mutated(self):
        """Вход не мутируется."""
        nums = [2, 1, 3]
        sliding_window_maximum(nums, 2)
        assert nums == [2, 1, 3]

    def test_accepts_tuple(self):
        """Подходит любая Sequence."""
        assert sliding_window_maximum((1, 3, 2), 2) == [3, 3]


# =============================================================================
# ТЕСТЫ: Merge Intervals
# =============================================================================


def _assert_canonical(merged):
    """Отсортировано по start, соседние не пересекаются и не касаются."""
    for a, b in zip(merged, merged[1:]):
        assert a[0] <= b[0]
        assert b[0] > a[1]


class TestMergeIntervals:
    """Тесты merge_intervals."""

    def test_empty_intervals(self):
        """Пустой вход → []."""
        assert merge_intervals([]) == []

    def test_single_interval(self):
        """Один интервал → без изменений."""
        assert merge_intervals([(1, 3)]) == [(1, 3)]

    @pytest.mark.parametrize(
        "intervals,expected",
        [
            ([(1, 3), (2, 6), (8, 10), (15, 18)], [(1, 6), (8, 10), (15, 18)]),
            ([(1, 4), (4, 5)], [(1, 5)]),
            ([(1, 5), (2, 3)], [(1, 5)]),
            ([(1, 4), (0, 2), (3, 5), (6, 7), (4, 6)], [(0, 7)]),
            ([(1, 2), (3, 4), (5, 6)], [(1, 2), (3, 4), (5, 6)]),
            ([(-5, -3), (-2, 0), (-1, 1)], [(-5, -3), (-2, 1)]),
            ([(4, 6), (1, 3), (2, 5)], [(1, 6)]),
        ],
    )
    def test_cases(self, intervals, expected):
        """Типичный, касание, вложенность, сложный, без пересечений, отрицательные, несортированный."""
        merged = merge_intervals(intervals)
        assert merged == expected
        _assert_canonical(merged)

    def test_idempotent(self):
        """merge(merge(x)) == merge(x)."""
        once = merge_intervals([(7, 9), (1, 3), (2, 4), (10, 12), (9, 10), (20, 21)])
        assert once == [(1, 4), (7, 12), (20, 21)]
        assert merge_intervals(once) == once

    def test_input_not_mutated(self):
        """Вход не сортируется на месте."""
        intervals = [(4, 6), (1, 3)]
        merge_intervals(intervals)
        assert intervals == [(4, 6), (1, 3)]

    def test_accepts_interval_models(self):
        """Модели Interval принимаются наравне с tuple."""
        merged = merge_intervals([Interval(start=2, end=5), (1, 3), Interval(start=8, end=9)])
        assert merged == [(1, 5), (8, 9)]

    def test_accepts_generator(self):
        """Подходит любой Iterable."""
        assert merge_intervals((i, i + 1) for i in range(0, 6, 2)) == [(0, 1), (2, 3), (4, 5)]


class TestParseIntervals:
    """Тесты parse_intervals (контракт intervals.json)."""

    def test_parse(self):
        """Список пар → модели Interval."""
        parsed = parse_intervals([[1, 3], [2, 6]])
        assert parsed == [Interval(start=1, end=3), Interval(start=2, end=6)]
        assert merge_intervals(parsed) == [(1, 6)]

    def test_parse_empty(self):
        """Пустой список допустим."""
        assert parse_intervals([]) == []

    @pytest.mark.parametrize(
        "payload",
        [
            [[1, 2, 3]],
            [[1]],
            [[1.5, 2]],
            [["a", 2]],
            {"start": 1, "end": 2},
        ],
    )
    def test_parse_contract_violation(self, payload):
        """Нарушение схемы → ValidationError."""
        with pytest.raises(ValidationError):
            parse_intervals(payload)


# =============================================================================
# ТЕСТЫ: Max Product
# =============================================================================


MAX_PRODUCT_CASES = [
    ([], 0),
    ([5], 5),
    ([-3], -3),
    ([0], 0),
    ([2, 3], 6),
    ([-2, -3], 6),
    ([-2, 3], 3),
    ([2, 3, -2], 6),
    ([-2, 3, -4], 24),
    ([-2, 0, -1], 0),
    ([2, 0, 3], 3),
    ([0, 0, 0], 0),
    ([1, 0, -2], 1),
    ([-1, -2, -3], 6),
    ([-1, -2, -3, -4], 24),
    ([2, 3, -2, 4], 6),
    ([-2, 3, -4, 5, -2], 120),
    ([2, -5, -2, -4, 3], 24),
    ([1, -2, 3, -4, 5], 120),
    ([-1, 2, -3, 4, -5], 120),
    ([6, 2, -1, 1, 1], 12),
    ([1, 2, 6, 2, 1], 24),
    ([1, 1, -1, 2, 6], 12),
]


class TestMaxProduct:
    """Тесты max_product и max_product_functional."""

    @pytest.mark.parametrize("nums,expected", MAX_PRODUCT_CASES)
    def test_max_product(self, nums, expected):
        """Императивная реализация."""
        assert max_product(nums) == expected

    @pytest.mark.parametrize("nums,expected", MAX_PRODUCT_CASES)
    def test_max_product_functional(self, nums, expected):
        """Реализация через reduce даёт тот же результат."""
        assert max_product_functional(nums) == expected
