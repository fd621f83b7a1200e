"""
Тесты для Array Exercises — линейный поиск
"""

import pytest

from ds_exercises.array import find_element_arr


class TestFindElementArr:
    """Тесты find_element_arr."""

    def test_empty_arr(self):
        """Пустой массив → -1."""
        assert find_element_arr([], 0) == -1

    def test_no_element(self):
        """Отсутствующий элемент → -1."""
        assert find_element_arr([1, 2, 3], 4) == -1

    def test_typical_case(self):
        """Индекс найденного элемента."""
        assert find_element_arr([1, 2, 3], 2) == 1

    def test_one_element_arr(self):
        """Массив из одного элемента."""
        assert find_element_arr([1], 1) == 0

    @pytest.mark.parametrize("arr,el,expected", [
        ([5, 7, 5, 7], 7, 1),
        ([-1, -1], -1, 0),
        ((9, 8, 7), 7, 2),
    ])
    def test_first_occurrence(self, arr, el, expected):
        """Возвращается первое вхождение."""
        assert find_element_arr(arr, el) == expected
