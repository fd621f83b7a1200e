"""
Array Exercises — линейный поиск
"""

from typing import Sequence


def find_element_arr(arr: Sequence[int], el: int) -> int:
    """
    Индекс первого вхождения el в arr.

    Returns:
        Индекс элемента или -1, если элемента нет (в т.ч. для пустого arr)
    """
    for i, x in enumerate(arr):
        if x == el:
            return i
    return -1
