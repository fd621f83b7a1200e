"""
Array-based exercises.
"""

from ds_exercises.array.exercises import find_element_arr

__all__ = ["find_element_arr"]
