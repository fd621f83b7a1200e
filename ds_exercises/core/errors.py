"""
Exercise Errors — базовая иерархия исключений библиотеки

Все ожидаемые ошибки (неверные размеры, выход за границы, отсутствие элемента)
выражаются типизированными исключениями с данными в атрибутах.
Модули matrix/vector/array наследуют свои ошибки от ExerciseError,
поэтому вызывающий код может перехватывать как конкретный вариант,
так и все ошибки библиотеки одним except.
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ExerciseError(Exception):
    """Базовый класс всех ошибок ds_exercises."""

    pass


class InvalidInput(ExerciseError, ValueError):
    """
    Входные данные вне области определения функции.

    Например: отрицательные размеры матрицы или окно больше массива.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Invalid input: {message}")

