"""
BigInt Errors — таксономия ошибок движка больших чисел

Движок никогда не завершает процесс сам: все сбои поднимаются как исключения,
а решение о завершении принимает вызывающая сторона (CLI).

Иерархия:
- BigIntError            — базовый класс
- InvalidFormatError     — неверная десятичная строка (ошибка вызывающего)
- AllocationError        — не удалось выделить/нарастить хранилище слов
- ReleasedBigIntError    — использование BigInt после release()
"""

from typing import Optional


class BigIntError(Exception):
    """Базовое исключение движка BigInt"""

    pass


class InvalidFormatError(BigIntError, ValueError):
    """
    Входная строка не является непустой последовательностью ASCII-цифр.

    Восстановимая ошибка: вызывающий может запросить ввод заново.

    Attributes:
        text: Исходная строка
        position: Индекс первого недопустимого символа (None для пустой строки)
    """

    def __init__(self, text: str, position: Optional[int] = None):
        self.text = text
        self.position = position
        if position is None:
            message = "Invalid decimal string (empty input)"
        else:
            message = (
                f"Invalid decimal string (only non-negative integers allowed): "
                f"unexpected {text[position]!r} at position {position}"
            )
        super().__init__(message)


class AllocationError(BigIntError, MemoryError):
    """
    Хранилище слов не удалось получить или нарастить.

    Ошибка окружения, а не входных данных.
    """

    pass


class ReleasedBigIntError(BigIntError, RuntimeError):
    """BigInt использован после release() без повторной инициализации"""

    pass
