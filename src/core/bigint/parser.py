"""
Decimal Parser — десятичная строка → BigInt

Формат: непустая строка из ASCII-цифр '0'..'9'.
Без знака, без пробелов; ведущие нули допустимы ("007" → 7).

Алгоритм (схема Горнера):
    acc = 0
    для каждой цифры слева направо: acc = acc * 10 + digit
    normalize(acc)

Пример: "123" → ((0*10 + 1)*10 + 2)*10 + 3
"""

import logging
from typing import Final, Optional

from src.core.bigint.errors import InvalidFormatError
from src.core.bigint.growth import add_small, multiply_small
from src.core.bigint.representation import BigInt, create, normalize, release

logger = logging.getLogger(__name__)

DECIMAL_BASE: Final[int] = 10

# str.isdigit() принимает и не-ASCII цифры, поэтому набор задаётся явно
_DECIMAL_DIGITS: Final[frozenset] = frozenset("0123456789")


def _first_invalid_position(s: str) -> Optional[int]:
    for position, char in enumerate(s):
        if char not in _DECIMAL_DIGITS:
            return position
    return None


def is_valid_decimal_string(s: str) -> bool:
    """
    Проверка десятичной строки.

    Returns:
        True если s непустая и состоит только из ASCII-цифр
    """
    return bool(s) and _first_invalid_position(s) is None


def parse_decimal(s: str) -> BigInt:
    """
    Десятичная строка → нормализованный BigInt.

    Args:
        s: Непустая строка ASCII-цифр

    Returns:
        Новый BigInt, удовлетворяющий нормализованной форме

    Raises:
        TypeError: Если s не str
        InvalidFormatError: Пустая строка, знак, пробел или иной не-цифровой символ
        AllocationError: Не удалось нарастить хранилище

    Examples:
        >>> parse_decimal("4294967296").words
        (0, 1)
        >>> parse_decimal("000123").words
        (123,)
    """
    if not isinstance(s, str):
        raise TypeError(f"Decimal input must be str, got {type(s).__name__}")
    if not s:
        raise InvalidFormatError(s)
    position = _first_invalid_position(s)
    if position is not None:
        raise InvalidFormatError(s, position)

    acc = create(1)
    try:
        for char in s:
            multiply_small(acc, DECIMAL_BASE)
            add_small(acc, ord(char) - ord("0"))
    except BaseException:
        release(acc)
        raise

    normalize(acc)
    logger.debug("Parsed %d decimal digits into %d words", len(s), acc.count)
    return acc
