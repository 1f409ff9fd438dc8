"""
BigInt Representation — хранилище слов и жизненный цикл

Большое неотрицательное целое хранится как последовательность 32-битных слов
(limbs) в порядке little-endian: words[0] — младшее слово.

ИНВАРИАНТЫ:
1. value = Σ words[i] * 2^(32*i) для i ∈ [0, count)
2. count >= 1 для любого живого BigInt (ноль = одно слово [0])
3. Нормализованная форма: старшее слово != 0, кроме случая count == 1
4. Каждый BigInt владеет своим хранилищем; наружу отдаётся только tuple-снимок

Жизненный цикл:
    create(n) → мутации (parser, growth) → normalize → ... → release
"""

import logging
from typing import Final, Iterable, List, Optional, Tuple

from src.core.bigint.errors import AllocationError, ReleasedBigIntError

logger = logging.getLogger(__name__)

# =============================================================================
# ГЕОМЕТРИЯ СЛОВА
# =============================================================================

# Ширина слова в битах
WORD_BITS: Final[int] = 32

# Основание позиционной системы (2^32)
WORD_BASE: Final[int] = 1 << WORD_BITS

# Маска младшей половины double-width аккумулятора
WORD_MASK: Final[int] = WORD_BASE - 1

# Количество hex-цифр в одном слове (для рендеринга с заполнением нулями)
HEX_DIGITS_PER_WORD: Final[int] = WORD_BITS // 4


# =============================================================================
# BIGINT
# =============================================================================


class BigInt:
    """
    Большое неотрицательное целое в base 2^32.

    Создаётся через create() или parse_decimal(), не напрямую.
    Поддерживает протокол контекстного менеджера: выход из with → release().
    """

    __slots__ = ("_words",)

    def __init__(self, words: List[int]):
        self._words: Optional[List[int]] = words

    @classmethod
    def from_words(cls, words: Iterable[int]) -> "BigInt":
        """
        Построение BigInt из готовых слов (little-endian).

        Результат НЕ нормализуется: это позволяет строить промежуточные
        значения со старшими нулями.

        Raises:
            ValueError: Пустая последовательность или слово вне [0, WORD_MASK]
        """
        values = list(words)
        if not values:
            raise ValueError("BigInt requires at least one word")
        for index, word in enumerate(values):
            if not 0 <= word <= WORD_MASK:
                raise ValueError(f"Word {index} out of 32-bit range: {word}")
        return cls(values)

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    @property
    def released(self) -> bool:
        return self._words is None

    @property
    def count(self) -> int:
        """Количество используемых слов (0 после release)"""
        if self._words is None:
            return 0
        return len(self._words)

    @property
    def words(self) -> Tuple[int, ...]:
        """Снимок слов, младшее первым"""
        return tuple(self.storage())

    def storage(self) -> List[int]:
        """
        Живой список слов для операций движка (parser, growth, multiplier).

        Raises:
            ReleasedBigIntError: Если хранилище освобождено
        """
        if self._words is None:
            raise ReleasedBigIntError("BigInt storage has been released")
        return self._words

    def is_normalized(self) -> bool:
        words = self.storage()
        return len(words) == 1 or words[-1] != 0

    def to_int(self) -> int:
        """Значение как Python int (сумма words[i] * 2^(32*i))"""
        value = 0
        for word in reversed(self.storage()):
            value = (value << WORD_BITS) | word
        return value

    # -------------------------------------------------------------------------
    # Протокол контекстного менеджера
    # -------------------------------------------------------------------------

    def __enter__(self) -> "BigInt":
        self.storage()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        release(self)

    def __repr__(self) -> str:
        if self._words is None:
            return "BigInt(<released>)"
        return f"BigInt(words={self._words!r})"


# =============================================================================
# ЖИЗНЕННЫЙ ЦИКЛ
# =============================================================================


def _zero_words(word_count: int) -> List[int]:
    if word_count < 1:
        raise ValueError(f"word_count must be >= 1, got {word_count}")
    try:
        return [0] * word_count
    except MemoryError as e:
        raise AllocationError(f"memory allocation failed ({word_count} words)") from e


def create(word_count: int) -> BigInt:
    """
    Создание BigInt из word_count нулевых слов.

    Args:
        word_count: Количество слов (>= 1)

    Returns:
        BigInt со значением 0 и count == word_count

    Raises:
        ValueError: Если word_count < 1
        AllocationError: Если хранилище не удалось выделить
    """
    return BigInt(_zero_words(word_count))


def reset(a: BigInt, word_count: int = 1) -> BigInt:
    """Повторная инициализация (в том числе освобождённого) BigInt нулями"""
    a._words = _zero_words(word_count)
    return a


def release(a: BigInt) -> None:
    """
    Освобождение хранилища. count становится 0.

    Повторный вызов безопасен. После release BigInt непригоден
    до reset().
    """
    a._words = None


def normalize(a: BigInt) -> BigInt:
    """
    Удаление старших нулевых слов.

    Останавливается на count == 1, даже если это слово нулевое.
    Идемпотентна.

    Returns:
        Тот же BigInt (для цепочек вызовов)
    """
    words = a.storage()
    count = len(words)
    while count > 1 and words[count - 1] == 0:
        count -= 1
    del words[count:]
    return a


def is_zero(a: BigInt) -> bool:
    """True если count == 0 (освобождён) или единственное слово равно 0"""
    count = a.count
    return count == 0 or (count == 1 and a.storage()[0] == 0)


def append_word(a: BigInt, word: int) -> None:
    """
    Рост хранилища ровно на одно старшее слово.

    Raises:
        AllocationError: Если хранилище не удалось нарастить
    """
    words = a.storage()
    try:
        words.append(word)
    except MemoryError as e:
        raise AllocationError(f"realloc failed (growing to {len(words) + 1} words)") from e
    logger.debug("BigInt grown to %d words", len(words))
