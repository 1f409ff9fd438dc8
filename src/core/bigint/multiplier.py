"""
Schoolbook Multiplier — C = A * B

Позиционное умножение "в столбик" в base 2^32, O(n·m).

Для каждого слова A[i] и B[j]:
    cur = C[i+j] + A[i] * B[j] + carry

cur может достигать ~2^64, поэтому шаг выполняется в double-width
аккумуляторе: младшие 32 бита → C[i+j], старшие → carry.
После внутреннего цикла остаток переноса добавляется в C[i+m].

Результат выделяется заново (n + m слов) и нормализуется.
Операнды только читаются.
"""

import logging

from src.core.bigint.representation import (
    WORD_BITS,
    WORD_MASK,
    BigInt,
    create,
    normalize,
)

logger = logging.getLogger(__name__)


def multiply(a: BigInt, b: BigInt) -> BigInt:
    """
    Произведение двух BigInt.

    Args:
        a: Первый операнд (n слов), не мутируется
        b: Второй операнд (m слов), не мутируется

    Returns:
        Новый нормализованный BigInt

    Raises:
        ReleasedBigIntError: Если операнд освобождён
        AllocationError: Не удалось выделить n + m слов результата
    """
    a_words = a.storage()
    b_words = b.storage()
    n = len(a_words)
    m = len(b_words)

    c = create(n + m)
    c_words = c.storage()

    for i in range(n):
        a_i = a_words[i]
        carry = 0
        for j in range(m):
            cur = c_words[i + j] + a_i * b_words[j] + carry
            c_words[i + j] = cur & WORD_MASK
            carry = cur >> WORD_BITS
        # C[i+m] ещё не затронут в строке i, поэтому перенос помещается в слово
        c_words[i + m] = (c_words[i + m] + carry) & WORD_MASK

    normalize(c)
    logger.debug("Multiplied %d x %d words -> %d words", n, m, c.count)
    return c
