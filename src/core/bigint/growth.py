"""
Growth Primitives — мутации аккумулятора на однословное значение

Используются парсером (Horner: acc = acc * 10 + digit), но корректны
для любого множителя/слагаемого в диапазоне [0, WORD_MASK].

Каждый шаг вычисляется в double-width аккумуляторе:
младшие 32 бита сохраняются в слово, старшие переносятся дальше.
Оставшийся ненулевой перенос добавляет ровно одно старшее слово.
"""

from src.core.bigint.representation import (
    WORD_BITS,
    WORD_MASK,
    BigInt,
    append_word,
)


def _check_small(k: int) -> None:
    if not 0 <= k <= WORD_MASK:
        raise ValueError(f"Small operand must be in [0, {WORD_MASK}], got {k}")


def multiply_small(acc: BigInt, k: int) -> BigInt:
    """
    acc *= k (in place).

    Args:
        acc: Аккумулятор (мутируется)
        k: Однословный множитель, 0 <= k <= WORD_MASK

    Returns:
        Тот же acc

    Raises:
        ValueError: k вне диапазона слова
        AllocationError: Не удалось нарастить хранилище

    Note:
        При k == 0 многословный acc сохраняет старшие нули,
        нормализация остаётся за вызывающим.
    """
    _check_small(k)
    words = acc.storage()
    carry = 0
    for i in range(len(words)):
        cur = words[i] * k + carry
        words[i] = cur & WORD_MASK
        carry = cur >> WORD_BITS

    if carry != 0:
        append_word(acc, carry)
    return acc


def add_small(acc: BigInt, k: int) -> BigInt:
    """
    acc += k (in place).

    Перенос распространяется от слова 0 и прекращается, как только обнулится.

    Raises:
        ValueError: k вне диапазона слова
        AllocationError: Не удалось нарастить хранилище
    """
    _check_small(k)
    words = acc.storage()
    carry = k
    i = 0
    while carry != 0 and i < len(words):
        cur = words[i] + carry
        words[i] = cur & WORD_MASK
        carry = cur >> WORD_BITS
        i += 1

    if carry != 0:
        append_word(acc, carry)
    return acc
