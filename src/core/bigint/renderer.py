"""
Hex Renderer — BigInt → каноническая hex-строка

    0          → "0x0"
    иначе      → "0x" + старшее слово без ведущих нулей
                      + остальные слова по 8 hex-цифр (uppercase, с нулями)
"""

from src.core.bigint.representation import HEX_DIGITS_PER_WORD, BigInt, is_zero


def to_hex(a: BigInt) -> str:
    """
    Raises:
        ReleasedBigIntError: Если a освобождён

    Examples:
        >>> to_hex(BigInt.from_words([0xFFFFFFFE, 1]))
        '0x1FFFFFFFE'
    """
    words = a.storage()
    if is_zero(a):
        return "0x0"

    top = len(words) - 1
    parts = [f"0x{words[top]:X}"]
    parts.extend(f"{words[i]:0{HEX_DIGITS_PER_WORD}X}" for i in range(top - 1, -1, -1))
    return "".join(parts)
