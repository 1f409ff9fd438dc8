"""
Тесты для Schoolbook Multiplier

Проверяет:
1. Точность произведения (сверка с Python int)
2. Перенос через границу слов (double-width аккумулятор)
3. Нормализацию результата
4. Неизменность операндов
5. Ноль, единицу и коммутативность
"""

import random

import pytest

from src.core.bigint import (
    WORD_MASK,
    BigInt,
    ReleasedBigIntError,
    create,
    multiply,
    parse_decimal,
    release,
    to_hex,
)


def _from_int(value: int) -> BigInt:
    words = []
    while True:
        words.append(value & WORD_MASK)
        value >>= 32
        if not value:
            return BigInt.from_words(words)


class TestMultiply:
    """Тесты для multiply"""

    def test_small_product(self) -> None:
        assert multiply(parse_decimal("2"), parse_decimal("2")).words == (4,)

    def test_default_demo_pair(self) -> None:
        """100000 * 100000 = 10^10 = 0x2_540BE400"""
        c = multiply(parse_decimal("100000"), parse_decimal("100000"))
        assert c.words == (0x540BE400, 0x2)

    def test_carry_across_word_boundary(self) -> None:
        """(2^32 - 1) * 2 = 0x1_FFFFFFFE"""
        c = multiply(parse_decimal("4294967295"), parse_decimal("2"))
        assert c.words == (0xFFFFFFFE, 1)

    def test_max_words_need_double_width(self) -> None:
        """(2^64 - 1)^2: каждый шаг накапливает почти 2^64"""
        a = BigInt.from_words([WORD_MASK, WORD_MASK])
        c = multiply(a, a)
        assert c.to_int() == (2**64 - 1) ** 2
        assert c.count == 4

    def test_result_uses_fewer_than_n_plus_m_words(self) -> None:
        """1 * 1 выделяет 2 слова, нормализация оставляет одно"""
        c = multiply(parse_decimal("1"), parse_decimal("1"))
        assert c.words == (1,)
        assert c.is_normalized()

    def test_zero_operand(self) -> None:
        c = multiply(parse_decimal("0"), parse_decimal("999999999999999999"))
        assert c.words == (0,)
        assert to_hex(c) == "0x0"

    def test_multiplicative_identity(self) -> None:
        a = parse_decimal("123456789012345678901234567890")
        assert multiply(a, parse_decimal("1")).words == a.words

    def test_operands_not_mutated(self) -> None:
        a = BigInt.from_words([WORD_MASK, 3])
        b = BigInt.from_words([WORD_MASK])
        multiply(a, b)
        assert a.words == (WORD_MASK, 3)
        assert b.words == (WORD_MASK,)

    def test_result_is_fresh_instance(self) -> None:
        a = parse_decimal("5")
        b = parse_decimal("1")
        c = multiply(a, b)
        assert c is not a
        assert c is not b
        c.storage()[0] = 0
        assert a.words == (5,)

    def test_same_operand_twice(self) -> None:
        a = parse_decimal("4294967296")
        assert multiply(a, a).to_int() == 2**64

    def test_unnormalized_operand(self) -> None:
        """Старшие нули операнда не портят результат"""
        a = BigInt.from_words([3, 0, 0])
        c = multiply(a, parse_decimal("7"))
        assert c.words == (21,)

    def test_released_operand_raises(self) -> None:
        a = parse_decimal("3")
        release(a)
        with pytest.raises(ReleasedBigIntError):
            multiply(a, create(1))

    def test_random_against_int(self) -> None:
        rng = random.Random(42)
        for _ in range(150):
            x = rng.getrandbits(rng.randint(1, 700))
            y = rng.getrandbits(rng.randint(1, 700))
            c = multiply(_from_int(x), _from_int(y))
            assert c.to_int() == x * y
            assert c.is_normalized()

    def test_commutativity(self) -> None:
        rng = random.Random(1)
        for _ in range(50):
            x = str(rng.getrandbits(rng.randint(1, 400)))
            y = str(rng.getrandbits(rng.randint(1, 400)))
            left = multiply(parse_decimal(x), parse_decimal(y))
            right = multiply(parse_decimal(y), parse_decimal(x))
            assert to_hex(left) == to_hex(right)
