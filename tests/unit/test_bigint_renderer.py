"""
Тесты для Hex Renderer

Проверяет:
1. Ноль → "0x0"
2. Старшее слово без ведущих нулей, остальные по 8 цифр
3. Uppercase
4. Round-trip десятичная строка → hex против Python int
"""

import random

import pytest

from src.core.bigint import (
    BigInt,
    ReleasedBigIntError,
    create,
    parse_decimal,
    release,
    to_hex,
)


class TestToHex:
    """Тесты для to_hex"""

    def test_zero(self) -> None:
        assert to_hex(create(1)) == "0x0"

    def test_single_word(self) -> None:
        assert to_hex(BigInt.from_words([4])) == "0x4"
        assert to_hex(BigInt.from_words([0xABCDEF])) == "0xABCDEF"

    def test_lower_words_zero_padded(self) -> None:
        assert to_hex(BigInt.from_words([0x1, 0x2])) == "0x200000001"
        assert to_hex(BigInt.from_words([0, 0, 1])) == "0x10000000000000000"

    def test_uppercase(self) -> None:
        assert to_hex(BigInt.from_words([0xDEADBEEF, 0xCAFE])) == "0xCAFEDEADBEEF"

    def test_word_boundary_value(self) -> None:
        assert to_hex(parse_decimal("4294967295")) == "0xFFFFFFFF"
        assert to_hex(parse_decimal("4294967296")) == "0x100000000"

    def test_released_raises(self) -> None:
        a = create(1)
        release(a)
        with pytest.raises(ReleasedBigIntError):
            to_hex(a)

    def test_operand_unchanged(self) -> None:
        a = BigInt.from_words([1, 2])
        to_hex(a)
        assert a.words == (1, 2)


class TestRoundTrip:
    """parse_decimal(str(v)) → to_hex совпадает с hex от Python int"""

    @pytest.mark.parametrize(
        "value",
        [0, 1, 9, 10, 2**32 - 1, 2**32, 2**64 - 1, 2**64, 10**30, 2**255 + 1],
    )
    def test_known_values(self, value: int) -> None:
        assert to_hex(parse_decimal(str(value))) == f"0x{value:X}"

    def test_random_values(self) -> None:
        rng = random.Random(99)
        for _ in range(100):
            value = rng.getrandbits(rng.randint(1, 2048))
            assert to_hex(parse_decimal(str(value))) == f"0x{value:X}"
