"""
BigInt engine — точная арифметика неотрицательных целых произвольной точности

Представление base 2^32 (little-endian слова), парсинг десятичных строк,
школьное умножение с double-width переносом, рендеринг в hex.
"""

# Errors
from src.core.bigint.errors import (
    AllocationError,
    BigIntError,
    InvalidFormatError,
    ReleasedBigIntError,
)

# Representation & lifecycle
from src.core.bigint.representation import (
    HEX_DIGITS_PER_WORD,
    WORD_BASE,
    WORD_BITS,
    WORD_MASK,
    BigInt,
    create,
    is_zero,
    normalize,
    release,
    reset,
)

# Growth primitives
from src.core.bigint.growth import add_small, multiply_small

# Parser / Multiplier / Renderer
from src.core.bigint.parser import is_valid_decimal_string, parse_decimal
from src.core.bigint.multiplier import multiply
from src.core.bigint.renderer import to_hex

# Pipeline
from src.core.bigint.pipeline import multiply_decimal

__all__ = [
    # Errors
    "BigIntError",
    "InvalidFormatError",
    "AllocationError",
    "ReleasedBigIntError",
    # Representation — Constants
    "WORD_BITS",
    "WORD_BASE",
    "WORD_MASK",
    "HEX_DIGITS_PER_WORD",
    # Representation — Types & lifecycle
    "BigInt",
    "create",
    "reset",
    "release",
    "normalize",
    "is_zero",
    # Growth primitives
    "multiply_small",
    "add_small",
    # Parser
    "is_valid_decimal_string",
    "parse_decimal",
    # Multiplier
    "multiply",
    # Renderer
    "to_hex",
    # Pipeline
    "multiply_decimal",
]
