"""
Decimal Multiplication Pipeline

parse(A), parse(B) → multiply → to_hex → MultiplicationReport

Промежуточные BigInt освобождаются по выходу из контекста,
в том числе при ошибке.
"""

from src.core.bigint.multiplier import multiply
from src.core.bigint.parser import parse_decimal
from src.core.bigint.renderer import to_hex
from src.core.domain.multiplication import MultiplicationReport


def multiply_decimal(operand_a: str, operand_b: str) -> MultiplicationReport:
    """
    Точное произведение двух неотрицательных десятичных строк.

    Raises:
        InvalidFormatError: Операнд не является десятичной строкой
        AllocationError: Не хватило памяти под слова
    """
    with parse_decimal(operand_a) as a, parse_decimal(operand_b) as b:
        with multiply(a, b) as product:
            return MultiplicationReport(
                operand_a=operand_a,
                operand_b=operand_b,
                product_hex=to_hex(product),
                product_words=product.count,
            )
