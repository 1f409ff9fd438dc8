"""
MultiplicationReport — результат умножения десятичных операндов

Immutable Pydantic модель: исходные строки операндов без изменений,
каноническое hex-представление произведения и его размер в словах.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

# Каноническая форма: "0x0" либо "0x" + uppercase hex без ведущего нуля
HEX_PREFIX: Final[str] = "0x"
_HEX_UPPER_DIGITS: Final[frozenset] = frozenset("0123456789ABCDEF")


class MultiplicationReport(BaseModel):
    """
    Результат A * B.

    operand_a/operand_b хранятся ровно так, как были переданы
    (в том числе с ведущими нулями).
    """

    operand_a: str = Field(..., pattern=r"^[0-9]+$", description="Операнд A (dec)")
    operand_b: str = Field(..., pattern=r"^[0-9]+$", description="Операнд B (dec)")
    product_hex: str = Field(..., description="Произведение, каноническая hex-строка")
    product_words: int = Field(..., ge=1, description="Количество 32-битных слов произведения")

    model_config = {"frozen": True}

    @field_validator("product_hex")
    @classmethod
    def validate_product_hex(cls, v: str) -> str:
        """Проверка канонической формы: префикс 0x, uppercase, без ведущих нулей"""
        if not v.startswith(HEX_PREFIX):
            raise ValueError(f"product_hex must start with {HEX_PREFIX!r}: {v!r}")
        digits = v[len(HEX_PREFIX):]
        if not digits or any(c not in _HEX_UPPER_DIGITS for c in digits):
            raise ValueError(f"product_hex must contain uppercase hex digits: {v!r}")
        if len(digits) > 1 and digits[0] == "0":
            raise ValueError(f"product_hex must not have leading zeros: {v!r}")
        return v

    def is_zero(self) -> bool:
        return self.product_hex == "0x0"

    def to_line(self) -> str:
        """
        Строка вывода CLI.

        Returns:
            "<A> (dec) * <B> (dec) = 0x<HEX>"
        """
        return f"{self.operand_a} (dec) * {self.operand_b} (dec) = {self.product_hex}"
