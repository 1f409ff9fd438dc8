"""
CLI — командная строка big_mult.

Единственная граница ошибок: исключения движка превращаются здесь
в сообщения stderr и коды завершения.
"""

from src.cli.big_mult import main, run
from src.cli.config import (
    DEFAULT_OPERAND_A,
    DEFAULT_OPERAND_B,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    BigMultConfig,
)

__all__ = [
    "main",
    "run",
    "BigMultConfig",
    "DEFAULT_OPERAND_A",
    "DEFAULT_OPERAND_B",
    "EXIT_FAILURE",
    "EXIT_SUCCESS",
]
