"""
CLI Configuration — параметры командной строки big_mult

Значения по умолчанию совпадают с демонстрационным запуском без аргументов.
"""

import logging
from dataclasses import dataclass
from typing import Final, Tuple

# Коды завершения процесса
EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1

# Демонстрационная пара операндов
DEFAULT_OPERAND_A: Final[str] = "100000"
DEFAULT_OPERAND_B: Final[str] = "100000"

# Единственные флаги CLI; всё остальное считается операндом
VERBOSE_FLAGS: Final[Tuple[str, ...]] = ("-v", "--verbose")


@dataclass(frozen=True)
class BigMultConfig:
    """Конфигурация запуска CLI."""

    default_operand_a: str = DEFAULT_OPERAND_A
    default_operand_b: str = DEFAULT_OPERAND_B
    prog: str = "big_mult"
    log_level: int = logging.WARNING
    verbose_log_level: int = logging.DEBUG
    log_format: str = "%(levelname)s %(name)s: %(message)s"
