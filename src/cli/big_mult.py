"""
big_mult — точное умножение двух десятичных строк с выводом в hex

Использование:
    big_mult           -> 100000 * 100000
    big_mult A B       -> A * B (A, B — неотрицательные десятичные строки)

Вывод (stdout):
    A (dec) * B (dec) = 0x<HEX>

Ошибки формата и нехватка памяти → "Fatal error: ..." в stderr, код 1.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO, Tuple

from src.cli.config import EXIT_FAILURE, EXIT_SUCCESS, VERBOSE_FLAGS, BigMultConfig
from src.core.bigint import AllocationError, InvalidFormatError, multiply_decimal

logger = logging.getLogger(__name__)


def build_parser(config: BigMultConfig) -> argparse.ArgumentParser:
    """
    Парсер только для флагов.

    Операнды в argparse не передаются: "-12a" или "-h" должны дойти
    до проверки количества и до parse_decimal, а не стать опциями.
    """
    parser = argparse.ArgumentParser(
        prog=config.prog,
        description="Multiply two non-negative decimal integers, print the product in hex",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        *VERBOSE_FLAGS, dest="verbose", action="store_true", help="log engine diagnostics to stderr"
    )
    return parser


def split_arguments(argv: List[str]) -> Tuple[List[str], List[str]]:
    """
    Разделение аргументов на флаги и операнды (порядок операндов сохраняется).

    Returns:
        (flags, operands)
    """
    flags = [arg for arg in argv if arg in VERBOSE_FLAGS]
    operands = [arg for arg in argv if arg not in VERBOSE_FLAGS]
    return flags, operands


def print_usage(config: BigMultConfig, stream: TextIO) -> None:
    print("Usage:", file=stream)
    print(
        f"  {config.prog}           "
        f"(default: {config.default_operand_a} * {config.default_operand_b})",
        file=stream,
    )
    print(f"  {config.prog} <A> <B>   (A, B are non-negative decimal strings)", file=stream)


def configure_logging(config: BigMultConfig, verbose: bool) -> None:
    # basicConfig не трогает уже настроенный root, поэтому уровень задаётся явно
    logging.basicConfig(format=config.log_format, stream=sys.stderr)
    logging.getLogger().setLevel(config.verbose_log_level if verbose else config.log_level)


def main(argv: Optional[List[str]] = None, config: Optional[BigMultConfig] = None) -> int:
    """
    Точка входа CLI.

    Args:
        argv: Аргументы без имени программы (default: sys.argv[1:])
        config: Конфигурация (default: BigMultConfig())

    Returns:
        Код завершения процесса
    """
    config = config or BigMultConfig()
    flags, operands = split_arguments(sys.argv[1:] if argv is None else list(argv))
    args = build_parser(config).parse_args(flags)
    configure_logging(config, args.verbose)

    if not operands:
        operand_a = config.default_operand_a
        operand_b = config.default_operand_b
        print(f"[INFO] No arguments given. Using default: {operand_a} * {operand_b}")
    elif len(operands) == 2:
        operand_a, operand_b = operands
    else:
        print_usage(config, sys.stderr)
        return EXIT_FAILURE

    try:
        report = multiply_decimal(operand_a, operand_b)
    except (InvalidFormatError, AllocationError) as e:
        logger.debug("Multiplication failed", exc_info=True)
        print(f"Fatal error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print(report.to_line())
    return EXIT_SUCCESS


def run() -> None:
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    run()
