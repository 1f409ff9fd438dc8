"""
Domain models and value objects.

Contains the multiplication result model exchanged between the engine and the CLI.
"""

from src.core.domain.multiplication import HEX_PREFIX, MultiplicationReport

__all__ = [
    "HEX_PREFIX",
    "MultiplicationReport",
]
