"""
lambdalang - Lexer Configuration
================================

Configuration for the lexer. Options can come from:
- Default values (defined here)
- Explicit keyword arguments
- Environment variables (LexerOptions.from_env)
"""

from dataclasses import dataclass
import logging
import os


logger = logging.getLogger(__name__)


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        int_bits: Width of the signed integer type number literals must fit
                  in. The default of 32 accepts literals up to 2**31 - 1.
        filename: Name reported in diagnostics for sources created from a
                  plain string.
    """
    int_bits: int = 32
    filename: str = "<input>"

    def __post_init__(self):
        if self.int_bits < 2:
            raise ValueError(f"int_bits must be at least 2, got {self.int_bits}")

    @property
    def max_int(self) -> int:
        """Largest literal the number reader accepts."""
        return (1 << (self.int_bits - 1)) - 1

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Environment variables (all optional):
            LAMBDALANG_INT_BITS: Signed integer width (integer >= 2)

        Invalid values are logged and the default is kept.
        """
        options = cls()

        if int_bits := os.environ.get("LAMBDALANG_INT_BITS"):
            try:
                value = int(int_bits)
                if value < 2:
                    raise ValueError(value)
                options.int_bits = value
            except ValueError:
                logger.warning(f"Ignoring invalid LAMBDALANG_INT_BITS={int_bits!r}")

        return options
