"""
lambdalang Error Hierarchy
==========================

This module defines the exception hierarchy for the lambdalang toolchain.
All exceptions inherit from LambdaError, allowing callers to catch every
lambdalang-related error with a single except clause if desired.

Exception Hierarchy
-------------------
LambdaError (base)
└── LexerError (lexical errors)
    ├── UnterminatedStringError - end of input inside a string literal
    ├── NumberOverflowError - integer literal too large for the target width
    ├── UnexpectedCharacterError - character not matched by any token rule
    └── LexerFatalError - abort requested through report_fatal()

Error Message Format
--------------------
Errors carrying a source location follow this format:

    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)

Example:
    script.lam:3:9: error: unterminated string literal
        print("hello
              ^
    hint: add closing '"' to complete the string
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class LambdaError(Exception):
    """
    Base exception for all lambdalang errors.

        try:
            tokens = tokenize(source)
        except LambdaError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Tokens deliberately carry no position; locations are taken from the
    character source at the moment an error is detected.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexerError(LambdaError):
    """
    Base exception for all lexical errors.

    Every lexical error is terminal for the token stream that raised it.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            script.lam:1:5: error: unexpected character '@'
                x = @y
                    ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            # Control characters would break the caret alignment
            shown = "".join(
                c if c.isprintable() or c == "\t" else " " for c in self.source_line
            )
            parts.append(f"    {shown}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnterminatedStringError(LexerError):
    """
    Unterminated string literal.

    Raised when the end of input is reached before the closing double
    quote. The location points at the opening quote.

    Example:
        greeting = "hello
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )


class NumberOverflowError(LexerError):
    """
    Integer literal does not fit the target integer width.

    Negative literals are lexed as an operator followed by a number, so
    only the positive bound applies here.
    """

    def __init__(
        self,
        literal: str,
        max_value: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.literal = literal
        self.max_value = max_value

        shown = literal if len(literal) <= 24 else f"{literal[:10]}...{literal[-10:]}"
        super().__init__(
            f"integer literal '{shown}' ({len(literal)} digits) is out of range",
            location=location,
            hint=f"maximum value is {max_value}",
            source_line=source_line,
        )


class UnexpectedCharacterError(LexerError):
    """
    Character not matched by any token rule.

    Raised instead of silently ending the token stream, so a stray
    character can never truncate a program.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unexpected character {char!r} (0x{ord(char):02X})",
            location=location,
            source_line=source_line,
        )


class LexerFatalError(LexerError):
    """
    Fatal diagnostic raised through report_fatal().

    Used by consumers that choose to abort on a condition of their own
    (for example a parser that gives up on the first error); the
    character source supplies the current position.
    """
    pass
