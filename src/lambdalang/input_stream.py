"""
Character Source
================

InputStream hands source text to the lexer one character at a time and
owns all position bookkeeping. The lexer only relies on the four
operations of the CharacterSource protocol, so any object providing them
can stand in (a REPL buffer, a file reader, a test double).

Example
-------
>>> stream = InputStream("ab\\nc")
>>> stream.advance(), stream.advance(), stream.advance()
('a', 'b', '\\n')
>>> stream.location
SourceLocation(filename='<input>', line=2, column=1)
"""

from typing import NoReturn, Optional, Protocol

from lambdalang.errors import LexerFatalError, SourceLocation


class CharacterSource(Protocol):
    """Contract the lexer consumes."""

    def peek(self) -> Optional[str]: ...

    def advance(self) -> Optional[str]: ...

    def at_end(self) -> bool: ...

    def report_fatal(self, message: str) -> NoReturn: ...


class InputStream:
    """
    Character source over an in-memory string.

    Attributes:
        source: The complete source text
        filename: Name of the source (for error messages)
        line: Current line number (1-indexed)
        column: Current column number (1-indexed)
    """

    def __init__(self, source: str, filename: str = "<input>", line_number: int = 1):
        self.source = source
        self.filename = filename
        self.line = line_number
        self.column = 1

        self._pos = 0
        self._line_start_pos = 0

    def peek(self) -> Optional[str]:
        """Return the next character without consuming it, or None at end."""
        if self._pos >= len(self.source):
            return None
        return self.source[self._pos]

    def advance(self) -> Optional[str]:
        """
        Consume and return the next character, or None at end.

        Updates line and column tracking.
        """
        if self._pos >= len(self.source):
            return None

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
            self._line_start_pos = self._pos
        else:
            self.column += 1

        return char

    def at_end(self) -> bool:
        return self._pos >= len(self.source)

    @property
    def location(self) -> SourceLocation:
        """Position of the next unconsumed character."""
        return SourceLocation(self.filename, self.line, self.column)

    def current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        line_end = self.source.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start_pos:line_end]

    def report_fatal(self, message: str) -> NoReturn:
        """Raise a LexerFatalError at the current position."""
        raise LexerFatalError(
            message,
            location=self.location,
            source_line=self.current_line(),
        )

    def __repr__(self) -> str:
        return f"InputStream({self.filename!r}, {self.line}:{self.column})"
