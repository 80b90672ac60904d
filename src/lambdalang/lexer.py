"""
lambdalang Lexer (Tokenizer)
============================

This module implements the lexer for the lambdalang scripting language.
It pulls characters from a character source and hands out classified
tokens one at a time through a single-token lookahead buffer.

Token Categories
----------------
| Type        | Example            | Value          |
|-------------|--------------------|----------------|
| KEYWORD     | if then else       | 'if'           |
| IDENTIFIER  | count, empty?, <=> | 'count'        |
| NUMBER      | 42                 | 42             |
| STRING      | "a\\"b"             | 'a"b'          |
| PUNCTUATION | , ; ( ) { } [ ]    | '('            |
| OPERATOR    | + - == && !=       | '=='           |

Identifiers start with a lowercase letter or underscore and may continue
with letters, digits and any of ``? ! - < > =``, so ``set-car!`` and
``x<=y`` are single identifiers. Operators are maximal runs of operator
characters, so ``a == -1`` yields the operator ``==`` and then ``-``
followed by the number 1 (there are no negative literals).

Comments
--------
``#`` starts a comment that runs to the end of the line.

Strings
-------
A backslash makes the following character literal. There is no escape
code translation: ``"\\n"`` is the single character ``n``.

Example Usage
-------------
>>> from lambdalang.lexer import Lexer
>>> lexer = Lexer('if x then 1 else "no"')
>>> lexer.peek()
Token(KEYWORD, 'if')
>>> [lexer.next() for _ in range(6)]
[Token(KEYWORD, 'if'), Token(IDENTIFIER, 'x'), Token(KEYWORD, 'then'), Token(NUMBER, 1), Token(KEYWORD, 'else'), Token(STRING, 'no')]
>>> lexer.next() is None
True
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterator, NoReturn, Optional, Union
import logging
import string

from lambdalang.config import LexerOptions
from lambdalang.errors import (
    LexerError,
    NumberOverflowError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from lambdalang.input_stream import CharacterSource, InputStream


logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Tag of the token union."""

    NUMBER = auto()         # Integer literal, value is an int
    STRING = auto()         # String literal, value is the unescaped text
    KEYWORD = auto()        # One of KEYWORDS
    IDENTIFIER = auto()     # Any other name
    PUNCTUATION = auto()    # Single delimiter character
    OPERATOR = auto()       # Run of operator characters


# =============================================================================
# Character Classes
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({
    "if",
    "then",
    "else",
    "lambda",
    "true",
    "false",
})

WHITESPACE = " \t\n"
DIGITS = string.digits
IDENT_START = string.ascii_lowercase + "_"
IDENT_CHARS = IDENT_START + DIGITS + "?!-<>="
PUNCTUATION = ",;(){}[]"
OPERATOR_CHARS = "+-*/%=&|<>!"


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


def is_digit(char: str) -> bool:
    # str.isdigit() would also accept non-ASCII digits
    return char in DIGITS


def is_ident_start(char: str) -> bool:
    return char in IDENT_START


def is_ident_char(char: str) -> bool:
    return char in IDENT_CHARS


def is_punctuation(char: str) -> bool:
    return char in PUNCTUATION


def is_operator_char(char: str) -> bool:
    return char in OPERATOR_CHARS


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified token.

    Tokens are immutable and carry no position; positions are only known
    to the character source and are reported through errors.

    Attributes:
        type: The TokenType tag
        value: int for NUMBER tokens, the token text otherwise
    """
    type: TokenType
    value: Union[str, int]

    def __repr__(self) -> str:
        if isinstance(self.value, int):
            return f"Token({self.type.name}, {self.value})"
        return f"Token({self.type.name}, {self.value!r})"

    def is_keyword(self, word: Optional[str] = None) -> bool:
        """Return True if this is a keyword token (optionally a specific one)."""
        return self.type is TokenType.KEYWORD and (word is None or self.value == word)

    def is_punctuation(self, char: Optional[str] = None) -> bool:
        """Return True if this is a punctuation token (optionally a specific one)."""
        return self.type is TokenType.PUNCTUATION and (char is None or self.value == char)

    def is_operator(self, op: Optional[str] = None) -> bool:
        """Return True if this is an operator token (optionally a specific one)."""
        return self.type is TokenType.OPERATOR and (op is None or self.value == op)


# =============================================================================
# Lexer Implementation
# =============================================================================

class _State(Enum):
    """States of the lookahead cell."""
    NOT_STARTED = auto()    # nothing dispatched yet
    BUFFERED = auto()       # holds the token next() returns
    EXHAUSTED = auto()      # end of stream reached, permanent
    FAILED = auto()         # a lexical error ended the stream, permanent


class Lexer:
    """
    Pull-based tokenizer with one token of lookahead.

    The lexer does no work until next() or peek() is called. next()
    returns the buffered token and immediately buffers the following
    one, so peek() always shows what next() will return. Once the input
    is exhausted both return None forever.

    A lexical error met while refilling the buffer is held until the
    consumer asks for the token it replaces; from then on every call
    raises that same error.

    Usage:
        lexer = Lexer(source_text, "script.lam")
        while (token := lexer.next()) is not None:
            ...

    Attributes:
        options: The LexerOptions in effect
    """

    def __init__(
        self,
        source: Union[str, CharacterSource],
        filename: Optional[str] = None,
        options: Optional[LexerOptions] = None,
    ):
        """
        Initialize the lexer.

        Args:
            source: Source text, or any object implementing CharacterSource
            filename: Name for diagnostics when source is a string
                      (defaults to options.filename)
            options: Lexer configuration (defaults to LexerOptions())
        """
        self.options = options or LexerOptions()

        if isinstance(source, str):
            source = InputStream(source, filename or self.options.filename)
        self._input = source

        self._state = _State.NOT_STARTED
        self._current: Optional[Token] = None
        self._error: Optional[LexerError] = None

    # =========================================================================
    # Public Interface
    # =========================================================================

    def next(self) -> Optional[Token]:
        """
        Consume and return the next token, or None at end of stream.

        Raises:
            LexerError: If the input is lexically malformed
        """
        if self._state is _State.NOT_STARTED:
            self._fill()

        if self._state is _State.FAILED:
            raise self._error
        if self._state is _State.EXHAUSTED:
            return None

        token = self._current
        self._fill()
        return token

    def peek(self) -> Optional[Token]:
        """
        Return the token next() will return, without consuming it.

        Only the very first call on a fresh lexer reads any input.

        Raises:
            LexerError: If the input is lexically malformed
        """
        if self._state is _State.NOT_STARTED:
            self._fill()

        if self._state is _State.FAILED:
            raise self._error
        return self._current

    def at_end(self) -> bool:
        """Return True if next() would return None."""
        return self.peek() is None

    def report_fatal(self, message: str) -> NoReturn:
        """
        Abort with a diagnostic at the current source position.

        Raises:
            LexerFatalError: Always (raised by the character source)
        """
        logger.debug(f"Fatal diagnostic requested: {message}")
        self._input.report_fatal(message)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next()
        if token is None:
            raise StopIteration
        return token

    # =========================================================================
    # Lookahead Buffer
    # =========================================================================

    def _fill(self) -> None:
        """Dispatch once and store the outcome in the lookahead cell."""
        try:
            token = self.read_next()
        except LexerError as e:
            logger.debug(f"Lexing stopped: {e.message} at {e.location}")
            self._state = _State.FAILED
            self._current = None
            self._error = e
            return

        if token is None:
            logger.debug("Token stream exhausted")
            self._state = _State.EXHAUSTED
        else:
            self._state = _State.BUFFERED
        self._current = token

    # =========================================================================
    # Dispatch
    # =========================================================================

    def read_while(self, predicate: Callable[[str], bool]) -> str:
        """
        Consume characters while predicate holds and return them.

        Stops at end of input or at the first character failing the
        predicate, which is left unconsumed.
        """
        chars = []
        while not self._input.at_end() and predicate(self._input.peek()):
            chars.append(self._input.advance())
        return "".join(chars)

    def read_next(self) -> Optional[Token]:
        """
        Read the next token straight from the input, bypassing the buffer.

        Returns:
            The next Token, or None at end of input
        """
        while True:
            self.read_while(is_whitespace)

            if self._input.at_end():
                return None

            char = self._input.peek()

            if char == "#":
                self._skip_comment()
                continue

            if char == '"':
                return self._read_string()

            if is_digit(char):
                return self._read_number()

            if is_ident_start(char):
                return self._read_ident()

            if is_punctuation(char):
                return Token(TokenType.PUNCTUATION, self._input.advance())

            if is_operator_char(char):
                return Token(TokenType.OPERATOR, self.read_while(is_operator_char))

            location, source_line = self._position()
            raise UnexpectedCharacterError(char, location, source_line)

    # =========================================================================
    # Token Readers
    # =========================================================================

    def _read_number(self) -> Token:
        location, source_line = self._position()
        digits = self.read_while(is_digit)

        # int() refuses very long digit strings, so bound the length first
        significant = digits.lstrip("0")
        if len(significant) > len(str(self.options.max_int)):
            raise NumberOverflowError(digits, self.options.max_int, location, source_line)

        value = int(significant or "0")
        if value > self.options.max_int:
            raise NumberOverflowError(digits, self.options.max_int, location, source_line)

        return Token(TokenType.NUMBER, value)

    def _read_ident(self) -> Token:
        """
        Read an identifier or keyword.

        The first character is already known to be an identifier start;
        keywords are recognized by exact membership in KEYWORDS.
        """
        name = self._input.advance() + self.read_while(is_ident_char)

        if name in KEYWORDS:
            return Token(TokenType.KEYWORD, name)
        return Token(TokenType.IDENTIFIER, name)

    def _read_escaped(self, end: str) -> str:
        """
        Read a delimited run of text, consuming both delimiters.

        A backslash makes the following character literal, whatever it is.

        Raises:
            UnterminatedStringError: If input ends before the closing delimiter
        """
        location, source_line = self._position()
        self._input.advance()  # consume opening delimiter

        chars = []
        escaped = False
        while not self._input.at_end():
            char = self._input.advance()

            if escaped:
                chars.append(char)
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == end:
                return "".join(chars)
            else:
                chars.append(char)

        raise UnterminatedStringError(location, source_line)

    def _read_string(self) -> Token:
        return Token(TokenType.STRING, self._read_escaped('"'))

    def _skip_comment(self) -> None:
        self.read_while(lambda c: c != "\n")
        self._input.advance()  # newline, if any

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _position(self) -> tuple[Optional[SourceLocation], Optional[str]]:
        """
        Current location and source line, if the character source tracks them.

        Only InputStream-like sources expose positions; the bare
        CharacterSource contract does not require it.
        """
        location = getattr(self._input, "location", None)
        current_line = getattr(self._input, "current_line", None)
        return location, current_line() if current_line is not None else None


def tokenize(
    source: str,
    filename: Optional[str] = None,
    options: Optional[LexerOptions] = None,
) -> list[Token]:
    """
    Tokenize a complete source string.

    Raises:
        LexerError: If the input is lexically malformed
    """
    return list(Lexer(source, filename, options))
