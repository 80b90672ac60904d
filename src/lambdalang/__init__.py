"""
lambdalang - Lexer for a Small Dynamic Scripting Language
=========================================================

This package provides the lexical scanner for lambdalang, a small
expression-oriented scripting language with C-like conditionals,
lambdas, ``#`` line comments and escaped double-quoted strings.

Main Components
---------------
- **lexer**: token model and the pull-based Lexer with one token of lookahead
- **input_stream**: character source with line/column tracking
- **config**: LexerOptions (integer width, default filename)
- **errors**: exception hierarchy with source-located diagnostics

Quick Start
-----------
    >>> from lambdalang import tokenize
    >>> tokenize("lambda (n) n * 2")
    [Token(KEYWORD, 'lambda'), Token(PUNCTUATION, '('), Token(IDENTIFIER, 'n'), Token(PUNCTUATION, ')'), Token(IDENTIFIER, 'n'), Token(OPERATOR, '*'), Token(NUMBER, 2)]

Or dump the tokens of a file from the command line:
    $ lamlex script.lam
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from lambdalang.config import LexerOptions
from lambdalang.errors import (
    LambdaError,
    SourceLocation,
    LexerError,
    UnterminatedStringError,
    NumberOverflowError,
    UnexpectedCharacterError,
    LexerFatalError,
)
from lambdalang.input_stream import CharacterSource, InputStream
from lambdalang.lexer import KEYWORDS, Lexer, Token, TokenType, tokenize

__all__ = [
    # Version info
    "__version__",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "tokenize",
    "LexerOptions",
    # Character source
    "CharacterSource",
    "InputStream",
    # Exception hierarchy
    "LambdaError",
    "SourceLocation",
    "LexerError",
    "UnterminatedStringError",
    "NumberOverflowError",
    "UnexpectedCharacterError",
    "LexerFatalError",
]
