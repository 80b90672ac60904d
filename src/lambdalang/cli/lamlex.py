"""
lamlex - Token Dump Command-Line Interface
==========================================

Prints the token stream of a lambdalang source file, one token per line.
Useful for checking how the lexer splits a program before feeding it to
a parser.

Usage Examples
--------------
    $ lamlex script.lam
    $ lamlex --int-bits 64 big_numbers.lam
    $ lamlex -v script.lam
"""

import logging
from pathlib import Path
from typing import Optional

import click

from lambdalang import __version__
from lambdalang.cli.errors import handle_cli_exception
from lambdalang.config import LexerOptions
from lambdalang.lexer import Lexer


@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--int-bits",
    type=click.IntRange(min=2),
    default=None,
    help="Signed integer width for number literals "
         "(default: LAMBDALANG_INT_BITS or 32)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output with debug logging",
)
@click.version_option(version=__version__, prog_name="lamlex")
def main(input_file: Path, int_bits: Optional[int], verbose: bool) -> None:
    """
    Print the tokens of a lambdalang source file.

    INPUT_FILE is the source file to tokenize.

    \b
    Examples:
        lamlex script.lam                # One token per line
        lamlex --int-bits 64 script.lam  # Allow 64-bit literals
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    options = LexerOptions.from_env()
    if int_bits is not None:
        options.int_bits = int_bits

    try:
        source = input_file.read_text(encoding="utf-8")
        lexer = Lexer(source, str(input_file), options)

        count = 0
        for token in lexer:
            click.echo(repr(token))
            count += 1

        if verbose:
            click.echo(f"{count} tokens from {input_file}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
