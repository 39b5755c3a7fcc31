"""
Command line front end for parsemath.

Evaluates the expression given as arguments, or every line of standard
input when no arguments are given.

Exit codes: 0 success, 1 lexical error, 2 syntax error, 3 evaluation
error, 4 expression nested too deeply.

Author: xwest
"""

import logging
import sys
from typing import Iterable, Tuple

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .lexer import LexerError
from .parser import ParseError, format_ast
from .evaluator import EvaluationError
from .pipeline import EvaluationResult, PipelineError, evaluate, format_number

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LEX_ERROR = 1
EXIT_SYNTAX_ERROR = 2
EXIT_EVALUATION_ERROR = 3
EXIT_TOO_DEEP = 4


def exit_code_for(error: PipelineError) -> int:
    """Map a pipeline error to the process exit status."""
    if isinstance(error, LexerError):
        return EXIT_LEX_ERROR
    if isinstance(error, ParseError):
        return EXIT_SYNTAX_ERROR
    if isinstance(error, EvaluationError):
        return EXIT_EVALUATION_ERROR
    raise TypeError(f"Not a pipeline error: {error!r}")


def _configure_logging(verbose: bool):
    package_logger = logging.getLogger("parsemath")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
        )
        package_logger.addHandler(handler)


def _report(result: EvaluationResult, show_ast: bool, explain: bool, console: Console) -> int:
    """Print one result and return its exit status."""
    if show_ast and result.ast is not None:
        click.echo(format_ast(result.ast))

    if result.ok:
        click.echo(format_number(result.value))
        return EXIT_OK

    diagnostic = result.error.diagnostic
    if explain:
        console.print(str(diagnostic).rstrip(), style="red", markup=False, highlight=False, soft_wrap=True)
    else:
        click.echo(diagnostic.summary(), err=True)
    return exit_code_for(result.error)


def _evaluate_lines(lines: Iterable[str], show_ast: bool, explain: bool, console: Console) -> int:
    status = EXIT_OK
    for line in lines:
        text = line.strip()
        if not text:
            continue
        try:
            result = evaluate(text)
        except RecursionError:
            logger.debug("Recursion limit hit on %r", text)
            click.echo("error: expression nested too deeply", err=True)
            status = EXIT_TOO_DEEP
            continue
        line_status = _report(result, show_ast, explain, console)
        if line_status != EXIT_OK:
            status = line_status
    return status


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("expression", nargs=-1)
@click.option(
    "--show-ast",
    is_flag=True,
    envvar="PARSEMATH_SHOW_AST",
    help="Print the parsed syntax tree before the result",
)
@click.option(
    "--explain",
    is_flag=True,
    envvar="PARSEMATH_EXPLAIN",
    help="Print full diagnostics with help text and suggestions",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    envvar="PARSEMATH_VERBOSE",
    help="Log every pipeline stage",
)
@click.version_option(__version__, prog_name="parsemath")
def main(expression: Tuple[str, ...], show_ast: bool, explain: bool, verbose: bool) -> None:
    """Evaluate arithmetic expressions.

    EXPRESSION is evaluated once; its words are joined with spaces. With no
    EXPRESSION, every line of standard input is evaluated.

    Supported: numbers such as 42 and 3.5, + - * / ^ and parentheses.

    Examples:

        parsemath "1 + 2 * 3"

        parsemath -- -2^2

        echo "(1 + 2) * 3" | parsemath --show-ast
    """
    _configure_logging(verbose)
    console = Console(stderr=True)

    if expression:
        lines = [" ".join(expression)]
    else:
        lines = sys.stdin

    sys.exit(_evaluate_lines(lines, show_ast, explain, console))


if __name__ == "__main__":
    main()
