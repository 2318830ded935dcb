"""
Command line interface for PrattCalc.

    prattcalc eval "( 2 + 3 ) * 3"
    prattcalc parse --format tree "2 ^ 3 ^ 2"
    prattcalc tokens "1 + 2"
    prattcalc repl

Expressions may be passed as one quoted argument or as separate words;
words are joined with single spaces before lexing.

Author: xwest
"""

import logging
import sys
from typing import Tuple

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.tree import Tree

from . import __version__
from .config import CalcConfig
from .lexer import Lexer, TokenType
from .lexer.tokens import SYMBOLS
from .parser import Parser, Expression, ASTVisitor, ParseError, to_infix, to_sexpr
from .parser.printer import format_number
from .evaluator import Evaluator, EvaluationError

logger = logging.getLogger(__name__)

EXIT_PARSE_ERROR = 1
EXIT_EVALUATION_ERROR = 2

EXPRESSION_SETTINGS = {"ignore_unknown_options": True}


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def format_result(value) -> str:
    """Show integral floats without the trailing .0."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    if isinstance(value, float):
        return repr(value)
    return str(value)


class RichTreeBuilder(ASTVisitor):
    """Mirror an expression tree as a rich Tree for display."""

    def visit_constant(self, node):
        return Tree(format_number(node.value))

    def visit_unary(self, node, operand):
        return self._branch(f"Unary {SYMBOLS[node.operator]}", operand)

    def visit_binary(self, node, left, right):
        return self._branch(f"Binary {SYMBOLS[node.operator]}", left, right)

    def _branch(self, label: str, *children: Tree) -> Tree:
        tree = Tree(label)
        tree.children.extend(children)
        return tree


def _join(words: Tuple[str, ...]) -> str:
    return " ".join(words)


def _parse(source: str, config: CalcConfig) -> Expression:
    lexer = Lexer(source, config.filename)
    tokens = lexer.tokenize()
    return Parser(tokens, config).parse()


def _fail(error: Exception, exit_code: int) -> None:
    Console(stderr=True, highlight=False).print(str(error), markup=False, soft_wrap=True, end="")
    sys.exit(exit_code)


@click.group("prattcalc")
@click.version_option(__version__, prog_name="prattcalc")
@click.option("--verbose", "-v", is_flag=True, help="Log every parser step (DEBUG)")
@click.option("--unary-plus", is_flag=True, help="Allow '+' as a prefix operator")
@click.option("--max-depth", type=click.IntRange(min=1), default=None,
              help="Deepest allowed nesting of groups and prefix operators")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, unary_plus: bool, max_depth) -> None:
    """Parse and evaluate whitespace-separated arithmetic expressions."""
    configure_logging(verbose)

    try:
        config = CalcConfig.from_env()
    except ValueError as e:
        raise click.UsageError(str(e))
    if unary_plus:
        config = config.with_unary_plus()
    if max_depth is not None:
        config = CalcConfig(config.prefix_operators, max_depth, config.filename)

    logger.debug("Using %s", config)
    ctx.obj = config


@cli.command("eval", context_settings=EXPRESSION_SETTINGS)
@click.argument("expression", nargs=-1, required=True)
@click.pass_obj
def eval_cmd(config: CalcConfig, expression: Tuple[str, ...]) -> None:
    """Evaluate EXPRESSION and print its value."""
    try:
        tree = _parse(_join(expression), config)
    except ParseError as e:
        _fail(e, EXIT_PARSE_ERROR)

    try:
        value = Evaluator(config).evaluate(tree)
    except EvaluationError as e:
        _fail(e, EXIT_EVALUATION_ERROR)

    click.echo(format_result(value))


@cli.command("parse", context_settings=EXPRESSION_SETTINGS)
@click.argument("expression", nargs=-1, required=True)
@click.option("--format", "-f", "output_format",
              type=click.Choice(["sexpr", "infix", "tree"]), default="sexpr",
              help="How to print the expression tree")
@click.pass_obj
def parse_cmd(config: CalcConfig, expression: Tuple[str, ...], output_format: str) -> None:
    """Parse EXPRESSION and print its tree."""
    try:
        tree = _parse(_join(expression), config)
    except ParseError as e:
        _fail(e, EXIT_PARSE_ERROR)

    if output_format == "tree":
        Console(highlight=False).print(tree.accept(RichTreeBuilder()))
    elif output_format == "infix":
        click.echo(to_infix(tree))
    else:
        click.echo(to_sexpr(tree))


@cli.command("tokens", context_settings=EXPRESSION_SETTINGS)
@click.argument("expression", nargs=-1, required=True)
@click.pass_obj
def tokens_cmd(config: CalcConfig, expression: Tuple[str, ...]) -> None:
    """Print the tokens of EXPRESSION."""
    lexer = Lexer(_join(expression), config.filename)

    table = Table("#", "Type", "Lexeme", "Value", "Column")
    for index, token in enumerate(lexer.tokenize()):
        style = "red" if token.type == TokenType.ILLEGAL else None
        value = "" if token.value is None else format_number(token.value)
        table.add_row(str(index), token.type.name, token.lexeme, value,
                      str(token.location.column), style=style)

    Console(highlight=False).print(table)


@cli.command("repl")
@click.pass_obj
def repl_cmd(config: CalcConfig) -> None:
    """Read expressions line by line and print their values."""
    stdin = click.get_text_stream("stdin")
    evaluator = Evaluator(config)
    errors = Console(stderr=True, highlight=False)

    while True:
        click.echo("> ", nl=False)
        line = stdin.readline()
        if not line:
            click.echo()
            break

        source = line.strip()
        if not source:
            continue
        if source in ("quit", "exit"):
            break

        try:
            click.echo(format_result(evaluator.evaluate(_parse(source, config))))
        except (ParseError, EvaluationError) as e:
            errors.print(str(e), markup=False, soft_wrap=True, end="")


def main(argv=None) -> None:
    cli.main(args=argv, prog_name="prattcalc")


if __name__ == "__main__":
    main()
