"""
Grammar builder CLI.

Builds grammars defined in Python modules and prints them:

    grammar-builder build myproject.grammars:json_grammar
    grammar-builder build myproject.grammars:make_grammar --mode ebnf -o grammar.lark
    grammar-builder example
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

import typer

from grammar_builder._version import get_version
from grammar_builder.cli_ui import console, highlight_grammar, print_error, print_success
from grammar_builder.core.errors import GrammarError
from grammar_builder.core.grammar import Grammar
from grammar_builder.core.naming import OutputMode


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        typer.echo(f"grammar-builder {get_version()}")
        raise typer.Exit()


app = typer.Typer(
    help="Build GBNF / Lark EBNF grammars from Python rule definitions.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging for all commands."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def load_grammar(target: str) -> Grammar:
    """
    Resolve a ``module:attribute`` target to a Grammar.

    The attribute may be a Grammar or a zero-argument callable returning one.

    Raises:
        typer.BadParameter: If the target cannot be imported or is not a Grammar
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise typer.BadParameter(f"Expected 'module:attribute', got '{target}'")

    # Grammars defined next to the caller are importable for the duration of the import
    cwd = str(Path.cwd())
    sys.path.insert(0, cwd)
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(f"Cannot import module '{module_name}': {e}") from e
    finally:
        sys.path.remove(cwd)

    try:
        obj = getattr(module, attribute)
    except AttributeError as e:
        raise typer.BadParameter(f"Module '{module_name}' has no attribute '{attribute}'") from e

    if callable(obj) and not isinstance(obj, Grammar):
        obj = obj()
    if not isinstance(obj, Grammar):
        raise typer.BadParameter(f"'{target}' is not a Grammar (got {type(obj).__name__})")
    return obj


def _emit(grammar: Grammar, mode: OutputMode | None, output: Path | None, debug: bool) -> None:
    try:
        text = grammar.build(mode)
    except GrammarError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if output is not None:
        output.write_text(text + "\n")
        print_success(f"Wrote grammar to {output}")
    elif debug:
        console.print(highlight_grammar(text, mode or grammar.options.mode))
    else:
        typer.echo(text)


@app.command()
def build(
    target: str = typer.Argument(..., help="Grammar to build, as module:attribute"),
    mode: OutputMode | None = typer.Option(
        None, "--mode", "-m", help="Output notation (defaults to the grammar's own)"
    ),
    output: Path | None = typer.Option(  # noqa: B008
        None, "--output", "-o", help="Write the grammar to a file instead of stdout"
    ),
    debug: bool = typer.Option(False, "--debug", help="Highlight rule names in the output"),
) -> None:
    """Build a grammar defined in a Python module."""
    _emit(load_grammar(target), mode, output, debug)


@app.command()
def example(
    mode: OutputMode = typer.Option(OutputMode.GBNF, "--mode", "-m", help="Output notation"),
) -> None:
    """Print the bundled ISO 8601 date grammar."""
    from grammar_builder.examples.iso8601 import iso8601_date_grammar

    _emit(iso8601_date_grammar(), mode, None, False)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
