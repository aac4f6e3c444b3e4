"""
Rich console output for the grammar builder.

Used by the CLI and by ``Grammar.build()`` when the debug option is on.
"""

from rich.console import Console
from rich.style import Style
from rich.text import Text

from grammar_builder.core.naming import OutputMode

console = Console()
err_console = Console(stderr=True)

STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "rule_name": Style(color="magenta"),
    "operator": Style(color="magenta"),
    "expression": Style(color="white"),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
}

_OPERATORS = {
    OutputMode.GBNF: " ::= ",
    OutputMode.EBNF: ": ",
}


def highlight_grammar(grammar: str, mode: OutputMode = OutputMode.GBNF) -> Text:
    """Return grammar text with rule names and operators styled."""
    operator = _OPERATORS[mode]
    text = Text()
    for index, line in enumerate(grammar.splitlines()):
        if index:
            text.append("\n")
        name, sep, expression = line.partition(operator)
        if not sep:
            text.append(line, style=STYLES["expression"])
            continue
        text.append(name, style=STYLES["rule_name"])
        text.append(sep, style=STYLES["operator"])
        text.append(expression, style=STYLES["expression"])
    return text


def print_grammar(grammar: str, mode: OutputMode = OutputMode.GBNF) -> None:
    """Print a highlighted grammar with a header."""
    console.print(Text("[Grammar] Grammar Output:", style=STYLES["title"]))
    console.print(highlight_grammar(grammar, mode))


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(Text(f"Error: {message}", style=STYLES["error"]))


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(message, style=STYLES["success"]))
