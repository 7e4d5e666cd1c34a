"""
mathexpr CLI package.

- commands.py: eval, run, and parse commands
- utils.py: version display, config loading, results log selection
"""

import typer

from mathexpr.cli.commands import eval_command, parse_command, run_command
from mathexpr.cli.utils import version_callback

app = typer.Typer(
    help="""mathexpr – evaluate fully parenthesised arithmetic expressions

Examples:
  • mathexpr eval "((1+2)*(3+4))"
  • mathexpr eval "log(8, 2)" --no-log
  • mathexpr run expressions.txt
  • mathexpr parse "root(27, 3)"
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """mathexpr CLI main callback for global options."""
    pass


app.command(name="eval")(eval_command)
app.command(name="run")(run_command)
app.command(name="parse")(parse_command)


def main() -> None:
    """Console script entry point."""
    app()


__all__ = ["app", "main"]
