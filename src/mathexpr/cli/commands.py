"""
Expression commands for the mathexpr CLI.

- eval:  Evaluate one expression
- run:   Evaluate a file of expressions, one per line
- parse: Show the AST (or concrete parse tree) of an expression
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from mathexpr.cli.utils import load_cli_config, results_log_for
from mathexpr.core.config import CONFIG_FILENAME
from mathexpr.core.errors import MathExprError
from mathexpr.core.expression_lang import parse_and_evaluate, parse_expr
from mathexpr.core.expression_lang.grammar import parse_tree
from mathexpr.core.ir.expressions import Expr, Num
from mathexpr.results import evaluate_lines

console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


def eval_command(
    expression: str = typer.Argument(..., help="Expression, e.g. '((1+2)*(3+4))'"),
    config_path: Path = typer.Option(  # noqa: B008
        Path(CONFIG_FILENAME),
        "--config",
        "-c",
        help="Path to mathexpr.toml",
    ),
    no_log: bool = typer.Option(
        False,
        "--no-log",
        help="Do not append the result to the results log",
    ),
) -> None:
    """Evaluate a single expression."""
    config = load_cli_config(config_path)

    try:
        result = parse_and_evaluate(expression, max_depth=config.parser.max_depth)
    except MathExprError as e:
        _fail(str(e))

    typer.echo(f"{expression} = {result!r}")

    log = results_log_for(config, config_path, no_log)
    if log is not None:
        log.append(expression, result)


def run_command(
    file: Path = typer.Argument(  # noqa: B008
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="File with one expression per line ('#' starts a comment)",
    ),
    config_path: Path = typer.Option(  # noqa: B008
        Path(CONFIG_FILENAME),
        "--config",
        "-c",
        help="Path to mathexpr.toml",
    ),
    no_log: bool = typer.Option(
        False,
        "--no-log",
        help="Do not append results to the results log",
    ),
) -> None:
    """Evaluate every expression in a file, stopping at the first error."""
    config = load_cli_config(config_path)
    log = results_log_for(config, config_path, no_log)

    try:
        lines = file.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {file}: {e}")

    batch = evaluate_lines(lines, max_depth=config.parser.max_depth, log=log)
    try:
        for source, result in batch:
            typer.echo(f"{source} = {result!r}")
    except MathExprError as e:
        _fail(str(e))


def parse_command(
    expression: str = typer.Argument(..., help="Expression to parse"),
    concrete: bool = typer.Option(
        False,
        "--tree",
        help="Show the concrete parse tree instead of the AST",
    ),
    config_path: Path = typer.Option(  # noqa: B008
        Path(CONFIG_FILENAME),
        "--config",
        "-c",
        help="Path to mathexpr.toml",
    ),
) -> None:
    """Show the syntax tree of an expression without evaluating it."""
    config = load_cli_config(config_path)

    try:
        if concrete:
            typer.echo(parse_tree(expression, max_depth=config.parser.max_depth).pretty())
            return
        expr = parse_expr(expression, max_depth=config.parser.max_depth)
    except MathExprError as e:
        _fail(str(e))

    console.print(_ast_tree(expr))


def _ast_tree(expr: Expr, tree: Tree | None = None, role: str = "") -> Tree:
    """Render an AST as a rich Tree, labelling children by their role."""
    prefix = f"[dim]{role}:[/dim] " if role else ""
    if isinstance(expr, Num):
        label = f"{prefix}[cyan]{expr.value!r}[/cyan]"
    else:
        label = f"{prefix}[bold]{type(expr).__name__}[/bold]"

    node = Tree(label) if tree is None else tree.add(label)
    for name in type(expr).model_fields:
        child = getattr(expr, name)
        if not isinstance(child, float):
            _ast_tree(child, node, name)
    return node
