"""
minicalc command line.

    minicalc                     start the interactive calculator
    minicalc repl                same, with REPL options
    minicalc eval "1 + 2 * 3"    evaluate one expression
    minicalc tokens "1 & 2"      show the lexer's tokens
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from minicalc._version import get_version
from minicalc.core.config import CalculatorConfig, load_config
from minicalc.core.errors import ConfigError
from minicalc.core.syntax.lexer import tokenize
from minicalc.printer import print_tree
from minicalc.repl import ERROR_STYLE, Repl, evaluate_line

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Interactive integer calculator.",
    add_completion=False,
)


@dataclass
class CliState:
    """Options shared by every command."""

    config: CalculatorConfig
    color: bool

    def console(self, stderr: bool = False) -> Console:
        return Console(no_color=not self.color, highlight=False, stderr=stderr)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"minicalc version {get_version()}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config_path: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Path to a minicalc.toml file (default: ./minicalc.toml if present)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: $MINICALC_LOG_LEVEL or the config file)",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Interactive integer calculator. Starts the REPL when no command is given."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    _configure_logging(config.resolved_log_level(log_level))
    logger.debug("Using configuration %r", config)
    state = CliState(config=config, color=config.repl.color and not no_color)
    ctx.obj = state

    if ctx.invoked_subcommand is None:
        Repl(config=config.repl, console=state.console()).run()


@app.command("repl")
def repl_command(
    ctx: typer.Context,
    show_tree: bool | None = typer.Option(
        None,
        "--show-tree/--hide-tree",
        help="Print the syntax tree of every line (default: from config).",
    ),
    prompt: str | None = typer.Option(None, "--prompt", help="Input prompt (default: '> ')."),
) -> None:
    """Start the interactive calculator."""
    state: CliState = ctx.obj
    updates: dict[str, object] = {}
    if show_tree is not None:
        updates["show_tree"] = show_tree
    if prompt is not None:
        updates["prompt"] = prompt
    repl_config = state.config.repl.model_copy(update=updates)
    Repl(config=repl_config, console=state.console()).run()


@app.command("eval")
def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(
        ...,
        help=(
            "Expression to evaluate, e.g. '(1 + 2) * 3'. Put '--' before an expression "
            "that starts with '-'; unary minus itself is reported as a diagnostic."
        ),
    ),
    show_tree: bool = typer.Option(False, "--show-tree", help="Print the syntax tree first."),
) -> None:
    """Evaluate one expression and print the result."""
    state: CliState = ctx.obj
    console = state.console()
    result = evaluate_line(expression)

    if show_tree:
        print_tree(result.tree.root, console)

    if result.ok:
        console.print(Text(str(result.value)))
        return

    err_console = state.console(stderr=True)
    if result.fault:
        err_console.print(Text(result.fault, style=ERROR_STYLE))
        raise typer.Exit(code=2)

    for diagnostic in result.diagnostics:
        err_console.print(Text(diagnostic, style=ERROR_STYLE))
    raise typer.Exit(code=1)


@app.command("tokens")
def tokens_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Text to lex"),
) -> None:
    """Show the tokens the lexer produces, including whitespace and bad tokens."""
    state: CliState = ctx.obj
    console = state.console()
    tokens, diagnostics = tokenize(expression)

    table = Table(title="Tokens")
    table.add_column("Kind", style="cyan")
    table.add_column("Position", justify="right")
    table.add_column("Text")
    table.add_column("Value", justify="right")
    for token in tokens:
        table.add_row(
            str(token.kind),
            str(token.position),
            repr(token.text),
            "" if token.value is None else str(token.value),
        )
    console.print(table)

    for diagnostic in diagnostics:
        console.print(Text(diagnostic, style=ERROR_STYLE))


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
