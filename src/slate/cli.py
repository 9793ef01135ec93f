"""
Slate CLI.

Commands:
- run: evaluate a program file
- eval: evaluate a program given on the command line
- tokens: show the token stream of a program
- ast: show the parsed AST of a program
- repl: interactive prompt sharing one environment across lines
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from slate._version import get_version
from slate.core.errors import SlateError
from slate.core.ir import AST, Value
from slate.core.language import Environment, Lexer, evaluate, parse_source, tokenize
from slate.core.settings import DEFAULT_CONFIG_FILE, SlateConfig, load_config

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Slate: a small expression-oriented scripting language",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

_config = SlateConfig()


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        typer.echo(f"slate {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to slate.toml"),
    ] = Path(DEFAULT_CONFIG_FILE),
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Slate: a small expression-oriented scripting language."""
    global _config
    try:
        _config = load_config(config)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        err_console.print(f"[red]Invalid config {config}:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    logging.basicConfig(
        level=_config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _execute(source: str, env: Environment) -> Value:
    """Parse and evaluate ``source``, printing the AST when configured."""
    ast = parse_source(source)
    logger.debug("Evaluating %d top-level expressions", len(ast.tail))
    if _config.show_ast:
        console.print(f"[dim]{escape(str(ast))}[/dim]")
    return evaluate(ast, env)


def _report(error: SlateError) -> None:
    err_console.print(f"[red]{type(error).__name__}:[/red] {escape(str(error))}")


def _fail(error: SlateError) -> typer.Exit:
    _report(error)
    return typer.Exit(code=1)


# =============================================================================
# Commands
# =============================================================================


@app.command(name="run")
def run_file(
    path: Annotated[Path, typer.Argument(help="Program file", exists=True, dir_okay=False)],
) -> None:
    """Evaluate a program file and print its result."""
    source = path.read_text()
    try:
        result = _execute(source, Environment())
    except SlateError as e:
        raise _fail(e)
    console.print(str(result), markup=False)


@app.command(name="eval")
def eval_source(
    source: Annotated[str, typer.Argument(help="Program text")],
) -> None:
    """Evaluate a program given inline and print its result."""
    try:
        result = _execute(source, Environment())
    except SlateError as e:
        raise _fail(e)
    console.print(str(result), markup=False)


@app.command(name="tokens")
def show_tokens(
    source: Annotated[str, typer.Argument(help="Program text")],
) -> None:
    """Show the typed tokens of a program."""
    try:
        raw = tokenize(source)
    except SlateError as e:
        raise _fail(e)

    table = Table(title="Tokens")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Raw")
    table.add_column("Kind", style="cyan")
    table.add_column("Value")
    for i, (text, token) in enumerate(zip(raw, Lexer(raw).all(), strict=True)):
        value = "" if token.value is None else escape(repr(token.value))
        table.add_row(str(i), escape(text), token.kind.value, value)
    console.print(table)


@app.command(name="ast")
def show_ast(
    source: Annotated[str, typer.Argument(help="Program text")],
) -> None:
    """Show the parsed AST of a program."""
    try:
        ast: AST = parse_source(source)
    except SlateError as e:
        raise _fail(e)
    console.print(str(ast), markup=False)


@app.command(name="repl")
def repl() -> None:
    """Read and evaluate lines, keeping bindings between them."""
    env = Environment()
    while True:
        try:
            line = console.input(_config.prompt)
        except EOFError:
            break
        if not line.strip():
            continue
        try:
            result = _execute(line, env)
        except SlateError as e:
            _report(e)
            continue
        console.print(str(result), markup=False)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
