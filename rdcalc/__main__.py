"""CLI for the rdcalc expression evaluator.

Usage:
    python -m rdcalc eval "1 + 2 * 3"                # Print the value
    python -m rdcalc eval "(1+2" --verbose           # Debug logging on stderr
    python -m rdcalc eval "1+2 junk" --allow-trailing
    python -m rdcalc demo                            # Run the fixed demo suite
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from rdcalc.config import load_settings
from rdcalc.demo import render_demo, run_demo
from rdcalc.evaluator import evaluate
from rdcalc.models import EvaluationError

app = typer.Typer(
    name="rdcalc",
    help="Recursive-descent arithmetic expression evaluator",
    no_args_is_help=True,
)
console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    """Send rdcalc debug logs to stderr through Rich when --verbose is set."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression to evaluate (e.g., '2 + 3 * 4')"),
    max_depth: Optional[int] = typer.Option(None, "--max-depth", min=1, help="Maximum parenthesis nesting"),
    allow_trailing: Optional[bool] = typer.Option(
        None, "--allow-trailing/--strict", help="Ignore input left over after a complete expression",
    ),
    precision: int = typer.Option(6, "--precision", "-p", min=1, help="Significant digits to print"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each evaluation step to stderr"),
) -> None:
    """Evaluate an expression and print its value."""
    _setup_logging(verbose)

    try:
        settings = load_settings()
    except ValueError as e:
        console.print(f"[red]Config error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    try:
        value = evaluate(
            expression,
            max_depth=max_depth if max_depth is not None else settings.max_depth,
            allow_trailing=allow_trailing if allow_trailing is not None else settings.allow_trailing,
        )
    except EvaluationError as e:
        console.print(f"[red]Error ({e.kind.value}):[/red] {escape(str(e))}")
        console.print(escape(e.caret()), highlight=False)
        raise typer.Exit(1)

    typer.echo(f"{value:.{precision}g}")


@app.command("demo")
def cmd_demo(
    tolerance: float = typer.Option(1e-4, "--tolerance", "-t", help="Relative tolerance against expected values"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each evaluation step to stderr"),
) -> None:
    """Run the built-in demonstration expressions and compare with known answers."""
    _setup_logging(verbose)

    try:
        load_settings()
    except ValueError as e:
        console.print(f"[red]Config error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    results = run_demo(tolerance=tolerance)
    render_demo(results, console)

    if any(r.verdict != "pass" for r in results):
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
