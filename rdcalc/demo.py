"""Demonstration suite: fixed expressions checked against known answers.

Runs every case through evaluate() and renders a Rich comparison table
showing the computed value, the expected value and a verdict.
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table

from rdcalc.evaluator import evaluate
from rdcalc.models import DemoCase, DemoResult, EvaluationError

# Expected answers are rounded to about six significant digits.
DEMO_CASES: list[DemoCase] = [
    DemoCase("-((6+4))* -(2+2) - -1", 41.0),
    DemoCase("6/5-4-45+3.08", -44.72),
    DemoCase("0.34+ -34/45-2", -2.41556),
    DemoCase("(0.03)*73-2", 0.19),
    DemoCase("(20-23 + -5 * (12 / (34 + 3) - 3))", 10.3784),
    DemoCase("-25 + 4 * -(32 - 45 / 5 - -6)", -141.0),
    DemoCase("0.0003101 - 34 * (4 + 5) / 23", -13.3040),
    DemoCase("1 + ((1 + 1) + 3) + 4 * 5 / 6 - 7", 2.33333),
    DemoCase("9 / 8/7 /6/5/4  /  3 /  2/1", 0.00022321),
    DemoCase("-( -(-( -(2+3*4)+2 )-1)+ 0)", 11.0),
]

_VERDICT_COLORS = {"pass": "green", "fail": "red", "error": "yellow"}


def run_demo(
    cases: Optional[Sequence[DemoCase]] = None,
    tolerance: float = 1e-4,
) -> list[DemoResult]:
    """Evaluate every case, capturing errors instead of stopping at the first.

    Args:
        cases: Cases to run. Defaults to DEMO_CASES.
        tolerance: Relative tolerance for comparing against the expected value.
    """
    results = []
    for case in DEMO_CASES if cases is None else cases:
        try:
            value = evaluate(case.expression)
        except EvaluationError as e:
            results.append(DemoResult(case=case, error=e, tolerance=tolerance))
            continue
        results.append(DemoResult(case=case, value=value, tolerance=tolerance))
    return results


def render_demo(results: Sequence[DemoResult], console: Console) -> None:
    """Render a Rich table of demo results."""
    table = Table(title="rdcalc demo", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Expression", style="cyan", min_width=20)
    table.add_column("Result", justify="right")
    table.add_column("Expected", justify="right")
    table.add_column("Verdict", justify="center")

    for i, r in enumerate(results):
        if r.error is not None:
            shown = f"[yellow]{r.error.kind.value}[/yellow]"
        else:
            shown = f"{r.value:g}"
        color = _VERDICT_COLORS.get(r.verdict, "white")
        table.add_row(
            str(i),
            r.case.expression,
            shown,
            f"{r.case.expected:g}",
            f"[{color}]{r.verdict}[/{color}]",
        )

    passed = sum(1 for r in results if r.verdict == "pass")
    console.print()
    console.print(table)
    console.print(f"  {passed}/{len(results)} passed")
    console.print()
