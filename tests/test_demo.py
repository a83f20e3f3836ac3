"""Tests for the demonstration suite and its Rich table."""

import io

from rich.console import Console

from rdcalc.demo import DEMO_CASES, render_demo, run_demo
from rdcalc.models import DemoCase, DemoResult, ErrorKind


def test_all_demo_cases_pass():
    results = run_demo()
    assert len(results) == len(DEMO_CASES) == 10
    assert [r.verdict for r in results] == ["pass"] * 10


def test_wrong_expectation_fails():
    [result] = run_demo([DemoCase("1 + 1", 3.0)])
    assert result.value == 2.0
    assert result.verdict == "fail"


def test_error_is_captured():
    [result] = run_demo([DemoCase("1 / 0", 0.0)])
    assert result.value is None
    assert result.error.kind is ErrorKind.DIVISION_BY_ZERO
    assert result.verdict == "error"


def test_tolerance_is_relative():
    assert DemoResult(DemoCase("", 1000.0), value=1000.05, tolerance=1e-4).verdict == "pass"
    assert DemoResult(DemoCase("", 1000.0), value=1000.5, tolerance=1e-4).verdict == "fail"


def test_render_demo():
    buf = io.StringIO()
    console = Console(file=buf, width=120, color_system=None)
    results = run_demo([DemoCase("2 * 3", 6.0), DemoCase("(1", 1.0)])
    render_demo(results, console)
    out = buf.getvalue()
    assert "2 * 3" in out
    assert "unbalanced-parentheses" in out
    assert "1/2 passed" in out
