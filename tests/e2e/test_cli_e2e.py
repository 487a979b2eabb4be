"""
End-to-end tests for the naturals CLI.

These run the real entry point in-process, without mocking, and check
the full output a user sees.
"""

import sys
from dataclasses import dataclass
from io import StringIO

from naturals.catalog import Product
from naturals.cli.main import main as naturals_main


@dataclass
class CLIResult:
    """Result of running the CLI."""

    returncode: int
    stdout: str
    stderr: str


def run_naturals(*args: str) -> CLIResult:
    original_stdout = sys.stdout
    original_stderr = sys.stderr

    stdout_capture = StringIO()
    stderr_capture = StringIO()

    try:
        sys.stdout = stdout_capture
        sys.stderr = stderr_capture

        try:
            returncode = naturals_main(list(args))
        except SystemExit as e:
            returncode = e.code if e.code is not None else 0

    finally:
        sys.stdout = original_stdout
        sys.stderr = original_stderr

    return CLIResult(
        returncode=returncode,
        stdout=stdout_capture.getvalue(),
        stderr=stderr_capture.getvalue(),
    )


def test_demo_output_matches_product_lines():
    coconut = Product.new("Coconut and Vanilla Body Scrub", ["Coconut Oil", "Vanilla Extract"])
    lavender = Product.new("Lavender and Rosemary Diffuser Oil", ["Lavender Oil", "Rosemary Oil"])

    result = run_naturals()

    assert result.returncode == 0
    assert result.stderr == ""
    assert result.stdout == "\n".join(
        [
            coconut.format(),
            lavender.format(),
            "Sorting products by ingredient count...",
            coconut.format(),
            lavender.format(),
            "",
        ]
    )


def test_verbose_output():
    result = run_naturals("--verbose", "--sort", "name")

    assert result.returncode == 0
    assert result.stdout.count("2 products") == 2
    assert "Sorting products by name..." in result.stdout


def test_bad_format_is_usage_error():
    result = run_naturals("--format", "yaml")

    assert result.returncode == 2
    assert "invalid choice" in result.stderr
