"""Render benchmark results as a Rich table or JSON document."""

from __future__ import annotations

from collections.abc import Sequence

import orjson
from rich.console import Console
from rich.table import Table

from hello_world.application.benchmarks import BenchmarkResult


def build_results_table(results: Sequence[BenchmarkResult]) -> Table:
    """Return a Rich table with one row per result."""
    table = Table(title="Benchmark results")
    table.add_column("Benchmark", style="cyan")
    table.add_column("Iterations", justify="right")
    table.add_column("Time/op (ns)", justify="right")
    table.add_column("Ops/s", justify="right")
    for result in results:
        table.add_row(
            result.name,
            f"{result.iterations:,}",
            f"{result.mean_ns:,.1f}",
            f"{result.ops_per_second:,.0f}",
        )
    return table


def results_as_json(results: Sequence[BenchmarkResult]) -> str:
    """Serialise results to an indented JSON array.

    Example:
        >>> print(results_as_json([BenchmarkResult(name="get_greeting", iterations=2, total_seconds=1.0)]))
        [
          {
            "name": "get_greeting",
            "iterations": 2,
            "total_seconds": 1.0,
            "mean_ns": 500000000.0,
            "ops_per_second": 2.0
          }
        ]
    """
    payload = [
        {
            "name": result.name,
            "iterations": result.iterations,
            "total_seconds": result.total_seconds,
            "mean_ns": result.mean_ns,
            "ops_per_second": result.ops_per_second,
        }
        for result in results
    ]
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8")


def print_results(results: Sequence[BenchmarkResult], *, console: Console | None = None) -> None:
    """Print the results table to ``console`` (stdout when None)."""
    (console or Console()).print(build_results_table(results))


__all__ = [
    "build_results_table",
    "print_results",
    "results_as_json",
]
