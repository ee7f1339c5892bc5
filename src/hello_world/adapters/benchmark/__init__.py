"""Benchmark adapter - settings parsing and result rendering.

Contents:
    * :mod:`.settings` - ``[benchmark]`` section validation with pydantic
    * :mod:`.report` - Rich table and JSON rendering of results
"""

from __future__ import annotations

from .report import build_results_table, print_results, results_as_json
from .settings import BenchmarkConfigModel, load_benchmark_settings

__all__ = [
    "BenchmarkConfigModel",
    "build_results_table",
    "load_benchmark_settings",
    "print_results",
    "results_as_json",
]
