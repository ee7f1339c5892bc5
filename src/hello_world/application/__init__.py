"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.benchmarks` - Benchmark harness for the greeting provider
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .benchmarks import (
    BenchmarkCase,
    BenchmarkResult,
    BenchmarkSettings,
    build_default_suite,
    run_benchmark,
    run_suite,
)
from .ports import (
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadBenchmarkSettings,
)

__all__ = [
    "BenchmarkCase",
    "BenchmarkResult",
    "BenchmarkSettings",
    "build_default_suite",
    "run_benchmark",
    "run_suite",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadBenchmarkSettings",
]
