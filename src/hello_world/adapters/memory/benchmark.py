"""In-memory benchmark settings adapter for testing."""

from __future__ import annotations

from lib_layered_config import Config

from ...application.benchmarks import BenchmarkSettings

#: Small enough for CLI tests to run the whole suite instantly.
IN_MEMORY_ITERATIONS = 10


def load_benchmark_settings_in_memory(config: Config) -> BenchmarkSettings:
    """Ignore ``config`` and return a tiny, fixed benchmark workload."""
    return BenchmarkSettings(iterations=IN_MEMORY_ITERATIONS, string_sizes=(8,))


__all__ = [
    "IN_MEMORY_ITERATIONS",
    "load_benchmark_settings_in_memory",
]
