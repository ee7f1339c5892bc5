"""Micro-benchmark harness for the greeting provider.

Times a zero-argument body in a tight loop between a fixture's setup and
teardown. Cases are plain data so the CLI, tests, and any other caller
share one suite definition.

Contents:
    * :class:`BenchmarkSettings` - Validated iteration count and string sizes.
    * :class:`BenchmarkCase` - Named fixture yielding the body to time.
    * :class:`BenchmarkResult` - Timing outcome for a single case.
    * :func:`run_benchmark` / :func:`run_suite` - Execute cases.
    * :func:`build_default_suite` - Greeting, string construction, and substring search cases.

System Role:
    Application layer. Depends on the domain greeting only; configuration
    parsing and rendering live in adapters.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator, Sequence
from contextlib import AbstractContextManager, contextmanager, nullcontext
from dataclasses import dataclass
from functools import partial

from ..domain.behaviors import get_greeting

Body = Callable[[], object]
Fixture = Callable[[], AbstractContextManager[Body]]
Clock = Callable[[], float]

DEFAULT_ITERATIONS = 100_000
DEFAULT_STRING_SIZES: tuple[int, ...] = (8, 64, 512, 4096)
SUBSTRING_NEEDLE = "World"


@dataclass(frozen=True, slots=True)
class BenchmarkSettings:
    """Knobs for a benchmark run.

    Example:
        >>> BenchmarkSettings().iterations
        100000
        >>> BenchmarkSettings().string_sizes
        (8, 64, 512, 4096)
    """

    iterations: int = DEFAULT_ITERATIONS
    string_sizes: tuple[int, ...] = DEFAULT_STRING_SIZES


@dataclass(frozen=True, slots=True)
class BenchmarkCase:
    """A named benchmark with scoped setup and teardown.

    ``fixture`` returns a context manager: entering it performs setup and
    yields the body to time, leaving it performs teardown.
    """

    name: str
    fixture: Fixture


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    """Timing outcome for one benchmark case.

    Example:
        >>> result = BenchmarkResult(name="noop", iterations=4, total_seconds=2e-6)
        >>> result.mean_ns
        500.0
        >>> BenchmarkResult(name="noop", iterations=1, total_seconds=0.0).ops_per_second
        0.0
    """

    name: str
    iterations: int
    total_seconds: float

    @property
    def mean_ns(self) -> float:
        """Mean wall time per iteration in nanoseconds."""
        return self.total_seconds / self.iterations * 1e9

    @property
    def ops_per_second(self) -> float:
        """Iterations per second, ``0.0`` when no time was measured."""
        if self.total_seconds <= 0:
            return 0.0
        return self.iterations / self.total_seconds


def plain_case(name: str, body: Body) -> BenchmarkCase:
    """Wrap a body that needs no setup or teardown into a case."""
    return BenchmarkCase(name=name, fixture=partial(nullcontext, body))


def run_benchmark(case: BenchmarkCase, iterations: int, *, clock: Clock = time.perf_counter) -> BenchmarkResult:
    """Time ``iterations`` calls of the case body inside its fixture.

    Setup and teardown are excluded from the measured interval.

    Args:
        case: Benchmark case to execute.
        iterations: Number of body invocations, at least 1.
        clock: Monotonic clock returning seconds.

    Returns:
        Measured result for the case.

    Raises:
        ValueError: If ``iterations`` is less than 1.

    Example:
        >>> result = run_benchmark(plain_case("noop", lambda: None), 3)
        >>> (result.name, result.iterations)
        ('noop', 3)
    """
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")

    with case.fixture() as body:
        started = clock()
        for _ in range(iterations):
            body()
        elapsed = clock() - started
    return BenchmarkResult(name=case.name, iterations=iterations, total_seconds=elapsed)


def run_suite(
    cases: Sequence[BenchmarkCase], iterations: int, *, clock: Clock = time.perf_counter
) -> list[BenchmarkResult]:
    """Run every case in order with the same iteration count."""
    return [run_benchmark(case, iterations, clock=clock) for case in cases]


def _build_string(size: int) -> str:
    return "x" * size


@contextmanager
def _greeting_search_fixture() -> Iterator[Body]:
    text = get_greeting()
    yield partial(text.find, SUBSTRING_NEEDLE)


def build_default_suite(string_sizes: Sequence[int] = DEFAULT_STRING_SIZES) -> list[BenchmarkCase]:
    """Return the standard benchmark cases.

    Args:
        string_sizes: Lengths used for the string construction cases.

    Returns:
        ``get_greeting``, one ``string_construction/<size>`` per size, and
        ``find_substring``.

    Example:
        >>> [case.name for case in build_default_suite([8, 64])]
        ['get_greeting', 'string_construction/8', 'string_construction/64', 'find_substring']
    """
    cases = [plain_case("get_greeting", get_greeting)]
    cases.extend(plain_case(f"string_construction/{size}", partial(_build_string, size)) for size in string_sizes)
    cases.append(BenchmarkCase(name="find_substring", fixture=_greeting_search_fixture))
    return cases


__all__ = [
    "DEFAULT_ITERATIONS",
    "DEFAULT_STRING_SIZES",
    "BenchmarkCase",
    "BenchmarkResult",
    "BenchmarkSettings",
    "build_default_suite",
    "plain_case",
    "run_benchmark",
    "run_suite",
]
