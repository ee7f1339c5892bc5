"""Benchmark harness stories: fixtures, timing, and the default suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from itertools import count

import pytest

from hello_world.application.benchmarks import (
    DEFAULT_STRING_SIZES,
    BenchmarkCase,
    BenchmarkResult,
    BenchmarkSettings,
    build_default_suite,
    plain_case,
    run_benchmark,
    run_suite,
)


def _ticking_clock(step: float = 0.5) -> Callable[[], float]:
    """Clock advancing by ``step`` seconds on every read."""
    ticks = count()
    return lambda: next(ticks) * step


# ======================== run_benchmark ========================


@pytest.mark.os_agnostic
def test_run_benchmark_calls_body_once_per_iteration() -> None:
    calls: list[int] = []

    result = run_benchmark(plain_case("counter", lambda: calls.append(1)), 25)

    assert len(calls) == 25
    assert result.name == "counter"
    assert result.iterations == 25


@pytest.mark.os_agnostic
def test_run_benchmark_measures_interval_with_injected_clock() -> None:
    result = run_benchmark(plain_case("noop", lambda: None), 4, clock=_ticking_clock(0.5))

    assert result.total_seconds == 0.5


@pytest.mark.os_agnostic
def test_run_benchmark_runs_setup_before_and_teardown_after_body() -> None:
    events: list[str] = []

    @contextmanager
    def fixture() -> Iterator[Callable[[], object]]:
        events.append("setup")
        yield lambda: events.append("body")
        events.append("teardown")

    run_benchmark(BenchmarkCase(name="ordered", fixture=fixture), 2)

    assert events == ["setup", "body", "body", "teardown"]


@pytest.mark.os_agnostic
def test_run_benchmark_excludes_fixture_work_from_timing() -> None:
    clock = _ticking_clock(1.0)

    @contextmanager
    def fixture() -> Iterator[Callable[[], object]]:
        clock()
        yield lambda: None
        clock()

    result = run_benchmark(BenchmarkCase(name="scoped", fixture=fixture), 3, clock=clock)

    assert result.total_seconds == 1.0


@pytest.mark.os_agnostic
def test_run_benchmark_tears_down_when_body_raises() -> None:
    events: list[str] = []

    @contextmanager
    def fixture() -> Iterator[Callable[[], object]]:
        try:
            yield _boom
        finally:
            events.append("teardown")

    with pytest.raises(ZeroDivisionError):
        run_benchmark(BenchmarkCase(name="broken", fixture=fixture), 1)

    assert events == ["teardown"]


def _boom() -> object:
    return 1 / 0


@pytest.mark.os_agnostic
@pytest.mark.parametrize("iterations", [0, -1])
def test_run_benchmark_rejects_non_positive_iterations(iterations: int) -> None:
    with pytest.raises(ValueError, match="at least 1"):
        run_benchmark(plain_case("noop", lambda: None), iterations)


@pytest.mark.os_agnostic
def test_run_suite_preserves_case_order() -> None:
    cases = [plain_case(name, lambda: None) for name in ("first", "second", "third")]

    results = run_suite(cases, 2)

    assert [result.name for result in results] == ["first", "second", "third"]
    assert all(result.iterations == 2 for result in results)


# ======================== BenchmarkResult ========================


@pytest.mark.os_agnostic
def test_result_derives_mean_and_throughput() -> None:
    result = BenchmarkResult(name="x", iterations=1_000, total_seconds=0.002)

    assert result.mean_ns == pytest.approx(2_000.0)
    assert result.ops_per_second == pytest.approx(500_000.0)


@pytest.mark.os_agnostic
def test_result_throughput_is_zero_without_measured_time() -> None:
    assert BenchmarkResult(name="x", iterations=10, total_seconds=0.0).ops_per_second == 0.0


# ======================== default suite ========================


@pytest.mark.os_agnostic
def test_default_suite_names_follow_configured_sizes() -> None:
    names = [case.name for case in build_default_suite()]

    assert names == [
        "get_greeting",
        *(f"string_construction/{size}" for size in DEFAULT_STRING_SIZES),
        "find_substring",
    ]


@pytest.mark.os_agnostic
def test_default_suite_bodies_produce_expected_values() -> None:
    suite = {case.name: case for case in build_default_suite([3])}

    with suite["get_greeting"].fixture() as body:
        assert body() == "Hello, World!"
    with suite["string_construction/3"].fixture() as body:
        assert body() == "xxx"
    with suite["find_substring"].fixture() as body:
        assert body() == 7


@pytest.mark.os_agnostic
def test_default_suite_runs_end_to_end() -> None:
    results = run_suite(build_default_suite([8]), 50)

    assert len(results) == 3
    assert all(result.total_seconds >= 0 for result in results)


@pytest.mark.os_agnostic
def test_settings_defaults_cover_four_string_sizes() -> None:
    settings = BenchmarkSettings()

    assert settings.iterations == 100_000
    assert settings.string_sizes == (8, 64, 512, 4096)


@pytest.mark.os_agnostic
def test_settings_string_sizes_cannot_be_changed_in_place() -> None:
    settings = BenchmarkSettings(string_sizes=(16, 32))

    assert not hasattr(settings.string_sizes, "append")
    assert build_default_suite(settings.string_sizes)[1].name == "string_construction/16"
