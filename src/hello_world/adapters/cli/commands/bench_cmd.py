"""Benchmark CLI command.

Contents:
    * :func:`cli_bench` - Run the default benchmark suite and report timings.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from hello_world.adapters.benchmark.report import print_results, results_as_json
from hello_world.application.benchmarks import build_default_suite, run_suite
from hello_world.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context

logger = logging.getLogger(__name__)


@click.command("bench", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--iterations",
    type=click.IntRange(min=1),
    default=None,
    help="Body invocations per case (default: benchmark.iterations from config)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (table or JSON)",
)
@click.pass_context
def cli_bench(ctx: click.Context, iterations: int | None, output_format: str) -> None:
    """Time the greeting and reference workloads.

    Runs get_greeting, string construction for each configured size, and a
    substring search over the greeting prepared in fixture setup. Invalid
    [benchmark] settings exit with code 78.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-bench", extra={"command": "bench", "format": fmt.value}):
        settings = cli_ctx.services.load_benchmark_settings(cli_ctx.config)

        effective_iterations = iterations if iterations is not None else settings.iterations
        cases = build_default_suite(settings.string_sizes)
        logger.info("Running benchmarks", extra={"cases": len(cases), "iterations": effective_iterations})
        results = run_suite(cases, effective_iterations)

        if lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.flush()
        if fmt is OutputFormat.JSON:
            click.echo(results_as_json(results))
        else:
            print_results(results)


__all__ = ["cli_bench"]
