"""Process entry point for ``hello-world`` and ``python -m hello_world``.

Runs the root group with an injected services factory and turns the outcome
into an exit code:

* Click usage errors are shown by Click with their own code (2, or 22 for
  an unknown config section).
* :class:`~hello_world.domain.errors.ConfigurationError` prints one line and
  exits with ``ExitCode.CONFIG_ERROR``.
* Anything else goes through ``lib_cli_exit_tools``: a short summary, or the
  full traceback with ``--traceback``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from hello_world import __init__conf__
from hello_world.domain.errors import ConfigurationError

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import traceback_scope, tracebacks_enabled
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from hello_world.composition import AppServices


def _report_unexpected(exc: BaseException) -> int:
    verbose = tracebacks_enabled()
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        outcome = cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        return ExitCode.CONFIG_ERROR
    except BaseException as exc:  # SystemExit and KeyboardInterrupt as well
        return _report_unexpected(exc)
    return outcome if isinstance(outcome, int) else ExitCode.SUCCESS


def _shutdown_logging() -> None:
    # Worker threads calling main() must not stop logging for the whole process.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: CLI arguments; None reads ``sys.argv``.
        restore_traceback: Put the traceback flags back as they were afterwards.
        services_factory: ``build_production`` for real runs, or a test factory.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from hello_world.composition import build_production
        >>> main(["hello"], services_factory=build_production)  # doctest: +SKIP
        Hello, World!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    try:
        with traceback_scope(restore=restore_traceback):
            return _run_cli(argv, services_factory=services_factory)
    finally:
        _shutdown_logging()


__all__ = ["main"]
