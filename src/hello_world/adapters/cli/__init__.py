"""CLI package providing the command-line interface.

Public facade for the CLI subsystem: consumers import from here and stay
insulated from internal module boundaries.

Contents:
    * CLI state and traceback scoping from :mod:`.context`
    * Root command group from :mod:`.root`
    * Entry point from :mod:`.main`
    * All command functions from :mod:`.commands`
"""

from __future__ import annotations

from .commands import (
    cli_bench,
    cli_config,
    cli_fail,
    cli_hello,
    cli_info,
    cli_logdemo,
)
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import CLIContext, enable_tracebacks, get_cli_context, traceback_scope, tracebacks_enabled
from .main import main
from .root import cli

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    # CLI state and traceback scoping
    "CLIContext",
    "enable_tracebacks",
    "get_cli_context",
    "traceback_scope",
    "tracebacks_enabled",
    # Root command
    "cli",
    # Entry point
    "main",
    # Commands
    "cli_bench",
    "cli_config",
    "cli_fail",
    "cli_hello",
    "cli_info",
    "cli_logdemo",
]
