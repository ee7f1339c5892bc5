"""CLI command implementations.

Contents:
    * Info commands from :mod:`.info`
    * Benchmark command from :mod:`.bench_cmd`
    * Config command from :mod:`.config`
    * Logging commands from :mod:`.logging`
"""

from __future__ import annotations

from .bench_cmd import cli_bench
from .config import cli_config
from .info import cli_fail, cli_hello, cli_info
from .logging import cli_logdemo

__all__ = [
    "cli_bench",
    "cli_config",
    "cli_fail",
    "cli_hello",
    "cli_info",
    "cli_logdemo",
]
