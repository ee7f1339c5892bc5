"""Display configuration through lib_layered_config's Rich renderer.

Pending log output is flushed first so log lines and the configuration
dump do not interleave on the terminal.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from hello_world.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render ``config`` (or one ``section`` of it) to stdout.

    Args:
        config: Loaded layered configuration.
        output_format: ``HUMAN`` for TOML-like output, ``JSON`` for JSON.
        section: Optional top-level section to restrict the output to.
        console: Optional Rich console, mainly for tests.
        profile: Optional profile name shown in provenance comments.

    Raises:
        ValueError: If ``section`` does not exist in ``config``.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    _lib_display(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
