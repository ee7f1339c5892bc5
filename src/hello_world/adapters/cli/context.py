"""Per-invocation CLI state and the ``--traceback`` switch.

The root group stores one :class:`CLIContext` in ``ctx.obj``; subcommands
read it back with :func:`get_cli_context`. Traceback verbosity lives in
``lib_cli_exit_tools.config`` and is scoped to one ``main`` call by
:func:`traceback_scope`.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from hello_world.composition import AppServices


@dataclass(slots=True)
class CLIContext:
    """What the root group hands to every subcommand.

    ``set_overrides`` keeps the raw ``--set`` strings so ``config --profile``
    can reload and reapply them.
    """

    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: If the command runs without the root group.
    """
    cli_ctx = ctx.find_object(CLIContext)
    if cli_ctx is None:
        raise RuntimeError("No CLIContext on the click context; invoke commands through the root group.")
    return cli_ctx


def tracebacks_enabled() -> bool:
    return bool(getattr(lib_cli_exit_tools.config, "traceback", False))


def enable_tracebacks(enabled: bool) -> None:
    """Switch full, colored tracebacks on or off for error reporting."""
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


@contextmanager
def traceback_scope(*, restore: bool = True) -> Iterator[None]:
    """Undo traceback changes made inside the block when ``restore`` is set.

    Example:
        >>> before = tracebacks_enabled()
        >>> with traceback_scope():
        ...     enable_tracebacks(not before)
        >>> tracebacks_enabled() == before
        True
    """
    saved = (
        tracebacks_enabled(),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )
    try:
        yield
    finally:
        if restore:
            lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = saved


__all__ = [
    "CLIContext",
    "enable_tracebacks",
    "get_cli_context",
    "traceback_scope",
    "tracebacks_enabled",
]
