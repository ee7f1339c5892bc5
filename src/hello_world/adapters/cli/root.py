"""Root CLI command group and global option handling.

Contents:
    * :func:`cli` - Root command group with ``--traceback``, ``--profile``, and ``--set``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from hello_world import __init__conf__
from hello_world.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, enable_tracebacks

if TYPE_CHECKING:
    from hello_world.composition import AppServices


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides, reporting malformed ones as usage errors."""
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


def _load_config(services: AppServices, profile: str | None) -> Config:
    """Load configuration, reporting an invalid ``--profile`` as a bad parameter."""
    try:
        return services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'ci', 'benchmarks')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration once, start logging, and hand state to subcommands."""
    # ctx.obj is the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = _apply_cli_overrides(_load_config(services, profile), set_overrides)
    services.init_logging(config)
    ctx.obj = CLIContext(
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    enable_tracebacks(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Deferred: command modules import from package ancestors of this module.
def _register_commands() -> None:
    from .commands import (
        cli_bench,
        cli_config,
        cli_fail,
        cli_hello,
        cli_info,
        cli_logdemo,
    )

    for cmd in (cli_bench, cli_config, cli_fail, cli_hello, cli_info, cli_logdemo):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
