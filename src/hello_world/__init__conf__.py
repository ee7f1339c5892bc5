"""Static package metadata surfaced to CLI commands and documentation.

Kept as plain constants so the CLI can show version information without
querying ``importlib.metadata`` at runtime. ``version`` mirrors
``[project].version`` in ``pyproject.toml``.

Contents:
    * Metadata constants (``name``, ``title``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path discovery.
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "hello_world"
title: Final[str] = "Minimal greeting library with benchmark harness"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/hello-world-py/hello_world"
author: Final[str] = "hello_world maintainers"
author_email: Final[str] = "maintainers@hello-world.invalid"
shell_command: Final[str] = "hello-world"

#: Vendor, application, and slug identifiers for configuration file discovery.
LAYEREDCONF_VENDOR: Final[str] = "hello-world"
LAYEREDCONF_APP: Final[str] = "hello_world"
LAYEREDCONF_SLUG: Final[str] = "hello-world"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hello_world:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
