"""Type-safe domain enums for command output formats."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for the ``config`` and ``bench`` commands.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output (TOML-like config, table for benchmarks).
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = ["OutputFormat"]
