"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when configuration values are malformed or out of range, for
    example a non-positive ``benchmark.iterations``. Caught at the CLI
    boundary and mapped to ``ExitCode.CONFIG_ERROR``.

    Example:
        >>> from hello_world.domain.errors import ConfigurationError
        >>> err = ConfigurationError("benchmark.iterations must be positive")
        >>> str(err)
        'benchmark.iterations must be positive'
    """


__all__ = ["ConfigurationError"]
