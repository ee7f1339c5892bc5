"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Core domain behavior (greeting)
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    get_greeting,
)
from .enums import OutputFormat
from .errors import ConfigurationError

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "get_greeting",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
]
