"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

CANONICAL_GREETING = "Hello, World!"


def get_greeting() -> str:
    r"""Return the canonical greeting string.

    Takes no input and reads no state, so every call from every thread
    yields the same literal.

    Returns:
        The canonical greeting string.

    Example:
        >>> get_greeting()
        'Hello, World!'
        >>> len(get_greeting())
        13
    """
    return CANONICAL_GREETING


__all__ = [
    "CANONICAL_GREETING",
    "get_greeting",
]
