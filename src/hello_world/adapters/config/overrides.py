"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""

OverrideTree = dict[str, dict[str, object]]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment split into section, key path, and value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    Only the first ``=`` separates path from value, so values may contain
    further ``=`` characters.

    Raises:
        ValueError: If ``=`` is missing, the path has no dot, or any path
            component is empty.

    Examples:
        >>> override = parse_override("benchmark.iterations=500")
        >>> override.section, override.key_path, override.value
        ('benchmark', ('iterations',), 500)

        >>> parse_override("benchmark.string_sizes=[1,2]").value
        [1, 2]
    """
    path_part, sep, value_str = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    section, dot, key_str = path_part.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")

    key_path = tuple(key_str.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Decode ``raw`` as JSON, keeping the plain string when that fails.

    Examples:
        >>> coerce_value("false")
        False
        >>> coerce_value("2500")
        2500
        >>> coerce_value("null")
        >>> coerce_value("WARNING")
        'WARNING'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: OverrideTree, override: ConfigOverride) -> None:
    """Insert ``override`` into ``target``, creating intermediate tables.

    Raises:
        TypeError: If an intermediate key already holds a non-table value.

    Example:
        >>> tree: OverrideTree = {}
        >>> _nest_override(tree, ConfigOverride(section="lib_log_rich", key_path=("payload", "max"), value=9))
        >>> tree
        {'lib_log_rich': {'payload': {'max': 9}}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for part in parents:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` override deep-merged on top.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"benchmark": {"iterations": 10}}, {})
        >>> apply_overrides(cfg, ("benchmark.iterations=20",))["benchmark"]["iterations"]
        20
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    tree: OverrideTree = {}
    for raw in raw_overrides:
        _nest_override(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
