"""Parse the ``[benchmark]`` configuration section into validated settings."""

from __future__ import annotations

from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, field_validator

from hello_world.application.benchmarks import DEFAULT_ITERATIONS, DEFAULT_STRING_SIZES, BenchmarkSettings
from hello_world.domain.errors import ConfigurationError


class BenchmarkConfigModel(BaseModel):
    """Pydantic model for ``[benchmark]`` section validation.

    Example:
        >>> BenchmarkConfigModel().iterations
        100000
        >>> BenchmarkConfigModel(iterations=10, string_sizes=[1]).string_sizes
        [1]
    """

    iterations: PositiveInt = DEFAULT_ITERATIONS
    string_sizes: list[PositiveInt] = Field(default_factory=lambda: list(DEFAULT_STRING_SIZES), min_length=1)

    model_config = ConfigDict(extra="forbid")

    @field_validator("iterations", "string_sizes", mode="before")
    @classmethod
    def _reject_booleans(cls, v: Any) -> Any:
        """Refuse ``true``/``false`` where a count is expected.

        Lax integer parsing would read ``true`` as 1. Numeric strings from
        environment variables still pass through to normal coercion.
        """
        items = v if isinstance(v, list) else [v]
        if any(isinstance(item, bool) for item in items):
            raise ValueError("expected an integer, got a boolean")
        return v


def load_benchmark_settings(config: Config) -> BenchmarkSettings:
    """Build :class:`BenchmarkSettings` from the ``[benchmark]`` section.

    A missing section yields the defaults.

    Args:
        config: Loaded layered configuration.

    Returns:
        Validated benchmark settings.

    Raises:
        ConfigurationError: If the section holds unknown keys or invalid values.

    Example:
        >>> load_benchmark_settings(Config({"benchmark": {"iterations": 7}}, {})).iterations
        7
    """
    raw: object = config.get("benchmark", default={})
    try:
        parsed = BenchmarkConfigModel.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [benchmark] configuration: {exc}") from exc
    return BenchmarkSettings(iterations=parsed.iterations, string_sizes=tuple(parsed.string_sizes))


__all__ = [
    "BenchmarkConfigModel",
    "load_benchmark_settings",
]
