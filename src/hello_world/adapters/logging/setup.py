"""Centralized logging initialization for all entry points.

Every entry point (console script, ``python -m``, tests driving the CLI)
routes through :func:`init_logging`, so the lib_log_rich runtime is
configured once from the ``[lib_log_rich]`` configuration section.

Contents:
    * :class:`LoggingConfigModel` – boundary model for the ``[lib_log_rich]`` section.
    * :func:`init_logging` – idempotent runtime initialization.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from hello_world import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` section.

    Extra keys pass through untouched to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="bench", console_level="DEBUG").model_dump(exclude_none=True)
        {'service': 'bench', 'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a ``RuntimeConfig``.

    ``service`` falls back to the package name when not configured.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime once per process.

    Enables ``.env`` loading so ``LOG_*`` variables apply, builds the runtime
    configuration, and bridges stdlib :mod:`logging` so ``logging.getLogger``
    calls in this package land in lib_log_rich. Later calls return immediately.

    Args:
        config: Loaded layered configuration.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
