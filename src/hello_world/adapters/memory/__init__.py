"""In-memory adapter implementations for testing.

Lightweight implementations of every application port that operate entirely
in memory -- no filesystem, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.benchmark` - Fixed benchmark settings
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .benchmark import IN_MEMORY_ITERATIONS, load_benchmark_settings_in_memory
from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from hello_world.application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadBenchmarkSettings,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_benchmark_settings: LoadBenchmarkSettings = load_benchmark_settings_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "IN_MEMORY_ITERATIONS",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_benchmark_settings_in_memory",
]
