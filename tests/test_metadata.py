"""Package metadata and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

from hello_world import __init__conf__

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"
PACKAGE_DIR = PROJECT_ROOT / "src" / "hello_world"


def _load_pyproject() -> dict[str, Any]:
    return rtoml.load(PYPROJECT_PATH)


def _wheel_table() -> dict[str, Any]:
    tool = cast(dict[str, Any], _load_pyproject().get("tool", {}))
    return cast(dict[str, Any], tool["hatch"]["build"]["targets"]["wheel"])


@pytest.mark.os_agnostic
def test_print_info_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    from hello_world import print_info

    print_info()

    captured = capsys.readouterr().out
    assert "Info for hello_world:" in captured
    assert "version" in captured


@pytest.mark.os_agnostic
def test_metadata_constants_are_set() -> None:
    assert __init__conf__.name == "hello_world"
    assert __init__conf__.shell_command == "hello-world"


@pytest.mark.os_agnostic
def test_version_matches_pyproject() -> None:
    assert __init__conf__.version == _load_pyproject()["project"]["version"]


@pytest.mark.os_agnostic
def test_console_script_points_at_entry() -> None:
    scripts = _load_pyproject()["project"]["scripts"]

    assert scripts[__init__conf__.shell_command] == "hello_world.entry:main"


@pytest.mark.os_agnostic
def test_py_typed_marker_exists_and_ships_in_wheel() -> None:
    assert (PACKAGE_DIR / "py.typed").is_file()
    assert any("py.typed" in entry for entry in cast(list[str], _wheel_table().get("include", [])))


@pytest.mark.os_agnostic
def test_default_config_ships_in_wheel() -> None:
    assert any("defaultconfig.toml" in entry for entry in cast(list[str], _wheel_table().get("include", [])))
