"""Property-based tests for ``--set`` parsing and the greeting contract."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from hello_world import get_greeting
from hello_world.adapters.config.overrides import coerce_value, parse_override

IDENTIFIER = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]*", fullmatch=True)
ALLOWED_COERCED_TYPES = (str, int, float, bool, type(None), list, dict)


@pytest.mark.os_agnostic
@given(raw=st.text())
@settings(max_examples=200)
def test_coerce_value_never_raises(raw: str) -> None:
    assert isinstance(coerce_value(raw), ALLOWED_COERCED_TYPES)


@pytest.mark.os_agnostic
@given(value=st.integers(min_value=-(2**53), max_value=2**53))
def test_coerce_value_round_trips_integers(value: int) -> None:
    assert coerce_value(str(value)) == value


@pytest.mark.os_agnostic
@given(section=IDENTIFIER, keys=st.lists(IDENTIFIER, min_size=1, max_size=4), value=st.text(max_size=50))
@settings(max_examples=200)
def test_well_formed_overrides_split_on_first_dot_and_equals(section: str, keys: list[str], value: str) -> None:
    result = parse_override(f"{section}.{'.'.join(keys)}={value}")

    assert result.section == section
    assert result.key_path == tuple(keys)
    assert result.value == coerce_value(value)


@pytest.mark.os_agnostic
@given(raw=st.text().filter(lambda s: "=" not in s))
@settings(max_examples=200)
def test_strings_without_equals_are_rejected(raw: str) -> None:
    with pytest.raises(ValueError, match="must contain '='"):
        parse_override(raw)


@pytest.mark.os_agnostic
@given(calls=st.integers(min_value=1, max_value=200))
def test_greeting_is_stable_for_any_number_of_calls(calls: int) -> None:
    assert {get_greeting() for _ in range(calls)} == {"Hello, World!"}
