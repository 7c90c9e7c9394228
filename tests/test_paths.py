# ==============================================
# Tests for path helpers
# ==============================================

import pytest

from field_mappings.paths import compile_pattern, get_nested_value, path_signature, split_path

RECORD = {
    "client": {"household_members": [{"first_name": "John"}, {"first_name": "Amy"}]},
    "home": {"address_state": "FL", "features": {"pool": False}},
}


@pytest.mark.parametrize("path, expected", [
    ("home.address_state", "FL"),
    ("client.household_members[1].first_name", "Amy"),
    ("client.household_members.0.first_name", "John"),
    ("home.features.pool", False),
    ("client.household_members[5].first_name", None),
    ("home.address_state.code", None),
    ("auto.vehicles", None),
    ("", None),
])
def test_get_nested_value(path, expected):
    assert get_nested_value(RECORD, path) == expected


def test_get_nested_value_on_non_container():
    assert get_nested_value("text", "a.b") is None
    assert get_nested_value(None, "a") is None


def test_split_path():
    assert split_path("a.b[2].c") == ["a", "b", 2, "c"]


def test_signature_normalizes_indices():
    assert path_signature("a[3].b[*]") == "a[*].b[*]"


def test_pattern_matches_whole_key_only():
    pattern = compile_pattern("auto.vehicles[*].vin")
    assert pattern.matches("auto.vehicles[12].vin")
    assert not pattern.matches("auto.vehicles[x].vin")
    assert not pattern.matches("auto.vehicles[1].vin_check")
    assert not pattern.matches(None)
    assert pattern.index_of("auto.vehicles[12].vin") == 12
