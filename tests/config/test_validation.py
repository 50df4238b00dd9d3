"""Tests for the validation rules."""

import datetime

import pytest

from cxs_settings.config.keys import DEFAULTS
from cxs_settings.config.validation import (
    NAME_KEYS,
    UnknownKeyPolicy,
    as_text,
    collect_errors,
    is_valid_name,
)


class TestIsValidName:
    """Test cases for the alphanumeric-or-underscore rule."""

    @pytest.mark.parametrize("value", ["pool1", "POOL_1", "_", "", "walleté", "١٢"])
    def test_valid(self, value):
        assert is_valid_name(value)

    @pytest.mark.parametrize("value", ["*98*", "a b", "a-b", "a.b", "a/b", "\t"])
    def test_invalid(self, value):
        assert not is_valid_name(value)


class TestCollectErrors:
    """Test cases for collect_errors."""

    def test_defaults_are_valid(self):
        assert collect_errors(DEFAULTS) == []

    def test_name_keys(self):
        assert NAME_KEYS == {"pool_name", "config_name", "wallet_name"}

    def test_messages_sorted_by_key(self):
        settings = {"wallet_name": "w!", "config_name": "c!", "pool_name": "p!"}

        assert collect_errors(settings) == [
            "config_name has invalid setting: c!",
            "pool_name has invalid setting: p!",
            "wallet_name has invalid setting: w!",
        ]

    def test_unknown_keys_ignored_by_default(self):
        assert collect_errors({"a": "*", "b": {"x": 1}}) == []

    def test_unknown_keys_rejected(self):
        errors = collect_errors({"b": "b", "a": "a", "pool_name": "ok"}, UnknownKeyPolicy.REJECT)

        assert errors == ["a is not a recognised setting", "b is not a recognised setting"]

    def test_known_unchecked_keys_pass_under_reject(self):
        settings = {"wallet_type": "?", "agent_endpoint": "::"}
        assert collect_errors(settings, UnknownKeyPolicy.REJECT) == []

    @pytest.mark.parametrize("value", [2024, 0, True, False])
    def test_scalar_name_values_checked_as_text(self, value):
        assert collect_errors({"pool_name": value}) == []

    @pytest.mark.parametrize("value", [None, ["a"], {"a": "b"}, -1, 1.5, datetime.date(2024, 1, 1)])
    def test_name_values_without_valid_text(self, value):
        assert collect_errors({"wallet_name": value}) == [f"wallet_name has invalid setting: {value}"]


class TestAsText:
    """Test cases for rendering setting values as text."""

    @pytest.mark.parametrize("value,expected", [
        ("abc", "abc"),
        (8080, "8080"),
        (0.5, "0.5"),
        (True, "true"),
        (False, "false"),
        (datetime.date(2024, 1, 1), "2024-01-01"),
        (datetime.datetime(2024, 1, 1, 12, 30), "2024-01-01T12:30:00"),
        (datetime.time(7, 15), "07:15:00"),
    ])
    def test_scalars(self, value, expected):
        assert as_text(value) == expected

    @pytest.mark.parametrize("value", [None, ["a"], {"a": "b"}])
    def test_non_scalars(self, value):
        with pytest.raises(TypeError):
            as_text(value)
