"""Tests for configuration file parsing."""

import pytest

from cxs_settings.config.loader import load_config_file
from cxs_settings.core.exceptions import ConfigurationFileNotFound, ConfigurationParseFailure


class TestLoadConfigFile:
    """Test format dispatch and error mapping."""

    def test_json(self, write_config):
        path = write_config('{ "a" : "a", "b":"b", "pool_name":"*98*" }')
        assert load_config_file(path) == {"a": "a", "b": "b", "pool_name": "*98*"}

    def test_yaml(self, write_config):
        path = write_config("pool_name: p\nport: 8080\n", name="settings.yml")
        assert load_config_file(path) == {"pool_name": "p", "port": 8080}

    def test_toml(self, write_config):
        path = write_config('pool_name = "p"\n[wallet]\nkind = "x"\n', name="settings.toml")
        assert load_config_file(path) == {"pool_name": "p", "wallet": {"kind": "x"}}

    def test_unknown_extension_uses_yaml(self, write_config):
        path = write_config('{"a": "a"}', name="settings.conf")
        assert load_config_file(path) == {"a": "a"}

    def test_string_path(self, write_config):
        path = write_config({"a": "a"})
        assert load_config_file(str(path)) == {"a": "a"}

    def test_empty_file_is_empty_mapping(self, write_config):
        assert load_config_file(write_config("", name="empty.yaml")) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationFileNotFound) as exc_info:
            load_config_file(tmp_path / "nope.json")
        assert exc_info.value.path.endswith("nope.json")

    @pytest.mark.parametrize("content,name", [
        ('{"a": ', "bad.json"),
        ("a = ", "bad.toml"),
        ("a: [1, 2", "bad.yaml"),
    ])
    def test_malformed(self, write_config, content, name):
        with pytest.raises(ConfigurationParseFailure) as exc_info:
            load_config_file(write_config(content, name=name))
        assert exc_info.value.cause is not None

    def test_top_level_must_be_mapping(self, write_config):
        with pytest.raises(ConfigurationParseFailure, match="key/value pairs"):
            load_config_file(write_config('["a", "b"]'))

    def test_ini(self, write_config):
        path = write_config(
            "[DEFAULT]\npool_name = p\nWallet_Type = indy\n\n[agent]\nurl = http://a:1/%s\n",
            name="settings.ini",
        )
        assert load_config_file(path) == {
            "pool_name": "p",
            "Wallet_Type": "indy",
            "agent": {"url": "http://a:1/%s"},
        }

    def test_ini_without_section_header(self, write_config):
        with pytest.raises(ConfigurationParseFailure) as exc_info:
            load_config_file(write_config("pool_name = p\n", name="settings.ini"))
        assert exc_info.value.cause is not None

    def test_keys_must_be_text(self, write_config):
        with pytest.raises(ConfigurationParseFailure, match="non-text keys"):
            load_config_file(write_config("1: one\n", name="settings.yaml"))

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe\x00")
        with pytest.raises(ConfigurationParseFailure):
            load_config_file(path)
