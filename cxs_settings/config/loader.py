from __future__ import annotations

"""Configuration file parsing.

The format is picked from the file extension: ``.json``, ``.toml`` and
``.ini`` use the standard library parsers, everything else goes through
PyYAML (which also reads plain JSON). The result must be a flat or nested
mapping with text keys; the registry decides later which values are
readable as text.
"""

import configparser
import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict

import yaml

from ..core.exceptions import ConfigurationFileNotFound, ConfigurationParseFailure

logger = logging.getLogger(__name__)

__all__ = ["load_config_file"]


def _parse_json(text: str) -> Any:
    return json.loads(text)


def _parse_toml(text: str) -> Any:
    return tomllib.loads(text)


def _parse_yaml(text: str) -> Any:
    return yaml.safe_load(text)


def _parse_ini(text: str) -> Any:
    """Read INI text; ``[DEFAULT]`` keys are top-level, sections become mappings.

    Section entries inherited unchanged from ``[DEFAULT]`` are left out.
    """
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # keep key case
    parser.read_string(text)
    defaults = parser.defaults()
    data: Dict[str, Any] = dict(defaults)
    for section in parser.sections():
        data[section] = {k: v for k, v in parser.items(section, raw=True)
                         if defaults.get(k) != v}
    return data


_PARSERS = {
    ".json": _parse_json,
    ".toml": _parse_toml,
    ".yml": _parse_yaml,
    ".yaml": _parse_yaml,
    ".ini": _parse_ini,
}


def load_config_file(path: str | Path) -> Dict[str, Any]:
    """Read *path* and return its top-level key/value pairs.

    Raises:
        ConfigurationFileNotFound: *path* is not an existing regular file.
        ConfigurationParseFailure: the file cannot be read or is not a mapping.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ConfigurationFileNotFound(str(path))

    parser = _PARSERS.get(file_path.suffix.lower(), _parse_yaml)
    try:
        text = file_path.read_text(encoding="utf-8")
        data = parser(text)
    except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError,
            configparser.Error) as exc:
        # json.JSONDecodeError and tomllib.TOMLDecodeError are ValueErrors
        raise ConfigurationParseFailure(
            f"could not parse configuration file {file_path}: {exc}",
            path=str(file_path),
            cause=exc,
        ) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationParseFailure(
            f"configuration file {file_path} must contain key/value pairs, "
            f"got {type(data).__name__}",
            path=str(file_path),
        )
    bad_keys = [k for k in data if not isinstance(k, str)]
    if bad_keys:
        raise ConfigurationParseFailure(
            f"configuration file {file_path} has non-text keys: {bad_keys!r}",
            path=str(file_path),
        )

    logger.debug("Parsed %d setting(s) from %s", len(data), file_path)
    return data
