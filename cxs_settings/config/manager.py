from __future__ import annotations

"""Process-wide settings registry.

Holds the key/value settings shared by the whole library. The table is
seeded with defaults, overlaid by configuration files and read through
:meth:`SettingsRegistry.get_config_value`.

Merging is an overlay: keys present in a file overwrite existing values and
all other keys are left alone. After every merge the name-like known keys
are validated. By default an invalid merge is *not* rolled back (the values
stay live and the caller gets :class:`InvalidConfigurationValue`); pass
``transactional=True`` to validate a staged copy before committing.
"""

import logging
import os
from typing import Any, Dict

from ..core.error_codes import ErrorCode
from ..core.exceptions import InvalidConfiguration, InvalidConfigurationValue
from ..core.rwlock import ReadWriteLock
from .keys import DEFAULTS
from .loader import load_config_file
from .validation import UnknownKeyPolicy, as_text, collect_errors

logger = logging.getLogger(__name__)

__all__ = ["SettingsRegistry"]


class SettingsRegistry:
    """Thread-safe key/value settings table.

    Lookups share the lock; ``set_defaults`` and merges take it exclusively.
    A writer that fails mid-update poisons the lock and every later call
    raises :class:`~cxs_settings.core.exceptions.SettingsLockPoisoned`.
    """

    def __init__(self, unknown_keys: UnknownKeyPolicy = UnknownKeyPolicy.IGNORE,
                 transactional: bool = False) -> None:
        self._data: Dict[str, Any] = {}
        self._lock = ReadWriteLock()
        self.unknown_keys = UnknownKeyPolicy(unknown_keys)
        self.transactional = transactional

    # ------------------------------------------------------------------
    # Writers
    # ------------------------------------------------------------------
    def set_defaults(self) -> int:
        """Seed every known key that is not already set. Always succeeds."""
        with self._lock.write():
            for key, value in DEFAULTS.items():
                self._data.setdefault(key, value)
        logger.debug("Settings defaults applied")
        return ErrorCode.SUCCESS

    def process_config_file(self, path: str | os.PathLike) -> int:
        """Merge the settings in *path* and validate the result.

        Raises:
            ConfigurationFileNotFound: *path* is not an existing file.
            ConfigurationParseFailure: the file is not a key/value document.
            InvalidConfigurationValue: a known key failed validation. Unless
                the registry is transactional the merge has already been
                applied when this is raised.
        """
        incoming = load_config_file(path)

        if self.transactional:
            with self._lock.write():
                staged = dict(self._data)
                staged.update(incoming)
                errors = collect_errors(staged, self.unknown_keys)
                if not errors:
                    self._data = staged
            if errors:
                logger.warning("Rejected configuration %s: %s", path, "; ".join(errors))
                raise InvalidConfigurationValue(errors)
            logger.info("Merged %d setting(s) from %s", len(incoming), path)
            return ErrorCode.SUCCESS

        with self._lock.write():
            self._data.update(incoming)
        logger.info("Merged %d setting(s) from %s", len(incoming), path)

        return self.validate_config()

    def validate_config(self) -> int:
        """Validate the current table; raise InvalidConfigurationValue on failure."""
        errors = collect_errors(self.snapshot(), self.unknown_keys)
        if errors:
            logger.warning("Invalid configuration: %s", "; ".join(errors))
            raise InvalidConfigurationValue(errors)
        return ErrorCode.SUCCESS

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------
    def get_config_value(self, key: str) -> str:
        """Return the setting *key* as text.

        Raises:
            InvalidConfiguration: *key* is unset or its value is not text.
        """
        with self._lock.read():
            try:
                value = self._data[key]
            except KeyError:
                raise InvalidConfiguration("setting is not defined", key=key) from None
        try:
            return as_text(value)
        except TypeError as exc:
            raise InvalidConfiguration(str(exc), key=key, cause=exc) from exc

    def snapshot(self) -> Dict[str, Any]:
        """Return a shallow copy of the whole table."""
        with self._lock.read():
            return dict(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock.read():
            return key in self._data

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._data)

    def __repr__(self) -> str:
        return (f"SettingsRegistry(unknown_keys={self.unknown_keys.value!r}, "
                f"transactional={self.transactional!r})")
