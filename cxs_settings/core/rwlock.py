from __future__ import annotations

"""Reader/writer lock guarding the shared settings table.

Any number of readers may hold the lock together; a writer holds it alone.
Waiting writers block new readers so a merge is never starved by a steady
stream of lookups.

If an exception escapes a ``write()`` block the lock is *poisoned*: the
table may be half-updated, so every later acquisition raises
:class:`~cxs_settings.core.exceptions.SettingsLockPoisoned`.
"""

import logging
from contextlib import contextmanager
from threading import Condition, Lock
from typing import Iterator

from .exceptions import SettingsLockPoisoned

logger = logging.getLogger(__name__)

__all__ = ["ReadWriteLock"]


class ReadWriteLock:
    """Writer-preferring reader/writer lock with poisoning."""

    def __init__(self) -> None:
        self._cond = Condition(Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        with self._cond:
            return self._poisoned

    def _check_poison(self) -> None:
        if self._poisoned:
            raise SettingsLockPoisoned("settings lock poisoned by a failed writer")

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            self._check_poison()
            while self._writer or self._waiting_writers:
                self._cond.wait()
                self._check_poison()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._check_poison()
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
                    self._check_poison()
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        except BaseException:
            with self._cond:
                self._poisoned = True
            logger.critical("Writer failed while holding the settings lock; lock poisoned")
            raise
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()
