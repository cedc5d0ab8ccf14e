from __future__ import annotations

import threading


class OptionLockRegistry:
    """
    One lock per option name, so writers of different options never contend.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, name: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = threading.Lock()
                self._locks[name] = lock
            return lock


GLOBAL_OPTION_LOCKS = OptionLockRegistry()
