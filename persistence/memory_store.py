from __future__ import annotations

import copy
import threading
from typing import Any

from .interfaces import OptionsBackend


class InMemoryOptionsBackend(OptionsBackend):
    """
    Process-local options table. Values are deep-copied on the way in and out,
    so callers never share state with the stored value.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._lock = threading.Lock()
        self._options: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def load(self, name: str) -> Any | None:
        with self._lock:
            if name not in self._options:
                return None
            return copy.deepcopy(self._options[name])

    def save(self, name: str, value: Any) -> bool:
        with self._lock:
            self._options[name] = copy.deepcopy(value)
        return True

    def delete(self, name: str) -> bool:
        with self._lock:
            if name not in self._options:
                return False
            del self._options[name]
            return True
