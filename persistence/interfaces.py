from __future__ import annotations

from typing import Any, Protocol


class OptionsBackend(Protocol):
    """
    Host options API: one opaque JSON-like value persisted under a name.
    """

    def load(self, name: str) -> Any | None:
        """Return the stored value, or None if nothing is stored under ``name``."""
        ...

    def save(self, name: str, value: Any) -> bool:
        """Persist ``value`` under ``name``, overwriting it. False on failure."""
        ...

    def delete(self, name: str) -> bool:
        """Remove ``name``. True if something was removed."""
        ...
