from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from persistence.interfaces import OptionsBackend

logger = logging.getLogger(__name__)

# Single option holding the whole plugin configuration.
OPTION_NAME = "plugin_name_config"


class Config:
    """
    Plugin configuration kept as one mapping in the host options backend.

    The mapping is read once on construction and cached for the lifetime of
    the instance; reads never touch the backend. Every ``set`` writes the
    whole cached mapping back under ``option_name``:

        config = Config(host.options)
        config.set("feature_enabled", True)
        enabled = config.get("feature_enabled", False)

    Concurrent writers to the same option are last-writer-wins on the whole
    mapping, not per key. A failed save is reported through the return value
    of ``set`` only; the cache keeps the new value.
    """

    def __init__(self, backend: OptionsBackend, option_name: str = OPTION_NAME):
        self._backend = backend
        self._option_name = option_name
        self._config: dict[str, Any] = {}
        self._load_config()

    @property
    def option_name(self) -> str:
        return self._option_name

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> bool:
        """Store ``value`` under ``key`` and persist the full mapping. True on success."""
        self._config[key] = value
        return self._save_config()

    def has(self, key: str) -> bool:
        return key in self._config

    def all(self) -> dict[str, Any]:
        """Return a deep copy of every configuration value."""
        return copy.deepcopy(self._config)

    def _load_config(self) -> None:
        raw = self._backend.load(self._option_name)
        if isinstance(raw, Mapping):
            self._config = dict(raw)
            return
        if raw is not None:
            logger.debug(
                "CONFIG LOAD: option %s holds %s, not a mapping; starting empty",
                self._option_name,
                type(raw).__name__,
            )
        self._config = {}

    def _save_config(self) -> bool:
        ok = bool(self._backend.save(self._option_name, self._config))
        if not ok:
            logger.warning("CONFIG SAVE: backend rejected write of option %s", self._option_name)
        return ok
