from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from json_store import atomic_write_json, read_json

from .interfaces import OptionsBackend
from .locks import GLOBAL_OPTION_LOCKS
from .paths import data_dir, options_dir

logger = logging.getLogger(__name__)


class DiskOptionsBackend(OptionsBackend):
    """
    Stores each option as its own JSON document:

    - data/options/<option_name>.json

    Writes are atomic and serialized per option inside this process. Two
    processes saving the same option are last-writer-wins on the whole value.
    """

    def __init__(self, base_dir: Path | None = None):
        self._dir = options_dir(base_dir if base_dir is not None else data_dir())

    @property
    def directory(self) -> Path:
        return self._dir

    def load(self, name: str) -> Any | None:
        with GLOBAL_OPTION_LOCKS.lock_for(name):
            return read_json(self._path(name))

    def save(self, name: str, value: Any) -> bool:
        path = self._path(name)
        with GLOBAL_OPTION_LOCKS.lock_for(name):
            try:
                atomic_write_json(path, value)
            except (TypeError, ValueError) as e:
                logger.warning("OPTION SAVE: %s is not JSON serializable: %r", name, e)
                return False
            except OSError as e:
                logger.warning("OPTION SAVE: failed to write %s: %r", path, e)
                return False
        return True

    def delete(self, name: str) -> bool:
        path = self._path(name)
        with GLOBAL_OPTION_LOCKS.lock_for(name):
            try:
                path.unlink()
            except FileNotFoundError:
                return False
        return True

    def _path(self, name: str) -> Path:
        safe = (name.strip() or "unnamed").replace("/", "_").replace("\\", "_")
        return self._dir / f"{safe}.json"
