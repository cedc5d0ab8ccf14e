from __future__ import annotations

from .disk_store import DiskOptionsBackend
from .interfaces import OptionsBackend
from .memory_store import InMemoryOptionsBackend

__all__ = [
    "OptionsBackend",
    "DiskOptionsBackend",
    "InMemoryOptionsBackend",
]
