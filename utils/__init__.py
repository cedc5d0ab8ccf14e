from __future__ import annotations

from .config import OPTION_NAME, Config

__all__ = ["OPTION_NAME", "Config"]
