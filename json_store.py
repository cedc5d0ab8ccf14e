from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def read_json(path: Path) -> Any | None:
    """
    Read a JSON document from disk.

    Returns None for missing files, empty files, or invalid JSON.
    """
    if not path.exists():
        return None
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.debug("JSON READ: %s is not valid UTF-8", path)
        return None
    except OSError as e:
        logger.warning("JSON READ: failed to read %s: %r", path, e)
        return None
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError:
        logger.debug("JSON READ: %s is not valid JSON", path)
        return None


def atomic_write_json(path: Path, payload: Any, *, indent: int = 2, sort_keys: bool = True) -> None:
    """
    Serialize first, then write to a temp file and replace the target.

    Raises TypeError/ValueError for unserializable payloads (nothing is written)
    and OSError for filesystem failures.
    """
    text = json.dumps(payload, indent=indent, sort_keys=sort_keys)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            f.write(text)
            f.write("\n")
        tmp_path.replace(path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
