from __future__ import annotations

from pathlib import Path
import sys
from typing import Any, Callable


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sandbox_project(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Redirect persistence paths to a temp project directory so tests never touch real ./data.
    """
    import persistence.paths as paths

    def _project_root() -> Path:
        return tmp_path

    def _data_dir() -> Path:
        p = tmp_path / "data"
        p.mkdir(parents=True, exist_ok=True)
        return p

    monkeypatch.setattr(paths, "project_root", _project_root)
    monkeypatch.setattr(paths, "data_dir", _data_dir)
    # disk_store imported data_dir by name
    import persistence.disk_store as disk_store

    monkeypatch.setattr(disk_store, "data_dir", _data_dir)
    return tmp_path


@pytest.fixture
def host():
    from host import Host
    from persistence import InMemoryOptionsBackend

    return Host(InMemoryOptionsBackend())


@pytest.fixture
def stub_options(monkeypatch: pytest.MonkeyPatch, host) -> Callable[..., None]:
    """
    Replace the host's options functions with canned answers.

    stub_options(load=..., save=...) makes every load() return ``load`` and
    every save() return ``save``; by default nothing is stored and saves succeed.
    """

    def _stub(load: Any = None, save: bool = True) -> None:
        monkeypatch.setattr(host.options, "load", lambda name: load)
        monkeypatch.setattr(host.options, "save", lambda name, value: save)

    _stub()
    return _stub
