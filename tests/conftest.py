from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Factories building real packages on disk or inside zip archives and
   placing them on sys.path for the duration of a test.
"""

import importlib
import logging
import os
import sys
import uuid
import zipfile
from logging.handlers import QueueListener
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from resutil.infra.logging import _CONFIGURED_FLAG_ATTR, _HANDLER_TAG_ATTR, _QUEUE_LISTENER_ATTR  # noqa: E402

PackageFactory = Callable[..., str]


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def unique_package_name(stem: str = "respkg") -> str:
    """Return a package name no other test has imported."""
    return f"{stem}_{uuid.uuid4().hex[:10]}"


def _forget_modules(prefixes: List[str]) -> None:
    for name in list(sys.modules):
        if any(name == p or name.startswith(p + ".") for p in prefixes):
            del sys.modules[name]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def plain_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[PackageFactory]:
    """
    Factory creating an importable package inside a temporary directory.

    Usage:
        name = plain_package({"res/a.txt": b"..."}, dirs=["res/empty"])

    Resource keys are '/'-separated paths relative to the package directory.
    The package directory itself is placed under a fresh sys.path root.
    """
    created: List[str] = []

    def _make(
            files: Optional[Dict[str, bytes]] = None,
            dirs: Optional[List[str]] = None,
            name: Optional[str] = None,
            init_source: str = "",
    ) -> str:
        pkg_name = name or unique_package_name("plainpkg")
        root = tmp_path / f"site_{pkg_name}"
        pkg_dir = root / pkg_name
        pkg_dir.mkdir(parents=True)
        (pkg_dir / "__init__.py").write_text(init_source, encoding="utf-8")
        (pkg_dir / "mod.py").write_text("VALUE = 1\n", encoding="utf-8")

        for rel in dirs or []:
            (pkg_dir / rel).mkdir(parents=True, exist_ok=True)
        for rel, data in (files or {}).items():
            target = pkg_dir / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)

        monkeypatch.syspath_prepend(str(root))
        created.append(pkg_name)
        return pkg_name

    yield _make
    _forget_modules(created)


@pytest.fixture
def archive_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[PackageFactory]:
    """
    Factory creating an importable package inside a zip archive.

    Usage:
        name = archive_package({"res/a.txt": b"..."}, dir_entries=["res/empty/"])

    Only the entries named are written: intermediate directories get no
    entry of their own unless listed in 'dir_entries'. 'inner_root' nests
    the import root inside the archive (sys.path gets 'archive.zip/inner').
    """
    created: List[str] = []
    archives: List[str] = []

    def _make(
            files: Optional[Dict[str, bytes]] = None,
            dir_entries: Optional[List[str]] = None,
            name: Optional[str] = None,
            inner_root: str = "",
            init_source: str = "",
            extra_entries: Optional[Dict[str, bytes]] = None,
    ) -> str:
        pkg_name = name or unique_package_name("zippkg")
        archive_path = tmp_path / f"{pkg_name}.zip"
        base = f"{inner_root}/{pkg_name}" if inner_root else pkg_name

        with zipfile.ZipFile(archive_path, "w") as zf:
            zf.writestr(f"{base}/__init__.py", init_source)
            zf.writestr(f"{base}/mod.py", "VALUE = 1\n")
            for entry in dir_entries or []:
                zf.writestr(f"{base}/{entry.rstrip('/')}/", b"")
            for rel, data in (files or {}).items():
                zf.writestr(f"{base}/{rel}", data)
            for entry, data in (extra_entries or {}).items():
                zf.writestr(entry, data)

        sys_path_entry = os.path.join(str(archive_path), inner_root) if inner_root else str(archive_path)
        monkeypatch.syspath_prepend(sys_path_entry)
        created.append(pkg_name)
        archives.append(sys_path_entry)
        return pkg_name

    yield _make
    _forget_modules(created)
    for entry in archives:
        sys.path_importer_cache.pop(entry, None)
    importlib.invalidate_caches()


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Clean up root logger handlers before and after a test."""

    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if listener and isinstance(listener, QueueListener):
            if getattr(listener, "_thread", None) is not None:
                listener.stop()
            setattr(root, _QUEUE_LISTENER_ATTR, None)

        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()

        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()
