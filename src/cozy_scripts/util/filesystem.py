"""
Filesystem helpers shared by the scaffold modules.
"""

from __future__ import annotations

import hashlib
import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock

logger = logging.getLogger(__name__)

LOCK_DIRNAME = "cozy-scripts-locks"


def ensure_directory(path: Path | str) -> Path:
    """
    Ensure a directory exists, returning the resolved Path.
    """
    resolved = Path(path).expanduser().resolve()
    resolved.mkdir(parents=True, exist_ok=True)
    return resolved


def _ensure_parent(target: Path) -> None:
    """Ensure the parent directory for target exists."""
    if target.parent and not target.parent.exists():
        target.parent.mkdir(parents=True, exist_ok=True)


def lock_path_for(target: Path) -> Path:
    """Return the lock file guarding writes to target."""
    digest = hashlib.sha1(str(target).encode("utf-8")).hexdigest()[:16]
    return Path(tempfile.gettempdir()) / LOCK_DIRNAME / f"{target.name}-{digest}.lock"


@contextmanager
def file_lock(path: Path | str):
    """Context manager for a lock on target, kept outside the target's directory."""
    target = Path(path).expanduser().resolve()
    lock_path = lock_path_for(target)
    _ensure_parent(lock_path)
    try:
        with FileLock(str(lock_path)):
            yield
    finally:
        try:
            lock_path.unlink()
        except FileNotFoundError:
            pass


def _atomic_write_text(target: Path, content: str, encoding: str) -> None:
    """Write text atomically by staging a temp file and renaming."""
    _ensure_parent(target)
    fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, target)
    finally:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass


def write_text_file(path: Path | str, content: str, encoding: str = "utf-8", *, lock: bool = True) -> Path:
    """
    Write text to a file, creating parent directories as needed.
    """
    target = Path(path).expanduser().resolve()
    if lock:
        with file_lock(target):
            _atomic_write_text(target, content, encoding=encoding)
    else:
        _atomic_write_text(target, content, encoding=encoding)
    return target


def copy_entry(source: Path, destination: Path) -> Path:
    """
    Copy a file or a whole directory tree to destination, merging into
    existing directories and overwriting existing files.
    """
    if source.is_dir():
        shutil.copytree(source, destination, dirs_exist_ok=True)
    else:
        _ensure_parent(destination)
        shutil.copy2(source, destination)
    return destination


def remove_path(path: Path | str) -> bool:
    """
    Remove a file, symlink or directory tree if it exists.

    Returns:
        True if something was removed, False if nothing was there.
    """
    target = Path(path)
    if target.is_symlink() or target.is_file():
        target.unlink()
        return True
    if target.is_dir():
        shutil.rmtree(target)
        return True
    logger.debug("Nothing to remove at %s", target)
    return False
