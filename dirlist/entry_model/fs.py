"""Filesystem collaborators: directory reads and per-entry stat snapshots."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from .types import EntryMetadata

CURRENT_DIR = "."
PARENT_DIR = ".."


class RootAccessError(Exception):
    """The listing root cannot be read."""

    def __init__(self, path: Path, error: OSError) -> None:
        self.path = path
        self.error = error
        reason = error.strerror or str(error)
        super().__init__(f"cannot access '{path}': {reason}")


def read_metadata(path: Path) -> EntryMetadata:
    """Stat ``path`` (following symlinks) into an :class:`EntryMetadata`.

    Raises ``OSError`` when the target cannot be stat'ed, e.g. for a broken
    symlink.
    """
    st = path.stat()
    try:
        is_symlink = path.is_symlink()
    except OSError:
        is_symlink = False
    return EntryMetadata(
        is_directory=stat.S_ISDIR(st.st_mode),
        is_regular_file=stat.S_ISREG(st.st_mode),
        is_symlink=is_symlink,
        size_bytes=int(st.st_size),
        permission_bits=stat.S_IMODE(st.st_mode),
        hard_link_count=int(st.st_nlink),
        owner_id=int(st.st_uid),
        group_id=int(st.st_gid),
        modified_time=float(st.st_mtime),
        accessed_time=float(st.st_atime),
        block_count=int(getattr(st, "st_blocks", 0)),
        inode=int(st.st_ino) if os.name == "posix" else None,
    )


def _is_utf8_name(name: str) -> bool:
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def list_directory(directory: Path, show_all: bool = False, show_almost_all: bool = False) -> list[tuple[str, Path]]:
    """Return ``(name, path)`` pairs for visible members of ``directory``.

    Names that are not valid UTF-8 are skipped. Hidden names are skipped
    unless ``show_all`` or ``show_almost_all`` is set; ``show_all`` appends the
    synthetic ``.`` and ``..`` entries.
    Raises :class:`RootAccessError` when ``directory`` cannot be scanned.
    """
    try:
        with os.scandir(directory) as scanned:
            names = [child.name for child in scanned if _is_utf8_name(child.name)]
    except OSError as exc:
        raise RootAccessError(directory, exc) from exc

    if not (show_all or show_almost_all):
        names = [name for name in names if not name.startswith(".")]
    if show_all:
        names.extend([CURRENT_DIR, PARENT_DIR])
    return [(name, directory / name) for name in names]


__all__ = [
    "CURRENT_DIR",
    "PARENT_DIR",
    "RootAccessError",
    "list_directory",
    "read_metadata",
]
