"""Domain datatypes for listed directory entries."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePath


@dataclass(frozen=True)
class EntryMetadata:
    """Snapshot of one entry's filesystem metadata."""

    is_directory: bool
    is_regular_file: bool
    is_symlink: bool
    size_bytes: int
    permission_bits: int
    hard_link_count: int
    owner_id: int
    group_id: int
    modified_time: float
    accessed_time: float
    block_count: int
    inode: int | None = None


@dataclass(frozen=True)
class Entry:
    """One directory member; ``metadata`` is ``None`` when lookup failed."""

    name: str
    path: Path
    metadata: EntryMetadata | None = None

    @property
    def is_directory(self) -> bool:
        return self.metadata is not None and self.metadata.is_directory

    @property
    def extension(self) -> str:
        """Return the name suffix without its leading dot, or ``""``.

        Read from ``name``: ``Path(dir) / "."`` is ``dir`` itself.
        """
        return PurePath(self.name).suffix[1:]


__all__ = [
    "Entry",
    "EntryMetadata",
]
