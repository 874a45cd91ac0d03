"""Entry collection with metadata lookup, block totals, and ordering."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .sorting import SortKey, sort_key_function
from .types import Entry, EntryMetadata

STAT_BLOCK_BYTES = 512
DISPLAY_BLOCK_BYTES = 1024

MetadataLookup = Callable[[Path], EntryMetadata]


def scale_blocks(block_count: int) -> int:
    """Convert 512-byte stat blocks to 1K display blocks, rounding up."""
    total_bytes = block_count * STAT_BLOCK_BYTES
    return -(-total_bytes // DISPLAY_BLOCK_BYTES)


@dataclass(frozen=True)
class EntryMetadataError:
    """Non-fatal metadata lookup failure for one entry."""

    name: str
    path: Path
    error: OSError

    @property
    def message(self) -> str:
        return str(self.error)


class EntryCollection:
    """Entries of one listing batch.

    Construction looks up metadata for every ``(name, path)`` pair. A failed
    lookup keeps the entry with ``metadata=None`` and records an
    :class:`EntryMetadataError` in :attr:`errors` instead of raising.
    """

    def __init__(self, named_paths: Iterable[tuple[str, Path]], lookup: MetadataLookup) -> None:
        self.entries: list[Entry] = []
        self.errors: list[EntryMetadataError] = []
        self._total_blocks = 0
        for name, path in named_paths:
            try:
                metadata = lookup(path)
            except OSError as exc:
                self.errors.append(EntryMetadataError(name=name, path=path, error=exc))
                self.entries.append(Entry(name=name, path=path, metadata=None))
                continue
            self._total_blocks += metadata.block_count
            self.entries.append(Entry(name=name, path=path, metadata=metadata))

    @property
    def total_blocks(self) -> int:
        """Aggregate block count in 1K display units."""
        return scale_blocks(self._total_blocks)

    def sort_by(self, key: SortKey) -> None:
        self.entries.sort(key=sort_key_function(key))

    def reverse(self) -> None:
        self.entries.reverse()

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


__all__ = [
    "DISPLAY_BLOCK_BYTES",
    "EntryCollection",
    "EntryMetadataError",
    "MetadataLookup",
    "scale_blocks",
]
