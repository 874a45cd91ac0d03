"""End-to-end listing pipeline.

Reads the directory, builds and orders the :class:`EntryCollection`, renders
each entry's cells, and lays them out as long, one-per-line, or compact text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .entry_model import (
    EntryCollection,
    EntryMetadataError,
    MetadataLookup,
    SortKey,
    list_directory,
    read_metadata,
)
from .render import DisplayOptions, render_fields
from .table import TableAlignment, render_table
from .users import NameResolver, SystemNameResolver

COMPACT_ENTRY_SEPARATOR = "  "


@dataclass(frozen=True)
class ListingRequest:
    path: Path
    show_all: bool = False
    show_almost_all: bool = False
    one_per_line: bool = False
    sort_key: SortKey = SortKey.NAME
    reverse: bool = False
    display: DisplayOptions = field(default_factory=DisplayOptions)


@dataclass(frozen=True)
class ListingResult:
    text: str
    errors: tuple[EntryMetadataError, ...] = ()


def collect_entries(request: ListingRequest, lookup: MetadataLookup = read_metadata) -> EntryCollection:
    """Read, stat, and order entries for ``request``.

    Raises :class:`dirlist.entry_model.RootAccessError` for unreadable roots.
    """
    named_paths = list_directory(request.path, show_all=request.show_all, show_almost_all=request.show_almost_all)
    collection = EntryCollection(named_paths, lookup)
    collection.sort_by(request.sort_key)
    if request.reverse:
        collection.reverse()
    return collection


def format_listing(collection: EntryCollection, request: ListingRequest, resolver: NameResolver) -> str:
    """Lay out an already ordered collection as output text."""
    options = request.display
    rows = [render_fields(entry, options, resolver) for entry in collection]

    if options.long_listing:
        lines = [f"total {collection.total_blocks}"]
        if rows:
            lines.append(render_table(rows, TableAlignment.RIGHT_EXCEPT_LAST_LEFT))
        return "\n".join(lines)
    if request.one_per_line:
        return render_table(rows, TableAlignment.RIGHT_EXCEPT_LAST_LEFT)
    return COMPACT_ENTRY_SEPARATOR.join(" ".join(cell for cell in row if cell) for row in rows)


def run_listing(
    request: ListingRequest,
    lookup: MetadataLookup = read_metadata,
    resolver: NameResolver | None = None,
) -> ListingResult:
    collection = collect_entries(request, lookup)
    text = format_listing(collection, request, resolver if resolver is not None else SystemNameResolver())
    return ListingResult(text=text, errors=tuple(collection.errors))


__all__ = [
    "ListingRequest",
    "ListingResult",
    "collect_entries",
    "format_listing",
    "run_listing",
]
