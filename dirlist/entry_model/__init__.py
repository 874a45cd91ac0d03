"""Domain model for one directory listing batch.

This package contains non-rendering listing primitives:
- entry and metadata datatypes
- sort-key selection and ordering
- the entry collection with block totals and error capture
- filesystem collaborators for directory reads and stat snapshots
"""

from __future__ import annotations

from .types import Entry, EntryMetadata
from .sorting import SortKey, select_sort_key, sort_key_function
from .collection import EntryCollection, EntryMetadataError, MetadataLookup, scale_blocks
from .fs import RootAccessError, list_directory, read_metadata

__all__ = [
    "Entry",
    "EntryMetadata",
    "SortKey",
    "select_sort_key",
    "sort_key_function",
    "EntryCollection",
    "EntryMetadataError",
    "MetadataLookup",
    "scale_blocks",
    "RootAccessError",
    "list_directory",
    "read_metadata",
]
