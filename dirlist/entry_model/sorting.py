"""Sort-key selection and per-key ordering for listed entries.

Every key ends with the entry name so ties always fall back to name order.
Under the time and size keys, entries without metadata sort after every
entry with metadata. Directory-first treats them as non-directories.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from .types import Entry


class SortKey(Enum):
    NAME = "name"
    DIRECTORY_FIRST = "directory-first"
    MODIFIED_TIME = "modified-time"
    ACCESS_TIME = "access-time"
    SIZE = "size"
    EXTENSION = "extension"


def select_sort_key(
    directory_first: bool = False,
    size: bool = False,
    access_time: bool = False,
    modified_time: bool = False,
    extension: bool = False,
) -> SortKey:
    """Collapse sort flags into the one active :class:`SortKey`.

    Precedence: directory-first > size > access-time > modified-time >
    extension > name.
    """
    if directory_first:
        return SortKey.DIRECTORY_FIRST
    if size:
        return SortKey.SIZE
    if access_time:
        return SortKey.ACCESS_TIME
    if modified_time:
        return SortKey.MODIFIED_TIME
    if extension:
        return SortKey.EXTENSION
    return SortKey.NAME


def _name_key(entry: Entry) -> tuple:
    return (entry.name,)


def _directory_first_key(entry: Entry) -> tuple:
    if entry.metadata is None:
        return (1, entry.name)
    return (0 if entry.metadata.is_directory else 1, entry.name)


def _modified_time_key(entry: Entry) -> tuple:
    # Newest first.
    if entry.metadata is None:
        return (1, 0.0, entry.name)
    return (0, -entry.metadata.modified_time, entry.name)


def _access_time_key(entry: Entry) -> tuple:
    if entry.metadata is None:
        return (1, 0.0, entry.name)
    return (0, -entry.metadata.accessed_time, entry.name)


def _size_key(entry: Entry) -> tuple:
    # Largest first.
    if entry.metadata is None:
        return (1, 0, entry.name)
    return (0, -entry.metadata.size_bytes, entry.name)


def _extension_key(entry: Entry) -> tuple:
    extension = entry.extension
    if not extension:
        return (1, "", entry.name)
    return (0, extension, entry.name)


SORT_KEY_FUNCTIONS: dict[SortKey, Callable[[Entry], tuple]] = {
    SortKey.NAME: _name_key,
    SortKey.DIRECTORY_FIRST: _directory_first_key,
    SortKey.MODIFIED_TIME: _modified_time_key,
    SortKey.ACCESS_TIME: _access_time_key,
    SortKey.SIZE: _size_key,
    SortKey.EXTENSION: _extension_key,
}


def sort_key_function(key: SortKey) -> Callable[[Entry], tuple]:
    """Return the ``sorted(key=...)`` callable implementing ``key``."""
    return SORT_KEY_FUNCTIONS[key]


__all__ = [
    "SortKey",
    "select_sort_key",
    "sort_key_function",
]
