"""Per-entry display fields for the listing table.

``render_fields`` turns one :class:`Entry` plus :class:`DisplayOptions` into
an ordered list of cells. Rows from one listing always share a column count:
entries without metadata get empty strings for every non-name cell.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .ansi import blue_bold
from .civil_date import MonthStyle, from_timestamp
from .entry_model import Entry, EntryMetadata, scale_blocks
from .users import NameResolutionError, NameResolver

INODE_SUPPORTED = os.name == "posix"
UNKNOWN_NAME = "?"

KB_IN_BYTES = 1024
MB_IN_BYTES = 1024**2
GB_IN_BYTES = 1024**3
TB_IN_BYTES = 1024**4

PERMISSION_TRIADS = {
    "4": "r--",
    "5": "r-x",
    "6": "rw-",
    "7": "rwx",
}


@dataclass(frozen=True)
class DisplayOptions:
    """Independently togglable column flags for one listing."""

    show_block_size: bool = False
    show_inode: bool = False
    long_format: bool = False
    numeric_ids: bool = False
    human_readable_size: bool = False
    access_time_instead_of_modified: bool = False
    colorize_directories: bool = False

    @property
    def long_listing(self) -> bool:
        return self.long_format or self.numeric_ids

    @property
    def inode_column(self) -> bool:
        return self.show_inode and INODE_SUPPORTED


def type_character(metadata: EntryMetadata) -> str:
    if metadata.is_symlink:
        return "l"
    if metadata.is_directory:
        return "d"
    if metadata.is_regular_file:
        return "-"
    return "?"


def permission_string(metadata: EntryMetadata) -> str:
    """Return the type character followed by rwx triads.

    Each of the last three octal digits maps through ``PERMISSION_TRIADS``;
    digits outside ``4``-``7`` contribute nothing.
    """
    digits = f"{metadata.permission_bits & 0o777:03o}"
    triads = "".join(PERMISSION_TRIADS.get(digit, "") for digit in digits)
    return type_character(metadata) + triads


def human_readable_size(size_bytes: int) -> str:
    """Format a byte count with one decimal and a K/M/G suffix.

    Counts below 1024 bytes, and from one terabyte up, are shown as plain
    integers.
    """
    if size_bytes < KB_IN_BYTES:
        return str(size_bytes)
    if size_bytes < MB_IN_BYTES:
        return f"{size_bytes / KB_IN_BYTES:.1f}K"
    if size_bytes < GB_IN_BYTES:
        return f"{size_bytes / MB_IN_BYTES:.1f}M"
    if size_bytes < TB_IN_BYTES:
        return f"{size_bytes / GB_IN_BYTES:.1f}G"
    return str(size_bytes)


def _owner_cell(metadata: EntryMetadata, options: DisplayOptions, resolver: NameResolver) -> str:
    if options.numeric_ids:
        return str(metadata.owner_id)
    try:
        return resolver.owner_name(metadata.owner_id)
    except NameResolutionError:
        return UNKNOWN_NAME


def _group_cell(metadata: EntryMetadata, options: DisplayOptions, resolver: NameResolver) -> str:
    if options.numeric_ids:
        return str(metadata.group_id)
    try:
        return resolver.group_name(metadata.group_id)
    except NameResolutionError:
        return UNKNOWN_NAME


def name_cell(entry: Entry, options: DisplayOptions) -> str:
    if options.colorize_directories and entry.is_directory:
        return blue_bold(entry.name)
    return entry.name


def field_count(options: DisplayOptions) -> int:
    """Number of cells ``render_fields`` produces for ``options``."""
    count = 1
    if options.show_block_size:
        count += 1
    if options.inode_column:
        count += 1
    if options.long_listing:
        count += 7
    return count


def render_fields(entry: Entry, options: DisplayOptions, resolver: NameResolver) -> list[str]:
    """Return display cells for ``entry`` in column order.

    Order: blocks, inode, permissions, links, owner, group, size, month, day,
    name. Only cells whose flag is set are produced.
    """
    metadata = entry.metadata
    if metadata is None:
        return [""] * (field_count(options) - 1) + [entry.name]

    fields: list[str] = []
    if options.show_block_size:
        fields.append(str(scale_blocks(metadata.block_count)))
    if options.inode_column:
        fields.append("" if metadata.inode is None else str(metadata.inode))
    if options.long_listing:
        fields.append(permission_string(metadata))
        fields.append(str(metadata.hard_link_count))
        fields.append(_owner_cell(metadata, options, resolver))
        fields.append(_group_cell(metadata, options, resolver))
        if options.human_readable_size:
            fields.append(human_readable_size(metadata.size_bytes))
        else:
            fields.append(str(metadata.size_bytes))
        timestamp = metadata.accessed_time if options.access_time_instead_of_modified else metadata.modified_time
        date = from_timestamp(timestamp)
        fields.append(date.month_display(MonthStyle.SHORT))
        fields.append(str(date.day))
    fields.append(name_cell(entry, options))
    return fields


__all__ = [
    "DisplayOptions",
    "field_count",
    "human_readable_size",
    "name_cell",
    "permission_string",
    "render_fields",
    "type_character",
]
