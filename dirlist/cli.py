"""Command-line front door for dirlist.

Parses ``rs`` options, merges config defaults, and runs the listing
pipeline. Per-entry diagnostics go to stderr; an unreadable root exits 1.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import config
from .entry_model import RootAccessError, select_sort_key
from .listing import ListingRequest, run_listing
from .render import DisplayOptions
from .terminal import COLOR_MODES, color_enabled

PROG_NAME = "rs"
DEFAULT_PATH = "."


def build_parser() -> argparse.ArgumentParser:
    # -h means human-readable sizes, so help is registered by hand.
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="List directory contents.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH, help="Directory to list. Defaults to '.'.")
    parser.add_argument("-a", "--all", action="store_true", help="Include hidden entries plus '.' and '..'.")
    parser.add_argument("-A", "--almost-all", action="store_true", help="Include hidden entries except '.' and '..'.")
    parser.add_argument("-1", dest="one_per_line", action="store_true", help="List one entry per line.")
    parser.add_argument("-l", dest="long", action="store_true", help="Use the long listing format.")
    parser.add_argument("-n", "--numeric-uid-gid", dest="numeric_ids", action="store_true", help="Like -l, with numeric owner and group ids.")
    parser.add_argument("-h", "--human-readable", action="store_true", help="With -l, print sizes like 2.0K and 1.0M.")
    parser.add_argument("-s", "--size", dest="show_block_size", action="store_true", help="Print allocated size of each entry in 1K blocks.")
    parser.add_argument("-i", "--inode", dest="show_inode", action="store_true", help="Print the inode number of each entry.")
    parser.add_argument("-t", dest="sort_time", action="store_true", help="Sort by modification time, newest first.")
    parser.add_argument("-u", dest="access_time", action="store_true", help="Show access time; sort by it with -t or without -l.")
    parser.add_argument("-S", dest="sort_size", action="store_true", help="Sort by file size, largest first.")
    parser.add_argument("-X", dest="sort_extension", action="store_true", help="Sort alphabetically by extension.")
    parser.add_argument("-r", "--reverse", action="store_true", help="Reverse the sort order.")
    parser.add_argument("--group-directories-first", action="store_true", help="List directories before files.")
    parser.add_argument("--color", choices=COLOR_MODES, default=None, help="Colorize directory names (default from config, else auto).")
    return parser


def request_from_args(args: argparse.Namespace) -> ListingRequest:
    """Merge parsed arguments with config defaults into a listing request."""
    long_listing = args.long or args.numeric_ids
    settings = config.load_config()
    color_mode = args.color if args.color is not None else config.load_color_mode(settings)
    display = DisplayOptions(
        show_block_size=args.show_block_size,
        show_inode=args.show_inode,
        long_format=args.long,
        numeric_ids=args.numeric_ids,
        human_readable_size=args.human_readable or config.load_human_readable(settings),
        access_time_instead_of_modified=args.access_time,
        colorize_directories=color_enabled(color_mode),
    )
    sort_key = select_sort_key(
        directory_first=args.group_directories_first or config.load_group_directories_first(settings),
        size=args.sort_size,
        access_time=args.access_time and (args.sort_time or not long_listing),
        modified_time=args.sort_time,
        extension=args.sort_extension,
    )
    return ListingRequest(
        path=Path(args.path),
        show_all=args.all,
        show_almost_all=args.almost_all or config.load_show_almost_all(settings),
        one_per_line=args.one_per_line,
        sort_key=sort_key,
        reverse=args.reverse,
        display=display,
    )


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and print the listing for one path.

    A regular-file argument is echoed back unchanged. An unreadable root
    raises ``SystemExit(1)`` after writing ``rs: cannot access ...``.
    """
    args = build_parser().parse_args(argv)
    request = request_from_args(args)

    if request.path.is_file():
        sys.stdout.write(f"{request.path}\n")
        return

    try:
        result = run_listing(request)
    except RootAccessError as exc:
        sys.stderr.write(f"{PROG_NAME}: {exc}\n")
        raise SystemExit(1) from exc

    for error in result.errors:
        sys.stderr.write(f"{error.message}\n")
    if result.text:
        sys.stdout.write(f"{result.text}\n")


if __name__ == "__main__":
    main()
