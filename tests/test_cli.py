"""CLI argument, exit-status, and output-stream behavior tests."""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirlist import cli
from dirlist.entry_model import SortKey


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name)
        patcher = mock.patch("dirlist.config.CONFIG_PATH", self.root / "no-config.json")
        patcher.start()
        self.addCleanup(patcher.stop)

    def run_cli(self, *argv: str) -> tuple[str, str]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        with mock.patch.object(sys, "stdout", stdout), mock.patch.object(sys, "stderr", stderr):
            cli.main(list(argv))
        return stdout.getvalue(), stderr.getvalue()


class CliListingTests(CliTestCase):
    def test_default_listing_prints_sorted_compact_line(self) -> None:
        listing = self.root / "listing"
        listing.mkdir()
        for name in ["b.txt", "a.txt"]:
            (listing / name).write_text(name, encoding="utf-8")
        (listing / "dir1").mkdir()

        stdout, stderr = self.run_cli(str(listing), "--color", "never")

        self.assertEqual(stdout, "a.txt  b.txt  dir1\n")
        self.assertEqual(stderr, "")

    def test_color_always_wraps_directories(self) -> None:
        listing = self.root / "listing"
        (listing / "dir1").mkdir(parents=True)

        stdout, _stderr = self.run_cli(str(listing), "-1", "--color=always")

        self.assertEqual(stdout, "\x1b[34;1mdir1\x1b[0m\n")

    def test_regular_file_path_is_echoed(self) -> None:
        target = self.root / "file.txt"
        target.write_text("x", encoding="utf-8")

        stdout, _stderr = self.run_cli(str(target), "-l")

        self.assertEqual(stdout, f"{target}\n")

    def test_unreadable_root_exits_nonzero_with_message(self) -> None:
        missing = self.root / "missing"
        stderr = io.StringIO()
        with mock.patch.object(sys, "stderr", stderr), self.assertRaises(SystemExit) as caught:
            cli.main([str(missing)])
        self.assertEqual(caught.exception.code, 1)
        self.assertEqual(stderr.getvalue(), f"rs: cannot access '{missing}': No such file or directory\n")

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unavailable")
    def test_metadata_failures_go_to_stderr_and_entry_still_lists(self) -> None:
        listing = self.root / "listing"
        listing.mkdir()
        os.symlink(listing / "nowhere", listing / "dangling")
        (listing / "ok.txt").write_text("ok", encoding="utf-8")

        stdout, stderr = self.run_cli(str(listing), "-1", "--color=never")

        self.assertEqual(stdout, "dangling\nok.txt\n")
        self.assertIn("No such file or directory", stderr)

    def test_undecodable_name_does_not_block_other_entries(self) -> None:
        listing = self.root / "listing"
        listing.mkdir()
        (listing / "ok.txt").write_text("ok", encoding="utf-8")
        try:
            fd = os.open(os.path.join(os.fsencode(listing), b"bad\xff.txt"), os.O_CREAT | os.O_WRONLY)
        except OSError:
            self.skipTest("filesystem rejects non-UTF-8 names")
        os.close(fd)

        buffer = io.BytesIO()
        stdout = io.TextIOWrapper(buffer, encoding="utf-8", errors="strict")
        with mock.patch.object(sys, "stdout", stdout):
            cli.main([str(listing), "--color=never"])
        stdout.flush()

        self.assertEqual(buffer.getvalue(), b"ok.txt\n")

    def test_defaults_to_current_directory(self) -> None:
        (self.root / "here.txt").write_text("h", encoding="utf-8")
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root)
            stdout, _stderr = self.run_cli("--color=never")
        finally:
            os.chdir(previous_cwd)
        self.assertEqual(stdout, "here.txt\n")


class RequestFromArgsTests(CliTestCase):
    def request(self, *argv: str):
        return cli.request_from_args(cli.build_parser().parse_args(list(argv)))

    def test_sort_flags_collapse_by_precedence(self) -> None:
        self.assertIs(self.request().sort_key, SortKey.NAME)
        self.assertIs(self.request("-X", "-t").sort_key, SortKey.MODIFIED_TIME)
        self.assertIs(self.request("-t", "-S").sort_key, SortKey.SIZE)
        self.assertIs(self.request("-S", "--group-directories-first").sort_key, SortKey.DIRECTORY_FIRST)

    def test_access_time_flag_sorting_rules(self) -> None:
        self.assertIs(self.request("-u").sort_key, SortKey.ACCESS_TIME)
        self.assertIs(self.request("-lu").sort_key, SortKey.NAME)
        self.assertIs(self.request("-ltu").sort_key, SortKey.ACCESS_TIME)
        self.assertTrue(self.request("-lu").display.access_time_instead_of_modified)

    def test_display_flags(self) -> None:
        request = self.request("-n", "-h", "-s", "-i", "-r", "-A", "--color=never")
        self.assertTrue(request.display.numeric_ids)
        self.assertTrue(request.display.long_listing)
        self.assertTrue(request.display.human_readable_size)
        self.assertTrue(request.display.show_block_size)
        self.assertTrue(request.display.show_inode)
        self.assertFalse(request.display.colorize_directories)
        self.assertTrue(request.reverse)
        self.assertTrue(request.show_almost_all)
        self.assertEqual(request.path, Path("."))

    def test_config_file_is_read_once_per_request(self) -> None:
        with mock.patch("dirlist.config.load_config", return_value={"show_almost_all": True}) as load_config:
            request = self.request("-l")
        load_config.assert_called_once_with()
        self.assertTrue(request.show_almost_all)

    def test_config_supplies_defaults(self) -> None:
        with mock.patch("dirlist.config.load_human_readable", return_value=True), mock.patch(
            "dirlist.config.load_color_mode", return_value="always"
        ):
            request = self.request()
        self.assertTrue(request.display.human_readable_size)
        self.assertTrue(request.display.colorize_directories)


if __name__ == "__main__":
    unittest.main()
