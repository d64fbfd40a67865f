"""Tests for target validation and the directory walk."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path, PurePath

from treelister.errors import DirectoryPermissionError, MissingArgumentError, NotFoundError, TreeListerError
from treelister.scan import ScanEntry, count_entries, resolve_target_directory, scan_directory


def _make_sample_tree(root: Path) -> None:
    (root / "a.txt").write_text("a\n", encoding="utf-8")
    (root / "b").mkdir()
    (root / "b" / "c.txt").write_text("c\n", encoding="utf-8")
    (root / "b-x").mkdir()
    (root / "b" / "deep").mkdir()
    (root / "b" / "deep" / "d.md").write_text("d\n", encoding="utf-8")
    (root / ".hidden").write_text("h\n", encoding="utf-8")


class ResolveTargetDirectoryTests(unittest.TestCase):
    def test_resolves_relative_path_and_keeps_given_text(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                (root / "sub").mkdir()
                target = resolve_target_directory("sub")
            finally:
                os.chdir(previous_cwd)

            self.assertEqual(target.given, "sub")
            self.assertEqual(target.path, root / "sub")
            self.assertTrue(target.path.is_absolute())

    def test_absent_or_empty_path_raises_missing_argument(self) -> None:
        for raw in (None, ""):
            with self.subTest(raw=raw), self.assertRaises(MissingArgumentError):
                resolve_target_directory(raw)

    def test_missing_path_raises_not_found(self) -> None:
        with self.assertRaises(NotFoundError) as ctx:
            resolve_target_directory("/no/such/dir")
        self.assertIn("/no/such/dir", str(ctx.exception))

    def test_regular_file_raises_not_found(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "file.txt"
            path.write_text("x\n", encoding="utf-8")
            with self.assertRaises(NotFoundError):
                resolve_target_directory(path)

    @unittest.skipIf(hasattr(os, "geteuid") and os.geteuid() == 0, "root can read any directory")
    def test_unreadable_directory_raises_permission_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            locked = Path(tmp) / "locked"
            locked.mkdir()
            locked.chmod(0o000)
            try:
                with self.assertRaises(DirectoryPermissionError) as ctx:
                    resolve_target_directory(locked)
            finally:
                locked.chmod(0o755)

            self.assertIsInstance(ctx.exception, PermissionError)
            self.assertIsInstance(ctx.exception, TreeListerError)


class ScanDirectoryTests(unittest.TestCase):
    def test_entries_are_in_tree_order_with_hidden_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _make_sample_tree(root)

            result = scan_directory(resolve_target_directory(root))

            self.assertEqual(
                [str(entry.relative) for entry in result.entries],
                [
                    ".hidden",
                    "a.txt",
                    "b",
                    os.path.join("b", "c.txt"),
                    os.path.join("b", "deep"),
                    os.path.join("b", "deep", "d.md"),
                    "b-x",
                ],
            )
            self.assertEqual([entry.depth for entry in result.entries], [1, 1, 1, 2, 2, 3, 1])
            self.assertEqual(result.unreadable, ())

    def test_tree_order_matches_sort_by_path_segments(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _make_sample_tree(root)

            result = scan_directory(resolve_target_directory(root))
            parts = [entry.parts for entry in result.entries]

            self.assertEqual(parts, sorted(parts))

    def test_counts_match_independent_walk(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _make_sample_tree(root)

            result = scan_directory(resolve_target_directory(root))

            walked_files = 0
            walked_dirs = 0
            for _dirpath, dirnames, filenames in os.walk(root):
                walked_files += len(filenames)
                walked_dirs += len(dirnames)

            self.assertEqual(result.stats.files, walked_files)
            self.assertEqual(result.stats.directories, walked_dirs)
            self.assertEqual(result.stats.total, walked_files + walked_dirs)
            self.assertEqual(result.stats.total, len(result.entries))
            self.assertEqual(result.stats.files + result.stats.directories, result.stats.total)

    def test_excluded_name_is_skipped_everywhere(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _make_sample_tree(root)
            (root / "list_paths.py").write_text("#!/usr/bin/env python3\n", encoding="utf-8")
            (root / "b" / "list_paths.py").write_text("\n", encoding="utf-8")

            result = scan_directory(resolve_target_directory(root), excluded_name="list_paths.py")

            self.assertNotIn("list_paths.py", [entry.name for entry in result.entries])
            self.assertEqual(result.stats.total, 7)
            self.assertEqual(result.excluded_name, "list_paths.py")

    def test_directory_sharing_excluded_name_is_kept_with_its_children(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "tool").mkdir()
            (root / "tool" / "inner.txt").write_text("x\n", encoding="utf-8")
            (root / "tool" / "tool").write_text("own file\n", encoding="utf-8")
            (root / "keep.txt").write_text("k\n", encoding="utf-8")

            result = scan_directory(resolve_target_directory(root), excluded_name="tool")

            self.assertEqual(
                [str(entry.relative) for entry in result.entries],
                ["keep.txt", "tool", os.path.join("tool", "inner.txt")],
            )
            self.assertEqual((result.stats.files, result.stats.directories), (2, 1))

    def test_walks_trees_deeper_than_the_recursion_limit(self) -> None:
        levels = 1100
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                for _ in range(levels):
                    os.mkdir("a")
                    os.chdir("a")
                with open("leaf.txt", "w", encoding="utf-8") as handle:
                    handle.write("leaf\n")
                os.chdir(root)

                result = scan_directory(resolve_target_directory(root))

                # Unwind bottom-up one level at a time so cleanup never recurses.
                os.chdir(os.path.join(*(["a"] * levels)))
                os.remove("leaf.txt")
                for _ in range(levels):
                    os.chdir("..")
                    os.rmdir("a")
            finally:
                os.chdir(previous_cwd)

            self.assertEqual(result.stats.directories, levels)
            self.assertEqual(result.stats.files, 1)
            self.assertEqual([entry.depth for entry in result.entries], list(range(1, levels + 2)))
            self.assertEqual(result.entries[-1].name, "leaf.txt")
            self.assertEqual(result.unreadable, ())

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unsupported")
    def test_symlinked_directory_counts_as_file_and_is_not_followed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "real").mkdir()
            (root / "real" / "x.txt").write_text("x\n", encoding="utf-8")
            (root / "link").symlink_to(root / "real", target_is_directory=True)

            result = scan_directory(resolve_target_directory(root))

            self.assertEqual([str(entry.relative) for entry in result.entries], ["link", "real", os.path.join("real", "x.txt")])
            link = result.entries[0]
            self.assertFalse(link.is_dir)
            self.assertEqual(result.stats.files, 2)
            self.assertEqual(result.stats.directories, 1)

    def test_empty_directory_has_zero_counts(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            result = scan_directory(resolve_target_directory(tmp))

            self.assertEqual(result.entries, ())
            self.assertEqual((result.stats.total, result.stats.files, result.stats.directories), (0, 0, 0))

    @unittest.skipIf(hasattr(os, "geteuid") and os.geteuid() == 0, "root can read any directory")
    def test_unreadable_subdirectory_is_reported_and_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            locked = root / "locked"
            locked.mkdir()
            (locked / "secret.txt").write_text("s\n", encoding="utf-8")
            locked.chmod(0o000)
            try:
                result = scan_directory(resolve_target_directory(root))
            finally:
                locked.chmod(0o755)

            self.assertEqual([entry.name for entry in result.entries], ["locked"])
            self.assertEqual(result.unreadable, (locked,))


class CountEntriesTests(unittest.TestCase):
    def test_count_entries_splits_files_and_directories(self) -> None:
        entries = [
            ScanEntry(Path("/r/a"), PurePath("a"), True),
            ScanEntry(Path("/r/a/b"), PurePath("a/b"), False),
            ScanEntry(Path("/r/c"), PurePath("c"), False),
        ]

        stats = count_entries(entries)

        self.assertEqual((stats.total, stats.files, stats.directories), (3, 2, 1))


if __name__ == "__main__":
    unittest.main()
