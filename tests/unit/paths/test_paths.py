"""Tests for pure path helpers used by the navigation boundary."""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from quickexplorer.paths import is_filesystem_root, is_within, parent_of, relative_to


class PathHelperTests(unittest.TestCase):
    def test_parent_of_returns_containing_directory(self) -> None:
        self.assertEqual(parent_of(Path("/a/b/c")), Path("/a/b"))
        self.assertEqual(parent_of("/a"), Path("/"))

    def test_filesystem_root_is_its_own_parent(self) -> None:
        self.assertEqual(parent_of("/"), Path("/"))
        self.assertTrue(is_filesystem_root("/"))
        self.assertFalse(is_filesystem_root("/a"))

    def test_is_within_accepts_root_and_descendants(self) -> None:
        self.assertTrue(is_within("/a/b", "/a/b"))
        self.assertTrue(is_within("/a/b/c", "/a/b"))
        self.assertTrue(is_within(Path("/a/b/c/d"), Path("/a/b")))

    def test_is_within_rejects_ancestors_and_siblings_sharing_a_prefix(self) -> None:
        self.assertFalse(is_within("/a", "/a/b"))
        self.assertFalse(is_within("/", "/a/b"))
        self.assertFalse(is_within("/a/bc", "/a/b"))

    def test_is_within_normalizes_backslashes(self) -> None:
        self.assertTrue(is_within("C:\\proj\\src", "C:/proj"))
        self.assertFalse(is_within("C:\\other", "C:/proj"))

    def test_is_within_is_case_sensitive(self) -> None:
        self.assertFalse(is_within("/A/b/c", "/a/b"))

    def test_everything_is_within_filesystem_root(self) -> None:
        self.assertTrue(is_within("/a/b", "/"))

    def test_relative_to(self) -> None:
        self.assertEqual(relative_to("/a", "/a"), ".")
        self.assertEqual(relative_to("/a", "/a/b/c"), "b/c")
        self.assertEqual(relative_to(Path("/a/b"), Path("/a/b/c")), "c")

    def test_relative_to_returns_path_unchanged_when_no_relative_form_exists(self) -> None:
        with mock.patch("os.path.relpath", side_effect=ValueError("path is on mount C:, start on mount D:")):
            self.assertEqual(relative_to("D:/work", "C:/data/x"), "C:/data/x")
            self.assertEqual(relative_to(Path("/work"), Path("/data/x")), str(Path("/data/x")))


if __name__ == "__main__":
    unittest.main()
