"""Tests for the default host collaborators and the terminal renderer."""

from __future__ import annotations

import unittest
from dataclasses import fields
from pathlib import Path

from quickexplorer.file_tree_model import DirectoryEntry
from quickexplorer.host import LoggingNotifier, MemoryConfigStore, RecordingNotifier, StaticWorkspace
from quickexplorer.render import format_notice, render_listing
from quickexplorer.tree_pane import EntryRow, UpRow
from quickexplorer.ui_theme import DEFAULT_THEME, PLAIN_THEME, available_theme_names, resolve_theme


class HostCollaboratorTests(unittest.TestCase):
    def test_static_workspace(self) -> None:
        self.assertIsNone(StaticWorkspace().workspace_root())
        self.assertEqual(StaticWorkspace("/srv/app").workspace_root(), Path("/srv/app"))

    def test_logging_notifier_routes_levels(self) -> None:
        notifier = LoggingNotifier()
        with self.assertLogs("quickexplorer.notifications", level="INFO") as captured:
            notifier.info("hello")
            notifier.warning("careful")
            notifier.error("broken")

        self.assertEqual(
            captured.output,
            [
                "INFO:quickexplorer.notifications:hello",
                "WARNING:quickexplorer.notifications:careful",
                "ERROR:quickexplorer.notifications:broken",
            ],
        )

    def test_recording_notifier_drain_empties_queue(self) -> None:
        notifier = RecordingNotifier()
        notifier.warning("a")

        self.assertEqual(notifier.drain(), [("warning", "a")])
        self.assertEqual(notifier.messages, [])

    def test_memory_config_store_defaults(self) -> None:
        store = MemoryConfigStore()
        self.assertEqual(store.get("defaultPath", "fallback"), "fallback")
        store.set("defaultPath", "src")
        self.assertEqual(store.get("defaultPath"), "src")


class RenderTests(unittest.TestCase):
    def test_theme_resolution(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertIs(resolve_theme("unknown"), DEFAULT_THEME)
        self.assertEqual(available_theme_names(), ("default", "ocean"))

    def test_colored_listing_wraps_rows_in_theme_codes(self) -> None:
        output = render_listing("sub · Name ↑", [UpRow.for_parent(Path("/p"), Path("/p"))], DEFAULT_THEME)

        self.assertIn(f"{DEFAULT_THEME.row_parent}↑ ..{DEFAULT_THEME.reset}", output)
        self.assertTrue(output.startswith(DEFAULT_THEME.title))

    def test_empty_listing_shows_placeholder(self) -> None:
        self.assertEqual(render_listing(".", [], PLAIN_THEME), ".\n  (empty)\n")

    def test_notice_format(self) -> None:
        self.assertEqual(format_notice("warning", "x", PLAIN_THEME), "[warning] x")

    def test_every_palette_color_is_rendered(self) -> None:
        rows = [
            UpRow.for_parent(Path("/p"), Path("/p")),
            EntryRow.from_entry(DirectoryEntry("src", Path("/p/sub/src"), True)),
            EntryRow.from_entry(DirectoryEntry("a.py", Path("/p/sub/a.py"), False)),
        ]
        output = "".join(
            [
                render_listing("sub · Name ↑", rows, DEFAULT_THEME),
                render_listing("empty · Name ↑", [], DEFAULT_THEME),
                *(format_notice(level, "x", DEFAULT_THEME) for level in ("info", "warning", "error")),
            ]
        )

        for field in fields(DEFAULT_THEME):
            if field.name == "name":
                continue
            with self.subTest(field=field.name):
                self.assertIn(getattr(DEFAULT_THEME, field.name), output)


if __name__ == "__main__":
    unittest.main()
