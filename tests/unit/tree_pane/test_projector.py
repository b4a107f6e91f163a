"""Tests for row projection: the up row, entry rows, and failure degradation."""

from __future__ import annotations

import shutil
import tempfile
import unittest
from pathlib import Path

from quickexplorer.host import MemoryConfigStore, RecordingNotifier
from quickexplorer.runtime.commands import CHANGE_DIRECTORY, OPEN_FILE
from quickexplorer.runtime.navigation import NavigationState
from quickexplorer.tree_pane import EntryRow, UpRow, ViewProjector


class ViewProjectorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "src" / "pkg").mkdir(parents=True)
        (self.root / "README.md").write_text("# readme\n", encoding="utf-8")
        (self.root / "src" / "main.py").write_text("print()\n", encoding="utf-8")
        self.notifier = RecordingNotifier()
        self.state = NavigationState(self.root, config=MemoryConfigStore(), notifier=self.notifier)
        self.projector = ViewProjector(self.state, self.notifier)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_root_listing_has_no_up_row(self) -> None:
        rows = self.projector.rows()

        self.assertEqual([row.label for row in rows], ["src", "README.md"])
        self.assertTrue(all(isinstance(row, EntryRow) for row in rows))

    def test_subdirectory_listing_starts_with_up_row(self) -> None:
        self.state.navigate(self.root / "src")

        rows = self.projector.rows()

        self.assertIsInstance(rows[0], UpRow)
        self.assertEqual(rows[0].path, self.root)
        self.assertEqual(rows[0].label, "..")
        self.assertEqual(rows[0].tooltip, "Go to parent directory: .")
        self.assertEqual(rows[0].command.command, CHANGE_DIRECTORY)
        self.assertEqual([row.label for row in rows[1:]], ["pkg", "main.py"])

    def test_entry_rows_carry_tooltip_icon_and_command(self) -> None:
        self.state.navigate(self.root / "src")
        rows = {row.label: row for row in self.projector.rows()}

        folder = rows["pkg"]
        self.assertEqual(folder.tooltip, "src/pkg")
        self.assertEqual(folder.icon, "folder")
        self.assertEqual(folder.context_value, "folder")
        self.assertEqual(folder.command.command, CHANGE_DIRECTORY)
        self.assertEqual(folder.command.argument, self.root / "src" / "pkg")

        script = rows["main.py"]
        self.assertIsNone(script.icon)
        self.assertEqual(script.context_value, "file")
        self.assertEqual(script.command.command, OPEN_FILE)

    def test_listing_failure_degrades_to_empty_rows_with_error(self) -> None:
        self.state.navigate(self.root / "src")
        shutil.rmtree(self.root / "src")

        with self.assertLogs("quickexplorer.tree_pane.projector", level="ERROR"):
            rows = self.projector.rows()

        self.assertEqual(rows, [])
        self.assertEqual(self.notifier.messages[-1][0], "error")
        self.assertIn(str(self.root / "src"), self.notifier.messages[-1][1])

    def test_host_capability_interface(self) -> None:
        children = self.projector.get_children()
        self.assertEqual(len(children), 2)
        self.assertIs(self.projector.get_item(children[0]), children[0])
        self.assertEqual(self.projector.get_children(children[0]), [])

        signals: list[bool] = []
        unsubscribe = self.projector.on_did_change(lambda: signals.append(True))
        self.state.toggle_sort_order()
        unsubscribe()
        self.state.toggle_sort_order()
        self.assertEqual(signals, [True])


class RowTests(unittest.TestCase):
    def test_up_row_without_project_root_uses_absolute_tooltip(self) -> None:
        row = UpRow.for_parent(Path("/a/b"))
        self.assertEqual(row.tooltip, "Go to parent directory: /a/b")
        self.assertEqual(row.icon, "arrow-up")
        self.assertEqual(row.context_value, "parentDirectory")


if __name__ == "__main__":
    unittest.main()
