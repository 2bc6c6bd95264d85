from __future__ import annotations

import unittest
from unittest import mock

from envreader.snapshot import EnvironmentEntry, capture_environment


class CaptureEnvironmentTests(unittest.TestCase):
    def test_pairs_keep_source_order(self) -> None:
        snapshot = capture_environment([("PATH", "/usr/bin"), ("HOME", "/root"), ("A", "")])

        self.assertEqual(len(snapshot), 3)
        self.assertEqual(snapshot.keys(), ["PATH", "HOME", "A"])
        self.assertEqual(snapshot[1], EnvironmentEntry("HOME", "/root"))

    def test_mapping_source_is_read_through_items(self) -> None:
        snapshot = capture_environment({"B": "2", "A": "1"})
        self.assertEqual([str(entry) for entry in snapshot], ["B=2", "A=1"])

    def test_default_source_is_process_environment(self) -> None:
        with mock.patch.dict("envreader.snapshot.os.environ", {"ONLY": "this"}, clear=True):
            snapshot = capture_environment()

        self.assertEqual(list(snapshot), [EnvironmentEntry("ONLY", "this")])

    def test_snapshot_is_not_a_live_view(self) -> None:
        source = {"KEY": "before"}
        snapshot = capture_environment(source)
        source["KEY"] = "after"
        source["NEW"] = "x"

        self.assertEqual(list(snapshot), [EnvironmentEntry("KEY", "before")])

    def test_entries_are_immutable(self) -> None:
        entry = EnvironmentEntry("K", "V")
        with self.assertRaises(AttributeError):
            entry.value = "changed"  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
