from pathlib import Path
import tempfile
import unittest

from omniplan.utilities.backup import BackupManager


class TestBackupManager(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.store = self.dir / "omniplan_store.json"
        self.store.write_text('{"v": 1}', encoding="utf-8")
        self.manager = BackupManager(self.dir, keep=3)

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_file_gives_none(self):
        self.assertIsNone(self.manager.create_backup("nothing.json"))

    def test_keeps_most_recent(self):
        created = [self.manager.create_backup(self.store.name, tag=f"n{i}") for i in range(5)]
        names = sorted(p.name for p in (self.dir / "backups").iterdir())
        self.assertEqual(names, sorted(p.name for p in created[-3:]))

    def test_restore_snapshots_current_first(self):
        snapshot = self.manager.create_backup(self.store.name, tag="import")
        self.store.write_text('{"v": 2}', encoding="utf-8")
        self.assertTrue(self.manager.restore_backup(snapshot.name, self.store.name))
        self.assertEqual(self.store.read_text(encoding="utf-8"), '{"v": 1}')
        listed = [b["name"] for b in self.manager.list_backups(self.store.name)]
        self.assertTrue(any(name.endswith("-pre-restore.json") for name in listed))

    def test_restore_unknown_snapshot(self):
        self.assertFalse(self.manager.restore_backup("missing.json", self.store.name))


if __name__ == '__main__':
    unittest.main()
