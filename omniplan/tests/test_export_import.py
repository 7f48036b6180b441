from datetime import date
from pathlib import Path
import json
import tempfile
import unittest

from omniplan.domain.Habit import Habit
from omniplan.domain.LifeGoals import LifeGoals
from omniplan.domain.Week import Week
from omniplan.infra.Week_Store import WeekStore
from omniplan.logic.planning.editing import add_todo, save_event
from omniplan.utilities.export_import import (
    BackupImportError,
    DataExporter,
    DataImporter,
    backup_file_name,
    parse_backup,
)

NOW = 1_700_000_000_000


def _sample_week():
    week = Week.empty(date(2024, 1, 1), NOW)
    week = add_todo(week, "2024-01-02", "Investor update", todo_id="t-1")
    week = save_event(week, "2024-01-03", title="Board", start_hour=14, repeating=True)
    return week.copy(habits=[Habit(id="h-1", name="Run", completions={"2024-01-01": True}, created_at=NOW)])


class TestExportImport(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.store = WeekStore.open(self.dir / "omniplan_store.json")
        self.store.save_week(_sample_week(), now=NOW)
        self.store.set_life_goals(LifeGoals().with_entry("1", "q1", "Hire CTO"))

    def tearDown(self):
        self._tmp.cleanup()

    def test_export_shape(self):
        backup = DataExporter(self.store).export_backup()
        self.assertEqual(backup["version"], "2.0")
        self.assertTrue(backup["exportDate"].endswith("Z"))
        self.assertEqual(set(backup["data"]), {"allWeeks", "emails", "lifeGoals"})
        self.assertIn("omni_week_2024-01-01", backup["data"]["allWeeks"])

    def test_round_trip_keeps_data(self):
        first = DataExporter(self.store).export_backup()
        other = WeekStore.open(self.dir / "other.json")
        DataImporter(other).import_backup(json.dumps(first))
        second = DataExporter(other).export_backup()
        self.assertEqual(first["data"], second["data"])

    def test_write_backup_uses_dated_name(self):
        path = DataExporter(self.store).write_backup(self.dir)
        self.assertEqual(path.name, backup_file_name())
        self.assertTrue(path.name.startswith("omniplan-backup-"))
        with open(path, "r", encoding="utf-8") as f:
            self.assertEqual(json.load(f)["version"], "2.0")

    def test_legacy_shape(self):
        legacy = {
            "version": "1.0",
            "timestamp": "2023-12-01T10:00:00Z",
            "allWeeks": {"omni_week_2024-01-01": _sample_week().to_dict()},
        }
        data = parse_backup(json.dumps(legacy))
        self.assertEqual(list(data.all_weeks), ["omni_week_2024-01-01"])
        self.assertEqual(data.emails, [])
        self.assertEqual(data.life_goals, LifeGoals())

    def test_current_shape_missing_inner_keys(self):
        data = parse_backup(json.dumps({"version": "2.0", "data": {"emails": []}}))
        self.assertEqual(data.all_weeks, {})

    def test_rejections(self):
        bad_inputs = [
            "",
            "   ",
            "{oops",
            "[1, 2]",
            json.dumps({"version": "2.0"}),
            json.dumps({"data": "weeks"}),
            json.dumps({"data": {"allWeeks": []}}),
            json.dumps({"emails": "inbox"}),
            json.dumps({"data": {"allWeeks": {"omni_week_x": {"weekStartDate": "not-a-date"}}}}),
        ]
        for text in bad_inputs:
            with self.subTest(text=text):
                with self.assertRaises(BackupImportError):
                    parse_backup(text)

    def test_rejected_import_changes_nothing(self):
        before = DataExporter(self.store).export_backup()["data"]
        with self.assertRaises(BackupImportError):
            DataImporter(self.store).import_backup(json.dumps({"data": {"allWeeks": {"k": 5}}}))
        self.assertEqual(DataExporter(self.store).export_backup()["data"], before)
        self.assertEqual(list((self.dir / "backups").glob("*-import.json")), [])

    def test_import_takes_snapshot_first(self):
        DataImporter(self.store).import_backup(json.dumps({"version": "2.0", "data": {}}))
        snapshots = list((self.dir / "backups").glob("omniplan_store_*-import.json"))
        self.assertEqual(len(snapshots), 1)
        with open(snapshots[0], "r", encoding="utf-8") as f:
            self.assertIn("omni_week_2024-01-01", json.load(f)["omni_all_weeks"])
        self.assertEqual(len(self.store), 0)

    def test_import_file(self):
        path = self.dir / "legacy.json"
        path.write_text(json.dumps({"lifeGoals": {"5": {"2029": {"goal": "Exit", "action": "Grow"}}}}),
                        encoding="utf-8")
        DataImporter(self.store).import_file(path)
        self.assertEqual(self.store.life_goals.get("5")["2029"]["goal"], "Exit")

    def test_import_missing_file(self):
        with self.assertRaises(BackupImportError):
            DataImporter(self.store).import_file(self.dir / "missing.json")


if __name__ == '__main__':
    unittest.main()
