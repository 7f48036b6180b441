from datetime import date, datetime
import unittest

from omniplan.utilities.dates import (
    format_day_key,
    format_hour,
    generate_time_slots,
    get_month_range,
    get_week_days,
    get_week_start,
    get_week_storage_key,
    local_midnight_ms,
    parse_day_key,
    week_end_ms,
)


class TestDates(unittest.TestCase):

    def test_week_start_is_monday(self):
        # 2024-01-03 is a Wednesday
        self.assertEqual(get_week_start(date(2024, 1, 3)), date(2024, 1, 1))
        self.assertEqual(get_week_start(date(2024, 1, 1)), date(2024, 1, 1))

    def test_sunday_belongs_to_preceding_monday(self):
        self.assertEqual(get_week_start(date(2024, 1, 7)), date(2024, 1, 1))
        self.assertEqual(get_week_storage_key(date(2024, 1, 7)), "omni_week_2024-01-01")

    def test_week_crossing_year_boundary(self):
        # 2025-01-01 is a Wednesday; its week starts in 2024
        self.assertEqual(get_week_storage_key(date(2025, 1, 1)), "omni_week_2024-12-30")

    def test_datetime_is_reduced_to_date(self):
        self.assertEqual(get_week_start(datetime(2024, 1, 3, 23, 59)), date(2024, 1, 1))

    def test_week_days(self):
        days = get_week_days(date(2024, 2, 28))
        self.assertEqual(len(days), 7)
        self.assertEqual(days[0], date(2024, 2, 26))
        self.assertEqual(days[-1], date(2024, 3, 3))

    def test_day_key_round_trip(self):
        self.assertEqual(format_day_key(date(2024, 3, 9)), "2024-03-09")
        self.assertEqual(parse_day_key("2024-03-09"), date(2024, 3, 9))

    def test_parse_day_key_rejects_garbage(self):
        with self.assertRaises(ValueError):
            parse_day_key("09.03.2024")

    def test_month_range(self):
        self.assertEqual(get_month_range(2024, 2), (date(2024, 2, 1), date(2024, 2, 29)))
        self.assertEqual(get_month_range(2023, 12), (date(2023, 12, 1), date(2023, 12, 31)))

    def test_time_slots(self):
        slots = generate_time_slots()
        self.assertEqual(len(slots), 48)
        self.assertEqual(slots[0], 0)
        self.assertEqual(slots[-1], 23.5)

    def test_format_hour(self):
        self.assertEqual(format_hour(0), "12:00 AM")
        self.assertEqual(format_hour(9.5), "9:30 AM")
        self.assertEqual(format_hour(12), "12:00 PM")
        self.assertEqual(format_hour(13.5), "1:30 PM")

    def test_week_end_is_last_millisecond_of_sunday(self):
        monday = date(2024, 1, 1)
        self.assertEqual(week_end_ms(monday), local_midnight_ms(date(2024, 1, 8)) - 1)


if __name__ == '__main__':
    unittest.main()
