from datetime import date

from django.test import TestCase

from scheduling.services.stats import NO_SLOT, dashboard_stats

from .helpers import make_appointment

TODAY = date(2026, 10, 19)


class DashboardStatsTest(TestCase):
    def test_empty(self):
        stats = dashboard_stats([], TODAY)
        self.assertEqual(stats["total_all"], 0)
        self.assertEqual(stats["total_month"], 0)
        self.assertEqual(stats["top_slot"], NO_SLOT)
        self.assertEqual(stats["month_label"], "Outubro 2026")

    def test_totals_and_top_slot(self):
        appointments = [
            make_appointment(day=date(2026, 10, 5), start="07:25", end="08:15"),
            make_appointment(day=date(2026, 9, 30), start="09:05", end="09:55"),
            make_appointment(day=date(2026, 10, 19), start="07:25", end="08:15"),
        ]
        stats = dashboard_stats(appointments, TODAY)
        self.assertEqual(stats["total_all"], 3)
        self.assertEqual(stats["total_month"], 2)
        self.assertEqual(stats["top_slot"], "07:25–08:15")

    def test_tie_keeps_first_slot_seen(self):
        appointments = [
            make_appointment(start="09:05", end="09:55"),
            make_appointment(start="07:25", end="08:15"),
        ]
        self.assertEqual(dashboard_stats(appointments, TODAY)["top_slot"], "09:05–09:55")

    def test_same_month_of_another_year_is_not_counted(self):
        appointments = [make_appointment(day=date(2025, 10, 19))]
        self.assertEqual(dashboard_stats(appointments, TODAY)["total_month"], 0)
