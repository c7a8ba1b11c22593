from datetime import date

from django.template import Context, Template
from django.test import SimpleTestCase, TestCase

from scheduling.services.calendar import (
    admin_day_summary,
    appointments_on,
    build_month_grid,
    client_day_summary,
    day_aria_label,
    group_by_day,
    month_label,
    parse_day,
    parse_month,
    shift_month,
)

from .helpers import make_appointment, make_request

TODAY = date(2026, 10, 19)


class CalendarHelpersTest(SimpleTestCase):
    def test_month_label_is_capitalised_portuguese(self):
        self.assertEqual(month_label(date(2026, 10, 5)), "Outubro 2026")
        self.assertEqual(month_label(date(2027, 3, 1)), "Março 2027")

    def test_parse_month(self):
        self.assertEqual(parse_month("2026-02", TODAY), date(2026, 2, 1))
        self.assertEqual(parse_month("2026-13", TODAY), date(2026, 10, 1))
        self.assertEqual(parse_month(None, TODAY), date(2026, 10, 1))

    def test_parse_day(self):
        self.assertEqual(parse_day("2026-11-03", TODAY), date(2026, 11, 3))
        self.assertEqual(parse_day("03/11/2026", TODAY), TODAY)
        self.assertEqual(parse_day(None, TODAY), TODAY)

    def test_years_at_the_edge_of_the_calendar_fall_back(self):
        self.assertEqual(parse_month("0001-01", TODAY), date(2026, 10, 1))
        self.assertEqual(parse_month("9999-12", TODAY), date(2026, 10, 1))
        self.assertEqual(parse_day("9999-12-31", TODAY), TODAY)
        self.assertEqual(parse_day("0001-01-01", TODAY), TODAY)

    def test_shift_month_crosses_year(self):
        self.assertEqual(shift_month(date(2026, 12, 1), 1), date(2027, 1, 1))
        self.assertEqual(shift_month(date(2026, 1, 1), -1), date(2025, 12, 1))

    def test_summaries(self):
        self.assertEqual(client_day_summary(0), "Nenhum agendamento para este dia.")
        self.assertEqual(client_day_summary(1), "Você tem 1 agendamento neste dia.")
        self.assertEqual(client_day_summary(3), "Você tem 3 agendamentos neste dia.")
        self.assertEqual(admin_day_summary(0, TODAY), "Você não tem nenhum agendamento no dia 19/10/2026")
        self.assertEqual(admin_day_summary(2, TODAY), "Você tem 2 agendamentos no dia 19/10/2026")

    def test_day_aria_label(self):
        self.assertEqual(day_aria_label(TODAY, 0), "19 de outubro de 2026")
        self.assertEqual(day_aria_label(TODAY, 1), "19 de outubro de 2026 — 1 agendamento")


class MonthGridTest(TestCase):
    def test_weeks_start_on_sunday_and_cover_the_month(self):
        weeks = build_month_grid(date(2026, 10, 1), today=TODAY)
        self.assertEqual(len(weeks), 5)
        self.assertTrue(all(len(week) == 7 for week in weeks))
        self.assertEqual(weeks[0][0]["date"], date(2026, 9, 27))
        self.assertEqual(weeks[0][0]["date"].weekday(), 6)
        self.assertFalse(weeks[0][0]["in_month"])
        self.assertEqual(weeks[-1][-1]["date"], date(2026, 10, 31))

    def test_month_starting_on_sunday(self):
        weeks = build_month_grid(date(2026, 2, 1), today=TODAY)
        self.assertEqual(len(weeks), 4)
        self.assertEqual(weeks[0][0]["date"], date(2026, 2, 1))

    def test_flags_and_counts(self):
        appointments = [
            make_appointment(),
            make_appointment(start="08:15", end="09:05"),
            make_appointment(day=date(2026, 10, 2)),
        ]
        weeks = build_month_grid(
            date(2026, 10, 1),
            today=TODAY,
            selected=date(2026, 10, 2),
            appointments=appointments,
        )
        cells = {cell["date"]: cell for week in weeks for cell in week}
        self.assertTrue(cells[TODAY]["is_today"])
        self.assertEqual(cells[TODAY]["event_count"], 2)
        self.assertEqual(cells[TODAY]["aria_label"], "19 de outubro de 2026 — 2 agendamentos")
        self.assertEqual(cells[TODAY]["title"], "2 agendamentos")
        self.assertTrue(cells[date(2026, 10, 2)]["is_selected"])
        self.assertFalse(cells[TODAY]["is_selected"])
        self.assertEqual(cells[date(2026, 10, 3)]["event_count"], 0)


class DayGroupingTest(TestCase):
    def test_group_by_day_sorts_by_start(self):
        late = make_appointment(start="13:30", end="14:15")
        early = make_appointment(start="07:25", end="08:15")
        other = make_appointment(day=date(2026, 10, 20))
        grouped = group_by_day([late, other, early])
        self.assertEqual(grouped[TODAY], [early, late])
        self.assertEqual(grouped[date(2026, 10, 20)], [other])

    def test_appointments_on_uses_local_day(self):
        evening = make_appointment(start="17:45", end="18:30")
        make_appointment(day=date(2026, 10, 18), start="17:45", end="18:30")
        morning = make_appointment(start="07:25", end="08:15")
        self.assertEqual(list(appointments_on(TODAY)), [morning, evening])


class PeriodLabelFilterTest(TestCase):
    def render(self, item):
        template = Template("{% load scheduling_extras %}{{ item|period_label }}")
        return template.render(Context({"item": item}))

    def test_appointment_label(self):
        appointment = make_appointment(start="07:25", end="09:55")
        self.assertEqual(self.render(appointment), "1ª–3ª aulas — 07:25 – 09:55")

    def test_request_label_falls_back_to_times(self):
        schedule_request = make_request(start="10:00", end="11:00")
        self.assertEqual(self.render(schedule_request), "10:00 – 11:00")

    def test_missing_times(self):
        self.assertEqual(self.render(None), "--:-- – --:--")
