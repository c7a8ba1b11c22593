import calendar
from collections import Counter, defaultdict
from datetime import date, datetime, timedelta

from django.utils import timezone

from scheduling.models import Appointment

MONTH_NAMES = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)
WEEKDAY_HEADERS = ("Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sáb")

# weeks start on Sunday
_CALENDAR = calendar.Calendar(firstweekday=6)


# Navigable years; outside this range neighbouring months and day bounds overflow `date`
MIN_YEAR = 1900
MAX_YEAR = 2999


def month_label(day):
    return f"{MONTH_NAMES[day.month - 1].capitalize()} {day.year}"


def parse_month(value, today):
    """'2026-10' -> date(2026, 10, 1); anything else -> first day of today's month."""
    try:
        parsed = datetime.strptime(value or "", "%Y-%m").date()
    except ValueError:
        return today.replace(day=1)
    if not MIN_YEAR <= parsed.year <= MAX_YEAR:
        return today.replace(day=1)
    return parsed.replace(day=1)


def parse_day(value, today):
    try:
        parsed = datetime.strptime(value or "", "%Y-%m-%d").date()
    except ValueError:
        return today
    if not MIN_YEAR <= parsed.year <= MAX_YEAR:
        return today
    return parsed


def shift_month(anchor, delta):
    month_index = anchor.year * 12 + (anchor.month - 1) + delta
    return date(month_index // 12, month_index % 12 + 1, 1)


def pluralize_appointments(count):
    return f"{count} agendamento{'s' if count > 1 else ''}"


def day_aria_label(day, count):
    label = f"{day.day} de {MONTH_NAMES[day.month - 1]} de {day.year}"
    if count:
        label += f" — {pluralize_appointments(count)}"
    return label


def group_by_day(appointments):
    """Local date -> appointments of that day sorted by start time."""
    grouped = defaultdict(list)
    for appointment in appointments:
        if appointment.start_time is None:
            continue
        grouped[timezone.localtime(appointment.start_time).date()].append(appointment)
    for items in grouped.values():
        items.sort(key=lambda item: item.start_time)
    return dict(grouped)


def build_month_grid(anchor, *, today, selected=None, appointments=()):
    counts = Counter(
        timezone.localtime(appointment.start_time).date()
        for appointment in appointments
        if appointment.start_time is not None
    )
    weeks = []
    for week in _CALENDAR.monthdatescalendar(anchor.year, anchor.month):
        cells = []
        for day in week:
            count = counts.get(day, 0)
            cells.append(
                {
                    "date": day,
                    "in_month": day.month == anchor.month,
                    "is_today": day == today,
                    "is_selected": selected is not None and day == selected,
                    "event_count": count,
                    "aria_label": day_aria_label(day, count),
                    "title": pluralize_appointments(count) if count else "",
                }
            )
        weeks.append(cells)
    return weeks


def appointments_on(day):
    tz = timezone.get_current_timezone()
    day_start = timezone.make_aware(datetime.combine(day, datetime.min.time()), tz)
    day_end = day_start + timedelta(days=1)
    return Appointment.objects.filter(start_time__gte=day_start, start_time__lt=day_end).order_by("start_time", "id")


def client_day_summary(count):
    if count == 0:
        return "Nenhum agendamento para este dia."
    return f"Você tem {pluralize_appointments(count)} neste dia."


def admin_day_summary(count, day):
    formatted = day.strftime("%d/%m/%Y")
    if count == 0:
        return f"Você não tem nenhum agendamento no dia {formatted}"
    return f"Você tem {pluralize_appointments(count)} no dia {formatted}"
