from datetime import date, datetime

from scheduling.forms import combine_local
from scheduling.models import Appointment, ScheduleRequest


def make_appointment(day=date(2026, 10, 19), start="07:25", end="08:15", **extra):
    fields = {
        "professor": "Prof. Ana",
        "class_group": "3ºA",
        "description": "Laboratório",
    }
    fields.update(extra)
    return Appointment.objects.create(
        start_time=combine_local(day, datetime.strptime(start, "%H:%M").time()),
        end_time=combine_local(day, datetime.strptime(end, "%H:%M").time()),
        **fields,
    )


def make_request(day=date(2026, 10, 20), start="10:25", end="12:05", **extra):
    fields = {
        "professor": "Prof. Bruno",
        "class_group": "8ºB",
        "description": "",
    }
    fields.update(extra)
    return ScheduleRequest.objects.create(
        date=day,
        start=datetime.strptime(start, "%H:%M").time(),
        end=datetime.strptime(end, "%H:%M").time(),
        **fields,
    )
