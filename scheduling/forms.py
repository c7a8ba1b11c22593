from datetime import datetime

from django import forms
from django.utils import timezone

from .models import Appointment, ScheduleRequest

TIME_ORDER_ERROR = "O horário de término deve ser maior que o de início."


def combine_local(day, clock):
    return timezone.make_aware(datetime.combine(day, clock), timezone.get_current_timezone())


class _TimeRangeForm(forms.Form):
    date = forms.DateField(input_formats=["%Y-%m-%d"], error_messages={"required": "Informe a data."})
    start = forms.TimeField(input_formats=["%H:%M"], error_messages={"required": "Informe o início."})
    end = forms.TimeField(input_formats=["%H:%M"], error_messages={"required": "Informe o fim."})
    professor = forms.CharField(max_length=120, error_messages={"required": "Informe o nome do professor."})
    class_group = forms.CharField(max_length=60, error_messages={"required": "Informe a turma."})

    def clean(self):
        cleaned_data = super().clean()
        start = cleaned_data.get("start")
        end = cleaned_data.get("end")
        if start and end and end <= start:
            self.add_error("end", TIME_ORDER_ERROR)
        return cleaned_data

    def start_datetime(self):
        return combine_local(self.cleaned_data["date"], self.cleaned_data["start"])

    def end_datetime(self):
        return combine_local(self.cleaned_data["date"], self.cleaned_data["end"])


class AppointmentForm(_TimeRangeForm):
    description = forms.CharField(max_length=5000, error_messages={"required": "Informe a descrição."})

    @classmethod
    def initial_for(cls, appointment):
        """Form values for editing an existing appointment."""
        return {
            "date": appointment.local_date.strftime("%Y-%m-%d"),
            "start": appointment.start_hhmm,
            "end": appointment.end_hhmm,
            "professor": appointment.professor,
            "class_group": appointment.class_group,
            "description": appointment.description,
        }

    def apply_to(self, appointment):
        appointment.professor = self.cleaned_data["professor"]
        appointment.class_group = self.cleaned_data["class_group"]
        appointment.description = self.cleaned_data["description"]
        appointment.start_time = self.start_datetime()
        appointment.end_time = self.end_datetime()
        return appointment

    def build(self):
        return self.apply_to(Appointment())


class ScheduleRequestForm(_TimeRangeForm):
    description = forms.CharField(required=False, max_length=5000)

    def build(self):
        return ScheduleRequest(
            date=self.cleaned_data["date"],
            start=self.cleaned_data["start"],
            end=self.cleaned_data["end"],
            professor=self.cleaned_data["professor"],
            class_group=self.cleaned_data["class_group"],
            description=self.cleaned_data.get("description", ""),
        )
