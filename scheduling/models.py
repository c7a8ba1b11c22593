from django.db import models
from django.utils import timezone


class Appointment(models.Model):
    professor = models.CharField(max_length=120)
    class_group = models.CharField(max_length=60)  # turma, e.g. 3ºA / INF-01
    description = models.TextField(blank=True)

    start_time = models.DateTimeField()
    end_time = models.DateTimeField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["start_time", "id"]
        indexes = [
            models.Index(fields=["start_time"], name="appointment_start_idx"),
        ]

    @property
    def title(self):
        return f"{self.professor} - {self.class_group}"

    @property
    def local_date(self):
        return timezone.localtime(self.start_time).date()

    @property
    def start_hhmm(self):
        return timezone.localtime(self.start_time).strftime("%H:%M")

    @property
    def end_hhmm(self):
        return timezone.localtime(self.end_time).strftime("%H:%M")

    def __str__(self):
        return f"{self.title} ({self.local_date})"


class ScheduleRequest(models.Model):
    date = models.DateField()
    start = models.TimeField()
    end = models.TimeField()
    professor = models.CharField(max_length=120)
    class_group = models.CharField(max_length=60)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    @property
    def start_hhmm(self):
        return self.start.strftime("%H:%M")

    @property
    def end_hhmm(self):
        return self.end.strftime("%H:%M")

    def __str__(self):
        return f"{self.date} {self.start_hhmm}-{self.end_hhmm} - {self.professor} ({self.class_group})"
