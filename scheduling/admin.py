from django.contrib import admin

from .models import Appointment, ScheduleRequest
from .periods import pretty_time_range_label


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('start_time', 'professor', 'class_group', 'period_display', 'updated_at')
    list_filter = ('start_time',)
    search_fields = ('professor', 'class_group', 'description')
    date_hierarchy = 'start_time'

    def period_display(self, obj):
        return pretty_time_range_label(obj.start_hhmm, obj.end_hhmm)
    period_display.short_description = 'Horário'


@admin.register(ScheduleRequest)
class ScheduleRequestAdmin(admin.ModelAdmin):
    list_display = ('date', 'start', 'end', 'professor', 'class_group', 'created_at')
    list_filter = ('date',)
    search_fields = ('professor', 'class_group', 'description')
