from datetime import datetime

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from scheduling.forms import combine_local
from scheduling.models import Appointment, ScheduleRequest

DEMO_APPOINTMENTS = (
    ("07:25", "09:05", "Prof. Ana", "3ºA", "Laboratório de ciências"),
    ("09:05", "10:25", "Prof. Bruno", "8ºB", "Sala de informática"),
    ("13:30", "15:00", "Prof. Carla", "INF-01", "Auditório"),
)
DEMO_REQUESTS = (
    ("10:25", "12:05", "Prof. Diego", "6ºA", "Biblioteca"),
    ("15:45", "16:15", "Prof. Elisa", "9ºC", ""),
)


class Command(BaseCommand):
    help = "Create sample appointments and pending requests for one day."

    def add_arguments(self, parser):
        parser.add_argument('--date', help='YYYY-MM-DD (default: today)')
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='List what would be created without writing to the database',
        )

    def handle(self, *args, **options):
        raw_date = options.get('date')
        if raw_date:
            try:
                day = datetime.strptime(raw_date, '%Y-%m-%d').date()
            except ValueError:
                raise CommandError(f"Invalid --date value: {raw_date}")
        else:
            day = timezone.localdate()

        dry_run = options['dry_run']
        if dry_run:
            self.stdout.write('[DRY RUN] nothing will be written.')

        for start, end, professor, class_group, description in DEMO_APPOINTMENTS:
            self.stdout.write(f" appointment {day} {start}-{end} {professor} - {class_group}")
            if dry_run:
                continue
            Appointment.objects.get_or_create(
                professor=professor,
                class_group=class_group,
                start_time=combine_local(day, datetime.strptime(start, '%H:%M').time()),
                defaults={
                    'end_time': combine_local(day, datetime.strptime(end, '%H:%M').time()),
                    'description': description,
                },
            )

        for start, end, professor, class_group, description in DEMO_REQUESTS:
            self.stdout.write(f" request {day} {start}-{end} {professor} - {class_group}")
            if dry_run:
                continue
            ScheduleRequest.objects.get_or_create(
                date=day,
                start=datetime.strptime(start, '%H:%M').time(),
                end=datetime.strptime(end, '%H:%M').time(),
                professor=professor,
                class_group=class_group,
                defaults={'description': description},
            )

        self.stdout.write(self.style.SUCCESS(f"[scheduling] demo data ready for {day}"))
