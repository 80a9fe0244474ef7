"""
Refresh Vaccine Statuses Management Command

Recomputes the status of every vaccine schedule that is not completed.
Celery beat runs the same job daily; use this when beat is not running:

    30 0 * * * cd /path/to/poultry-records && python manage.py refresh_vaccine_statuses
"""

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from core.coercion import parse_date
from core.exceptions import ValidationError
from medication_management.services import refresh_schedule_statuses


class Command(BaseCommand):
    help = 'Mark open vaccine schedules as overdue, pending or upcoming'

    def add_arguments(self, parser):
        parser.add_argument(
            '--date',
            help='Evaluate statuses as of this date (YYYY-MM-DD). Defaults to today.',
        )

    def handle(self, *args, **options):
        try:
            today = parse_date(options['date'], 'date') if options['date'] else timezone.localdate()
        except ValidationError as e:
            raise CommandError(e.message)

        self.stdout.write(f'Refreshing vaccine schedule statuses as of {today}...')
        changed = refresh_schedule_statuses(today=today)

        total = sum(changed.values())
        for status, count in changed.items():
            if count:
                self.stdout.write(f'  {count} schedule(s) -> {status}')

        if total:
            self.stdout.write(self.style.SUCCESS(f'✓ {total} schedule(s) updated'))
        else:
            self.stdout.write(self.style.SUCCESS('✓ All schedules already up to date'))
