"""
Vaccination Management Models

Models:
    - VaccineSchedule: A planned vaccination for the flock (by week of age)
    - VaccineAdministration: A record of a scheduled vaccine being given
"""

from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class VaccineSchedule(models.Model):
    """
    A planned vaccination.

    Status is kept current by medication_management.services.refresh_schedule_statuses
    (run daily by Celery beat) and set to completed when an administration is recorded.
    """

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        COMPLETED = 'completed', 'Completed'
        OVERDUE = 'overdue', 'Overdue'
        UPCOMING = 'upcoming', 'Upcoming'

    vaccine_name = models.CharField(max_length=200, help_text="Vaccine to administer (e.g., Newcastle, Gumboro)")
    week_number = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1)],
        help_text="Week of age the vaccine is due"
    )
    scheduled_date = models.DateField()
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True
    )
    description = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'poultry_vaccine_schedules'
        ordering = ['-scheduled_date', '-id']

    def __str__(self):
        return f"{self.vaccine_name} - Week {self.week_number} ({self.scheduled_date})"


class VaccineAdministration(models.Model):
    """
    Record of a scheduled vaccine being administered.
    """

    schedule = models.ForeignKey(
        VaccineSchedule,
        on_delete=models.CASCADE,
        related_name='administrations'
    )
    administration_date = models.DateField()
    full_flock_vaccinated = models.BooleanField(default=True)
    head_count_vaccinated = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Birds vaccinated when not the full flock"
    )
    cost = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    currency = models.CharField(max_length=10, default='KES')
    notes = models.TextField(blank=True)
    administered_by = models.CharField(max_length=255)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='vaccine_administrations'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'poultry_vaccine_administrations'
        ordering = ['-administration_date', '-id']

    def __str__(self):
        return f"{self.schedule.vaccine_name} on {self.administration_date}"
