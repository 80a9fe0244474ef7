"""
Vaccination services.

Recording an administration completes its schedule in the same transaction;
refresh_schedule_statuses re-derives the status of every open schedule from
its date.
"""

import logging
from datetime import timedelta

from django.db import transaction
from django.utils import timezone

from core.conf import records_setting
from .models import VaccineAdministration, VaccineSchedule

logger = logging.getLogger(__name__)


def mark_schedule_completed(schedule_pk):
    updated = VaccineSchedule.objects.filter(pk=schedule_pk).exclude(
        status=VaccineSchedule.Status.COMPLETED
    ).update(status=VaccineSchedule.Status.COMPLETED, updated_at=timezone.now())
    if updated:
        logger.info(f"Vaccine schedule {schedule_pk} marked completed")


@transaction.atomic
def record_administration(validated_data):
    """
    Create an administration and mark its schedule completed.

    ``validated_data`` is a serializer's validated_data (schedule is a
    VaccineSchedule instance).
    """
    schedule = VaccineSchedule.objects.select_for_update().get(pk=validated_data['schedule'].pk)
    administration = VaccineAdministration.objects.create(**validated_data)
    mark_schedule_completed(schedule.pk)

    logger.info(
        f"Vaccine administration {administration.pk} recorded for schedule {schedule.pk} "
        f"({schedule.vaccine_name}) on {administration.administration_date}"
    )
    return administration


def refresh_schedule_statuses(today=None):
    """
    Recompute the status of schedules that are not completed.

    - scheduled before today -> overdue
    - today up to the pending window (7 days by default) -> pending
    - later -> upcoming

    Returns the number of schedules moved into each status.
    """
    today = today or timezone.localdate()
    window_end = today + timedelta(days=int(records_setting('VACCINE_PENDING_WINDOW_DAYS')))
    Status = VaccineSchedule.Status

    open_schedules = VaccineSchedule.objects.exclude(status=Status.COMPLETED)

    with transaction.atomic():
        changed = {
            Status.OVERDUE: open_schedules.filter(
                scheduled_date__lt=today
            ).exclude(status=Status.OVERDUE).update(status=Status.OVERDUE),
            Status.PENDING: open_schedules.filter(
                scheduled_date__gte=today, scheduled_date__lte=window_end
            ).exclude(status=Status.PENDING).update(status=Status.PENDING),
            Status.UPCOMING: open_schedules.filter(
                scheduled_date__gt=window_end
            ).exclude(status=Status.UPCOMING).update(status=Status.UPCOMING),
        }

    result = {str(status): count for status, count in changed.items()}
    logger.info(f"Vaccine schedule statuses refreshed for {today}: {result}")
    return result
