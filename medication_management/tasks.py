"""
Vaccination Celery Tasks
"""

import logging

from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task
def refresh_vaccine_statuses():
    """
    Mark open vaccine schedules overdue / pending / upcoming.

    Scheduled daily by Celery beat (see core/celery.py).
    """
    from .services import refresh_schedule_statuses

    return refresh_schedule_statuses()
