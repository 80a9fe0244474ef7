"""
Vaccination Admin Configuration
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import VaccineAdministration, VaccineSchedule


class VaccineAdministrationInline(admin.TabularInline):
    model = VaccineAdministration
    extra = 0
    fields = ['administration_date', 'full_flock_vaccinated', 'head_count_vaccinated', 'cost', 'administered_by']


@admin.register(VaccineSchedule)
class VaccineScheduleAdmin(admin.ModelAdmin):
    """Admin interface for vaccine schedules."""

    list_display = ['vaccine_name', 'week_number', 'scheduled_date', 'status_badge']
    list_filter = ['status', 'scheduled_date']
    search_fields = ['vaccine_name', 'description']
    date_hierarchy = 'scheduled_date'
    inlines = [VaccineAdministrationInline]

    def status_badge(self, obj):
        colors = {
            VaccineSchedule.Status.COMPLETED: 'green',
            VaccineSchedule.Status.PENDING: 'orange',
            VaccineSchedule.Status.OVERDUE: 'red',
            VaccineSchedule.Status.UPCOMING: 'gray',
        }
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; border-radius: 3px;">{}</span>',
            colors.get(obj.status, 'gray'),
            obj.get_status_display()
        )
    status_badge.short_description = 'Status'


@admin.register(VaccineAdministration)
class VaccineAdministrationAdmin(admin.ModelAdmin):
    list_display = ['schedule', 'administration_date', 'full_flock_vaccinated', 'head_count_vaccinated', 'cost', 'currency']
    list_filter = ['full_flock_vaccinated', 'administration_date']
    search_fields = ['schedule__vaccine_name', 'administered_by']
    raw_id_fields = ['schedule', 'created_by']
    readonly_fields = ['created_at', 'updated_at']
