"""
Admin interface for batches, coops, allocations and daily logs.
"""

from django.contrib import admin
from django.utils.html import format_html
from .models import Batch, Coop, CoopAllocation, DailyLog


# =============================================================================
# BATCH ADMIN
# =============================================================================

class CoopAllocationInline(admin.TabularInline):
    model = CoopAllocation
    extra = 0
    fields = ['coop_id', 'allocated_quantity', 'placement_date', 'initial_mortality', 'notes']


@admin.register(Batch)
class BatchAdmin(admin.ModelAdmin):
    """
    Admin interface for bird batches.
    """

    list_display = [
        'batch_id', 'name', 'breed', 'arrival_date', 'initial_quantity',
        'current_count', 'mortality_rate_badge', 'payment_status', 'is_active'
    ]

    list_filter = ['breed', 'payment_status', 'is_active', 'arrival_date']

    search_fields = ['batch_id', 'name', 'supplier']

    readonly_fields = [
        'batch_id', 'total_initial_cost', 'balance_due', 'payment_status',
        'created_at', 'updated_at'
    ]

    fieldsets = [
        ('Batch Identification', {
            'fields': ['batch_id', 'name', 'breed', 'supplier']
        }),
        ('Intake', {
            'fields': [
                'arrival_date', 'intake_age_days', 'initial_quantity',
                'current_count', 'is_active'
            ]
        }),
        ('Costs (Derived Totals)', {
            'fields': [
                'currency', 'cost_per_bird', 'transport_cost', 'equipment_cost',
                'total_initial_cost', 'amount_paid_upfront', 'balance_due',
                'payment_status'
            ],
            'classes': ['wide']
        }),
        ('Timestamps', {
            'fields': ['created_at', 'updated_at'],
            'classes': ['collapse']
        }),
    ]

    inlines = [CoopAllocationInline]

    def mortality_rate_badge(self, obj):
        """Color-coded mortality rate badge"""
        rate = obj.mortality_rate_percent
        if rate < 5:
            color = 'green'
        elif rate < 10:
            color = 'orange'
        else:
            color = 'red'
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; border-radius: 3px; font-weight: bold;">{}%</span>',
            color, f"{rate:.2f}"
        )
    mortality_rate_badge.short_description = 'Mortality Rate'


# =============================================================================
# COOP ADMIN
# =============================================================================

@admin.register(Coop)
class CoopAdmin(admin.ModelAdmin):
    list_display = ['code', 'name', 'capacity', 'occupied', 'is_active']
    list_filter = ['is_active']
    search_fields = ['code', 'name']


@admin.register(CoopAllocation)
class CoopAllocationAdmin(admin.ModelAdmin):
    list_display = ['batch', 'coop_id', 'allocated_quantity', 'placement_date', 'initial_mortality']
    list_filter = ['placement_date']
    search_fields = ['coop_id', 'batch__batch_id']
    raw_id_fields = ['batch']


# =============================================================================
# DAILY LOG ADMIN
# =============================================================================

@admin.register(DailyLog)
class DailyLogAdmin(admin.ModelAdmin):
    """
    Daily logs are shown read-mostly: editing mortality here does not
    touch the batch's live count.
    """

    list_display = [
        'log_date', 'batch', 'mortality_count', 'feed_type',
        'feed_bags', 'feed_kg', 'water_intake_liters', 'logged_by'
    ]
    list_filter = ['feed_type', 'feed_input_mode', 'log_date']
    search_fields = ['logged_by', 'notes', 'batch__batch_id']
    date_hierarchy = 'log_date'
    raw_id_fields = ['batch', 'created_by']
    readonly_fields = ['created_at', 'updated_at']
