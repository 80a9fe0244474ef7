"""
Admin configuration for Expense Tracking models.
"""

from django.contrib import admin
from django.utils.html import format_html

from core.money import PaymentStatus
from .models import Expense


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    """Admin for expense records"""
    list_display = [
        'expense_date', 'category', 'description_short', 'amount_display',
        'status_badge', 'batch', 'created_at'
    ]
    list_filter = ['category', 'expense_date', 'payment_status']
    search_fields = ['description', 'notes', 'reference', 'payee', 'batch__batch_id']
    date_hierarchy = 'expense_date'
    list_per_page = 50
    ordering = ['-expense_date', '-created_at']
    raw_id_fields = ['batch']

    readonly_fields = ['balance_due', 'payment_status', 'created_at', 'updated_at', 'created_by']

    fieldsets = (
        ('Basic Information', {
            'fields': ('batch', 'expense_date', 'category', 'description')
        }),
        ('Expense Details', {
            'fields': ('quantity', 'unit', 'unit_cost', 'total_amount', 'currency')
        }),
        ('Payment Information', {
            'fields': (
                'amount_paid', 'balance_due', 'payment_status',
                'payment_method', 'reference', 'payee'
            )
        }),
        ('Notes', {
            'fields': ('notes',)
        }),
        ('Metadata', {
            'fields': ('created_by', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def description_short(self, obj):
        if len(obj.description) > 50:
            return f"{obj.description[:50]}..."
        return obj.description
    description_short.short_description = 'Description'

    def amount_display(self, obj):
        return f"{obj.currency} {obj.total_amount:,.2f}"
    amount_display.short_description = 'Amount'
    amount_display.admin_order_field = 'total_amount'

    def status_badge(self, obj):
        colors = {
            PaymentStatus.PAID: '#28a745',
            PaymentStatus.PARTIAL: '#fd7e14',
            PaymentStatus.PENDING: '#dc3545',
        }
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; border-radius: 3px;">{}</span>',
            colors.get(obj.payment_status, '#6c757d'),
            obj.get_payment_status_display()
        )
    status_badge.short_description = 'Payment'
