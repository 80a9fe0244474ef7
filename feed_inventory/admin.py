"""
Feed Inventory Admin Configuration

Admin interface for suppliers and feed intakes.
"""

from django.contrib import admin

from .models import FeedIntake, Supplier


@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    list_display = ['name', 'contact_person', 'phone', 'email', 'created_at']
    search_fields = ['name', 'contact_person', 'email']


@admin.register(FeedIntake)
class FeedIntakeAdmin(admin.ModelAdmin):
    """Admin interface for feed deliveries."""

    list_display = [
        'delivery_date', 'feed_type', 'supplier_name', 'bags_received',
        'kg_received', 'total_cost', 'currency', 'received_by'
    ]

    list_filter = ['feed_type', 'input_mode', 'delivery_date']

    search_fields = ['supplier_name', 'custom_feed_name', 'invoice_number', 'batch_number']

    date_hierarchy = 'delivery_date'

    raw_id_fields = ['supplier', 'created_by']

    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Delivery', {
            'fields': ('delivery_date', 'feed_type', 'custom_feed_name', 'received_by')
        }),
        ('Supplier', {
            'fields': ('supplier', 'supplier_name', 'invoice_number', 'batch_number')
        }),
        ('Quantity & Cost', {
            'fields': (
                'input_mode', 'bags_received', 'kg_received',
                'cost_per_bag', 'cost_per_kg', 'total_cost', 'currency'
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
