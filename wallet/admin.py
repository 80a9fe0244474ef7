from django.contrib import admin

from .models import Transfer, Wallet


@admin.register(Wallet)
class WalletAdmin(admin.ModelAdmin):
    """Balances are topped up here; the API only moves money between wallets."""
    list_display = ['user', 'balance_usd', 'balance_kes', 'updated_at']
    search_fields = ['user__username', 'user__email']
    raw_id_fields = ['user']


@admin.register(Transfer)
class TransferAdmin(admin.ModelAdmin):
    list_display = [
        'created_at', 'sender', 'recipient', 'amount', 'currency',
        'amount_received', 'currency_received', 'exchange_rate'
    ]
    list_filter = ['currency', 'created_at']
    search_fields = ['sender__username', 'recipient__username', 'purpose']
    date_hierarchy = 'created_at'

    def has_change_permission(self, request, obj=None):
        return False
