"""
Wallet Models

Each user holds one wallet with a USD and a KES balance. Transfers move money
between two users' wallets, converting to the other currency on the way.
"""

from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q

from core.money import CURRENCY_KES, CURRENCY_USD


class Currency(models.TextChoices):
    USD = CURRENCY_USD, 'US Dollar'
    KES = CURRENCY_KES, 'Kenyan Shilling'


class Wallet(models.Model):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='wallet'
    )
    balance_usd = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    balance_kes = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'poultry_wallets'
        constraints = [
            models.CheckConstraint(
                condition=Q(balance_usd__gte=0) & Q(balance_kes__gte=0),
                name='wallet_balances_non_negative',
            ),
        ]

    def __str__(self):
        return f"Wallet of {self.user} (USD {self.balance_usd}, KES {self.balance_kes})"

    @staticmethod
    def balance_field(currency):
        return 'balance_usd' if currency == CURRENCY_USD else 'balance_kes'

    def balance(self, currency):
        return getattr(self, self.balance_field(currency))


class Transfer(models.Model):
    """
    A completed transfer. ``amount`` leaves the sender in ``currency``;
    ``amount_received`` arrives in ``currency_received``.
    """

    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='transfers_sent'
    )
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='transfers_received'
    )
    amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    currency = models.CharField(max_length=3, choices=Currency.choices)
    exchange_rate = models.DecimalField(
        max_digits=12,
        decimal_places=4,
        help_text="KES per USD"
    )
    amount_received = models.DecimalField(max_digits=14, decimal_places=2)
    currency_received = models.CharField(max_length=3, choices=Currency.choices)
    purpose = models.CharField(max_length=255)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'poultry_transfers'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.sender} → {self.recipient}: {self.currency} {self.amount}"
