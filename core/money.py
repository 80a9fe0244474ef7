"""
Money helpers shared by batches, expenses and wallet transfers.

All amounts are Decimals with two places, rounded half-up.
"""

from decimal import Decimal, ROUND_HALF_UP

from django.db import models

from .exceptions import ValidationError

TWO_PLACES = Decimal('0.01')

CURRENCY_USD = 'USD'
CURRENCY_KES = 'KES'
SUPPORTED_CURRENCIES = (CURRENCY_USD, CURRENCY_KES)


class PaymentStatus(models.TextChoices):
    PAID = 'paid', 'Paid'
    PARTIAL = 'partial', 'Partial'
    PENDING = 'pending', 'Pending'


def quantize(amount) -> Decimal:
    return Decimal(amount).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def compute_balance(total: Decimal, paid: Decimal) -> Decimal:
    return quantize(total - paid)


def derive_payment_status(total: Decimal, paid: Decimal) -> str:
    """
    paid    - something is owed and it has been covered in full
    partial - some money has changed hands but not all
    pending - nothing paid yet (or nothing owed)
    """
    if total > 0 and paid >= total:
        return PaymentStatus.PAID
    if paid > 0:
        return PaymentStatus.PARTIAL
    return PaymentStatus.PENDING


def convert_currency(amount: Decimal, from_currency: str, rate: Decimal):
    """
    Convert between USD and KES. ``rate`` is KES per USD.

    Returns (converted_amount, target_currency).
    """
    if rate <= 0:
        raise ValidationError('Exchange rate must be greater than zero')
    if from_currency == CURRENCY_USD:
        return quantize(amount * rate), CURRENCY_KES
    if from_currency == CURRENCY_KES:
        return quantize(amount / rate), CURRENCY_USD
    raise ValidationError(f'Unsupported currency: {from_currency}. Use USD or KES')


def money_string(value) -> str:
    """Two-place string for JSON bodies built outside a serializer."""
    return str(quantize(value or 0))
