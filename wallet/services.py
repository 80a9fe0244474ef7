"""
Wallet Services

TransferService moves money between wallets:
- amounts convert USD→KES by multiplying by the rate, KES→USD by dividing
- both wallet rows are locked (in primary-key order) before either balance changes
- the sender must hold enough in the sending currency
"""

import logging
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.db import transaction

from core.conf import records_setting
from core.exceptions import InsufficientFundsError, NotFoundError, ValidationError
from core.money import SUPPORTED_CURRENCIES, convert_currency, quantize

from .models import Transfer, Wallet

logger = logging.getLogger(__name__)


def wallet_for(user):
    wallet, _ = Wallet.objects.get_or_create(user=user)
    return wallet


class TransferService:

    def default_rate(self) -> Decimal:
        return Decimal(records_setting('DEFAULT_USD_KES_RATE'))

    def quote(self, amount, currency, exchange_rate=None):
        """Conversion for a prospective transfer; no balances are touched."""
        if currency not in SUPPORTED_CURRENCIES:
            raise ValidationError(f'Unsupported currency: {currency}. Use USD or KES')
        if amount is None or amount <= 0:
            raise ValidationError('Amount must be greater than zero')

        rate = exchange_rate if exchange_rate is not None else self.default_rate()
        amount = quantize(amount)
        amount_received, currency_received = convert_currency(amount, currency, rate)
        if amount_received <= 0:
            raise ValidationError(
                f'{currency} {amount} converts to {currency_received} 0.00 at {rate}. '
                f'Send a larger amount'
            )
        return {
            'amount': amount,
            'currency': currency,
            'exchange_rate': rate,
            'amount_received': amount_received,
            'currency_received': currency_received,
        }

    def transfer(self, sender, recipient_id, amount, currency, purpose, exchange_rate=None):
        if not purpose or not purpose.strip():
            raise ValidationError('Purpose is required')

        quote = self.quote(amount, currency, exchange_rate)

        User = get_user_model()
        try:
            recipient = User.objects.get(pk=recipient_id)
        except User.DoesNotExist:
            raise NotFoundError('Recipient not found')
        if recipient.pk == sender.pk:
            raise ValidationError('Cannot transfer to yourself')

        wallet_for(sender)
        wallet_for(recipient)

        with transaction.atomic():
            wallets = {
                w.user_id: w
                for w in Wallet.objects.select_for_update().filter(
                    user_id__in=[sender.pk, recipient.pk]
                ).order_by('pk')
            }
            source, target = wallets[sender.pk], wallets[recipient.pk]

            available = source.balance(currency)
            if available < quote['amount']:
                raise InsufficientFundsError(
                    f"Insufficient {currency} balance. Available: {available}, "
                    f"requested: {quote['amount']}"
                )

            debit_field = Wallet.balance_field(currency)
            credit_field = Wallet.balance_field(quote['currency_received'])
            setattr(source, debit_field, available - quote['amount'])
            setattr(target, credit_field, target.balance(quote['currency_received']) + quote['amount_received'])
            source.save(update_fields=[debit_field, 'updated_at'])
            target.save(update_fields=[credit_field, 'updated_at'])

            record = Transfer.objects.create(
                sender=sender,
                recipient=recipient,
                purpose=purpose.strip(),
                **quote
            )

        logger.info(
            f"Transfer {record.pk}: user {sender.pk} sent {record.currency} {record.amount} to "
            f"user {recipient.pk} ({record.currency_received} {record.amount_received} at {record.exchange_rate})"
        )
        return record
