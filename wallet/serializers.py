from decimal import Decimal

from rest_framework import serializers

from .models import Currency, Transfer, Wallet


class WalletSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Wallet
        fields = ['user_id', 'balance_usd', 'balance_kes', 'updated_at']
        read_only_fields = fields


class TransferQuoteSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=Decimal('0.01'))
    currency = serializers.ChoiceField(choices=Currency.choices)
    exchange_rate = serializers.DecimalField(
        max_digits=12,
        decimal_places=4,
        min_value=Decimal('0.0001'),
        required=False
    )


class TransferRequestSerializer(TransferQuoteSerializer):
    to_user_id = serializers.IntegerField()
    purpose = serializers.CharField(max_length=255)


class TransferSerializer(serializers.ModelSerializer):
    sender_name = serializers.CharField(source='sender.get_full_name', read_only=True)
    recipient_name = serializers.CharField(source='recipient.get_full_name', read_only=True)

    class Meta:
        model = Transfer
        fields = [
            'id', 'sender', 'sender_name', 'recipient', 'recipient_name',
            'amount', 'currency', 'exchange_rate', 'amount_received',
            'currency_received', 'purpose', 'created_at'
        ]
        read_only_fields = fields


class QuoteResultSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    currency = serializers.CharField()
    exchange_rate = serializers.DecimalField(max_digits=12, decimal_places=4)
    amount_received = serializers.DecimalField(max_digits=14, decimal_places=2)
    currency_received = serializers.CharField()
