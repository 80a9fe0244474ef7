"""
Serializers for Expense Tracking.
"""

from rest_framework import serializers

from core.money import quantize
from flock_management.models import Batch

from .models import Expense


class ExpenseSerializer(serializers.ModelSerializer):
    """
    Expenses with derived total, balance and payment status.

    Send unit_cost (with quantity) to have the total computed, or
    total_amount alone for a lump sum.
    """
    batch_id = serializers.PrimaryKeyRelatedField(
        source='batch',
        queryset=Batch.objects.all(),
        required=False,
        allow_null=True
    )
    batch_code = serializers.CharField(source='batch.batch_id', read_only=True, allow_null=True)
    created_by_name = serializers.CharField(source='created_by.get_full_name', read_only=True, allow_null=True)

    class Meta:
        model = Expense
        fields = [
            'id', 'category', 'description', 'expense_date',
            'quantity', 'unit', 'unit_cost', 'total_amount',
            'amount_paid', 'balance_due', 'payment_status',
            'payee', 'payment_method', 'reference', 'currency',
            'batch_id', 'batch_code', 'notes',
            'created_by', 'created_by_name', 'created_at', 'updated_at'
        ]
        read_only_fields = [
            'id', 'balance_due', 'payment_status',
            'created_by', 'created_at', 'updated_at'
        ]
        extra_kwargs = {
            'total_amount': {'required': False},
        }

    def validate(self, attrs):
        def current(field, default=None):
            if field in attrs:
                return attrs[field]
            return getattr(self.instance, field) if self.instance else default

        quantity = current('quantity', Expense._meta.get_field('quantity').default)
        unit_cost = current('unit_cost')

        if unit_cost is not None:
            total_amount = quantize(quantity * unit_cost)
        else:
            total_amount = current('total_amount')

        if not total_amount or total_amount <= 0:
            raise serializers.ValidationError({
                'total_amount': 'Total amount must be greater than zero (enter it or a unit cost)'
            })

        amount_paid = current('amount_paid', Expense._meta.get_field('amount_paid').default)
        if amount_paid > total_amount:
            raise serializers.ValidationError({
                'amount_paid': 'Amount paid cannot exceed the total amount'
            })

        attrs['total_amount'] = total_amount
        return attrs
