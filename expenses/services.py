"""
Expense Services

Aggregates for the expense summary endpoint.
"""

from django.db.models import Count, Sum

from core.money import PaymentStatus, money_string

from .models import Expense, ExpenseCategory


def expense_summary(queryset=None):
    """
    Totals by category plus overall spend and outstanding balance.

    Every category appears in ``by_category`` even when it has no expenses.
    """
    queryset = Expense.objects.all() if queryset is None else queryset

    rows = {
        row['category']: row
        for row in queryset.values('category').annotate(
            count=Count('id'),
            total=Sum('total_amount'),
            paid=Sum('amount_paid'),
            outstanding=Sum('balance_due'),
        ).order_by('category')
    }

    by_category = {}
    for category in ExpenseCategory.values:
        row = rows.get(category, {})
        by_category[category] = {
            'count': row.get('count', 0),
            'total': money_string(row.get('total')),
            'paid': money_string(row.get('paid')),
            'outstanding': money_string(row.get('outstanding')),
        }

    totals = queryset.aggregate(
        count=Count('id'),
        total=Sum('total_amount'),
        paid=Sum('amount_paid'),
        outstanding=Sum('balance_due'),
    )
    unpaid = queryset.exclude(payment_status=PaymentStatus.PAID).count()

    return {
        'expense_count': totals['count'],
        'total_spent': money_string(totals['total']),
        'total_paid': money_string(totals['paid']),
        'outstanding_balance': money_string(totals['outstanding']),
        'unpaid_expenses': unpaid,
        'by_category': by_category,
    }
