"""
Views for Expense Tracking.

API Endpoints:
- /api/expenses/ - List/create expenses
- /api/expenses/{id}/ - Retrieve/update/delete expense
- /api/expenses/summary/ - Totals by category and outstanding balance
"""

import logging

from rest_framework import generics
from rest_framework.response import Response

from core.api import DomainErrorMixin, RecordDetailMixin, RecordsAPIView, filter_queryset

from .filters import ExpenseFilter
from .models import Expense
from .serializers import ExpenseSerializer
from .services import expense_summary

logger = logging.getLogger(__name__)


# =============================================================================
# EXPENSE VIEWS
# =============================================================================

class ExpenseListCreateView(DomainErrorMixin, generics.ListCreateAPIView):
    """
    GET /api/expenses/?category=&batchId=&startDate=&endDate=
    POST /api/expenses/
    """
    queryset = Expense.objects.select_related('batch', 'created_by')
    serializer_class = ExpenseSerializer
    filterset_class = ExpenseFilter

    def perform_create(self, serializer):
        expense = serializer.save(created_by=self.request.user)
        logger.info(
            f"Expense {expense.pk} recorded: {expense.category} {expense.total_amount} "
            f"{expense.currency} ({expense.payment_status})"
        )


class ExpenseDetailView(RecordDetailMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    GET    /api/expenses/{id}/
    PUT    /api/expenses/{id}/
    DELETE /api/expenses/{id}/
    """
    queryset = Expense.objects.select_related('batch', 'created_by')
    serializer_class = ExpenseSerializer
    record_label = 'Expense'


class ExpenseSummaryView(RecordsAPIView):
    """
    GET /api/expenses/summary/

    Accepts the same filters as the list.
    """

    def get(self, request):
        expenses = filter_queryset(ExpenseFilter, request, Expense.objects.all())
        return Response(expense_summary(expenses))
