from django_filters import rest_framework as filters

from .models import Expense, ExpenseCategory


class ExpenseFilter(filters.FilterSet):
    category = filters.ChoiceFilter(choices=ExpenseCategory.choices)
    batchId = filters.NumberFilter(field_name='batch_id')
    startDate = filters.DateFilter(field_name='expense_date', lookup_expr='gte')
    endDate = filters.DateFilter(field_name='expense_date', lookup_expr='lte')

    class Meta:
        model = Expense
        fields = []
