"""
Query-string filters for batches and daily logs.

Parameter names follow the camelCase used by the web client.
"""

from django_filters import rest_framework as filters

from .models import Batch, DailyLog


class BatchFilter(filters.FilterSet):
    isActive = filters.BooleanFilter(field_name='is_active')

    class Meta:
        model = Batch
        fields = []


class DailyLogFilter(filters.FilterSet):
    batchId = filters.NumberFilter(field_name='batch_id')
    startDate = filters.DateFilter(field_name='log_date', lookup_expr='gte')
    endDate = filters.DateFilter(field_name='log_date', lookup_expr='lte')

    class Meta:
        model = DailyLog
        fields = []
