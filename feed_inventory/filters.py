from django_filters import rest_framework as filters

from .models import FeedIntake


class FeedIntakeFilter(filters.FilterSet):
    supplierId = filters.CharFilter(method='filter_supplier')

    class Meta:
        model = FeedIntake
        fields = []

    def filter_supplier(self, queryset, name, value):
        # Non-numeric ids are ignored rather than rejected
        if not value.isdigit():
            return queryset
        return queryset.filter(supplier_id=int(value))
