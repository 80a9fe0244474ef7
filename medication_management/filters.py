from django_filters import rest_framework as filters

from .models import VaccineAdministration


class VaccineAdministrationFilter(filters.FilterSet):
    scheduleId = filters.CharFilter(method='filter_schedule')

    class Meta:
        model = VaccineAdministration
        fields = []

    def filter_schedule(self, queryset, name, value):
        # Non-numeric ids are ignored rather than rejected
        if not value.isdigit():
            return queryset
        return queryset.filter(schedule_id=int(value))
