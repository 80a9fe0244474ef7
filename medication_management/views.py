"""
Vaccination API Views

Schedules are plain records. Creating an administration goes through
medication_management.services so the schedule is completed atomically.
"""

from rest_framework import generics

from core.api import DomainErrorMixin, RecordDetailMixin
from .filters import VaccineAdministrationFilter
from .models import VaccineAdministration, VaccineSchedule
from .serializers import VaccineAdministrationSerializer, VaccineScheduleSerializer


# =============================================================================
# VACCINE SCHEDULE VIEWS
# =============================================================================

class VaccineScheduleListCreateView(DomainErrorMixin, generics.ListCreateAPIView):
    """
    GET  /api/vaccine-schedules/ - Latest scheduled date first
    POST /api/vaccine-schedules/
    """
    queryset = VaccineSchedule.objects.all()
    serializer_class = VaccineScheduleSerializer


class VaccineScheduleDetailView(RecordDetailMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    GET    /api/vaccine-schedules/{id}/
    PUT    /api/vaccine-schedules/{id}/
    DELETE /api/vaccine-schedules/{id}/ - Also deletes its administrations
    """
    queryset = VaccineSchedule.objects.all()
    serializer_class = VaccineScheduleSerializer
    record_label = 'Vaccine schedule'


# =============================================================================
# VACCINE ADMINISTRATION VIEWS
# =============================================================================

class VaccineAdministrationListCreateView(DomainErrorMixin, generics.ListCreateAPIView):
    """
    GET  /api/vaccine-administrations/?scheduleId=
    POST /api/vaccine-administrations/
    """
    queryset = VaccineAdministration.objects.select_related('schedule')
    serializer_class = VaccineAdministrationSerializer
    filterset_class = VaccineAdministrationFilter

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)


class VaccineAdministrationDetailView(RecordDetailMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    GET    /api/vaccine-administrations/{id}/
    PUT    /api/vaccine-administrations/{id}/
    DELETE /api/vaccine-administrations/{id}/
    """
    queryset = VaccineAdministration.objects.select_related('schedule')
    serializer_class = VaccineAdministrationSerializer
    record_label = 'Vaccine administration'
