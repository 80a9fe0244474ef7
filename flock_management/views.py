"""
Flock Management API Views

Batches, coop allocations, the coop registry and daily logs.
Batch and daily-log endpoints delegate to flock_management.services;
domain errors are turned into {"error": ...} responses by RecordsAPIView.
"""

from rest_framework import generics, status
from rest_framework.exceptions import MethodNotAllowed
from rest_framework.response import Response

from core.api import DomainErrorMixin, RecordDetailMixin, RecordsAPIView, filter_queryset
from .filters import BatchFilter, DailyLogFilter
from .models import Coop
from .serializers import (
    BatchSerializer,
    CoopAllocationSerializer,
    CoopSerializer,
    DailyLogSerializer,
)
from .services import BatchAccountingService, CoopAllocationLedger, DailyOperationsRecorder


# =============================================================================
# BATCH VIEWS
# =============================================================================

class BatchView(RecordsAPIView):
    """
    GET /api/batches/?isActive=true|false
    POST /api/batches/
    GET /api/batches/{id}/
    PUT /api/batches/{id}/
    PATCH /api/batches/{id}/
    DELETE /api/batches/{id}/

    PUT and PATCH are both sparse: absent fields are left untouched.
    """
    service_class = BatchAccountingService

    def get(self, request, batch_pk=None):
        """Get all batches or a specific batch by ID"""
        service = self.service_class()

        if batch_pk is not None:
            return Response(BatchSerializer(service.get(batch_pk)).data)

        batches = filter_queryset(BatchFilter, request, service.list())
        return Response(BatchSerializer(batches, many=True).data)

    def post(self, request, batch_pk=None):
        """Create new batch with optional coop allocations"""
        if batch_pk is not None:
            raise MethodNotAllowed(request.method)
        batch = self.service_class().create(request.data)
        return Response(BatchSerializer(batch).data, status=status.HTTP_201_CREATED)

    def put(self, request, batch_pk=None):
        """Update existing batch (supports partial updates)"""
        if batch_pk is None:
            raise MethodNotAllowed(request.method)
        batch = self.service_class().update(batch_pk, request.data)
        return Response(BatchSerializer(batch).data)

    def patch(self, request, batch_pk=None):
        return self.put(request, batch_pk)

    def delete(self, request, batch_pk=None):
        """Delete batch together with its allocations and daily logs"""
        if batch_pk is None:
            raise MethodNotAllowed(request.method)
        self.service_class().delete(batch_pk)
        return Response({'message': 'Batch deleted successfully'})


class BatchSummaryView(RecordsAPIView):
    """
    GET /api/batches/summary/

    Totals across all batches.
    """

    def get(self, request):
        return Response(BatchAccountingService().summary())


class BatchAllocationView(RecordsAPIView):
    """
    GET /api/batches/{id}/allocations/
    POST /api/batches/{id}/allocations/

    List a batch's coop allocations or append one.
    """

    def get(self, request, batch_pk):
        ledger = CoopAllocationLedger()
        allocations = ledger.list_for(batch_pk)
        data = ledger.totals(batch_pk)
        data['allocations'] = CoopAllocationSerializer(allocations, many=True).data
        return Response(data)

    def post(self, request, batch_pk):
        allocation = CoopAllocationLedger().append(batch_pk, request.data)
        return Response(CoopAllocationSerializer(allocation).data, status=status.HTTP_201_CREATED)


# =============================================================================
# COOP VIEWS
# =============================================================================

class CoopListCreateView(DomainErrorMixin, generics.ListCreateAPIView):
    """
    GET /api/coops/
    POST /api/coops/
    """
    queryset = Coop.objects.all()
    serializer_class = CoopSerializer

    def get_queryset(self):
        return super().get_queryset().order_by('code')


class CoopDetailView(RecordDetailMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    GET /api/coops/{id}/
    PUT /api/coops/{id}/
    DELETE /api/coops/{id}/
    """
    queryset = Coop.objects.all()
    serializer_class = CoopSerializer
    record_label = 'Coop'


# =============================================================================
# DAILY LOG VIEWS
# =============================================================================

class DailyLogView(RecordsAPIView):
    """
    GET /api/daily-logs/?batchId=&startDate=&endDate=
    POST /api/daily-logs/
    GET /api/daily-logs/{id}/
    PUT /api/daily-logs/{id}/
    PATCH /api/daily-logs/{id}/
    DELETE /api/daily-logs/{id}/

    A log with batch_id and mortality_count > 0 decrements the batch's live count.
    """
    recorder_class = DailyOperationsRecorder

    def get(self, request, log_pk=None):
        recorder = self.recorder_class()

        if log_pk is not None:
            return Response(DailyLogSerializer(recorder.get(log_pk)).data)

        logs = filter_queryset(DailyLogFilter, request, recorder.list())
        return Response(DailyLogSerializer(logs, many=True).data)

    def post(self, request, log_pk=None):
        if log_pk is not None:
            raise MethodNotAllowed(request.method)
        log = self.recorder_class().record(request.data, user=request.user)
        return Response(DailyLogSerializer(log).data, status=status.HTTP_201_CREATED)

    def put(self, request, log_pk=None):
        if log_pk is None:
            raise MethodNotAllowed(request.method)
        log = self.recorder_class().update(log_pk, request.data)
        return Response(DailyLogSerializer(log).data)

    def patch(self, request, log_pk=None):
        return self.put(request, log_pk)

    def delete(self, request, log_pk=None):
        if log_pk is None:
            raise MethodNotAllowed(request.method)
        self.recorder_class().delete(log_pk)
        return Response({'message': 'Daily log deleted successfully'})
