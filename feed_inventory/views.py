"""
Feed Inventory API Views

Provides endpoints for managing suppliers and feed intakes (deliveries).
"""

import logging

from rest_framework import generics

from core.api import DomainErrorMixin, RecordDetailMixin
from .filters import FeedIntakeFilter
from .models import FeedIntake, Supplier
from .serializers import FeedIntakeSerializer, SupplierSerializer

logger = logging.getLogger(__name__)


# =============================================================================
# SUPPLIER VIEWS
# =============================================================================

class SupplierListCreateView(DomainErrorMixin, generics.ListCreateAPIView):
    """
    GET  /api/suppliers/ - List suppliers, newest first
    POST /api/suppliers/ - Register a supplier
    """
    queryset = Supplier.objects.all()
    serializer_class = SupplierSerializer

    def perform_create(self, serializer):
        supplier = serializer.save()
        logger.info(f"Supplier {supplier.pk} '{supplier.name}' created by {self.request.user}")


class SupplierDetailView(RecordDetailMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    GET    /api/suppliers/{id}/
    PUT    /api/suppliers/{id}/
    DELETE /api/suppliers/{id}/ - Intakes keep their supplier_name
    """
    queryset = Supplier.objects.all()
    serializer_class = SupplierSerializer
    record_label = 'Supplier'


# =============================================================================
# FEED INTAKE VIEWS
# =============================================================================

class FeedIntakeListCreateView(DomainErrorMixin, generics.ListCreateAPIView):
    """
    GET  /api/feed-intakes/?supplierId= - List deliveries, latest delivery first
    POST /api/feed-intakes/ - Record a delivery
    """
    queryset = FeedIntake.objects.select_related('supplier', 'created_by')
    serializer_class = FeedIntakeSerializer
    filterset_class = FeedIntakeFilter

    def perform_create(self, serializer):
        intake = serializer.save(created_by=self.request.user)
        logger.info(
            f"Feed intake {intake.pk} recorded: {intake.kg_received} kg of "
            f"{intake.display_feed_name} for {intake.total_cost} {intake.currency}"
        )


class FeedIntakeDetailView(RecordDetailMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    GET    /api/feed-intakes/{id}/
    PUT    /api/feed-intakes/{id}/
    DELETE /api/feed-intakes/{id}/
    """
    queryset = FeedIntake.objects.select_related('supplier', 'created_by')
    serializer_class = FeedIntakeSerializer
    record_label = 'Feed intake'
