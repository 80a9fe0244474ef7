"""
Shared API view plumbing.

Every view in the project derives from one of the classes here so that domain
errors raised by the service layer come back as ``{"error": "..."}`` with the
right status code, and storage failures are logged without leaking driver text.
"""

import logging

from django.db import DatabaseError
from django_filters.utils import translate_validation
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import PoultryRecordsError, StorageError

logger = logging.getLogger(__name__)


class DomainErrorMixin:
    """Translate PoultryRecordsError and DatabaseError into JSON error bodies."""

    def handle_exception(self, exc):
        if isinstance(exc, PoultryRecordsError):
            if isinstance(exc, StorageError):
                logger.error(f"{self.__class__.__name__}: {exc.message}", exc_info=exc)
            return Response({'error': exc.message}, status=exc.status_code)

        if isinstance(exc, DatabaseError):
            logger.error(
                f"{self.__class__.__name__}: database error on {self.request.method} {self.request.path}",
                exc_info=exc,
            )
            return Response(
                {'error': StorageError.default_message},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return super().handle_exception(exc)


class RecordsAPIView(DomainErrorMixin, APIView):
    """Base APIView for hand-written endpoints."""
    permission_classes = [IsAuthenticated]


class SparseUpdateMixin:
    """Treat PUT as a sparse patch: absent fields are left untouched."""

    def update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return super().update(request, *args, **kwargs)


class DeleteMessageMixin:
    """Return ``{"message": "<Label> deleted successfully"}`` instead of an empty 204."""
    record_label = 'Record'

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        self.perform_destroy(instance)
        return Response({'message': f'{self.record_label} deleted successfully'})


class RecordDetailMixin(DomainErrorMixin, SparseUpdateMixin, DeleteMessageMixin):
    """Everything a generics.RetrieveUpdateDestroyAPIView needs for a simple record store."""
    permission_classes = [IsAuthenticated]


def filter_queryset(filterset_class, request, queryset):
    """Apply a FilterSet from an APIView; invalid parameters become a 400."""
    filterset = filterset_class(request.query_params, queryset=queryset, request=request)
    if not filterset.is_valid():
        raise translate_validation(filterset.errors)
    return filterset.qs
