"""
Batch URLs

Provides endpoints for managing bird batches and their coop allocations.
"""
from django.urls import path
from .views import BatchAllocationView, BatchSummaryView, BatchView

app_name = 'flock_management'

urlpatterns = [
    # Summary (must come before detail routes)
    path('summary/', BatchSummaryView.as_view(), name='batch-summary'),

    # Coop allocations for a batch
    path('<int:batch_pk>/allocations/', BatchAllocationView.as_view(), name='batch-allocations'),

    # CRUD operations
    path('', BatchView.as_view(), name='batches'),
    path('<int:batch_pk>/', BatchView.as_view(), name='batch-detail'),
]
