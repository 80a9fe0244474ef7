"""
Feed Inventory URL Configuration
"""

from django.urls import path

from .views import (
    FeedIntakeDetailView,
    FeedIntakeListCreateView,
    SupplierDetailView,
    SupplierListCreateView,
)

app_name = 'feed_inventory'

urlpatterns = [
    # Suppliers
    path('suppliers/', SupplierListCreateView.as_view(), name='supplier-list'),
    path('suppliers/<int:pk>/', SupplierDetailView.as_view(), name='supplier-detail'),

    # Feed Intakes
    path('feed-intakes/', FeedIntakeListCreateView.as_view(), name='feed-intake-list'),
    path('feed-intakes/<int:pk>/', FeedIntakeDetailView.as_view(), name='feed-intake-detail'),
]
