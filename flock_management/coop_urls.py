"""Coop registry API routes."""

from django.urls import path

from .views import CoopDetailView, CoopListCreateView

app_name = 'coops'

urlpatterns = [
    path('<int:pk>/', CoopDetailView.as_view(), name='coop-detail'),
    path('', CoopListCreateView.as_view(), name='coops'),
]
