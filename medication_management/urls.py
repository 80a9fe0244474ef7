"""
Vaccination URL Configuration
"""

from django.urls import path

from .views import (
    VaccineAdministrationDetailView,
    VaccineAdministrationListCreateView,
    VaccineScheduleDetailView,
    VaccineScheduleListCreateView,
)

app_name = 'medication_management'

urlpatterns = [
    path('vaccine-schedules/', VaccineScheduleListCreateView.as_view(), name='vaccine-schedule-list'),
    path('vaccine-schedules/<int:pk>/', VaccineScheduleDetailView.as_view(), name='vaccine-schedule-detail'),
    path('vaccine-administrations/', VaccineAdministrationListCreateView.as_view(), name='vaccine-administration-list'),
    path(
        'vaccine-administrations/<int:pk>/',
        VaccineAdministrationDetailView.as_view(),
        name='vaccine-administration-detail'
    ),
]
