"""Daily operations log API routes."""

from django.urls import path

from .views import DailyLogView

app_name = 'daily_logs'

urlpatterns = [
    path('<int:log_pk>/', DailyLogView.as_view(), name='daily-log-detail'),
    path('', DailyLogView.as_view(), name='daily-logs'),
]
