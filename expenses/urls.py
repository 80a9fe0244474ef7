"""
URL configuration for Expense Tracking app.

All endpoints are prefixed with /api/expenses/
"""

from django.urls import path
from .views import ExpenseDetailView, ExpenseListCreateView, ExpenseSummaryView

app_name = 'expenses'

urlpatterns = [
    path('summary/', ExpenseSummaryView.as_view(), name='summary'),
    path('', ExpenseListCreateView.as_view(), name='expense-list'),
    path('<int:pk>/', ExpenseDetailView.as_view(), name='expense-detail'),
]
