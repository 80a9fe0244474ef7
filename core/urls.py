"""
URL configuration for the Poultry Records project.

All API routes live under /api/. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path('', RedirectView.as_view(url='/admin/', permanent=False)),
    path('admin/', admin.site.urls),
    path('api/auth/', include('accounts.urls')),
    path('api/batches/', include('flock_management.urls')),  # Batches and coop allocations
    path('api/coops/', include('flock_management.coop_urls')),  # Coop registry
    path('api/daily-logs/', include('flock_management.daily_log_urls')),  # Daily operations
    path('api/', include('feed_inventory.urls')),  # Suppliers and feed intakes
    path('api/', include('medication_management.urls')),  # Vaccine schedules and administrations
    path('api/expenses/', include('expenses.urls')),  # Farm expenses
    path('api/wallet/', include('wallet.urls')),  # Wallet balances and transfers
]
