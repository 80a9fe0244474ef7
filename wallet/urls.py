from django.urls import path

from .views import TransferPreviewView, TransferView, WalletView

app_name = 'wallet'

urlpatterns = [
    path('', WalletView.as_view(), name='wallet'),
    path('transfers/', TransferView.as_view(), name='transfer-list'),
    path('transfers/preview/', TransferPreviewView.as_view(), name='transfer-preview'),
]
