"""
Wallet API Views

GET  /api/wallet/                     - the caller's balances
GET  /api/wallet/transfers/           - transfers the caller sent or received
POST /api/wallet/transfers/           - send money to another user
POST /api/wallet/transfers/preview/   - conversion quote, no money moves
"""

from django.db.models import Q
from rest_framework import status
from rest_framework.response import Response

from core.api import RecordsAPIView
from .models import Transfer
from .serializers import (
    QuoteResultSerializer,
    TransferQuoteSerializer,
    TransferRequestSerializer,
    TransferSerializer,
    WalletSerializer,
)
from .services import TransferService, wallet_for


class WalletView(RecordsAPIView):

    def get(self, request):
        return Response(WalletSerializer(wallet_for(request.user)).data)


class TransferView(RecordsAPIView):

    def get(self, request):
        transfers = Transfer.objects.filter(
            Q(sender=request.user) | Q(recipient=request.user)
        ).select_related('sender', 'recipient')
        return Response(TransferSerializer(transfers, many=True).data)

    def post(self, request):
        serializer = TransferRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        record = TransferService().transfer(
            sender=request.user,
            recipient_id=data['to_user_id'],
            amount=data['amount'],
            currency=data['currency'],
            purpose=data['purpose'],
            exchange_rate=data.get('exchange_rate'),
        )
        return Response(TransferSerializer(record).data, status=status.HTTP_201_CREATED)


class TransferPreviewView(RecordsAPIView):

    def post(self, request):
        serializer = TransferQuoteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        quote = TransferService().quote(data['amount'], data['currency'], data.get('exchange_rate'))
        return Response(QuoteResultSerializer(quote).data)
