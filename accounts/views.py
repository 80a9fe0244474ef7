"""
Account API Views

POST /api/auth/register/   - self-registration as a farm hand, opens a wallet
GET  /api/auth/profile/    - the caller with their wallet balances
PUT  /api/auth/profile/    - sparse profile update
"""

import logging

from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken

from core.api import DomainErrorMixin, SparseUpdateMixin
from .serializers import FarmUserRegistrationSerializer, FarmUserSerializer

logger = logging.getLogger(__name__)


class RegisterView(DomainErrorMixin, generics.CreateAPIView):
    serializer_class = FarmUserRegistrationSerializer
    permission_classes = [permissions.AllowAny]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"Farm user {user.username} registered (id {user.pk})")

        refresh = RefreshToken.for_user(user)
        return Response({
            'user': FarmUserSerializer(user).data,
            'tokens': {
                'refresh': str(refresh),
                'access': str(refresh.access_token),
            }
        }, status=status.HTTP_201_CREATED)


class ProfileView(DomainErrorMixin, SparseUpdateMixin, generics.RetrieveUpdateAPIView):
    serializer_class = FarmUserSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_object(self):
        return self.request.user
