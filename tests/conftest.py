"""
Shared pytest fixtures for the Poultry Records tests.
"""
import uuid

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

User = get_user_model()


def make_user(prefix='farmhand', **extra):
    unique_id = uuid.uuid4().hex[:8]
    return User.objects.create_user(
        username=f'{prefix}_{unique_id}',
        email=f'{prefix}_{unique_id}@test.com',
        password='testpass123',
        **extra
    )


@pytest.fixture
def farm_user(db):
    """A farm hand who records daily operations."""
    return make_user('farmhand', first_name='Wanjiru', last_name='Kamau')


@pytest.fixture
def api_client():
    """Unauthenticated API client."""
    return APIClient()


@pytest.fixture
def auth_client(farm_user):
    """API client authenticated as the farm hand."""
    client = APIClient()
    client.force_authenticate(user=farm_user)
    return client
