"""
Account Integration Tests

Registration, JWT login and the profile endpoint.
"""

import pytest

pytestmark = pytest.mark.django_db


class TestAccounts:

    def test_register_and_login(self, api_client):
        registered = api_client.post('/api/auth/register/', {
            'username': 'mwangi',
            'email': 'mwangi@farm.test',
            'password': 'Layers-2025-Coop',
            'password_confirm': 'Layers-2025-Coop',
            'first_name': 'Peter',
            'last_name': 'Mwangi',
        }, format='json')

        assert registered.status_code == 201
        assert registered.data['user']['full_name'] == 'Peter Mwangi'
        assert registered.data['user']['role'] == 'user'
        assert registered.data['user']['wallet']['balance_kes'] == '0.00'
        assert 'access' in registered.data['tokens']

        token = api_client.post('/api/auth/token/', {
            'username': 'mwangi', 'password': 'Layers-2025-Coop',
        }, format='json')
        assert token.status_code == 200

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.data['access']}")
        assert api_client.get('/api/batches/').status_code == 200

    def test_passwords_must_match(self, api_client):
        response = api_client.post('/api/auth/register/', {
            'username': 'otieno',
            'email': 'otieno@farm.test',
            'password': 'Layers-2025-Coop',
            'password_confirm': 'Broilers-2025-Coop',
        }, format='json')

        assert response.status_code == 400
        assert 'password' in response.data

    def test_records_need_authentication(self, api_client):
        assert api_client.get('/api/batches/').status_code == 401
        assert api_client.get('/api/wallet/').status_code == 401

    def test_registration_opens_wallet(self, api_client):
        from django.contrib.auth import get_user_model
        from wallet.models import Wallet

        api_client.post('/api/auth/register/', {
            'username': 'chebet',
            'email': 'chebet@farm.test',
            'password': 'Layers-2025-Coop',
            'password_confirm': 'Layers-2025-Coop',
        }, format='json')

        user = get_user_model().objects.get(username='chebet')
        assert Wallet.objects.filter(user=user).exists()


class TestProfile:

    def test_sparse_put(self, auth_client, farm_user):
        response = auth_client.put('/api/auth/profile/', {'phone': '+254700111222'}, format='json')

        assert response.status_code == 200
        assert response.data['phone'] == '+254700111222'
        assert response.data['full_name'] == 'Wanjiru Kamau'
        assert response.data['email'] == farm_user.email

    def test_profile_shows_wallet(self, auth_client, farm_user):
        from wallet.models import Wallet

        Wallet.objects.create(user=farm_user, balance_usd='250.00')

        response = auth_client.get('/api/auth/profile/')

        assert response.data['wallet']['balance_usd'] == '250.00'

    def test_role_cannot_be_self_assigned(self, auth_client):
        response = auth_client.put('/api/auth/profile/', {'role': 'admin'}, format='json')

        assert response.status_code == 200
        assert response.data['role'] == 'user'
