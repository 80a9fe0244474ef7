"""
Batch Accounting Integration Tests

Tests the batch lifecycle through the API:
- Batch creation with server-generated external ids
- Cost derivation (itemised or lump sum), balance and payment status
- Sparse updates, including changes to the initial quantity
- Deletion cascading to allocations and daily logs
- Flock summary

SCENARIO:
=========
A layer farm receives 500 day-old chicks from Kenchic on 1 January 2025:
- Chicks: KES 80 × 500 = KES 40,000
- Transport: KES 2,000
- Brooder equipment: KES 500
Total acquisition cost: KES 42,500, of which KES 20,000 is paid upfront.
"""

import pytest
from decimal import Decimal

pytestmark = pytest.mark.django_db


# =============================================================================
# FIXTURES
# =============================================================================

def batch_payload(**overrides):
    payload = {
        'batch_name': 'January layers',
        'supplier': 'Kenchic',
        'breed': 'Layers',
        'arrival_date': '2025-01-01',
        'intake_age_days': 1,
        'initial_quantity': 500,
        'cost_per_bird': '80.00',
        'transport_cost': '2000.00',
        'equipment_cost': '500.00',
        'amount_paid_upfront': '20000.00',
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def layers_batch(auth_client):
    """The January layers batch, created through the API."""
    response = auth_client.post('/api/batches/', batch_payload(), format='json')
    assert response.status_code == 201, response.data
    return response.data


# =============================================================================
# BATCH CREATION TESTS
# =============================================================================

class TestBatchCreation:
    """Creating batches derives ids, counts and costs on the server."""

    def test_external_id_and_live_count(self, layers_batch):
        assert layers_batch['batch_id'] == 'batch_layers_20250101'
        assert layers_batch['initial_quantity'] == 500
        assert layers_batch['current_count'] == 500
        assert layers_batch['mortality'] == 0
        assert layers_batch['is_active'] is True

    def test_itemised_costs(self, layers_batch):
        # 80 × 500 + 2,000 + 500
        assert layers_batch['total_initial_cost'] == '42500.00'
        assert layers_batch['balance_due'] == '22500.00'
        assert layers_batch['payment_status'] == 'partial'
        assert layers_batch['currency'] == 'KES'

    def test_same_breed_and_date_gets_suffix(self, auth_client, layers_batch):
        second = auth_client.post('/api/batches/', batch_payload(batch_name='Second lot'), format='json')
        third = auth_client.post('/api/batches/', batch_payload(batch_name='Third lot'), format='json')

        assert second.status_code == 201
        assert second.data['batch_id'] == 'batch_layers_20250101_2'
        assert third.data['batch_id'] == 'batch_layers_20250101_3'

    def test_breed_is_case_insensitive(self, auth_client):
        response = auth_client.post('/api/batches/', batch_payload(breed='kenbro'), format='json')

        assert response.status_code == 201
        assert response.data['breed'] == 'Kenbro'
        assert response.data['batch_id'] == 'batch_kenbro_20250101'

    def test_unknown_breed_rejected(self, auth_client):
        response = auth_client.post('/api/batches/', batch_payload(breed='Ostrich'), format='json')

        assert response.status_code == 400
        assert 'Invalid breed' in response.data['error']

    def test_missing_fields_listed(self, auth_client):
        payload = batch_payload()
        del payload['supplier']
        payload['initial_quantity'] = 0

        response = auth_client.post('/api/batches/', payload, format='json')

        assert response.status_code == 400
        assert response.data == {'error': 'Missing required fields: supplier, initial_quantity'}

    def test_zero_intake_age_allowed(self, auth_client):
        response = auth_client.post('/api/batches/', batch_payload(intake_age_days=0), format='json')

        assert response.status_code == 201
        assert response.data['intake_age_days'] == 0

    def test_invalid_arrival_date(self, auth_client):
        response = auth_client.post('/api/batches/', batch_payload(arrival_date='01/01/2025'), format='json')

        assert response.status_code == 400
        assert response.data['error'] == 'Invalid arrival_date format. Use YYYY-MM-DD'

    def test_requires_authentication(self, api_client):
        response = api_client.get('/api/batches/')
        assert response.status_code == 401


# =============================================================================
# COST DERIVATION TESTS
# =============================================================================

class TestCostDerivation:
    """Totals, balances and payment status are never taken on trust."""

    def test_lump_sum_total_when_nothing_itemised(self, auth_client):
        payload = batch_payload(
            cost_per_bird=None, transport_cost=None, equipment_cost=None,
            total_acquisition_cost='30000', amount_paid_upfront='30000',
        )
        response = auth_client.post('/api/batches/', payload, format='json')

        assert response.status_code == 201
        assert response.data['total_initial_cost'] == '30000.00'
        assert response.data['balance_due'] == '0.00'
        assert response.data['payment_status'] == 'paid'

    def test_declared_total_must_match_itemised(self, auth_client):
        response = auth_client.post(
            '/api/batches/', batch_payload(total_acquisition_cost='40000'), format='json'
        )

        assert response.status_code == 400
        assert 'does not match' in response.data['error']

    def test_matching_declared_total_accepted(self, auth_client):
        response = auth_client.post(
            '/api/batches/', batch_payload(total_acquisition_cost='42500.00'), format='json'
        )
        assert response.status_code == 201

    def test_overpayment_rejected(self, auth_client):
        response = auth_client.post(
            '/api/batches/', batch_payload(amount_paid_upfront='50000'), format='json'
        )

        assert response.status_code == 400
        assert 'cannot exceed' in response.data['error']

    def test_declared_balance_must_agree(self, auth_client):
        response = auth_client.post('/api/batches/', batch_payload(balance_due='100'), format='json')
        assert response.status_code == 400

    def test_declared_payment_status_must_agree(self, auth_client):
        response = auth_client.post('/api/batches/', batch_payload(payment_status='paid'), format='json')
        assert response.status_code == 400

        response = auth_client.post('/api/batches/', batch_payload(payment_status='partial'), format='json')
        assert response.status_code == 201

    def test_nothing_paid_is_pending(self, auth_client):
        response = auth_client.post('/api/batches/', batch_payload(amount_paid_upfront=0), format='json')

        assert response.data['payment_status'] == 'pending'
        assert response.data['balance_due'] == '42500.00'

    def test_fully_paid(self, auth_client):
        response = auth_client.post(
            '/api/batches/', batch_payload(amount_paid_upfront='42500'), format='json'
        )

        assert response.data['payment_status'] == 'paid'
        assert response.data['balance_due'] == '0.00'

    def test_negative_cost_rejected(self, auth_client):
        response = auth_client.post('/api/batches/', batch_payload(transport_cost='-5'), format='json')

        assert response.status_code == 400
        assert response.data['error'] == 'transport_cost cannot be negative'


# =============================================================================
# BATCH UPDATE TESTS
# =============================================================================

class TestBatchUpdate:
    """PUT and PATCH are sparse; derived figures follow the stored inputs."""

    def test_sparse_update_keeps_other_fields(self, auth_client, layers_batch):
        url = f"/api/batches/{layers_batch['id']}/"
        response = auth_client.put(url, {'batch_name': 'Layers - House 1'}, format='json')

        assert response.status_code == 200
        assert response.data['name'] == 'Layers - House 1'
        assert response.data['supplier'] == 'Kenchic'
        assert response.data['total_initial_cost'] == '42500.00'
        assert response.data['batch_id'] == layers_batch['batch_id']

    def test_payment_rederives_status(self, auth_client, layers_batch):
        url = f"/api/batches/{layers_batch['id']}/"
        response = auth_client.patch(url, {'amount_paid_upfront': '42500'}, format='json')

        assert response.data['payment_status'] == 'paid'
        assert response.data['balance_due'] == '0.00'

    def test_lump_sum_survives_unrelated_update(self, auth_client):
        created = auth_client.post('/api/batches/', batch_payload(
            cost_per_bird=None, transport_cost=None, equipment_cost=None,
            total_acquisition_cost='30000', amount_paid_upfront='10000',
        ), format='json').data

        response = auth_client.put(f"/api/batches/{created['id']}/", {'supplier': 'Isinya'}, format='json')

        assert response.data['total_initial_cost'] == '30000.00'
        assert response.data['balance_due'] == '20000.00'

    def test_initial_quantity_change_shifts_live_count(self, auth_client, layers_batch):
        from flock_management.services import DailyOperationsRecorder

        DailyOperationsRecorder().record_mortality(layers_batch['id'], 10)

        response = auth_client.put(
            f"/api/batches/{layers_batch['id']}/",
            {'initial_quantity': 450, 'cost_per_bird': '80.00'},
            format='json'
        )

        assert response.status_code == 200
        assert response.data['initial_quantity'] == 450
        assert response.data['current_count'] == 440
        # 80 × 450 + 2,000 + 500
        assert response.data['total_initial_cost'] == '38500.00'

    def test_initial_quantity_locked_while_allocated(self, auth_client):
        created = auth_client.post('/api/batches/', batch_payload(
            coop_allocations=[{'coop_id': 'COOP-A', 'allocated_quantity': 300}]
        ), format='json').data

        response = auth_client.put(
            f"/api/batches/{created['id']}/", {'initial_quantity': 600}, format='json'
        )

        assert response.status_code == 400
        assert 'coop allocations' in response.data['error']

    def test_current_count_cannot_exceed_initial(self, auth_client, layers_batch):
        response = auth_client.put(
            f"/api/batches/{layers_batch['id']}/", {'current_count': 501}, format='json'
        )
        assert response.status_code == 400

    def test_empty_allocation_list_clears(self, auth_client):
        from flock_management.models import CoopAllocation

        created = auth_client.post('/api/batches/', batch_payload(
            coop_allocations=[{'coop_id': 'COOP-A', 'allocated_quantity': 300}]
        ), format='json').data
        assert CoopAllocation.objects.filter(batch_id=created['id']).count() == 1

        response = auth_client.put(
            f"/api/batches/{created['id']}/", {'coop_allocations': []}, format='json'
        )

        assert response.status_code == 200
        assert response.data['coop_allocations'] == []
        assert response.data['unallocated_quantity'] == 500
        assert not CoopAllocation.objects.filter(batch_id=created['id']).exists()

    def test_null_allocation_list_keeps_placements(self, auth_client):
        from flock_management.models import CoopAllocation

        created = auth_client.post('/api/batches/', batch_payload(
            coop_allocations=[{'coop_id': 'COOP-A', 'allocated_quantity': 200}]
        ), format='json').data

        response = auth_client.put(
            f"/api/batches/{created['id']}/",
            {'supplier': 'Isinya Hatchery', 'coop_allocations': None},
            format='json'
        )

        assert response.status_code == 200
        assert response.data['supplier'] == 'Isinya Hatchery'
        stored = CoopAllocation.objects.filter(batch_id=created['id'])
        assert [(a.coop_id, a.allocated_quantity) for a in stored] == [('COOP-A', 200)]

    def test_update_unknown_batch(self, auth_client):
        response = auth_client.put('/api/batches/99999/', {'supplier': 'X'}, format='json')

        assert response.status_code == 404
        assert response.data == {'error': 'Batch not found'}


# =============================================================================
# READ, DELETE AND SUMMARY TESTS
# =============================================================================

class TestBatchReadAndDelete:

    def test_list_filters_active(self, auth_client, layers_batch):
        auth_client.post('/api/batches/', batch_payload(breed='Broilers', is_active=False), format='json')

        active = auth_client.get('/api/batches/?isActive=true')
        inactive = auth_client.get('/api/batches/?isActive=false')
        everything = auth_client.get('/api/batches/')

        assert [b['batch_id'] for b in active.data] == ['batch_layers_20250101']
        assert [b['batch_id'] for b in inactive.data] == ['batch_broilers_20250101']
        assert len(everything.data) == 2

    def test_list_newest_arrival_first(self, auth_client, layers_batch):
        auth_client.post('/api/batches/', batch_payload(arrival_date='2025-03-01'), format='json')

        response = auth_client.get('/api/batches/')

        assert [b['arrival_date'] for b in response.data] == ['2025-03-01', '2025-01-01']

    def test_retrieve_missing_batch(self, auth_client):
        response = auth_client.get('/api/batches/424242/')
        assert response.status_code == 404

    def test_methods_outside_their_route(self, auth_client, layers_batch):
        assert auth_client.put('/api/batches/', {'supplier': 'X'}, format='json').status_code == 405
        assert auth_client.delete('/api/batches/').status_code == 405
        assert auth_client.post(
            f"/api/batches/{layers_batch['id']}/", batch_payload(), format='json'
        ).status_code == 405
        assert auth_client.put('/api/daily-logs/', {'notes': 'x'}, format='json').status_code == 405
        assert auth_client.delete('/api/daily-logs/').status_code == 405

    def test_delete_cascades(self, auth_client):
        from flock_management.models import Batch, CoopAllocation, DailyLog

        created = auth_client.post('/api/batches/', batch_payload(
            coop_allocations=[{'coop_id': 'COOP-A', 'allocated_quantity': 200}]
        ), format='json').data
        auth_client.post('/api/daily-logs/', {
            'batch_id': created['id'],
            'log_date': '2025-01-02',
            'mortality_count': 3,
            'feed_type': 'Starters Mash',
            'feed_input_mode': 'kg',
            'feed_kg': 25,
            'water_intake_liters': 40,
            'logged_by': 'Wanjiru',
        }, format='json')

        response = auth_client.delete(f"/api/batches/{created['id']}/")

        assert response.status_code == 200
        assert response.data == {'message': 'Batch deleted successfully'}
        assert not Batch.objects.filter(pk=created['id']).exists()
        assert not CoopAllocation.objects.filter(batch_id=created['id']).exists()
        assert not DailyLog.objects.filter(batch_id=created['id']).exists()

    def test_summary(self, auth_client, layers_batch):
        from flock_management.services import DailyOperationsRecorder

        auth_client.post('/api/batches/', batch_payload(
            breed='Broilers', initial_quantity=100, cost_per_bird='100',
            transport_cost=0, equipment_cost=0, amount_paid_upfront=0,
        ), format='json')
        DailyOperationsRecorder().record_mortality(layers_batch['id'], 30)

        response = auth_client.get('/api/batches/summary/')

        assert response.status_code == 200
        assert response.data['batch_count'] == 2
        assert response.data['initial_birds'] == 600
        assert response.data['live_birds'] == 570
        assert response.data['total_mortality'] == 30
        assert response.data['mortality_rate_percent'] == '5.00'
        # 42,500 + 10,000
        assert response.data['total_cost'] == '52500.00'
        assert response.data['total_balance_due'] == '32500.00'
        assert response.data['by_breed']['Layers']['mortality'] == 30

    def test_mortality_rate_on_batch(self, auth_client, layers_batch):
        from flock_management.models import Batch
        from flock_management.services import DailyOperationsRecorder

        DailyOperationsRecorder().record_mortality(layers_batch['id'], 25)
        batch = Batch.objects.get(pk=layers_batch['id'])

        assert batch.mortality == 25
        assert batch.mortality_rate_percent == Decimal('5.00')
