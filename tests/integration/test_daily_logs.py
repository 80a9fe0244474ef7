"""
Daily Operations Integration Tests

Tests daily logs and the mortality they carry:
- A log with mortality decrements the batch's live count atomically
- Mortality larger than the live count is refused and nothing is written
- Feed quantity is stored in both bags and kg (50 kg per bag)
- Filtering by batch and date range
- Optional count reconciliation when logs are edited or deleted

SCENARIO:
=========
A batch of 500 layers is logged every morning by the farm hand:
- Day 1: 5 deaths, 2 bags of Starters Mash, 60 litres of water
- Day 2: 5 deaths, 100 kg of Starters Mash, 0 litres (water line repaired)
Live count: 500 → 495 → 490
"""

import pytest
from decimal import Decimal

pytestmark = pytest.mark.django_db


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def batch(db):
    """500 layers, no allocations."""
    from flock_management.services import BatchAccountingService

    return BatchAccountingService().create({
        'batch_name': 'January layers',
        'supplier': 'Kenchic',
        'breed': 'Layers',
        'arrival_date': '2025-01-01',
        'intake_age_days': 1,
        'initial_quantity': 500,
    })


def log_payload(batch_id=None, **overrides):
    payload = {
        'log_date': '2025-01-02',
        'mortality_count': 0,
        'feed_type': 'Starters Mash',
        'feed_input_mode': 'bags',
        'feed_bags': 2,
        'water_intake_liters': 60,
        'logged_by': 'Wanjiru',
    }
    if batch_id is not None:
        payload['batch_id'] = batch_id
    payload.update(overrides)
    return payload


def live_count(batch):
    batch.refresh_from_db()
    return batch.current_count


# =============================================================================
# MORTALITY TESTS
# =============================================================================

class TestMortalityRecording:
    """Logged deaths move the batch's live count."""

    def test_consecutive_logs_decrement(self, auth_client, batch):
        first = auth_client.post('/api/daily-logs/', log_payload(batch.pk, mortality_count=5), format='json')
        assert first.status_code == 201
        assert live_count(batch) == 495

        second = auth_client.post('/api/daily-logs/', log_payload(
            batch.pk, log_date='2025-01-03', mortality_count=5,
            feed_input_mode='kg', feed_kg=100, water_intake_liters=0,
        ), format='json')
        assert second.status_code == 201
        assert live_count(batch) == 490

    def test_excess_mortality_refused(self, auth_client, batch):
        from flock_management.models import DailyLog

        response = auth_client.post('/api/daily-logs/', log_payload(batch.pk, mortality_count=501), format='json')

        assert response.status_code == 409
        assert 'only 500 birds remain' in response.data['error']
        assert live_count(batch) == 500
        assert not DailyLog.objects.exists()

    def test_whole_flock_can_die(self, auth_client, batch):
        response = auth_client.post('/api/daily-logs/', log_payload(batch.pk, mortality_count=500), format='json')

        assert response.status_code == 201
        assert live_count(batch) == 0

    def test_unknown_batch_writes_nothing(self, auth_client):
        from flock_management.models import DailyLog

        with_deaths = auth_client.post('/api/daily-logs/', log_payload(9999, mortality_count=3), format='json')
        without_deaths = auth_client.post('/api/daily-logs/', log_payload(9999), format='json')

        assert with_deaths.status_code == 404
        assert without_deaths.status_code == 404
        assert with_deaths.data == {'error': 'Batch not found'}
        assert not DailyLog.objects.exists()

    def test_log_without_batch(self, auth_client):
        response = auth_client.post('/api/daily-logs/', log_payload(mortality_count=4), format='json')

        assert response.status_code == 201
        assert response.data['batch_id'] is None
        assert response.data['mortality_count'] == 4

    def test_negative_mortality_rejected(self, auth_client, batch):
        response = auth_client.post('/api/daily-logs/', log_payload(batch.pk, mortality_count=-2), format='json')

        assert response.status_code == 400
        assert live_count(batch) == 500

    def test_service_level_mortality(self, batch):
        from core.exceptions import InsufficientFlockError, NotFoundError
        from flock_management.services import DailyOperationsRecorder

        recorder = DailyOperationsRecorder()

        assert recorder.record_mortality(batch.pk, 120) == 380
        with pytest.raises(InsufficientFlockError):
            recorder.record_mortality(batch.pk, 381)
        with pytest.raises(NotFoundError):
            recorder.record_mortality(batch.pk + 1000, 1)
        assert live_count(batch) == 380


# =============================================================================
# FEED AND WATER TESTS
# =============================================================================

class TestFeedAndWater:

    def test_bags_converted_to_kg(self, auth_client):
        response = auth_client.post('/api/daily-logs/', log_payload(feed_bags=2), format='json')

        assert response.data['feed_bags'] == '2.00'
        assert response.data['feed_kg'] == '100.00'

    def test_kg_converted_to_bags(self, auth_client):
        response = auth_client.post('/api/daily-logs/', log_payload(
            feed_input_mode='kg', feed_bags=None, feed_kg=100
        ), format='json')

        assert response.data['feed_bags'] == '2.00'
        assert response.data['feed_kg'] == '100.00'

    def test_fractional_bags(self, auth_client):
        response = auth_client.post('/api/daily-logs/', log_payload(
            feed_input_mode='kg', feed_kg=75
        ), format='json')

        assert response.data['feed_bags'] == '1.50'

    def test_zero_water_allowed(self, auth_client):
        response = auth_client.post('/api/daily-logs/', log_payload(water_intake_liters=0), format='json')

        assert response.status_code == 201
        assert response.data['water_intake_liters'] == '0.00'

    def test_missing_water_rejected(self, auth_client):
        payload = log_payload()
        del payload['water_intake_liters']

        response = auth_client.post('/api/daily-logs/', payload, format='json')

        assert response.status_code == 400
        assert response.data['error'] == 'Missing required fields: water_intake_liters'

    def test_unknown_feed_type(self, auth_client):
        response = auth_client.post('/api/daily-logs/', log_payload(feed_type='Pellets'), format='json')

        assert response.status_code == 400
        assert 'Invalid feed_type' in response.data['error']

    def test_created_by_recorded(self, auth_client, farm_user):
        response = auth_client.post('/api/daily-logs/', log_payload(), format='json')

        assert response.data['created_by'] == farm_user.pk
        assert response.data['created_by_name'] == 'Wanjiru Kamau'


# =============================================================================
# LISTING TESTS
# =============================================================================

class TestDailyLogListing:

    @pytest.fixture
    def logs(self, auth_client, batch):
        for day in ('2025-01-02', '2025-01-05', '2025-01-09'):
            auth_client.post('/api/daily-logs/', log_payload(batch.pk, log_date=day), format='json')
        auth_client.post('/api/daily-logs/', log_payload(log_date='2025-01-04'), format='json')

    def test_newest_first(self, auth_client, logs):
        response = auth_client.get('/api/daily-logs/')

        assert [log['log_date'] for log in response.data] == [
            '2025-01-09', '2025-01-05', '2025-01-04', '2025-01-02'
        ]

    def test_filter_by_batch(self, auth_client, batch, logs):
        response = auth_client.get(f'/api/daily-logs/?batchId={batch.pk}')

        assert len(response.data) == 3
        assert all(log['batch_code'] == 'batch_layers_20250101' for log in response.data)

    def test_filter_by_date_range(self, auth_client, logs):
        response = auth_client.get('/api/daily-logs/?startDate=2025-01-03&endDate=2025-01-05')

        assert [log['log_date'] for log in response.data] == ['2025-01-05', '2025-01-04']

    def test_invalid_batch_filter(self, auth_client, logs):
        response = auth_client.get('/api/daily-logs/?batchId=abc')
        assert response.status_code == 400

    def test_retrieve_and_missing(self, auth_client, logs):
        from flock_management.models import DailyLog

        log = DailyLog.objects.first()
        assert auth_client.get(f'/api/daily-logs/{log.pk}/').status_code == 200

        missing = auth_client.get('/api/daily-logs/99999/')
        assert missing.status_code == 404
        assert missing.data == {'error': 'Daily log not found'}


# =============================================================================
# EDIT AND DELETE TESTS
# =============================================================================

class TestLogEditing:
    """Edits leave the live count alone unless reconciliation is enabled."""

    @pytest.fixture
    def log_with_deaths(self, auth_client, batch):
        response = auth_client.post('/api/daily-logs/', log_payload(batch.pk, mortality_count=10), format='json')
        return response.data

    def test_sparse_edit(self, auth_client, batch, log_with_deaths):
        response = auth_client.put(
            f"/api/daily-logs/{log_with_deaths['id']}/", {'notes': 'Two birds lame'}, format='json'
        )

        assert response.status_code == 200
        assert response.data['notes'] == 'Two birds lame'
        assert response.data['feed_kg'] == '100.00'
        assert response.data['mortality_count'] == 10

    def test_edit_does_not_touch_count_by_default(self, auth_client, batch, log_with_deaths):
        auth_client.put(f"/api/daily-logs/{log_with_deaths['id']}/", {'mortality_count': 4}, format='json')
        assert live_count(batch) == 490

    def test_edit_reconciles_when_enabled(self, auth_client, batch, log_with_deaths, settings):
        settings.POULTRY_RECORDS = {**settings.POULTRY_RECORDS, 'ADJUST_COUNT_ON_LOG_EDIT': True}

        auth_client.put(f"/api/daily-logs/{log_with_deaths['id']}/", {'mortality_count': 4}, format='json')
        assert live_count(batch) == 496

        auth_client.put(f"/api/daily-logs/{log_with_deaths['id']}/", {'mortality_count': 14}, format='json')
        assert live_count(batch) == 486

    def test_delete_restores_when_enabled(self, auth_client, batch, log_with_deaths, settings):
        settings.POULTRY_RECORDS = {**settings.POULTRY_RECORDS, 'ADJUST_COUNT_ON_LOG_EDIT': True}

        response = auth_client.delete(f"/api/daily-logs/{log_with_deaths['id']}/")

        assert response.status_code == 200
        assert response.data == {'message': 'Daily log deleted successfully'}
        assert live_count(batch) == 500

    def test_delete_keeps_count_by_default(self, auth_client, batch, log_with_deaths):
        auth_client.delete(f"/api/daily-logs/{log_with_deaths['id']}/")
        assert live_count(batch) == 490

    def test_feed_unit_switch_on_edit(self, auth_client, log_with_deaths):
        response = auth_client.patch(
            f"/api/daily-logs/{log_with_deaths['id']}/",
            {'feed_input_mode': 'kg', 'feed_kg': 25},
            format='json'
        )

        assert response.data['feed_input_mode'] == 'kg'
        assert response.data['feed_bags'] == '0.50'
        assert Decimal(response.data['feed_kg']) == Decimal('25')
