"""
Vaccination Integration Tests

Tests vaccine schedules and administrations:
- Recording an administration completes its schedule
- Partial-flock vaccinations need a head count
- Daily status refresh (overdue / pending / upcoming)
- Management command and Celery task wrappers

SCENARIO:
=========
Layers brought in on 1 January follow a standard programme:
- Week 1: Marek's (given on the 8th)
- Week 2: Newcastle + IB (due on the 15th, only 480 of 500 birds reached)
- Week 3: Gumboro (due on the 22nd)
- Week 8: Fowl Pox (due 26 February)
"""

import pytest
from datetime import date, timedelta
from io import StringIO

pytestmark = pytest.mark.django_db


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def schedules(db):
    from medication_management.models import VaccineSchedule

    return {
        'mareks': VaccineSchedule.objects.create(
            vaccine_name="Marek's", week_number=1, scheduled_date=date(2025, 1, 8)
        ),
        'newcastle': VaccineSchedule.objects.create(
            vaccine_name='Newcastle + IB', week_number=2, scheduled_date=date(2025, 1, 15)
        ),
        'gumboro': VaccineSchedule.objects.create(
            vaccine_name='Gumboro', week_number=3, scheduled_date=date(2025, 1, 22)
        ),
        'fowl_pox': VaccineSchedule.objects.create(
            vaccine_name='Fowl Pox', week_number=8, scheduled_date=date(2025, 2, 26)
        ),
    }


# =============================================================================
# SCHEDULE TESTS
# =============================================================================

class TestVaccineSchedules:

    def test_create_defaults_to_pending(self, auth_client):
        response = auth_client.post('/api/vaccine-schedules/', {
            'vaccine_name': 'Newcastle booster',
            'week_number': 6,
            'scheduled_date': '2025-02-12',
        }, format='json')

        assert response.status_code == 201
        assert response.data['status'] == 'pending'

    def test_required_fields(self, auth_client):
        response = auth_client.post('/api/vaccine-schedules/', {'description': 'x'}, format='json')

        assert response.status_code == 400
        for field in ('vaccine_name', 'week_number', 'scheduled_date'):
            assert field in response.data

    def test_latest_scheduled_first(self, auth_client, schedules):
        response = auth_client.get('/api/vaccine-schedules/')

        assert [s['vaccine_name'] for s in response.data] == [
            'Fowl Pox', 'Gumboro', 'Newcastle + IB', "Marek's"
        ]

    def test_delete_cascades_to_administrations(self, auth_client, schedules):
        from medication_management.models import VaccineAdministration

        schedule = schedules['mareks']
        auth_client.post('/api/vaccine-administrations/', {
            'schedule_id': schedule.pk,
            'administration_date': '2025-01-08',
            'cost': '1500',
            'administered_by': 'Dr. Mwangi',
        }, format='json')

        response = auth_client.delete(f'/api/vaccine-schedules/{schedule.pk}/')

        assert response.data == {'message': 'Vaccine schedule deleted successfully'}
        assert not VaccineAdministration.objects.exists()


# =============================================================================
# ADMINISTRATION TESTS
# =============================================================================

class TestVaccineAdministration:

    def test_administration_completes_schedule(self, auth_client, farm_user, schedules):
        schedule = schedules['mareks']

        response = auth_client.post('/api/vaccine-administrations/', {
            'schedule_id': schedule.pk,
            'administration_date': '2025-01-08',
            'cost': '1500.00',
            'administered_by': 'Dr. Mwangi',
        }, format='json')

        assert response.status_code == 201
        assert response.data['full_flock_vaccinated'] is True
        assert response.data['vaccine_name'] == "Marek's"
        assert response.data['created_by'] == farm_user.pk

        schedule.refresh_from_db()
        assert schedule.status == 'completed'

    def test_partial_flock_needs_head_count(self, auth_client, schedules):
        payload = {
            'schedule_id': schedules['newcastle'].pk,
            'administration_date': '2025-01-15',
            'full_flock_vaccinated': False,
            'cost': '2400',
            'administered_by': 'Dr. Mwangi',
        }

        missing = auth_client.post('/api/vaccine-administrations/', payload, format='json')
        zero = auth_client.post('/api/vaccine-administrations/', {**payload, 'head_count_vaccinated': 0}, format='json')
        ok = auth_client.post('/api/vaccine-administrations/', {**payload, 'head_count_vaccinated': 480}, format='json')

        assert missing.status_code == 400
        assert 'head_count_vaccinated' in missing.data
        assert zero.status_code == 400
        assert ok.status_code == 201
        assert ok.data['head_count_vaccinated'] == 480

    def test_required_fields(self, auth_client):
        response = auth_client.post('/api/vaccine-administrations/', {}, format='json')

        assert response.status_code == 400
        for field in ('schedule_id', 'administration_date', 'cost', 'administered_by'):
            assert field in response.data

    def test_unknown_schedule(self, auth_client):
        response = auth_client.post('/api/vaccine-administrations/', {
            'schedule_id': 9999,
            'administration_date': '2025-01-08',
            'cost': '100',
            'administered_by': 'Dr. Mwangi',
        }, format='json')

        assert response.status_code == 400
        assert 'schedule_id' in response.data

    def test_filter_by_schedule(self, auth_client, schedules):
        for key, day in (('mareks', '2025-01-08'), ('newcastle', '2025-01-15')):
            auth_client.post('/api/vaccine-administrations/', {
                'schedule_id': schedules[key].pk,
                'administration_date': day,
                'cost': '1000',
                'administered_by': 'Dr. Mwangi',
            }, format='json')

        everything = auth_client.get('/api/vaccine-administrations/')
        filtered = auth_client.get(f"/api/vaccine-administrations/?scheduleId={schedules['mareks'].pk}")

        assert [a['administration_date'] for a in everything.data] == ['2025-01-15', '2025-01-08']
        assert len(filtered.data) == 1
        assert filtered.data[0]['vaccine_name'] == "Marek's"


# =============================================================================
# STATUS REFRESH TESTS
# =============================================================================

class TestStatusRefresh:

    def test_statuses_follow_dates(self, schedules):
        from medication_management.models import VaccineSchedule
        from medication_management.services import record_administration, refresh_schedule_statuses

        record_administration({
            'schedule': schedules['mareks'],
            'administration_date': date(2025, 1, 8),
            'cost': 1500,
            'administered_by': 'Dr. Mwangi',
        })

        changed = refresh_schedule_statuses(today=date(2025, 1, 16))

        statuses = dict(VaccineSchedule.objects.values_list('vaccine_name', 'status'))
        assert statuses == {
            "Marek's": 'completed',
            'Newcastle + IB': 'overdue',
            'Gumboro': 'pending',
            'Fowl Pox': 'upcoming',
        }
        # Gumboro was already pending
        assert changed == {'overdue': 1, 'pending': 0, 'upcoming': 1}

    def test_pending_window_setting(self, schedules, settings):
        from medication_management.models import VaccineSchedule
        from medication_management.services import refresh_schedule_statuses

        settings.POULTRY_RECORDS = {**settings.POULTRY_RECORDS, 'VACCINE_PENDING_WINDOW_DAYS': 3}
        refresh_schedule_statuses(today=date(2025, 1, 16))

        assert VaccineSchedule.objects.get(vaccine_name='Gumboro').status == 'upcoming'

    def test_refresh_is_idempotent(self, schedules):
        from medication_management.services import refresh_schedule_statuses

        refresh_schedule_statuses(today=date(2025, 1, 16))
        changed = refresh_schedule_statuses(today=date(2025, 1, 16))

        assert sum(changed.values()) == 0

    def test_management_command(self, schedules):
        from django.core.management import call_command
        from medication_management.models import VaccineSchedule

        out = StringIO()
        call_command('refresh_vaccine_statuses', '--date', '2025-03-01', stdout=out)

        assert '4 schedule(s) updated' in out.getvalue()
        assert set(VaccineSchedule.objects.values_list('status', flat=True)) == {'overdue'}

    def test_management_command_rejects_bad_date(self, schedules):
        from django.core.management import call_command
        from django.core.management.base import CommandError

        with pytest.raises(CommandError):
            call_command('refresh_vaccine_statuses', '--date', 'tomorrow', stdout=StringIO())

    def test_celery_task_runs_for_today(self, db):
        from django.utils import timezone
        from medication_management.models import VaccineSchedule
        from medication_management.tasks import refresh_vaccine_statuses

        today = timezone.localdate()
        VaccineSchedule.objects.create(
            vaccine_name='Newcastle booster', week_number=6,
            scheduled_date=today - timedelta(days=1)
        )

        refresh_vaccine_statuses()

        assert VaccineSchedule.objects.get().status == 'overdue'
