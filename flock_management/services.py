"""
Batch Accounting Services

Business logic for the batch lifecycle:
1. BatchAccountingService - create/update/delete batches with server-derived totals
2. CoopAllocationLedger - place a batch's birds across coops under conservation rules
3. DailyOperationsRecorder - daily logs and their mortality side effect

Key Principles:
- total_initial_cost, balance_due and payment_status are always derived here
- current_count only moves through atomic conditional UPDATEs
- every multi-row write runs inside transaction.atomic()
"""

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

from django.db import IntegrityError, transaction
from django.db.models import Count, F, Q, Sum
from django.utils import timezone

from core.coercion import is_blank, parse_date, to_bool, to_decimal, to_int
from core.conf import records_setting
from core.exceptions import (
    AllocationError,
    InsufficientFlockError,
    NotFoundError,
    ValidationError,
)
from core.money import compute_balance, derive_payment_status, money_string, quantize
from feed_inventory.units import resolve_quantities

from .models import Batch, Coop, CoopAllocation, DailyLog, FeedInputMode, FeedType

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')

# Attempts at claiming a free external id before the IntegrityError is surfaced
MAX_IDENTIFIER_ATTEMPTS = 5


# ==============================================================================
# HELPERS
# ==============================================================================

def build_batch_identifier(breed: str, arrival_date: date) -> str:
    """batch_{breed_lower}_{YYYYMMDD}"""
    return f"batch_{breed.lower()}_{arrival_date.strftime('%Y%m%d')}"


def next_free_identifier(base: str) -> str:
    """Return ``base`` or the first of base_2, base_3, ... not yet taken."""
    taken = set(
        Batch.objects.filter(batch_id__startswith=base).values_list('batch_id', flat=True)
    )
    if base not in taken:
        return base
    suffix = 2
    while f"{base}_{suffix}" in taken:
        suffix += 1
    return f"{base}_{suffix}"


def well_formed_allocations(entries, default_placement_date: date) -> List[Dict[str, Any]]:
    """
    Keep only allocation entries with a coop_id and a positive whole
    allocated_quantity. Anything else is dropped without error.

    Args:
        entries: list of dicts as received in the request body
        default_placement_date: used when an entry has no placement_date

    Returns:
        List of cleaned dicts ready for CoopAllocation(**entry)
    """
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ValidationError('coop_allocations must be a list')

    cleaned = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue

        coop_id = entry.get('coop_id')
        coop_id = str(coop_id).strip() if coop_id is not None else ''
        if not coop_id:
            continue

        try:
            quantity = to_int(entry.get('allocated_quantity'), 'allocated_quantity', allow_negative=True)
        except ValidationError:
            continue
        if quantity <= 0:
            continue

        placement = entry.get('placement_date')
        placement_date = (
            default_placement_date if is_blank(placement)
            else parse_date(placement, 'placement_date')
        )
        initial_mortality = to_int(entry.get('initial_mortality'), 'initial_mortality', default=0)
        if initial_mortality > quantity:
            raise ValidationError(
                f'initial_mortality ({initial_mortality}) cannot exceed allocated_quantity ({quantity}) '
                f'for coop {coop_id}'
            )

        cleaned.append({
            'coop_id': coop_id,
            'allocated_quantity': quantity,
            'placement_date': placement_date,
            'initial_mortality': initial_mortality,
            'notes': entry.get('notes') or '',
        })
    return cleaned


def lock_batch(batch_pk) -> Batch:
    """SELECT ... FOR UPDATE the batch row. Must run inside transaction.atomic()."""
    try:
        return Batch.objects.select_for_update().get(pk=batch_pk)
    except Batch.DoesNotExist:
        raise NotFoundError('Batch not found')


# ==============================================================================
# COOP ALLOCATION LEDGER
# ==============================================================================

class CoopAllocationLedger:
    """
    Persists per-coop placements for a batch.

    Conservation rules checked on every write:
    - sum(allocated_quantity) for a batch <= batch.initial_quantity
    - for a registered coop with a capacity, birds placed there by all active
      batches <= capacity
    """

    def replace_all(self, batch_pk, entries) -> List[CoopAllocation]:
        """Delete every allocation of the batch and insert the well-formed subset of ``entries``."""
        with transaction.atomic():
            batch = lock_batch(batch_pk)
            return self.replace_for(batch, entries)

    def replace_for(self, batch: Batch, entries) -> List[CoopAllocation]:
        """
        Replace-all for a batch row the caller already holds (created or locked
        in the current transaction).
        """
        placements = well_formed_allocations(entries, batch.arrival_date)
        self._check_conservation(batch, placements)

        removed, _ = CoopAllocation.objects.filter(batch=batch).delete()
        CoopAllocation.objects.bulk_create([
            CoopAllocation(batch=batch, **placement) for placement in placements
        ])

        logger.info(
            f"Replaced coop allocations for {batch.batch_id}: "
            f"removed {removed}, stored {len(placements)}"
        )
        return list(CoopAllocation.objects.filter(batch=batch).order_by('id'))

    def append(self, batch_pk, entry) -> CoopAllocation:
        """Add a single allocation under the same conservation rules."""
        with transaction.atomic():
            batch = lock_batch(batch_pk)
            new_placements = well_formed_allocations([entry], batch.arrival_date)
            if not new_placements:
                raise ValidationError('coop_id and a positive allocated_quantity are required')

            existing = [
                {'coop_id': a.coop_id, 'allocated_quantity': a.allocated_quantity}
                for a in CoopAllocation.objects.filter(batch=batch)
            ]
            self._check_conservation(batch, existing + new_placements)

            allocation = CoopAllocation.objects.create(batch=batch, **new_placements[0])

        logger.info(
            f"Allocated {allocation.allocated_quantity} birds of {batch.batch_id} to coop {allocation.coop_id}"
        )
        return allocation

    def list_for(self, batch_pk) -> List[CoopAllocation]:
        if not Batch.objects.filter(pk=batch_pk).exists():
            raise NotFoundError('Batch not found')
        return list(CoopAllocation.objects.filter(batch_id=batch_pk).order_by('id'))

    def totals(self, batch_pk) -> Dict[str, int]:
        try:
            initial_quantity = Batch.objects.values_list('initial_quantity', flat=True).get(pk=batch_pk)
        except Batch.DoesNotExist:
            raise NotFoundError('Batch not found')
        allocated = CoopAllocation.objects.filter(batch_id=batch_pk).aggregate(
            total=Sum('allocated_quantity')
        )['total'] or 0
        return {
            'initial_quantity': initial_quantity,
            'allocated_quantity': allocated,
            'unallocated_quantity': initial_quantity - allocated,
        }

    def _check_conservation(self, batch: Batch, placements: List[Dict[str, Any]]):
        total = sum(p['allocated_quantity'] for p in placements)
        if total > batch.initial_quantity:
            raise AllocationError(
                f'Allocations total {total} birds but batch {batch.batch_id} '
                f'only has {batch.initial_quantity}'
            )

        per_coop = defaultdict(int)
        for placement in placements:
            per_coop[placement['coop_id']] += placement['allocated_quantity']

        coops = Coop.objects.filter(code__in=list(per_coop), capacity__isnull=False)
        for coop in coops:
            elsewhere = CoopAllocation.objects.filter(
                coop_id=coop.code,
                batch__is_active=True,
            ).exclude(batch=batch).aggregate(total=Sum('allocated_quantity'))['total'] or 0

            if elsewhere + per_coop[coop.code] > coop.capacity:
                raise AllocationError(
                    f'Coop {coop.code} holds at most {coop.capacity} birds; '
                    f'{elsewhere} already placed by other batches, '
                    f'{per_coop[coop.code]} requested'
                )


# ==============================================================================
# BATCH ACCOUNTING SERVICE
# ==============================================================================

class BatchAccountingService:
    """
    Composition point for batch bookkeeping.

    Example Usage:
        service = BatchAccountingService()
        batch = service.create({
            'batch_name': 'January layers',
            'supplier': 'Kenchic',
            'breed': 'Layers',
            'arrival_date': '2025-01-01',
            'intake_age_days': 1,
            'initial_quantity': 500,
        })
        # batch.batch_id == 'batch_layers_20250101', batch.current_count == 500
    """

    REQUIRED_FIELDS = (
        'batch_name', 'supplier', 'breed', 'arrival_date', 'intake_age_days', 'initial_quantity'
    )

    def __init__(self, ledger: Optional[CoopAllocationLedger] = None):
        self.ledger = ledger or CoopAllocationLedger()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, batch_pk) -> Batch:
        try:
            return Batch.objects.prefetch_related('coop_allocations').get(pk=batch_pk)
        except Batch.DoesNotExist:
            raise NotFoundError('Batch not found')

    def list(self, queryset=None):
        queryset = queryset if queryset is not None else Batch.objects.all()
        return queryset.prefetch_related('coop_allocations').order_by('-arrival_date', '-id')

    def summary(self) -> Dict[str, Any]:
        """Totals across all batches plus a per-breed breakdown."""
        batches = Batch.objects.all()
        totals = batches.aggregate(
            batch_count=Count('id'),
            active_batches=Count('id', filter=Q(is_active=True)),
            initial_birds=Sum('initial_quantity'),
            live_birds=Sum('current_count'),
            total_cost=Sum('total_initial_cost'),
            total_paid=Sum('amount_paid_upfront'),
            total_balance_due=Sum('balance_due'),
        )
        initial_birds = totals['initial_birds'] or 0
        live_birds = totals['live_birds'] or 0
        mortality = initial_birds - live_birds

        by_breed = {}
        for row in batches.values('breed').annotate(
            batches=Count('id'),
            initial=Sum('initial_quantity'),
            live=Sum('current_count'),
        ).order_by('breed'):
            by_breed[row['breed']] = {
                'batches': row['batches'],
                'live_birds': row['live'] or 0,
                'mortality': (row['initial'] or 0) - (row['live'] or 0),
            }

        rate = Decimal(mortality) * 100 / Decimal(initial_birds) if initial_birds else ZERO
        return {
            'batch_count': totals['batch_count'],
            'active_batches': totals['active_batches'],
            'initial_birds': initial_birds,
            'live_birds': live_birds,
            'total_mortality': mortality,
            'mortality_rate_percent': money_string(rate),
            'total_cost': money_string(totals['total_cost']),
            'total_paid': money_string(totals['total_paid']),
            'total_balance_due': money_string(totals['total_balance_due']),
            'by_breed': by_breed,
        }

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, data: Dict[str, Any]) -> Batch:
        missing = [
            field for field in ('batch_name', 'supplier', 'breed', 'arrival_date')
            if is_blank(data.get(field))
        ]
        # Intake age may legitimately be 0; only absence counts as missing
        if data.get('intake_age_days') is None or data.get('intake_age_days') == '':
            missing.append('intake_age_days')
        initial_raw = data.get('initial_quantity')
        if is_blank(initial_raw) or initial_raw == 0 or initial_raw == '0':
            missing.append('initial_quantity')
        if missing:
            raise ValidationError(f'Missing required fields: {", ".join(missing)}')

        breed = self._parse_breed(data['breed'])
        arrival_date = parse_date(data['arrival_date'], 'arrival_date')
        intake_age_days = to_int(data['intake_age_days'], 'intake_age_days')
        initial_quantity = to_int(initial_raw, 'initial_quantity')
        if initial_quantity < 1:
            raise ValidationError('initial_quantity must be at least 1')

        batch = Batch(
            name=str(data['batch_name']).strip(),
            supplier=str(data['supplier']).strip(),
            breed=breed,
            arrival_date=arrival_date,
            intake_age_days=intake_age_days,
            initial_quantity=initial_quantity,
            current_count=initial_quantity,
            currency=self._parse_currency(data.get('currency')),
            is_active=to_bool(data.get('is_active', True)),
            **self._derive_costs(data, initial_quantity),
        )

        with transaction.atomic():
            self._save_with_identifier(batch)
            if data.get('coop_allocations') is not None:
                self.ledger.replace_for(batch, data['coop_allocations'])

        logger.info(
            f"Batch {batch.batch_id} created: {batch.initial_quantity} {batch.breed}, "
            f"total {batch.total_initial_cost} {batch.currency} ({batch.payment_status})"
        )
        return self.get(batch.pk)

    def update(self, batch_pk, data: Dict[str, Any]) -> Batch:
        """
        Sparse patch. Fields absent from ``data`` keep their stored value; the
        cost snapshot is re-derived every time. A ``coop_allocations`` list (even
        an empty one) replaces the stored allocation set; null leaves it alone.
        """
        with transaction.atomic():
            batch = lock_batch(batch_pk)

            if 'batch_name' in data or 'name' in data:
                name = data.get('batch_name', data.get('name'))
                if is_blank(name):
                    raise ValidationError('batch_name cannot be blank')
                batch.name = str(name).strip()
            if 'supplier' in data:
                if is_blank(data['supplier']):
                    raise ValidationError('supplier cannot be blank')
                batch.supplier = str(data['supplier']).strip()
            if 'breed' in data:
                batch.breed = self._parse_breed(data['breed'])
            if 'arrival_date' in data:
                batch.arrival_date = parse_date(data['arrival_date'], 'arrival_date')
            if 'intake_age_days' in data:
                batch.intake_age_days = to_int(data['intake_age_days'], 'intake_age_days')
            if 'currency' in data:
                batch.currency = self._parse_currency(data['currency'])
            if 'is_active' in data:
                batch.is_active = to_bool(data['is_active'])

            self._apply_counts(batch, data)

            for field, value in self._derive_costs(data, batch.initial_quantity, existing=batch).items():
                setattr(batch, field, value)

            batch.save()

            if data.get('coop_allocations') is not None:
                self.ledger.replace_for(batch, data['coop_allocations'])

        logger.info(f"Batch {batch.batch_id} updated: fields {sorted(data.keys())}")
        return self.get(batch.pk)

    def delete(self, batch_pk) -> str:
        """Delete the batch; allocations and daily logs cascade. Returns the external id."""
        with transaction.atomic():
            batch = lock_batch(batch_pk)
            external_id = batch.batch_id
            batch.delete()

        logger.info(f"Batch {external_id} deleted")
        return external_id

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _parse_breed(self, value) -> str:
        breed = str(value).strip()
        for choice in Batch.Breed.values:
            if breed.lower() == choice.lower():
                return choice
        raise ValidationError(
            f'Invalid breed: {breed}. Choose one of {", ".join(Batch.Breed.values)}'
        )

    def _parse_currency(self, value) -> str:
        if is_blank(value):
            return records_setting('DEFAULT_CURRENCY')
        return str(value).strip().upper()

    def _apply_counts(self, batch: Batch, data: Dict[str, Any]):
        if 'initial_quantity' in data:
            new_initial = to_int(data['initial_quantity'], 'initial_quantity')
            if new_initial < 1:
                raise ValidationError('initial_quantity must be at least 1')
            if new_initial != batch.initial_quantity:
                if CoopAllocation.objects.filter(batch=batch).exists():
                    raise ValidationError(
                        'initial_quantity cannot change while the batch has coop allocations'
                    )
                if 'current_count' not in data:
                    shifted = batch.current_count + (new_initial - batch.initial_quantity)
                    if shifted < 0:
                        raise ValidationError(
                            f'initial_quantity {new_initial} is below the {batch.mortality} deaths already recorded'
                        )
                    batch.current_count = shifted
                batch.initial_quantity = new_initial

        if 'current_count' in data:
            current_count = to_int(data['current_count'], 'current_count')
            if current_count > batch.initial_quantity:
                raise ValidationError(
                    f'current_count ({current_count}) cannot exceed initial_quantity ({batch.initial_quantity})'
                )
            batch.current_count = current_count

    def _derive_costs(self, data: Dict[str, Any], initial_quantity: int,
                      existing: Optional[Batch] = None) -> Dict[str, Any]:
        """
        Derive the cost snapshot.

        The itemised total is cost_per_bird × initial_quantity + transport_cost
        + equipment_cost. When it is zero a declared total_acquisition_cost is
        taken as a lump sum. Caller-supplied balance_due / payment_status must
        agree with what is derived here.
        """
        def amount(field, current):
            if field in data and not is_blank(data.get(field)):
                return quantize(to_decimal(data[field], field))
            if field in data:
                return ZERO
            return current

        cost_per_bird = amount('cost_per_bird', existing.cost_per_bird if existing else ZERO)
        transport_cost = amount('transport_cost', existing.transport_cost if existing else ZERO)
        equipment_cost = amount('equipment_cost', existing.equipment_cost if existing else ZERO)
        paid = amount('amount_paid_upfront', existing.amount_paid_upfront if existing else ZERO)

        itemised = quantize(cost_per_bird * initial_quantity + transport_cost + equipment_cost)

        declared = data.get('total_acquisition_cost', data.get('total_initial_cost'))
        declared = None if is_blank(declared) else quantize(to_decimal(declared, 'total_acquisition_cost'))

        if itemised > 0:
            if declared is not None and declared != itemised:
                raise ValidationError(
                    f'total_acquisition_cost ({declared}) does not match cost_per_bird × initial_quantity '
                    f'+ transport_cost + equipment_cost ({itemised})'
                )
            total = itemised
        elif declared is not None:
            total = declared
        elif existing is not None and self._itemised(existing) == 0:
            # Keep an earlier lump-sum total
            total = existing.total_initial_cost
        else:
            total = ZERO

        if paid > total:
            raise ValidationError(
                f'amount_paid_upfront ({paid}) cannot exceed the total initial cost ({total})'
            )

        balance_due = compute_balance(total, paid)
        payment_status = derive_payment_status(total, paid)

        declared_balance = data.get('balance_due')
        if not is_blank(declared_balance):
            if quantize(to_decimal(declared_balance, 'balance_due', allow_negative=True)) != balance_due:
                raise ValidationError(
                    f'balance_due must equal total_initial_cost - amount_paid_upfront ({balance_due})'
                )

        declared_status = data.get('payment_status')
        if not is_blank(declared_status) and str(declared_status).strip().lower() != payment_status:
            raise ValidationError(
                f'payment_status must be "{payment_status}" for a total of {total} with {paid} paid'
            )

        return {
            'cost_per_bird': cost_per_bird,
            'transport_cost': transport_cost,
            'equipment_cost': equipment_cost,
            'total_initial_cost': total,
            'amount_paid_upfront': paid,
            'balance_due': balance_due,
            'payment_status': payment_status,
        }

    def _itemised(self, batch: Batch) -> Decimal:
        return quantize(
            batch.cost_per_bird * batch.initial_quantity + batch.transport_cost + batch.equipment_cost
        )

    def _save_with_identifier(self, batch: Batch):
        base = build_batch_identifier(batch.breed, batch.arrival_date)
        for attempt in range(1, MAX_IDENTIFIER_ATTEMPTS + 1):
            batch.batch_id = next_free_identifier(base)
            try:
                with transaction.atomic():
                    batch.save()
                return
            except IntegrityError:
                if attempt == MAX_IDENTIFIER_ATTEMPTS:
                    raise
                logger.warning(f"Batch id {batch.batch_id} was claimed concurrently, retrying")
                batch.pk = None


# ==============================================================================
# DAILY OPERATIONS RECORDER
# ==============================================================================

class DailyOperationsRecorder:
    """
    Daily log entries and the mortality they carry.

    Mortality always goes through record_mortality(), a single conditional
    UPDATE that refuses to take current_count below zero.
    """

    REQUIRED_FIELDS = ('log_date', 'feed_type', 'feed_input_mode', 'logged_by')

    # ------------------------------------------------------------------
    # Mortality
    # ------------------------------------------------------------------

    def record_mortality(self, batch_pk, count: int, on_date: Optional[date] = None) -> int:
        """
        Atomically subtract ``count`` birds from the batch.

        UPDATE poultry_batches SET current_count = current_count - :count
        WHERE id = :id AND current_count >= :count

        Returns:
            The batch's current_count after the decrement

        Raises:
            NotFoundError: no batch with that id
            InsufficientFlockError: fewer than ``count`` birds remain
        """
        if count <= 0:
            raise ValidationError('mortality_count must be greater than zero')

        with transaction.atomic():
            updated = Batch.objects.filter(pk=batch_pk, current_count__gte=count).update(
                current_count=F('current_count') - count,
                updated_at=timezone.now(),
            )
            if not updated:
                remaining = Batch.objects.filter(pk=batch_pk).values_list('current_count', flat=True).first()
                if remaining is None:
                    raise NotFoundError('Batch not found')
                raise InsufficientFlockError(
                    f'Cannot record {count} deaths: only {remaining} birds remain in this batch'
                )
            remaining = Batch.objects.values_list('current_count', flat=True).get(pk=batch_pk)

        logger.info(
            f"Recorded {count} deaths for batch {batch_pk} on {on_date or timezone.localdate()}: "
            f"{remaining} birds remaining"
        )
        return remaining

    def restore_birds(self, batch_pk, count: int) -> int:
        """Reverse earlier mortality, never above initial_quantity."""
        with transaction.atomic():
            updated = Batch.objects.filter(
                pk=batch_pk,
                current_count__lte=F('initial_quantity') - count,
            ).update(
                current_count=F('current_count') + count,
                updated_at=timezone.now(),
            )
            if not updated:
                if not Batch.objects.filter(pk=batch_pk).exists():
                    raise NotFoundError('Batch not found')
                raise ValidationError(
                    f'Restoring {count} birds would take the batch above its initial quantity'
                )
            remaining = Batch.objects.values_list('current_count', flat=True).get(pk=batch_pk)

        logger.info(f"Restored {count} birds to batch {batch_pk}: {remaining} birds remaining")
        return remaining

    # ------------------------------------------------------------------
    # Daily logs
    # ------------------------------------------------------------------

    def get(self, log_pk) -> DailyLog:
        try:
            return DailyLog.objects.select_related('batch').get(pk=log_pk)
        except DailyLog.DoesNotExist:
            raise NotFoundError('Daily log not found')

    def list(self, queryset=None):
        queryset = queryset if queryset is not None else DailyLog.objects.all()
        return queryset.select_related('batch').order_by('-log_date', '-id')

    def record(self, data: Dict[str, Any], user=None) -> DailyLog:
        missing = [field for field in self.REQUIRED_FIELDS if is_blank(data.get(field))]
        # 0 litres is a valid reading
        if data.get('water_intake_liters') is None or data.get('water_intake_liters') == '':
            missing.append('water_intake_liters')
        if missing:
            raise ValidationError(f'Missing required fields: {", ".join(missing)}')

        log_date = parse_date(data['log_date'], 'log_date')
        feed_type = self._parse_choice(data['feed_type'], FeedType, 'feed_type')
        input_mode = self._parse_choice(data['feed_input_mode'], FeedInputMode, 'feed_input_mode')
        feed_bags, feed_kg = resolve_quantities(
            input_mode,
            to_decimal(data.get('feed_bags'), 'feed_bags'),
            to_decimal(data.get('feed_kg'), 'feed_kg'),
        )
        water = quantize(to_decimal(data['water_intake_liters'], 'water_intake_liters'))
        mortality_count = to_int(data.get('mortality_count'), 'mortality_count', default=0)
        batch_pk = self._parse_batch_pk(data.get('batch_id'))

        with transaction.atomic():
            if batch_pk is not None:
                if mortality_count > 0:
                    self.record_mortality(batch_pk, mortality_count, log_date)
                elif not Batch.objects.filter(pk=batch_pk).exists():
                    raise NotFoundError('Batch not found')

            log = DailyLog.objects.create(
                batch_id=batch_pk,
                log_date=log_date,
                mortality_count=mortality_count,
                feed_type=feed_type,
                feed_input_mode=input_mode,
                feed_bags=feed_bags,
                feed_kg=feed_kg,
                water_intake_liters=water,
                notes=data.get('notes') or '',
                logged_by=str(data['logged_by']).strip(),
                created_by=user if user is not None and user.is_authenticated else None,
            )

        logger.info(
            f"Daily log {log.pk} recorded for {log_date} by {log.logged_by} "
            f"(batch {batch_pk}, mortality {mortality_count})"
        )
        return self.get(log.pk)

    def update(self, log_pk, data: Dict[str, Any]) -> DailyLog:
        """
        Sparse patch of a log. The batch count is only reconciled when
        POULTRY_RECORDS['ADJUST_COUNT_ON_LOG_EDIT'] is enabled.
        """
        with transaction.atomic():
            try:
                log = DailyLog.objects.select_for_update().get(pk=log_pk)
            except DailyLog.DoesNotExist:
                raise NotFoundError('Daily log not found')

            old_batch_pk, old_mortality = log.batch_id, log.mortality_count

            if 'log_date' in data:
                log.log_date = parse_date(data['log_date'], 'log_date')
            if 'feed_type' in data:
                log.feed_type = self._parse_choice(data['feed_type'], FeedType, 'feed_type')
            if 'feed_input_mode' in data:
                log.feed_input_mode = self._parse_choice(data['feed_input_mode'], FeedInputMode, 'feed_input_mode')
            if {'feed_input_mode', 'feed_bags', 'feed_kg'} & set(data):
                bags = to_decimal(data['feed_bags'], 'feed_bags') if 'feed_bags' in data else log.feed_bags
                kg = to_decimal(data['feed_kg'], 'feed_kg') if 'feed_kg' in data else log.feed_kg
                log.feed_bags, log.feed_kg = resolve_quantities(log.feed_input_mode, bags, kg)
            if 'water_intake_liters' in data:
                if data['water_intake_liters'] is None or data['water_intake_liters'] == '':
                    raise ValidationError('water_intake_liters cannot be empty')
                log.water_intake_liters = quantize(to_decimal(data['water_intake_liters'], 'water_intake_liters'))
            if 'logged_by' in data:
                if is_blank(data['logged_by']):
                    raise ValidationError('logged_by cannot be blank')
                log.logged_by = str(data['logged_by']).strip()
            if 'notes' in data:
                log.notes = data['notes'] or ''
            if 'mortality_count' in data:
                log.mortality_count = to_int(data['mortality_count'], 'mortality_count', default=0)
            if 'batch_id' in data:
                log.batch_id = self._parse_batch_pk(data['batch_id'])
                if log.batch_id is not None and not Batch.objects.filter(pk=log.batch_id).exists():
                    raise NotFoundError('Batch not found')

            if records_setting('ADJUST_COUNT_ON_LOG_EDIT'):
                self._reconcile(old_batch_pk, old_mortality, log.batch_id, log.mortality_count)

            log.save()

        logger.info(f"Daily log {log.pk} updated: fields {sorted(data.keys())}")
        return self.get(log.pk)

    def delete(self, log_pk):
        with transaction.atomic():
            try:
                log = DailyLog.objects.select_for_update().get(pk=log_pk)
            except DailyLog.DoesNotExist:
                raise NotFoundError('Daily log not found')

            if records_setting('ADJUST_COUNT_ON_LOG_EDIT') and log.batch_id and log.mortality_count:
                self.restore_birds(log.batch_id, log.mortality_count)
            log.delete()

        logger.info(f"Daily log {log_pk} deleted")

    def _reconcile(self, old_batch_pk, old_mortality: int, new_batch_pk, new_mortality: int):
        if old_batch_pk == new_batch_pk:
            if old_batch_pk is None:
                return
            delta = new_mortality - old_mortality
            if delta > 0:
                self.record_mortality(new_batch_pk, delta)
            elif delta < 0:
                self.restore_birds(old_batch_pk, -delta)
            return

        if old_batch_pk is not None and old_mortality:
            self.restore_birds(old_batch_pk, old_mortality)
        if new_batch_pk is not None and new_mortality:
            self.record_mortality(new_batch_pk, new_mortality)

    def _parse_choice(self, value, choices, field: str) -> str:
        text = str(value).strip()
        for choice in choices.values:
            if text.lower() == choice.lower():
                return choice
        raise ValidationError(f'Invalid {field}: {text}. Choose one of {", ".join(choices.values)}')

    def _parse_batch_pk(self, value) -> Optional[int]:
        if is_blank(value):
            return None
        return to_int(value, 'batch_id')
