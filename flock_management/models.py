"""
Flock Management Models

Handles:
- Batch tracking (birds received together, tracked as one cohort)
- Coop registry (physical enclosures with optional capacity)
- Coop allocations (how a batch's birds are placed across coops)
- Daily operational logs (feed, water, mortality)
"""

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q, F
from django.utils import timezone
from decimal import Decimal

from core.money import PaymentStatus


class FeedType(models.TextChoices):
    STARTERS_MASH = 'Starters Mash', 'Starters Mash'
    GROWERS_MASH = 'Growers Mash', 'Growers Mash'
    LAYERS_MASH = 'Layers Mash', 'Layers Mash'
    FINISHER_MASH = 'Finisher Mash', 'Finisher Mash'
    OTHER = 'Other', 'Other'


class FeedInputMode(models.TextChoices):
    BAGS = 'bags', 'Bags'
    KG = 'kg', 'Kilograms'


# =============================================================================
# COOP MODEL - Physical Enclosures
# =============================================================================

class Coop(models.Model):
    """
    A named enclosure birds can be placed in.

    Allocations reference coops by ``code``. A coop without a capacity accepts
    any number of birds.
    """

    code = models.CharField(
        max_length=100,
        unique=True,
        help_text="Identifier used by allocations (e.g., COOP-A)"
    )
    name = models.CharField(max_length=255, blank=True)
    capacity = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Maximum birds housed at once across all active batches"
    )
    is_active = models.BooleanField(default=True)
    notes = models.TextField(blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'poultry_coops'
        ordering = ['code']

    def __str__(self):
        return f"{self.code} ({self.name})" if self.name else self.code

    @property
    def occupied(self):
        """Birds currently allocated to this coop across active batches"""
        total = CoopAllocation.objects.filter(
            coop_id=self.code,
            batch__is_active=True,
        ).aggregate(total=models.Sum('allocated_quantity'))['total']
        return total or 0


# =============================================================================
# BATCH MODEL - Track Bird Cohorts
# =============================================================================

class Batch(models.Model):
    """
    Represents a batch of birds received together.
    Birds are not tracked individually but as cohorts.
    """

    class Breed(models.TextChoices):
        LAYERS = 'Layers', 'Layers'
        BROILERS = 'Broilers', 'Broilers'
        KENBRO = 'Kenbro', 'Kenbro'

    # Identification
    batch_id = models.CharField(
        max_length=100,
        unique=True,
        help_text="Human-readable identifier (e.g., batch_layers_20250101)"
    )
    name = models.CharField(max_length=255)
    supplier = models.CharField(
        max_length=255,
        help_text="Hatchery or supplier name"
    )
    breed = models.CharField(max_length=20, choices=Breed.choices, db_index=True)

    # Intake
    arrival_date = models.DateField(help_text="Date birds arrived at farm")
    intake_age_days = models.PositiveIntegerField(
        default=0,
        help_text="Age in days when birds arrived"
    )
    initial_quantity = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text="Number of birds at arrival"
    )
    current_count = models.PositiveIntegerField(
        help_text="Current number of live birds"
    )

    # Financial Tracking
    currency = models.CharField(max_length=10, default='KES')
    cost_per_bird = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(0)]
    )
    transport_cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(0)]
    )
    equipment_cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(0)]
    )
    total_initial_cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(0)],
        help_text="cost_per_bird × initial_quantity + transport + equipment, or a lump sum"
    )
    amount_paid_upfront = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(0)]
    )
    balance_due = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        help_text="total_initial_cost - amount_paid_upfront"
    )
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING
    )

    is_active = models.BooleanField(default=True, db_index=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'poultry_batches'
        ordering = ['-arrival_date', '-id']
        verbose_name_plural = 'Batches'
        constraints = [
            models.CheckConstraint(
                condition=Q(current_count__gte=0),
                name='batch_current_count_non_negative',
            ),
            models.CheckConstraint(
                condition=Q(current_count__lte=F('initial_quantity')),
                name='batch_current_count_within_initial',
            ),
        ]

    def __str__(self):
        return f"{self.batch_id} - {self.name}"

    @property
    def mortality(self):
        return self.initial_quantity - self.current_count

    @property
    def mortality_rate_percent(self):
        """(mortality / initial quantity) × 100, two places"""
        if not self.initial_quantity:
            return Decimal('0.00')
        rate = Decimal(self.mortality) * 100 / Decimal(self.initial_quantity)
        return rate.quantize(Decimal('0.01'))

    @property
    def days_on_farm(self):
        if not self.arrival_date:
            return 0
        return max((timezone.localdate() - self.arrival_date).days, 0)

    @property
    def allocated_quantity(self):
        # Iterating .all() reuses prefetch_related caches
        return sum(a.allocated_quantity for a in self.coop_allocations.all())

    @property
    def unallocated_quantity(self):
        return self.initial_quantity - self.allocated_quantity


# =============================================================================
# COOP ALLOCATION MODEL - Bird Placement
# =============================================================================

class CoopAllocation(models.Model):
    """
    Placement of part of a batch in a coop.

    Allocations are replaced as a set when a batch is updated with a new
    allocation list; they are never patched one by one.
    """

    batch = models.ForeignKey(
        Batch,
        on_delete=models.CASCADE,
        related_name='coop_allocations'
    )
    coop_id = models.CharField(
        max_length=100,
        db_index=True,
        help_text="Coop code (matches Coop.code when the coop is registered)"
    )
    allocated_quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    placement_date = models.DateField()
    initial_mortality = models.PositiveIntegerField(
        default=0,
        help_text="Birds lost during placement"
    )
    notes = models.TextField(blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'poultry_coop_allocations'
        ordering = ['id']
        constraints = [
            models.CheckConstraint(
                condition=Q(allocated_quantity__gt=0),
                name='coop_allocation_quantity_positive',
            ),
        ]

    def __str__(self):
        return f"{self.batch.batch_id} → {self.coop_id} ({self.allocated_quantity})"


# =============================================================================
# DAILY LOG MODEL - Feed, Water & Mortality
# =============================================================================

class DailyLog(models.Model):
    """
    One operational entry for a day.

    Mortality recorded here is subtracted from the batch's live count when the
    log is created. Several logs may exist for the same batch and date.
    """

    batch = models.ForeignKey(
        Batch,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='daily_logs'
    )
    log_date = models.DateField(db_index=True)
    mortality_count = models.PositiveIntegerField(default=0)

    # Feed
    feed_type = models.CharField(max_length=20, choices=FeedType.choices)
    feed_input_mode = models.CharField(max_length=10, choices=FeedInputMode.choices)
    feed_bags = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    feed_kg = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))

    # Water
    water_intake_liters = models.DecimalField(max_digits=10, decimal_places=2)

    notes = models.TextField(blank=True)
    logged_by = models.CharField(max_length=255)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='daily_logs'
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'poultry_daily_logs'
        ordering = ['-log_date', '-id']
        indexes = [
            models.Index(fields=['batch', 'log_date'], name='daily_log_batch_date_idx'),
        ]

    def __str__(self):
        batch = self.batch.batch_id if self.batch_id else 'unassigned'
        return f"{self.log_date} - {batch}"
