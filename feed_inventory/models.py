"""
Feed Inventory Models

Handles:
- Feed suppliers (contact records)
- Feed intakes (deliveries of feed with quantity and cost)
"""

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
from phonenumber_field.modelfields import PhoneNumberField

from flock_management.models import FeedInputMode, FeedType


class Supplier(models.Model):
    """
    A feed or chick supplier the farm buys from.
    """

    name = models.CharField(max_length=255)
    contact_person = models.CharField(max_length=255, blank=True)
    phone = PhoneNumberField(
        region='KE',  # Kenya
        blank=True,
        null=True,
        help_text="Phone number (Kenya format: +254XXXXXXXXX)"
    )
    email = models.EmailField(blank=True)
    address = models.TextField(blank=True)
    notes = models.TextField(blank=True)

    # Metadata
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'poultry_suppliers'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.name


class FeedIntake(models.Model):
    """
    A delivery of feed.

    Quantity is entered either in bags or in kilograms; the other unit and the
    matching unit cost are derived at a fixed bag weight.
    """

    delivery_date = models.DateField(help_text="Date the feed was delivered")
    feed_type = models.CharField(max_length=20, choices=FeedType.choices)
    custom_feed_name = models.CharField(
        max_length=255,
        blank=True,
        help_text="Required when feed type is Other"
    )

    # Supplier
    supplier = models.ForeignKey(
        Supplier,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='feed_intakes'
    )
    supplier_name = models.CharField(max_length=255, blank=True)

    # Quantity and Pricing
    input_mode = models.CharField(max_length=10, choices=FeedInputMode.choices)
    bags_received = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    kg_received = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    cost_per_bag = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    cost_per_kg = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    total_cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
        help_text="Entered directly or quantity × unit cost"
    )
    currency = models.CharField(max_length=10, default='KES')

    # References
    batch_number = models.CharField(max_length=100, blank=True, help_text="Manufacturer batch number")
    invoice_number = models.CharField(max_length=100, blank=True, help_text="Supplier invoice number")

    notes = models.TextField(blank=True)
    received_by = models.CharField(max_length=255, help_text="Person who received the delivery")

    # Metadata
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='feed_intakes_created'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'poultry_feed_intakes'
        ordering = ['-delivery_date', '-id']
        verbose_name = 'Feed Intake'
        verbose_name_plural = 'Feed Intakes'

    def __str__(self):
        return f"{self.display_feed_name} ({self.delivery_date})"

    @property
    def display_feed_name(self):
        if self.feed_type == FeedType.OTHER and self.custom_feed_name:
            return self.custom_feed_name
        return self.feed_type
