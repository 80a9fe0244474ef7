"""
Expense Tracking Models

Farm expenses outside bird acquisition and feed intakes (which carry their
own costs). Each expense can be:
- Linked to a specific batch (for per-batch costing)
- Farm-level (general overhead, not tied to a batch)
"""

from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from core.money import PaymentStatus, compute_balance, derive_payment_status


class ExpenseCategory(models.TextChoices):
    """Predefined expense categories for standardized tracking."""
    FEED = 'Feed', 'Feed'
    MEDICINE = 'Medicine', 'Medicine'
    INFRASTRUCTURE = 'Infrastructure', 'Infrastructure'
    SALARY = 'Salary', 'Salary'
    OTHER = 'Other', 'Other'


class Expense(models.Model):
    """
    Individual expense record.

    total_amount is quantity × unit_cost when a unit cost is given, otherwise
    the total entered. balance_due and payment_status are derived on save.
    """

    category = models.CharField(
        max_length=20,
        choices=ExpenseCategory.choices,
        db_index=True,
        help_text="Main expense category"
    )

    # Expense Details
    description = models.CharField(
        max_length=255,
        help_text="Brief description of the expense"
    )

    expense_date = models.DateField(
        db_index=True,
        help_text="Date expense was incurred"
    )

    # Quantity & Cost
    quantity = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('1.00'),
        validators=[MinValueValidator(Decimal('0.01'))],
        help_text="Quantity (hours, units, kWh, etc.)"
    )

    unit = models.CharField(
        max_length=50,
        default='unit',
        help_text="Unit of measurement"
    )

    unit_cost = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Cost per unit"
    )

    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
        help_text="Total expense amount"
    )

    # Payment
    amount_paid = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    balance_due = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        help_text="total_amount - amount_paid (auto-calculated)"
    )

    payment_status = models.CharField(
        max_length=10,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING,
        help_text="Payment status (auto-calculated)"
    )

    payment_method = models.CharField(
        max_length=50,
        blank=True,
        help_text="Payment method (Cash, M-Pesa, Bank, etc.)"
    )

    reference = models.CharField(
        max_length=100,
        blank=True,
        help_text="Receipt or reference number"
    )

    # Vendor/Payee
    payee = models.CharField(
        max_length=200,
        blank=True,
        help_text="Name of person/company paid"
    )

    currency = models.CharField(max_length=10, default='KES')

    batch = models.ForeignKey(
        'flock_management.Batch',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expenses',
        help_text="Specific batch (leave blank for farm-level expenses)"
    )

    # Notes
    notes = models.TextField(
        blank=True,
        help_text="Additional notes"
    )

    # Metadata
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expenses_created',
        help_text="User who recorded this expense"
    )

    class Meta:
        db_table = 'poultry_expenses'
        ordering = ['-expense_date', '-created_at']
        verbose_name = 'Expense'
        verbose_name_plural = 'Expenses'
        indexes = [
            models.Index(fields=['category', 'expense_date'], name='expense_category_date_idx'),
            models.Index(fields=['batch', 'expense_date'], name='expense_batch_date_idx'),
        ]

    def __str__(self):
        batch_info = f" ({self.batch.batch_id})" if self.batch_id else ""
        return f"{self.category}{batch_info}: {self.currency} {self.total_amount} - {self.expense_date}"

    def save(self, *args, **kwargs):
        """Derive balance and payment status before saving."""
        self.balance_due = compute_balance(self.total_amount, self.amount_paid)
        self.payment_status = derive_payment_status(self.total_amount, self.amount_paid)
        super().save(*args, **kwargs)
