from django.contrib.auth.models import AbstractUser
from django.db import models
from phonenumber_field.modelfields import PhoneNumberField


class User(AbstractUser):
    """
    Custom User model extending Django's AbstractUser.
    Farm staff who log operations and hold a wallet.
    """

    class UserRole(models.TextChoices):
        ADMIN = 'admin', 'Administrator'
        MANAGER = 'manager', 'Farm Manager'
        USER = 'user', 'Farm Hand'

    email = models.EmailField(unique=True)

    role = models.CharField(
        max_length=50,
        choices=UserRole.choices,
        default=UserRole.USER,
        db_index=True,
        help_text="User's role on the farm"
    )

    phone = PhoneNumberField(
        region='KE',  # Kenya
        blank=True,
        null=True,
        help_text="Phone number (Kenya format: +254XXXXXXXXX)"
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'poultry_users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return f"{self.get_full_name()} ({self.get_role_display()})"

    def get_full_name(self):
        """Return the user's full name or username if name is not set."""
        full_name = super().get_full_name()
        return full_name if full_name else self.username
