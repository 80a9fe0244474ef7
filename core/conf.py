"""
Access to the POULTRY_RECORDS settings dict with defaults.
"""

from decimal import Decimal

from django.conf import settings

DEFAULTS = {
    'DEFAULT_CURRENCY': 'KES',
    'KG_PER_BAG': Decimal('50'),
    'DEFAULT_USD_KES_RATE': Decimal('127'),
    'ADJUST_COUNT_ON_LOG_EDIT': False,
    'VACCINE_PENDING_WINDOW_DAYS': 7,
}


def records_setting(name: str):
    """Read a POULTRY_RECORDS value, falling back to the built-in default."""
    configured = getattr(settings, 'POULTRY_RECORDS', {})
    return configured.get(name, DEFAULTS[name])
