"""
Unit tests for the money, coercion and feed-unit helpers.
"""

import pytest
from datetime import date
from decimal import Decimal

from core.coercion import parse_date, to_bool, to_decimal, to_int
from core.exceptions import ValidationError
from core.money import (
    compute_balance,
    convert_currency,
    derive_payment_status,
    money_string,
    quantize,
)
from feed_inventory.units import bags_to_kg, kg_to_bags, resolve_quantities


# =============================================================================
# MONEY
# =============================================================================

class TestMoney:

    def test_quantize_rounds_half_up(self):
        assert quantize('2.345') == Decimal('2.35')
        assert quantize(Decimal('2.344')) == Decimal('2.34')
        assert quantize(7) == Decimal('7.00')

    @pytest.mark.parametrize('total, paid, expected', [
        ('1000', '1000', 'paid'),
        ('1000', '1200', 'paid'),
        ('1000', '400', 'partial'),
        ('1000', '0', 'pending'),
        ('0', '0', 'pending'),
    ])
    def test_payment_status(self, total, paid, expected):
        assert derive_payment_status(Decimal(total), Decimal(paid)) == expected

    def test_balance(self):
        assert compute_balance(Decimal('1500.00'), Decimal('499.995')) == Decimal('1000.01')

    def test_convert_usd_to_kes(self):
        assert convert_currency(Decimal('10'), 'USD', Decimal('127')) == (Decimal('1270.00'), 'KES')

    def test_convert_kes_to_usd(self):
        assert convert_currency(Decimal('1000'), 'KES', Decimal('127')) == (Decimal('7.87'), 'USD')

    def test_convert_rejects_bad_input(self):
        with pytest.raises(ValidationError):
            convert_currency(Decimal('10'), 'USD', Decimal('0'))
        with pytest.raises(ValidationError):
            convert_currency(Decimal('10'), 'EUR', Decimal('127'))

    def test_money_string(self):
        assert money_string(None) == '0.00'
        assert money_string(Decimal('12.5')) == '12.50'


# =============================================================================
# COERCION
# =============================================================================

class TestCoercion:

    def test_to_decimal_avoids_float_noise(self):
        assert to_decimal(0.1, 'cost') == Decimal('0.1')
        assert to_decimal('', 'cost') == Decimal('0')

    def test_to_decimal_rejects_negative_and_garbage(self):
        with pytest.raises(ValidationError):
            to_decimal('-1', 'cost')
        with pytest.raises(ValidationError):
            to_decimal('abc', 'cost')
        with pytest.raises(ValidationError):
            to_decimal(True, 'cost')

    def test_to_int(self):
        assert to_int('12', 'count') == 12
        assert to_int(None, 'count', default=0) == 0
        with pytest.raises(ValidationError):
            to_int('1.5', 'count')
        with pytest.raises(ValidationError):
            to_int(None, 'count')

    def test_parse_date(self):
        assert parse_date('2025-01-10', 'log_date') == date(2025, 1, 10)
        assert parse_date('2025-01-10T08:30:00Z', 'log_date') == date(2025, 1, 10)
        with pytest.raises(ValidationError) as excinfo:
            parse_date('10/01/2025', 'log_date')
        assert excinfo.value.message == 'Invalid log_date format. Use YYYY-MM-DD'

    def test_to_bool(self):
        assert to_bool('true') is True
        assert to_bool('0') is False
        assert to_bool(False) is False


# =============================================================================
# FEED UNITS
# =============================================================================

class TestFeedUnits:

    def test_bags_and_kg(self):
        assert bags_to_kg(3) == Decimal('150.00')
        assert kg_to_bags(Decimal('125')) == Decimal('2.50')

    def test_resolve_keeps_entered_unit(self):
        assert resolve_quantities('bags', Decimal('4'), None) == (Decimal('4.00'), Decimal('200.00'))
        assert resolve_quantities('kg', None, Decimal('75')) == (Decimal('1.50'), Decimal('75.00'))

    def test_bag_weight_setting(self, settings):
        settings.POULTRY_RECORDS = {**settings.POULTRY_RECORDS, 'KG_PER_BAG': 70}

        assert bags_to_kg(2) == Decimal('140.00')
