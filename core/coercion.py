"""
Coercion of raw request values into storage types.

Request bodies arrive as JSON, so numbers may be ints, floats or strings and
dates are ISO strings. Each helper raises ``core.exceptions.ValidationError``
with a field-specific message when the value cannot be used.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from .exceptions import ValidationError

ZERO = Decimal('0')


def is_blank(value) -> bool:
    """True for None, empty strings and whitespace-only strings."""
    return value is None or (isinstance(value, str) and not value.strip())


def parse_date(value, field: str) -> date:
    """Parse YYYY-MM-DD (or an ISO datetime) into a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if is_blank(value) or not isinstance(value, str):
        raise ValidationError(f'Invalid {field} format. Use YYYY-MM-DD')
    try:
        return datetime.fromisoformat(value.strip().replace('Z', '+00:00')).date()
    except ValueError:
        raise ValidationError(f'Invalid {field} format. Use YYYY-MM-DD')


def to_decimal(value, field: str, default: Decimal = ZERO, allow_negative: bool = False) -> Decimal:
    """Convert to Decimal via str() so floats do not carry binary noise."""
    if is_blank(value):
        return default
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be a number')
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f'{field} must be a number')
    if not number.is_finite():
        raise ValidationError(f'{field} must be a number')
    if number < 0 and not allow_negative:
        raise ValidationError(f'{field} cannot be negative')
    return number


def to_int(value, field: str, default: int = None, allow_negative: bool = False) -> int:
    """Convert to int, rejecting fractions. A blank value returns ``default``."""
    if is_blank(value):
        if default is None:
            raise ValidationError(f'{field} is required')
        return default
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be a whole number')
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f'{field} must be a whole number')
    if not number.is_finite() or number != number.to_integral_value():
        raise ValidationError(f'{field} must be a whole number')
    number = int(number)
    if number < 0 and not allow_negative:
        raise ValidationError(f'{field} cannot be negative')
    return number


def to_bool(value) -> bool:
    """Interpret JSON booleans and the usual query-string spellings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes', 'on')
    return bool(value)
