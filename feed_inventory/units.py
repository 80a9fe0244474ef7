"""
Feed quantity conversion between bags and kilograms.

A bag is a fixed weight (50 kg unless POULTRY_RECORDS['KG_PER_BAG'] says
otherwise). Results are two-place Decimals so a value entered in one unit and
derived in the other never drifts through float arithmetic.
"""

from decimal import Decimal
from typing import Optional, Tuple

from core.conf import records_setting
from core.money import quantize


def kg_per_bag() -> Decimal:
    return Decimal(records_setting('KG_PER_BAG'))


def bags_to_kg(bags, per_bag: Optional[Decimal] = None) -> Decimal:
    per_bag = per_bag if per_bag is not None else kg_per_bag()
    return quantize(Decimal(bags) * per_bag)


def kg_to_bags(kg, per_bag: Optional[Decimal] = None) -> Decimal:
    per_bag = per_bag if per_bag is not None else kg_per_bag()
    return quantize(Decimal(kg) / per_bag)


def resolve_quantities(input_mode: str, bags: Decimal, kg: Decimal) -> Tuple[Decimal, Decimal]:
    """
    Return (bags, kg) where the unit that was entered wins and the other one
    is derived from it.
    """
    if input_mode == 'bags':
        return quantize(bags), bags_to_kg(bags)
    return kg_to_bags(kg), quantize(kg)
