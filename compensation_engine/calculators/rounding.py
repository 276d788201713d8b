"""
Money Rounding

Shared rounding rule for every amount the engine produces.
"""

from decimal import ROUND_HALF_UP, Decimal


def quantize_money(value: Decimal) -> Decimal:
    """Round to 2 decimal places, halves away from zero."""
    return value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
