"""
Accommodation Supplement

Flat per-year amount added on top of the multiplicative compensation for
late-bracket players the releasing club housed at its own expense.
"""

from decimal import Decimal

from ..models import AgeBracket, AgeClass


class AccommodationSupplement:
    """Calculates the housing supplement."""

    PER_YEAR = Decimal('15000.00')

    def calculate(self, age_class: AgeClass, housing_years: int) -> Decimal:
        """
        Accommodation Supplement = housing_years × 15,000.00

        Always 0 for U13 - U15. The result is an exact multiple of the
        per-year amount, so it needs no rounding.
        """
        if age_class.bracket == AgeBracket.EARLY:
            return Decimal('0')
        return housing_years * self.PER_YEAR
