"""
Tenure Factor

Rewards the releasing academy for the years the player spent there.
"""

from decimal import Decimal

from ..models import AgeClass


class TenureFactor:
    """Resolves the multiplier for consecutive years at the releasing academy."""

    # Not monotonic: year 2 is lower than year 1.
    FACTORS = {
        1: Decimal('2.0'),
        2: Decimal('1.5'),
        3: Decimal('2.25'),
        4: Decimal('3.0'),
        5: Decimal('3.75'),
        6: Decimal('4.5'),
        7: Decimal('5.25'),
    }
    MIN_YEARS = 1
    MAX_YEARS = 7
    UNINTERRUPTED_U11_U12_FACTOR = Decimal('1.0')

    def resolve(self, age_class: AgeClass, tenure_years: int, had_uninterrupted_u11_and_u12: bool) -> Decimal:
        """
        Look up the tenure multiplier.

        A U13 joiner who played U11 and U12 without interruption at the
        releasing club always gets 1.0. Otherwise years are clamped into
        [1, 7] before the lookup, so 0 behaves like 1 and 50 like 7.
        """
        if age_class == AgeClass.U13 and had_uninterrupted_u11_and_u12:
            return self.UNINTERRUPTED_U11_U12_FACTOR

        return self.FACTORS[self.clamp(tenure_years)]

    @classmethod
    def clamp(cls, tenure_years: int) -> int:
        return min(max(tenure_years, cls.MIN_YEARS), cls.MAX_YEARS)
