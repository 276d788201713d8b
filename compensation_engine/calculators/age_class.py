"""
Age Class Factor

Younger players carry a higher multiplier for their training effort.
"""

from decimal import Decimal

from ..models import AgeClass


class AgeClassFactor:
    """Resolves the multiplier for the age class the player joins."""

    FACTORS = {
        AgeClass.U13: Decimal('1.75'),
        AgeClass.U14: Decimal('1.5'),
        AgeClass.U15: Decimal('1.25'),
    }
    DEFAULT = Decimal('1.0')

    def resolve(self, age_class: AgeClass) -> Decimal:
        """U13 → 1.75, U14 → 1.5, U15 → 1.25, everything older → 1.0."""
        return self.FACTORS.get(age_class, self.DEFAULT)
