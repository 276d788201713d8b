"""
Academy Category Factor
"""

from decimal import Decimal

from ..models import AcademyCategory


class AcademyCategoryFactor:
    """Academies certified only at baseline level receive half."""

    FACTORS = {
        AcademyCategory.EXPECTED: Decimal('1.0'),
        AcademyCategory.BASELINE: Decimal('0.5'),
    }

    def resolve(self, academy_category: AcademyCategory) -> Decimal:
        return self.FACTORS[academy_category]
