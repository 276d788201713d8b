"""
Distance Factor

Only early-bracket players (U13 - U15) are compensated for relocation distance.
"""

from decimal import Decimal

from ..models import AgeBracket, AgeClass


class DistanceFactor:
    """Resolves the multiplier for distance between residence and receiving academy."""

    FAR_THRESHOLD_KM = Decimal('150')
    FAR_FACTOR = Decimal('2.5')
    MEDIUM_THRESHOLD_KM = Decimal('100')
    MEDIUM_FACTOR = Decimal('1.5')
    NEUTRAL = Decimal('1.0')

    def resolve(self, age_class: AgeClass, receiving_distance_km: Decimal, releasing_distance_km: Decimal) -> Decimal:
        """
        Tier the factor by distance to the receiving academy.

        Returns 1.0 outside the early bracket and whenever the receiving
        academy is closer to home than the releasing one.
        """
        if age_class.bracket != AgeBracket.EARLY:
            return self.NEUTRAL

        if receiving_distance_km < releasing_distance_km:
            return self.NEUTRAL

        if receiving_distance_km >= self.FAR_THRESHOLD_KM:
            return self.FAR_FACTOR
        if receiving_distance_km >= self.MEDIUM_THRESHOLD_KM:
            return self.MEDIUM_FACTOR
        return self.NEUTRAL
