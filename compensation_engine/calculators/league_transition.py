"""
League Transition Factor

Prices the move between the releasing and receiving clubs' league tiers.
"""

from decimal import Decimal

from ..models import AgeBracket, AgeClass, LeagueTier

TOP = LeagueTier.TOP_TIER
SECOND = LeagueTier.SECOND_TIER
THIRD = LeagueTier.THIRD_TIER
REGIONAL = LeagueTier.REGIONAL_TIER


class LeagueTransitionFactor:
    """Resolves the multiplier for a (releasing tier, receiving tier) pair."""

    # (releasing, receiving) -> (early bracket, late bracket)
    # Every one of the 16 pairs must be listed; lookups never fall back.
    MATRIX: dict[tuple[LeagueTier, LeagueTier], tuple[Decimal, Decimal]] = {
        (TOP, TOP): (Decimal('1.25'), Decimal('1.0')),
        (TOP, SECOND): (Decimal('0.75'), Decimal('0.75')),
        (TOP, THIRD): (Decimal('0.5'), Decimal('0.5')),
        (TOP, REGIONAL): (Decimal('0.5'), Decimal('0.5')),

        (SECOND, TOP): (Decimal('1.0'), Decimal('1.0')),
        (SECOND, SECOND): (Decimal('0.94'), Decimal('0.75')),
        (SECOND, THIRD): (Decimal('0.5'), Decimal('0.5')),
        (SECOND, REGIONAL): (Decimal('0.5'), Decimal('0.5')),

        (THIRD, TOP): (Decimal('1.0'), Decimal('1.0')),
        (THIRD, SECOND): (Decimal('0.75'), Decimal('0.75')),
        (THIRD, THIRD): (Decimal('0.63'), Decimal('0.5')),
        (THIRD, REGIONAL): (Decimal('0.5'), Decimal('0.5')),

        (REGIONAL, TOP): (Decimal('1.0'), Decimal('1.0')),
        (REGIONAL, SECOND): (Decimal('0.75'), Decimal('0.75')),
        (REGIONAL, THIRD): (Decimal('0.5'), Decimal('0.5')),
        (REGIONAL, REGIONAL): (Decimal('0.63'), Decimal('0.5')),
    }

    def resolve(self, releasing_tier: LeagueTier, receiving_tier: LeagueTier, age_class: AgeClass) -> Decimal:
        early, late = self.MATRIX[(releasing_tier, receiving_tier)]
        if age_class.bracket == AgeBracket.EARLY:
            return early
        return late
