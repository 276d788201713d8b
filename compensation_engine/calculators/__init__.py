"""
Calculators Package

Provides one resolver per compensation factor plus the accommodation supplement.
"""

from .academy_category import AcademyCategoryFactor
from .accommodation import AccommodationSupplement
from .age_class import AgeClassFactor
from .contract_offer import ContractOfferFactor
from .distance import DistanceFactor
from .league_transition import LeagueTransitionFactor
from .rounding import quantize_money
from .tenure import TenureFactor

__all__ = [
    "AgeClassFactor",
    "TenureFactor",
    "DistanceFactor",
    "LeagueTransitionFactor",
    "AcademyCategoryFactor",
    "ContractOfferFactor",
    "AccommodationSupplement",
    "quantize_money",
]
