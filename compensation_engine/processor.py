"""
Compensation Engine - Main Orchestrator

Runs the factor pipeline once per receiving league tier.
"""

import logging
from decimal import Decimal
from typing import Any, Dict

from .calculators import (
    AcademyCategoryFactor,
    AccommodationSupplement,
    AgeClassFactor,
    ContractOfferFactor,
    DistanceFactor,
    LeagueTransitionFactor,
    TenureFactor,
    quantize_money,
)
from .models import (
    CalculationRequest,
    CompensationFactor,
    CompensationResult,
    FactorSet,
    LeagueTier,
    TransferScenario,
)
from .output import OutputBuilder
from .validators import InputValidator

logger = logging.getLogger(__name__)


class CompensationEngine:
    """
    Main orchestrator for training compensation.

    Implements a flat pipeline:
    1. Resolve tier-independent factors (age class, tenure, distance,
       academy category, contract offer) and the accommodation supplement
    2. For each receiving league tier:
       a. Resolve the league transition factor
       b. Multiply BASE by all six factors
       c. Round to cents and add the accommodation supplement

    The engine holds no state between calls; the same scenario always
    produces identical results.
    """

    BASE = Decimal('20000.00')

    FACTOR_NAMES = (
        "Base",
        "AgeClass",
        "Tenure",
        "Distance",
        "LeagueTransition",
        "AcademyCategory",
        "ContractOffer",
    )

    def __init__(self):
        self.age_class_factor = AgeClassFactor()
        self.tenure_factor = TenureFactor()
        self.distance_factor = DistanceFactor()
        self.league_transition_factor = LeagueTransitionFactor()
        self.academy_category_factor = AcademyCategoryFactor()
        self.contract_offer_factor = ContractOfferFactor()
        self.accommodation = AccommodationSupplement()
        self.validator = InputValidator()
        self.output_builder = OutputBuilder()

    def compute(self, scenario: TransferScenario) -> list[CompensationResult]:
        """
        Compute compensation for every receiving league tier.

        Args:
            scenario: The transfer to price

        Returns:
            Exactly four results, one per LeagueTier, in declaration order
        """
        factors = self._resolve_factors(scenario)
        return [self._compute_for_tier(scenario, factors, tier) for tier in LeagueTier]

    def compute_from_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Parse, validate and compute from raw dictionary input.

        Convenience method for API usage.
        """
        request = CalculationRequest.from_dict(data)
        self.validator.validate(request)
        results = self.compute(request.scenario)
        return self.output_builder.build(request, results)

    def _resolve_factors(self, scenario: TransferScenario) -> FactorSet:
        """Resolve everything that does not depend on the receiving tier."""
        age_class = scenario.age_class
        return FactorSet(
            age_class=self.age_class_factor.resolve(age_class),
            tenure=self.tenure_factor.resolve(
                age_class, scenario.tenure_years, scenario.had_uninterrupted_u11_and_u12
            ),
            distance=self.distance_factor.resolve(
                age_class, scenario.receiving_distance_km, scenario.releasing_distance_km
            ),
            academy_category=self.academy_category_factor.resolve(scenario.academy_category),
            contract_offer=self.contract_offer_factor.resolve(age_class, scenario.contract_offered),
            accommodation_supplement=self.accommodation.calculate(age_class, scenario.housing_years),
        )

    def _compute_for_tier(
        self,
        scenario: TransferScenario,
        factors: FactorSet,
        receiving_tier: LeagueTier
    ) -> CompensationResult:
        league_transition = self.league_transition_factor.resolve(
            scenario.releasing_league_tier, receiving_tier, scenario.age_class
        )

        values = (
            self.BASE,
            factors.age_class,
            factors.tenure,
            factors.distance,
            league_transition,
            factors.academy_category,
            factors.contract_offer,
        )

        compensation = Decimal('1')
        for value in values:
            compensation *= value

        base_compensation = quantize_money(compensation)
        total = base_compensation + factors.accommodation_supplement

        logger.debug(
            "Computed %s: compensation=%s supplement=%s total=%s",
            receiving_tier.value, base_compensation, factors.accommodation_supplement, total
        )

        return CompensationResult(
            receiving_tier=receiving_tier,
            base_compensation=base_compensation,
            accommodation_supplement=factors.accommodation_supplement,
            total=total,
            factors=tuple(
                CompensationFactor(name=name, value=value)
                for name, value in zip(self.FACTOR_NAMES, values)
            ),
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def compute_from_dict(input_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Compute compensation from a Python dict and return a Python dict.
    """
    engine = CompensationEngine()
    return engine.compute_from_dict(input_data)


def compute_from_json(json_input: str) -> str:
    """
    Compute compensation from a JSON string and return a JSON string.
    """
    import json

    try:
        input_data = json.loads(json_input)
        engine = CompensationEngine()
        result = engine.compute_from_dict(input_data)
        return json.dumps(result, indent=2)

    except (ValueError, KeyError) as e:
        error_response = {"error": str(e), "status": "validation_failed"}
        return json.dumps(error_response, indent=2)

    except Exception as e:
        error_response = {"error": str(e), "status": "failed"}
        return json.dumps(error_response, indent=2)
