"""
Output Builder

Constructs the final API response from the computed results.
"""

from decimal import Decimal

from .calculators import TenureFactor
from .models import (
    LEAGUE_LABELS,
    AgeBracket,
    AgeClass,
    CalculationRequest,
    CompensationResult,
    TransferScenario,
)


def to_money(value: Decimal) -> float:
    """Convert Decimal to float with 2 decimal places."""
    return round(float(value), 2)


class OutputBuilder:
    """Builds the final output response."""

    def build(self, request: CalculationRequest, results: list[CompensationResult]) -> dict:
        """Construct the complete response for one calculation."""
        output = {
            "scenario": self._build_scenario(request.scenario),
            "results": [self._build_result(request.scenario, result) for result in results],
            "totals_by_tier": self.build_totals_by_tier(results),
        }
        if not request.player.is_empty:
            output["player"] = {
                "player_name": request.player.player_name.strip() if request.player.player_name else None,
                "current_club": request.player.current_club,
                "calculation_date": request.player.calculation_date,
            }
        return output

    def build_totals_by_tier(self, results: list[CompensationResult]) -> dict:
        """Flat record of base compensation and total per receiving tier.

        This is the shape a calculation is stored in.
        """
        record = {}
        for result in results:
            tier = result.receiving_tier.value
            record[f"base_compensation_{tier}"] = to_money(result.base_compensation)
            record[f"total_{tier}"] = to_money(result.total)
        return record

    def _build_scenario(self, scenario: TransferScenario) -> dict:
        """Echo the scenario the results were computed from."""
        return {
            "age_class": scenario.age_class.value,
            "age_bracket": scenario.age_class.bracket.value,
            "tenure_years": scenario.tenure_years,
            "had_uninterrupted_u11_and_u12": scenario.had_uninterrupted_u11_and_u12,
            "receiving_distance_km": float(scenario.receiving_distance_km),
            "releasing_distance_km": float(scenario.releasing_distance_km),
            "releasing_league_tier": scenario.releasing_league_tier.value,
            "academy_category": scenario.academy_category.value,
            "contract_offered": scenario.contract_offered,
            "housing_years": scenario.housing_years,
        }

    def _build_result(self, scenario: TransferScenario, result: CompensationResult) -> dict:
        """Build one receiving-tier entry with value and description for each factor."""
        return {
            "receiving_tier": result.receiving_tier.value,
            "receiving_tier_label": LEAGUE_LABELS[result.receiving_tier],
            "base_compensation": to_money(result.base_compensation),
            "accommodation_supplement": to_money(result.accommodation_supplement),
            "total": to_money(result.total),
            "factors": [
                {
                    "name": factor.name,
                    "value": float(factor.value),
                    "description": self._describe(factor.name, scenario, result),
                }
                for factor in result.factors
            ],
        }

    def _describe(self, name: str, scenario: TransferScenario, result: CompensationResult) -> str:
        """Explain why a factor took its value."""
        age_class = scenario.age_class
        early = age_class.bracket == AgeBracket.EARLY

        if name == "Base":
            return "Base amount for every training compensation"

        if name == "AgeClass":
            return f"Player joins {age_class.value}"

        if name == "Tenure":
            if age_class == AgeClass.U13 and scenario.had_uninterrupted_u11_and_u12:
                return "Played U11 and U12 without interruption at the releasing club"
            clamped = TenureFactor.clamp(scenario.tenure_years)
            if clamped != scenario.tenure_years:
                return f"{scenario.tenure_years} years at the releasing academy, counted as {clamped}"
            return f"{scenario.tenure_years} years at the releasing academy"

        if name == "Distance":
            if not early:
                return "Distance only applies from U13 to U15"
            if scenario.receiving_distance_km < scenario.releasing_distance_km:
                return (
                    f"Receiving academy ({scenario.receiving_distance_km} km) is closer than "
                    f"releasing academy ({scenario.releasing_distance_km} km)"
                )
            return f"Receiving academy is {scenario.receiving_distance_km} km from the player's residence"

        if name == "LeagueTransition":
            bracket = "U13 - U15" if early else "U16 - U21"
            return (
                f"{LEAGUE_LABELS[scenario.releasing_league_tier]} → "
                f"{LEAGUE_LABELS[result.receiving_tier]} ({bracket})"
            )

        if name == "AcademyCategory":
            return f"Releasing academy certified at {scenario.academy_category.value} level"

        if name == "ContractOffer":
            if early:
                return "Contract offer only applies from U16"
            if scenario.contract_offered:
                return "Releasing club offered a contract"
            return "Releasing club did not offer a contract"

        raise ValueError(f"Unknown factor: {name}")
