"""
Tests for the Output Builder
"""

from decimal import Decimal

import pytest

from compensation_engine import CompensationEngine
from compensation_engine.models import (
    AcademyCategory,
    AgeClass,
    CalculationRequest,
    LeagueTier,
    PlayerContext,
    TransferScenario,
)
from compensation_engine.output import OutputBuilder, to_money


class TestToMoney:

    def test_converts_decimal(self):
        assert to_money(Decimal("95175.00")) == 95175.0

    def test_keeps_cents(self):
        assert to_money(Decimal("37209.38")) == 37209.38


class TestOutputBuilder:

    @pytest.fixture
    def builder(self):
        return OutputBuilder()

    @pytest.fixture
    def scenario(self):
        return TransferScenario(
            age_class=AgeClass.U13,
            tenure_years=0,
            receiving_distance_km=Decimal("80"),
            releasing_distance_km=Decimal("95"),
            releasing_league_tier=LeagueTier.TOP_TIER,
            academy_category=AcademyCategory.EXPECTED,
        )

    @pytest.fixture
    def output(self, builder, scenario):
        results = CompensationEngine().compute(scenario)
        return builder.build(CalculationRequest(scenario=scenario), results)

    def test_result_labels(self, output):
        labels = [r["receiving_tier_label"] for r in output["results"]]
        assert labels == ["Bundesliga", "2. Bundesliga", "3. Liga", "Regionalliga"]

    def test_factor_entries(self, output):
        factors = output["results"][0]["factors"]

        assert len(factors) == 7
        assert factors[0] == {
            "name": "Base",
            "value": 20000.0,
            "description": "Base amount for every training compensation",
        }

    def test_clamped_tenure_is_explained(self, output):
        tenure = output["results"][0]["factors"][2]
        assert tenure["value"] == 2.0
        assert tenure["description"] == "0 years at the releasing academy, counted as 1"

    def test_closer_receiving_academy_is_explained(self, output):
        distance = output["results"][0]["factors"][3]
        assert distance["value"] == 1.0
        assert "closer" in distance["description"]

    def test_league_transition_description(self, output):
        transition = output["results"][1]["factors"][4]
        assert transition["description"] == "Bundesliga → 2. Bundesliga (U13 - U15)"

    def test_contract_offer_not_applicable(self, output):
        contract = output["results"][0]["factors"][6]
        assert contract["description"] == "Contract offer only applies from U16"

    def test_totals_by_tier(self, output):
        # 20,000 × 1.75 × 2.0 × 1.0 × 1.25 = 87,500
        assert output["totals_by_tier"]["total_top_tier"] == 87500.0
        assert output["totals_by_tier"]["base_compensation_top_tier"] == 87500.0
        assert set(output["totals_by_tier"]) == {
            f"{prefix}_{tier.value}"
            for prefix in ("base_compensation", "total")
            for tier in LeagueTier
        }

    def test_scenario_echo(self, output):
        assert output["scenario"]["age_class"] == "U13"
        assert output["scenario"]["age_bracket"] == "early"
        assert output["scenario"]["receiving_distance_km"] == 80.0

    def test_player_omitted_when_empty(self, output):
        assert "player" not in output

    def test_player_included(self, builder, scenario):
        request = CalculationRequest(
            scenario=scenario,
            player=PlayerContext(player_name="  Lena Beispiel ", current_club="FC Muster"),
        )
        output = builder.build(request, CompensationEngine().compute(scenario))

        assert output["player"] == {
            "player_name": "Lena Beispiel",
            "current_club": "FC Muster",
            "calculation_date": None,
        }
