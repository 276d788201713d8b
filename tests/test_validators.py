"""
Tests for Input Validation
"""

from dataclasses import replace
from decimal import Decimal

import pytest

from compensation_engine.models import (
    AcademyCategory,
    AgeClass,
    CalculationRequest,
    LeagueTier,
    PlayerContext,
    TransferScenario,
)
from compensation_engine.validators import InputValidator


class TestInputValidator:

    @pytest.fixture
    def validator(self):
        return InputValidator()

    @pytest.fixture
    def scenario(self):
        return TransferScenario(
            age_class=AgeClass.U16,
            tenure_years=4,
            releasing_league_tier=LeagueTier.SECOND_TIER,
            academy_category=AcademyCategory.BASELINE,
            receiving_distance_km=Decimal("40"),
            releasing_distance_km=Decimal("10"),
            housing_years=1,
        )

    def test_valid_request(self, validator, scenario):
        validator.validate(CalculationRequest(scenario=scenario))

    def test_out_of_range_tenure_is_accepted(self, validator, scenario):
        validator.validate(CalculationRequest(scenario=replace(scenario, tenure_years=-2)))
        validator.validate(CalculationRequest(scenario=replace(scenario, tenure_years=40)))

    def test_negative_receiving_distance(self, validator, scenario):
        bad = replace(scenario, receiving_distance_km=Decimal("-0.5"))
        with pytest.raises(ValueError, match="receiving_distance_km cannot be negative"):
            validator.validate(CalculationRequest(scenario=bad))

    def test_negative_releasing_distance(self, validator, scenario):
        bad = replace(scenario, releasing_distance_km=Decimal("-10"))
        with pytest.raises(ValueError, match="releasing_distance_km cannot be negative"):
            validator.validate(CalculationRequest(scenario=bad))

    def test_negative_housing_years(self, validator, scenario):
        bad = replace(scenario, housing_years=-1)
        with pytest.raises(ValueError, match="housing_years cannot be negative"):
            validator.validate(CalculationRequest(scenario=bad))

    def test_blank_player_name(self, validator, scenario):
        request = CalculationRequest(scenario=scenario, player=PlayerContext(player_name="   "))
        with pytest.raises(ValueError, match="player_name cannot be blank"):
            validator.validate(request)

    def test_missing_player_name_is_allowed(self, validator, scenario):
        validator.validate(CalculationRequest(scenario=scenario, player=PlayerContext(current_club="FC Muster")))


class TestScenarioParsing:

    def test_from_dict_parses_enums_and_decimals(self):
        scenario = TransferScenario.from_dict({
            "age_class": "U15",
            "tenure_years": 6,
            "releasing_league_tier": "regional_tier",
            "academy_category": "expected",
            "receiving_distance_km": 101.5,
        })

        assert scenario.age_class == AgeClass.U15
        assert scenario.releasing_league_tier == LeagueTier.REGIONAL_TIER
        assert scenario.receiving_distance_km == Decimal("101.5")
        assert scenario.releasing_distance_km == Decimal("0")
        assert scenario.had_uninterrupted_u11_and_u12 is False
        assert scenario.housing_years == 0

    def test_unknown_category_raises(self):
        with pytest.raises(ValueError):
            TransferScenario.from_dict({
                "age_class": "U15",
                "tenure_years": 1,
                "releasing_league_tier": "top_tier",
                "academy_category": "elite",
            })

    def test_scenario_is_immutable(self):
        scenario = TransferScenario(
            age_class=AgeClass.U15,
            tenure_years=1,
            releasing_league_tier=LeagueTier.TOP_TIER,
            academy_category=AcademyCategory.EXPECTED,
        )
        with pytest.raises(AttributeError):
            scenario.tenure_years = 3


class TestScenarioFieldTypes:
    """Loosely typed JSON values are rejected instead of coerced."""

    @pytest.fixture
    def data(self):
        return {
            "age_class": "U18",
            "tenure_years": 3,
            "releasing_league_tier": "second_tier",
            "academy_category": "expected",
            "contract_offered": False,
            "housing_years": 2,
        }

    @pytest.mark.parametrize("field", ["contract_offered", "had_uninterrupted_u11_and_u12"])
    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_boolean_fields_require_true_or_false(self, data, field, value):
        data[field] = value
        with pytest.raises(ValueError, match=field):
            TransferScenario.from_dict(data)

    @pytest.mark.parametrize("field", ["tenure_years", "housing_years"])
    @pytest.mark.parametrize("value", [2.9, 1.5, "3", True])
    def test_year_fields_require_whole_numbers(self, data, field, value):
        data[field] = value
        with pytest.raises(ValueError, match=field):
            TransferScenario.from_dict(data)

    def test_integral_float_years_are_accepted(self, data):
        data["tenure_years"] = 4.0
        assert TransferScenario.from_dict(data).tenure_years == 4

    @pytest.mark.parametrize("value", ["far", None, True, [120]])
    def test_non_numeric_distance(self, data, value):
        data["receiving_distance_km"] = value
        with pytest.raises(ValueError, match="receiving_distance_km must be a number"):
            TransferScenario.from_dict(data)


class TestNonFiniteAndPlayerTypes:

    @pytest.fixture
    def validator(self):
        return InputValidator()

    @pytest.fixture
    def scenario(self):
        return TransferScenario(
            age_class=AgeClass.U14,
            tenure_years=2,
            releasing_league_tier=LeagueTier.TOP_TIER,
            academy_category=AcademyCategory.EXPECTED,
        )

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_distance(self, validator, scenario, value):
        bad = replace(scenario, releasing_distance_km=Decimal(value))
        with pytest.raises(ValueError, match="releasing_distance_km must be a finite number"):
            validator.validate(CalculationRequest(scenario=bad))

    def test_non_string_player_name(self, validator, scenario):
        request = CalculationRequest(scenario=scenario, player=PlayerContext(player_name=123))
        with pytest.raises(ValueError, match="player_name must be text"):
            validator.validate(request)
