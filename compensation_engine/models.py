"""
Domain Models for the Training Compensation Engine

These dataclasses provide type-safe representations of all business entities.
All monetary values and multipliers use Decimal for precision.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum

# =============================================================================
# ENUMERATIONS
# =============================================================================


class AgeBracket(str, Enum):
    """Regulatory age grouping used by every age-gated factor."""

    EARLY = "early"  # U13 - U15
    LATE = "late"  # U16 - U21


class AgeClass(str, Enum):
    """Age class the player joins at the receiving academy."""

    U13 = "U13"
    U14 = "U14"
    U15 = "U15"
    U16 = "U16"
    U17 = "U17"
    U18 = "U18"
    U19 = "U19"
    U20 = "U20"
    U21 = "U21"

    @property
    def number(self) -> int:
        return int(self.value[1:])

    @property
    def bracket(self) -> AgeBracket:
        if self.number < 16:
            return AgeBracket.EARLY
        return AgeBracket.LATE


class LeagueTier(str, Enum):
    """Division of a club's first team. Declaration order is the result order."""

    TOP_TIER = "top_tier"
    SECOND_TIER = "second_tier"
    THIRD_TIER = "third_tier"
    REGIONAL_TIER = "regional_tier"


LEAGUE_LABELS = {
    LeagueTier.TOP_TIER: "Bundesliga",
    LeagueTier.SECOND_TIER: "2. Bundesliga",
    LeagueTier.THIRD_TIER: "3. Liga",
    LeagueTier.REGIONAL_TIER: "Regionalliga",
}


class AcademyCategory(str, Enum):
    """Certification level of the releasing academy."""

    EXPECTED = "expected"
    BASELINE = "baseline"


# =============================================================================
# INPUT MODELS
# =============================================================================


def _decimal(name: str, value) -> Decimal:
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"{name} must be a number, got: {value!r}")


def _integer(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a whole number, got: {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{name} must be a whole number, got: {value!r}")
    return int(value)


def _boolean(name: str, value) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false, got: {value!r}")
    return value


@dataclass(frozen=True)
class TransferScenario:
    """Everything the engine needs to price a single transfer."""

    age_class: AgeClass
    tenure_years: int
    releasing_league_tier: LeagueTier
    academy_category: AcademyCategory
    had_uninterrupted_u11_and_u12: bool = False
    receiving_distance_km: Decimal = Decimal("0")
    releasing_distance_km: Decimal = Decimal("0")
    contract_offered: bool = False
    housing_years: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "TransferScenario":
        return cls(
            age_class=AgeClass(data["age_class"]),
            tenure_years=_integer("tenure_years", data["tenure_years"]),
            releasing_league_tier=LeagueTier(data["releasing_league_tier"]),
            academy_category=AcademyCategory(data["academy_category"]),
            had_uninterrupted_u11_and_u12=_boolean(
                "had_uninterrupted_u11_and_u12", data.get("had_uninterrupted_u11_and_u12", False)
            ),
            receiving_distance_km=_decimal("receiving_distance_km", data.get("receiving_distance_km", 0)),
            releasing_distance_km=_decimal("releasing_distance_km", data.get("releasing_distance_km", 0)),
            contract_offered=_boolean("contract_offered", data.get("contract_offered", False)),
            housing_years=_integer("housing_years", data.get("housing_years", 0)),
        )


@dataclass(frozen=True)
class PlayerContext:
    """Identifies who a calculation belongs to. Never read by the engine."""

    player_name: str | None = None
    current_club: str | None = None
    calculation_date: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.player_name is None and self.current_club is None and self.calculation_date is None

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerContext":
        return cls(
            player_name=data.get("player_name"),
            current_club=data.get("current_club"),
            calculation_date=data.get("calculation_date"),
        )


@dataclass(frozen=True)
class CalculationRequest:
    """Complete API input: the scenario plus its identifying context."""

    scenario: TransferScenario
    player: PlayerContext = field(default_factory=PlayerContext)

    @classmethod
    def from_dict(cls, data: dict) -> "CalculationRequest":
        return cls(
            scenario=TransferScenario.from_dict(data["scenario"]),
            player=PlayerContext.from_dict(data.get("player") or {}),
        )


# =============================================================================
# OUTPUT / RESULT MODELS
# =============================================================================


@dataclass(frozen=True)
class CompensationFactor:
    """A named multiplier (or the base amount) kept for audit and display."""

    name: str
    value: Decimal


@dataclass(frozen=True)
class FactorSet:
    """Factors that do not depend on the receiving league tier."""

    age_class: Decimal
    tenure: Decimal
    distance: Decimal
    academy_category: Decimal
    contract_offer: Decimal
    accommodation_supplement: Decimal


@dataclass(frozen=True)
class CompensationResult:
    """Compensation owed if the receiving club plays in `receiving_tier`.

    Note: base_compensation is already rounded to cents, so
    total == base_compensation + accommodation_supplement.
    """

    receiving_tier: LeagueTier
    base_compensation: Decimal
    accommodation_supplement: Decimal
    total: Decimal
    factors: tuple[CompensationFactor, ...]

    def factor(self, name: str) -> Decimal:
        """Look up a factor value by name."""
        for entry in self.factors:
            if entry.name == name:
                return entry.value
        raise KeyError(name)
