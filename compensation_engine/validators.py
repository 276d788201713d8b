"""
Input Validation for the Training Compensation Engine

Validates request data at the API boundary before it reaches the engine.
Raises ValueError with clear messages for any constraint violations.

The engine itself never validates: it is total over its input types and
clamps out-of-range tenure instead of rejecting it.
"""

from .models import CalculationRequest, PlayerContext, TransferScenario


class InputValidator:
    """Validates calculation requests according to business rules."""

    def validate(self, request: CalculationRequest) -> None:
        """
        Run all validations. Raises ValueError if any check fails.
        """
        self._validate_scenario(request.scenario)
        self._validate_player(request.player)

    def _validate_scenario(self, scenario: TransferScenario) -> None:
        """Validate scenario-level constraints."""
        for name in ("receiving_distance_km", "releasing_distance_km"):
            distance = getattr(scenario, name)
            if not distance.is_finite():
                raise ValueError(f"{name} must be a finite number, got: {distance}")

        if scenario.receiving_distance_km < 0:
            raise ValueError(
                f"receiving_distance_km cannot be negative, got: {scenario.receiving_distance_km}"
            )

        if scenario.releasing_distance_km < 0:
            raise ValueError(
                f"releasing_distance_km cannot be negative, got: {scenario.releasing_distance_km}"
            )

        if scenario.housing_years < 0:
            raise ValueError(f"housing_years cannot be negative, got: {scenario.housing_years}")

    def _validate_player(self, player: PlayerContext) -> None:
        """Validate the identifying context, when one was sent."""
        if player.player_name is not None and not isinstance(player.player_name, str):
            raise ValueError(f"player_name must be text, got: {player.player_name!r}")

        if player.player_name is not None and not player.player_name.strip():
            raise ValueError("player_name cannot be blank")
