"""
Contract Offer Factor

Late-bracket players (U16+) are cheaper when the releasing club did not
offer them a contract.
"""

from decimal import Decimal

from ..models import AgeBracket, AgeClass


class ContractOfferFactor:
    """Resolves the multiplier for whether a contract was offered."""

    OFFERED = Decimal('1.0')
    NOT_OFFERED = Decimal('0.75')

    def resolve(self, age_class: AgeClass, contract_offered: bool) -> Decimal:
        if age_class.bracket == AgeBracket.EARLY:
            return self.OFFERED
        return self.OFFERED if contract_offered else self.NOT_OFFERED
