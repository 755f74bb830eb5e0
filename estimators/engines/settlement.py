"""Personal-injury settlement and insurance-claim estimation.

Pain and suffering is medical expenses times a severity multiplier. The
combined damages are reduced by the claimant's comparative fault, then by the
attorney's contingency fee. The settlement range repeats the calculation with
the low and high multipliers of the same severity.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from estimators.engines.tables import INJURY_TYPES, SETTLEMENT_PARAMS, get_severity_multiplier
from estimators.exceptions import UnknownInjuryTypeError
from estimators.models.config import InjuryTypeProfile, SettlementParams
from estimators.models.enums import Severity
from estimators.models.results import InsuranceClaimResult, SettlementRange, SettlementResult

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")


class SettlementEngine:
    """Estimates settlement values from damages, severity and fault."""

    def __init__(self, params: SettlementParams = SETTLEMENT_PARAMS) -> None:
        self.params = params

    def compute_settlement(
        self,
        medical_expenses: Decimal,
        lost_wages: Decimal,
        other_damages: Decimal,
        severity: Severity | str,
        has_attorney: bool = True,
        fault_percent: Decimal = ZERO,
    ) -> SettlementResult:
        """Compute the point estimate and range.

        Inputs are not validated: amounts are expected non-negative and
        ``fault_percent`` in [0, 100].
        """
        multiplier = get_severity_multiplier(severity, self.params)
        severity = Severity(severity)
        fee_rate = self.params.attorney_fee_rate if has_attorney else ZERO

        pain_suffering = self._pain_and_suffering(medical_expenses, multiplier.avg)
        subtotal = other_damages + medical_expenses + lost_wages + pain_suffering
        adjusted_total = self._apply_fault(subtotal, fault_percent)
        attorney_fees = adjusted_total * fee_rate
        net_settlement = adjusted_total - attorney_fees

        settlement_range = SettlementRange(
            min=self._net_for_multiplier(
                medical_expenses, lost_wages, other_damages,
                multiplier.min, fault_percent, fee_rate,
            ),
            max=self._net_for_multiplier(
                medical_expenses, lost_wages, other_damages,
                multiplier.max, fault_percent, fee_rate,
            ),
        )

        logger.debug(
            "Settlement %s: subtotal=%s adjusted=%s net=%s range=%s-%s",
            severity, subtotal, adjusted_total, net_settlement,
            settlement_range.min, settlement_range.max,
        )

        return SettlementResult(
            medical_expenses=medical_expenses,
            lost_wages=lost_wages,
            other_damages=other_damages,
            severity=severity,
            has_attorney=has_attorney,
            fault_percent=fault_percent,
            pain_suffering_multiplier=multiplier.avg,
            pain_suffering=pain_suffering,
            subtotal=subtotal,
            adjusted_total=adjusted_total,
            attorney_fees=attorney_fees,
            net_settlement=net_settlement,
            range=settlement_range,
        )

    def compute_car_accident(
        self,
        vehicle_damage: Decimal,
        medical_expenses: Decimal,
        lost_wages: Decimal,
        severity: Severity | str,
        has_attorney: bool = True,
        fault_percent: Decimal = ZERO,
    ) -> SettlementResult:
        """Car-accident settlement: vehicle damage is the extra damages line."""
        return self.compute_settlement(
            medical_expenses=medical_expenses,
            lost_wages=lost_wages,
            other_damages=vehicle_damage,
            severity=severity,
            has_attorney=has_attorney,
            fault_percent=fault_percent,
        )

    def compute_insurance_claim(
        self,
        vehicle_damage: Decimal,
        medical_expenses: Decimal,
        lost_wages: Decimal,
        policy_limit: Decimal,
    ) -> InsuranceClaimResult:
        """Claim value against an at-fault driver's policy, capped at the limit."""
        pain_suffering = self._pain_and_suffering(
            medical_expenses, self.params.insurance_claim_multiplier
        )
        total_claim = vehicle_damage + medical_expenses + lost_wages + pain_suffering
        return InsuranceClaimResult(
            vehicle_damage=vehicle_damage,
            medical_expenses=medical_expenses,
            lost_wages=lost_wages,
            pain_suffering=pain_suffering,
            total_claim=total_claim,
            policy_limit=policy_limit,
            expected_payout=min(total_claim, policy_limit),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _pain_and_suffering(medical_expenses: Decimal, multiplier: Decimal) -> Decimal:
        return (medical_expenses * multiplier).quantize(Decimal("1"), rounding=ROUND_HALF_UP)

    @staticmethod
    def _apply_fault(total: Decimal, fault_percent: Decimal) -> Decimal:
        # Comparative fault reduces the combined total, not individual categories.
        return total * (1 - fault_percent / HUNDRED)

    def _net_for_multiplier(
        self,
        medical_expenses: Decimal,
        lost_wages: Decimal,
        other_damages: Decimal,
        multiplier: Decimal,
        fault_percent: Decimal,
        fee_rate: Decimal,
    ) -> Decimal:
        pain = self._pain_and_suffering(medical_expenses, multiplier)
        total = other_damages + medical_expenses + lost_wages + pain
        return self._apply_fault(total, fault_percent) * (1 - fee_rate)


def list_injury_types() -> list[InjuryTypeProfile]:
    """Injury guide entries ordered by severity, then typical settlement."""
    return sorted(
        INJURY_TYPES.values(),
        key=lambda p: (p.severity.rank, p.settlement_min),
    )


def get_injury_type(key: str) -> InjuryTypeProfile:
    profile = INJURY_TYPES.get(key.lower().replace("-", "_"))
    if profile is None:
        raise UnknownInjuryTypeError(key)
    return profile
