"""Settlement and insurance-claim report generator."""

from estimators.models.results import InsuranceClaimResult, SettlementResult
from estimators.reports.base import build_environment


class SettlementReportGenerator:
    """Renders settlement breakdowns."""

    def __init__(self) -> None:
        self.env = build_environment()

    def render_settlement(self, result: SettlementResult, title: str = "Injury Settlement") -> str:
        template = self.env.get_template("settlement.txt")
        return template.render(res=result, title=title)

    def render_insurance_claim(self, result: InsuranceClaimResult) -> str:
        template = self.env.get_template("insurance_claim.txt")
        return template.render(res=result)
