"""Comparison report generator (W-2 vs 1099, LLC vs S-Corp)."""

from estimators.models.results import EntityComparison, IncomeComparison
from estimators.reports.base import build_environment


class ComparisonReportGenerator:
    def __init__(self) -> None:
        self.env = build_environment()

    def render_w2_vs_1099(self, result: IncomeComparison) -> str:
        return self.env.get_template("w2_vs_1099.txt").render(res=result)

    def render_llc_vs_scorp(self, result: EntityComparison) -> str:
        return self.env.get_template("llc_vs_scorp.txt").render(res=result)
