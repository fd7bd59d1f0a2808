"""
SimulationResult — the single value a simulation run returns.

Disposable: callers recompute it whenever any input changes. The *_frame()
helpers give pandas views for dashboards and notebooks.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List

import pandas as pd

from engine.allocation import AllocationLine, DonorAllocationSummary
from engine.geography import GeographyAllocation
from insights.runway import DonorRunway
from insights.scoring import DonorScore
from insights.strategies import AllocationStrategy, SimulationTotals, strategies_to_dataframe


@dataclass(frozen=True)
class SimulationResult:
    total_contributions: float
    total_admin_cost: float
    total_net_funding: float
    total_allocated: float
    general_fund_total: float
    allocations: List[AllocationLine]
    donor_summaries: List[DonorAllocationSummary]
    geography_allocations: List[GeographyAllocation]
    monthly_burn: float
    runway_months: float
    donor_scores: List[DonorScore] = field(default_factory=list)
    donor_runways: List[DonorRunway] = field(default_factory=list)
    allocation_strategies: List[AllocationStrategy] = field(default_factory=list)

    @property
    def totals(self) -> SimulationTotals:
        return SimulationTotals(
            total_contributions=self.total_contributions,
            total_admin_cost=self.total_admin_cost,
            total_net_funding=self.total_net_funding,
            total_allocated=self.total_allocated,
            general_fund_total=self.general_fund_total,
            monthly_burn=self.monthly_burn,
            runway_months=self.runway_months,
        )

    def to_dict(self) -> dict:
        return asdict(self)

    def headline(self) -> pd.DataFrame:
        """One-row summary of the aggregate figures."""
        return pd.DataFrame([asdict(self.totals)])

    def allocations_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [a.to_dict() for a in self.allocations],
            columns=["donor_id", "program_id", "weight", "amount"],
        )

    def donor_summaries_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [s.to_dict() for s in self.donor_summaries],
            columns=[
                "donor_id", "donor_name", "donor_type", "contribution_amount",
                "admin_percent", "admin_amount", "net_amount",
                "allocated_amount", "general_fund_amount",
            ],
        )

    def geography_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [g.to_dict() for g in self.geography_allocations],
            columns=["geography", "amount"],
        )

    def scores_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [s.to_dict() for s in self.donor_scores],
            columns=[
                "donor_id", "donor_name", "admin_score", "preference_score",
                "balance_score", "fcra_bonus", "total_score", "ranking",
            ],
        )

    def runways_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [r.to_dict() for r in self.donor_runways],
            columns=[
                "donor_id", "donor_name", "available_funds", "monthly_allocation",
                "runway_months", "depletion_date", "status",
            ],
        )

    def strategies_frame(self) -> pd.DataFrame:
        return strategies_to_dataframe(self.allocation_strategies)
