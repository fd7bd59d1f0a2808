"""
Allocation strategy generator — three named donor drawdown orders.

  Optimal            : by total score;      actual admin cost / runway
  Conservative       : by admin score;      admin × 0.90, runway × 1.15
  Preference-Strict  : by preference score; admin × 1.05, runway × 0.95

NOTE: the multipliers are flat heuristics for guidance text. They are NOT
obtained by re-running the allocation engine under each ordering. Keep them as
literal constants; a rigorous version would re-simulate per strategy.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List, Optional, Sequence

import pandas as pd

from core.schema import Donor
from core.utils import round_half_up

from .scoring import DonorScore

CONSERVATIVE_ADMIN_REDUCTION = 0.10
CONSERVATIVE_RUNWAY_GAIN = 0.15
PREFERENCE_ADMIN_FACTOR = 1.05
PREFERENCE_RUNWAY_FACTOR = 0.95

# top preference donor below this admin score makes Preference-Strict high risk
PREFERENCE_RISK_ADMIN_SCORE = 50
EXCELLENT_ADMIN_SCORE = 70


@dataclass(frozen=True)
class SimulationTotals:
    """Aggregate figures a strategy is measured against."""
    total_contributions: float
    total_admin_cost: float
    total_net_funding: float
    total_allocated: float
    general_fund_total: float
    monthly_burn: float
    runway_months: float


@dataclass(frozen=True)
class AllocationStrategy:
    scenario_name: str
    description: str
    donor_order: List[str]  # donor ids, draw from first to last
    expected_admin_cost: float
    expected_runway: float
    risk_level: str         # low | medium | high
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def _rounded_admin(score: DonorScore) -> int:
    """Admin score as shown on the dashboard; thresholds and ordering use this."""
    return round_half_up(score.admin_score)


def _rounded_preference(score: DonorScore) -> int:
    return round_half_up(score.preference_score)


def _top(scores: Sequence[DonorScore]) -> Optional[DonorScore]:
    return scores[0] if scores else None


def _optimal(by_total: List[DonorScore], totals: SimulationTotals) -> AllocationStrategy:
    top = _top(by_total)
    recommendations = []
    if top is not None:
        recommendations.append(
            f"Use {top.donor_name} first (highest overall score: {top.total_score}/100)"
        )
    recommendations += [
        "Prioritize donors with admin rates below 15%",
        "Maintain at least 3 months reserve from general fund",
    ]
    if top is not None and _rounded_admin(top) > EXCELLENT_ADMIN_SCORE:
        recommendations.append(f"{top.donor_name} offers excellent admin efficiency")
    else:
        recommendations.append("Consider negotiating lower admin rates with top donors")

    return AllocationStrategy(
        scenario_name="Optimal",
        description="Balanced approach optimizing cost, preferences, and flexibility",
        donor_order=[s.donor_id for s in by_total],
        expected_admin_cost=totals.total_admin_cost,
        expected_runway=totals.runway_months,
        risk_level="low",
        recommendations=recommendations,
    )


def _conservative(by_admin: List[DonorScore], totals: SimulationTotals) -> AllocationStrategy:
    top = _top(by_admin)
    reduction = totals.total_admin_cost * CONSERVATIVE_ADMIN_REDUCTION
    runway_gain = totals.runway_months * CONSERVATIVE_RUNWAY_GAIN

    recommendations = []
    if top is not None:
        recommendations.append(f"Start with {top.donor_name} (lowest admin overhead)")
    recommendations += [
        f"Could save approx. {round_half_up(reduction)} in admin costs",
        f"Extend runway by ~{runway_gain:.1f} months",
        "Review all donors with admin rates above 15%",
    ]

    return AllocationStrategy(
        scenario_name="Conservative",
        description="Minimize admin overhead and maximize runway",
        donor_order=[s.donor_id for s in by_admin],
        expected_admin_cost=totals.total_admin_cost - reduction,
        expected_runway=totals.runway_months * (1 + CONSERVATIVE_RUNWAY_GAIN),
        risk_level="medium",
        recommendations=recommendations,
    )


def _preference_strict(
    by_preference: List[DonorScore], totals: SimulationTotals
) -> AllocationStrategy:
    top = _top(by_preference)
    high_risk = top is not None and _rounded_admin(top) < PREFERENCE_RISK_ADMIN_SCORE

    recommendations = []
    if top is not None:
        recommendations.append(f"Prioritize {top.donor_name} (best preference alignment)")
    recommendations += [
        "Ensure all program preferences are met",
        "May incur higher admin costs for better donor relations",
        "Warning: This approach may reduce cost efficiency"
        if high_risk
        else "Maintains good balance between preferences and costs",
    ]

    return AllocationStrategy(
        scenario_name="Preference-Strict",
        description="Strictly honor all donor program preferences",
        donor_order=[s.donor_id for s in by_preference],
        expected_admin_cost=totals.total_admin_cost * PREFERENCE_ADMIN_FACTOR,
        expected_runway=totals.runway_months * PREFERENCE_RUNWAY_FACTOR,
        risk_level="high" if high_risk else "medium",
        recommendations=recommendations,
    )


def generate_allocation_strategies(
    donors: Sequence[Donor],
    donor_scores: Sequence[DonorScore],
    totals: SimulationTotals,
) -> List[AllocationStrategy]:
    """
    Build the Optimal, Conservative and Preference-Strict strategies.

    `donors` is accepted for parity with the scoring inputs; orderings come
    from `donor_scores` alone. All sorts are stable, so ties keep score order.
    With no donors the strategies carry empty orders and generic advice.
    """
    by_total = sorted(donor_scores, key=lambda s: s.total_score, reverse=True)
    by_admin = sorted(donor_scores, key=_rounded_admin, reverse=True)
    by_preference = sorted(donor_scores, key=_rounded_preference, reverse=True)

    return [
        _optimal(by_total, totals),
        _conservative(by_admin, totals),
        _preference_strict(by_preference, totals),
    ]


def strategies_to_dataframe(strategies: Sequence[AllocationStrategy]) -> pd.DataFrame:
    """Display-friendly comparison table, one row per strategy."""
    return pd.DataFrame([
        {
            "Strategy": s.scenario_name,
            "Risk": s.risk_level,
            "Expected Admin Cost": s.expected_admin_cost,
            "Expected Runway (months)": s.expected_runway,
            "First Donor": s.donor_order[0] if s.donor_order else "",
            "Donors": len(s.donor_order),
        }
        for s in strategies
    ])
