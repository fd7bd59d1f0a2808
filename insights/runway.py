"""
Per-donor runway projection.

Question answered: "how long would this donor's net funds alone sustain the
whole organisation?" Every donor is measured against the same organisation-wide
monthly burn, not a donor-specific share of it.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List

from core.config import DEFAULT_CONFIG, SimulationConfig
from core.schema import Donor
from core.utils import add_months
from engine.allocation import DonorAllocationSummary
from engine.payroll import compute_runway_months

HEALTHY = "healthy"
WARNING = "warning"
CRITICAL = "critical"


@dataclass(frozen=True)
class DonorRunway:
    donor_id: str
    donor_name: str
    available_funds: float
    monthly_allocation: float
    runway_months: float
    depletion_date: str  # ISO calendar date
    status: str          # healthy | warning | critical

    def to_dict(self) -> dict:
        return asdict(self)


def classify_runway(runway_months: float, config: SimulationConfig = DEFAULT_CONFIG) -> str:
    """> 12 months healthy, (6, 12] warning, <= 6 critical."""
    if runway_months > config.healthy_runway_months:
        return HEALTHY
    if runway_months > config.warning_runway_months:
        return WARNING
    return CRITICAL


def compute_donor_runway(
    donor: Donor,
    monthly_burn: float,
    summary: DonorAllocationSummary,
    config: SimulationConfig = DEFAULT_CONFIG,
) -> DonorRunway:
    """
    Parameters
    ----------
    donor : Donor
        The donor being projected (id/name only; funds come from the summary)
    monthly_burn : float
        Organisation-wide burn. Zero or negative burn gives a 0-month runway.
    summary : DonorAllocationSummary
        This donor's allocation rollup; its net_amount is the available funds.
    """
    available_funds = summary.net_amount
    # fixed amortisation period, independent of burn
    monthly_allocation = available_funds / config.funding_period_months
    runway_months = compute_runway_months(available_funds, monthly_burn)

    depletion = add_months(config.reference_date(), math.floor(runway_months))

    return DonorRunway(
        donor_id=donor.id,
        donor_name=donor.name,
        available_funds=available_funds,
        monthly_allocation=monthly_allocation,
        runway_months=runway_months,
        depletion_date=depletion.isoformat(),
        status=classify_runway(runway_months, config),
    )


def project_donor_runways(
    donors: Iterable[Donor],
    monthly_burn: float,
    summaries: Iterable[DonorAllocationSummary],
    config: SimulationConfig = DEFAULT_CONFIG,
) -> List[DonorRunway]:
    """All donor runways, longest first. Donors with no summary are skipped."""
    by_id: Dict[str, DonorAllocationSummary] = {s.donor_id: s for s in summaries}
    runways = [
        compute_donor_runway(d, monthly_burn, by_id[d.id], config)
        for d in donors
        if d.id in by_id
    ]
    return sorted(runways, key=lambda r: r.runway_months, reverse=True)
