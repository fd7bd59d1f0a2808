"""
Simulation runner — orchestrates one full what-if run.

Flow:
  1. per donor: admin rate → net amount → allocation lines + general fund
  2. totals, geography rollup
  3. monthly burn (payroll + overhead) and organisation runway
  4. donor scores + ranks, per-donor runways, allocation strategies

Pure and stateless: identical inputs give identical outputs, except
depletion dates when config.as_of_date is left as "today".
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from core.config import DEFAULT_CONFIG, SimulationConfig
from core.schema import Donor, Employee, Program
from engine.allocation import AllocationLine, DonorAllocationSummary, summarize_donor
from engine.geography import aggregate_by_geography
from engine.payroll import compute_monthly_burn, compute_runway_months
from insights.runway import project_donor_runways
from insights.scoring import rank_donors
from insights.strategies import SimulationTotals, generate_allocation_strategies

from .result import SimulationResult

logger = logging.getLogger(__name__)


def run_simulation(
    donors: Sequence[Donor],
    programs: Sequence[Program],
    employees: Sequence[Employee],
    operational_overhead: Optional[float] = None,
    *,
    config: SimulationConfig = DEFAULT_CONFIG,
) -> SimulationResult:
    """
    Run the allocation & runway simulation over already-merged snapshots.

    Parameters
    ----------
    donors, programs, employees : sequences of core.schema records
    operational_overhead : float, optional
        Flat monthly overhead added to payroll. Defaults to
        config.operational_overhead (250,000).
    config : SimulationConfig
        Rule constants and the as-of date for depletion dates.

    Returns
    -------
    SimulationResult
    """
    if operational_overhead is None:
        operational_overhead = config.operational_overhead

    allocations: List[AllocationLine] = []
    summaries: List[DonorAllocationSummary] = []

    for donor in donors:
        summary, lines = summarize_donor(donor, config)
        allocations.extend(lines)
        summaries.append(summary)

    total_contributions = sum(s.contribution_amount for s in summaries)
    total_admin_cost = sum(s.admin_amount for s in summaries)
    total_net_funding = sum(s.net_amount for s in summaries)
    general_fund_total = sum(s.general_fund_amount for s in summaries)
    total_allocated = sum(a.amount for a in allocations)

    geography_allocations = aggregate_by_geography(programs, allocations)

    monthly_burn = compute_monthly_burn(employees, operational_overhead)
    total_monthly_funding = total_net_funding / config.funding_period_months
    runway_months = compute_runway_months(total_monthly_funding, monthly_burn)

    logger.debug(
        f"Simulated {len(summaries)} donors / {len(employees)} employees: "
        f"net={total_net_funding:,.0f} burn={monthly_burn:,.0f} runway={runway_months:.2f}mo"
    )

    totals = SimulationTotals(
        total_contributions=total_contributions,
        total_admin_cost=total_admin_cost,
        total_net_funding=total_net_funding,
        total_allocated=total_allocated,
        general_fund_total=general_fund_total,
        monthly_burn=monthly_burn,
        runway_months=runway_months,
    )

    donor_scores = rank_donors(donors, config)
    donor_runways = project_donor_runways(donors, monthly_burn, summaries, config)
    strategies = generate_allocation_strategies(donors, donor_scores, totals)

    return SimulationResult(
        total_contributions=total_contributions,
        total_admin_cost=total_admin_cost,
        total_net_funding=total_net_funding,
        total_allocated=total_allocated,
        general_fund_total=general_fund_total,
        allocations=allocations,
        donor_summaries=summaries,
        geography_allocations=geography_allocations,
        monthly_burn=monthly_burn,
        runway_months=runway_months,
        donor_scores=donor_scores,
        donor_runways=donor_runways,
        allocation_strategies=strategies,
    )
