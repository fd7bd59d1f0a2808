"""
Allocation calculator — spreads a donor's net amount over its program
preferences, with the unclaimed remainder going to the general fund.

Weights are percentage points of the NET amount (after admin).

Known edge case: weights are not validated. A donor whose weights sum past 100
gets allocation lines totalling more than its net amount, while its general
fund clamps to zero. Guard upstream (data_prep.validators flags it).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import List, Tuple

from core.config import DEFAULT_CONFIG, SimulationConfig
from core.schema import Donor

from .economics import compute_net


@dataclass(frozen=True)
class AllocationLine:
    donor_id: str
    program_id: str
    weight: float
    amount: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DonorAllocationSummary:
    donor_id: str
    donor_name: str
    donor_type: str
    contribution_amount: float
    admin_percent: float
    admin_amount: float
    net_amount: float
    allocated_amount: float
    general_fund_amount: float

    def to_dict(self) -> dict:
        return asdict(self)


def build_allocation_lines(donor: Donor, net_amount: float) -> List[AllocationLine]:
    """One line per preference, in preference order."""
    return [
        AllocationLine(
            donor_id=donor.id,
            program_id=pref.program_id,
            weight=pref.weight,
            amount=net_amount * (pref.weight / 100),
        )
        for pref in donor.preferences
    ]


def compute_general_fund(donor: Donor, net_amount: float) -> float:
    """Unrestricted share: net × max(0, 100 − Σweights) / 100."""
    remainder = max(0.0, 100 - donor.total_preference_weight)
    return net_amount * (remainder / 100)


def summarize_donor(
    donor: Donor,
    config: SimulationConfig = DEFAULT_CONFIG,
) -> Tuple[DonorAllocationSummary, List[AllocationLine]]:
    """Run economics + allocation for one donor."""
    net = compute_net(donor, config)
    lines = build_allocation_lines(donor, net.net_amount)
    general_fund = compute_general_fund(donor, net.net_amount)

    summary = DonorAllocationSummary(
        donor_id=donor.id,
        donor_name=donor.name,
        donor_type=donor.type,
        contribution_amount=donor.contribution_amount,
        admin_percent=net.admin_percent,
        admin_amount=net.admin_amount,
        net_amount=net.net_amount,
        allocated_amount=sum(line.amount for line in lines),
        general_fund_amount=general_fund,
    )
    return summary, lines
