"""
Donor economics — admin-rate resolution and net-amount computation.

Admin rate policy (default-to-baseline):
  - admin_overhead_percent > 0  → that percentage overrides the baseline
  - otherwise (0, negative)     → baseline rate for the donor's type
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from core.config import DEFAULT_CONFIG, SimulationConfig
from core.schema import Donor


@dataclass(frozen=True)
class DonorNet:
    admin_percent: float  # fraction, e.g. 0.18
    admin_amount: float
    net_amount: float

    def to_dict(self) -> dict:
        return asdict(self)


def resolve_admin_rate(donor: Donor, config: SimulationConfig = DEFAULT_CONFIG) -> float:
    """Return the admin rate (fraction) applied to this donor's contribution."""
    if donor.admin_overhead_percent > 0:
        return donor.admin_overhead_percent / 100
    return config.baseline_admin_rate(donor.type)


def compute_net(donor: Donor, config: SimulationConfig = DEFAULT_CONFIG) -> DonorNet:
    """
    Split a contribution into admin deduction and net amount.

    net_amount is defined as contribution - admin_amount, so the two always add
    back to the contribution exactly.
    """
    admin_percent = resolve_admin_rate(donor, config)
    admin_amount = donor.contribution_amount * admin_percent
    net_amount = donor.contribution_amount - admin_amount
    return DonorNet(
        admin_percent=admin_percent,
        admin_amount=admin_amount,
        net_amount=net_amount,
    )
