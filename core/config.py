"""
Simulation configuration.
Every rule constant the engine uses lives here so tests and what-if callers can
swap them without touching engine code.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Dict, Optional

from .utils import to_date

ADMIN_RATE_BY_TYPE: Dict[str, float] = {
    "International": 0.18,
    "National": 0.12,
    "CSR": 0.15,
    "HNI": 0.10,
}

OPERATIONAL_OVERHEAD: float = 250_000

SCORE_WEIGHTS: Dict[str, float] = {
    "admin": 0.35,
    "preference": 0.30,
    "balance": 0.25,
    "fcra": 0.10,
}


@dataclass(frozen=True)
class SimulationConfig:
    operational_overhead: float = OPERATIONAL_OVERHEAD
    admin_rate_by_type: Dict[str, float] = field(
        default_factory=lambda: dict(ADMIN_RATE_BY_TYPE)
    )

    # payroll derivation
    pf_rate: float = 0.12
    tds_rate: float = 0.10

    # net funding is amortised over this many months
    funding_period_months: int = 12

    # scoring
    balance_reference: float = 30_000_000  # 3 crore
    admin_score_ceiling: float = 0.25      # admin rate that scores 0
    fcra_bonus_points: float = 10.0
    score_weights: Dict[str, float] = field(default_factory=lambda: dict(SCORE_WEIGHTS))

    # runway status tiers (months)
    healthy_runway_months: float = 12.0
    warning_runway_months: float = 6.0

    # anchor for depletion dates; None = today at call time
    as_of_date: Optional[dt.date] = None

    def baseline_admin_rate(self, donor_type: str) -> float:
        return self.admin_rate_by_type.get(donor_type, 0.0)

    def reference_date(self) -> dt.date:
        return to_date(self.as_of_date)


DEFAULT_CONFIG = SimulationConfig()
