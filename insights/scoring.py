"""
Donor scoring — multi-factor score used to rank donors for drawdown order.

Each donor is scored on its own:
  admin       (35%) : (0.25 − admin rate) / 0.25 × 100, clamped to [0, 100]
  preference  (30%) : sum of preference weights (coverage of its funds)
  balance     (25%) : contribution / 3 crore × 100, capped at 100
  fcra        (10%) : 10 points if FCRA approved, else 0

Ranking is the only cross-donor step: stable sort by total score, descending.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Iterable, List

from core.config import DEFAULT_CONFIG, SimulationConfig
from core.schema import Donor
from core.utils import clamp, round_half_up
from engine.economics import resolve_admin_rate


@dataclass(frozen=True)
class DonorScore:
    donor_id: str
    donor_name: str
    admin_score: float       # 0-100, higher = lower admin rate
    preference_score: float  # 0-100
    balance_score: float     # 0-100
    fcra_bonus: float        # 0 or fcra_bonus_points
    total_score: int
    ranking: int = 0         # 0 until rank_donors() assigns it

    def to_dict(self) -> dict:
        return asdict(self)


def score_donor(donor: Donor, config: SimulationConfig = DEFAULT_CONFIG) -> DonorScore:
    admin_rate = resolve_admin_rate(donor, config)
    ceiling = config.admin_score_ceiling
    admin_score = clamp((ceiling - admin_rate) / ceiling * 100, 0.0, 100.0)

    preference_score = donor.total_preference_weight

    balance_score = min(100.0, donor.contribution_amount / config.balance_reference * 100)

    fcra_bonus = config.fcra_bonus_points if donor.fcra_approved else 0.0

    w = config.score_weights
    total = (
        admin_score * w["admin"]
        + preference_score * w["preference"]
        + balance_score * w["balance"]
        + fcra_bonus * w["fcra"]
    )

    return DonorScore(
        donor_id=donor.id,
        donor_name=donor.name,
        admin_score=admin_score,
        preference_score=preference_score,
        balance_score=balance_score,
        fcra_bonus=fcra_bonus,
        total_score=round_half_up(total),
    )


def rank_donors(
    donors: Iterable[Donor],
    config: SimulationConfig = DEFAULT_CONFIG,
) -> List[DonorScore]:
    """Score every donor, sort by total descending (ties keep input order), assign 1..N."""
    scores = [score_donor(d, config) for d in donors]
    ordered = sorted(scores, key=lambda s: s.total_score, reverse=True)
    return [replace(s, ranking=i) for i, s in enumerate(ordered, 1)]
