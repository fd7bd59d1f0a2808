"""
Admin-rate watchlist — donors whose stated admin overhead sits close to their
type's baseline rate (within ±10%), worth a renegotiation look.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, List

from core.config import DEFAULT_CONFIG, SimulationConfig
from core.schema import Donor

BAND = 0.10


@dataclass(frozen=True)
class AdminWatchItem:
    donor_id: str
    donor_name: str
    baseline_percent: float
    actual_percent: float
    difference: float
    percent_of_baseline: float
    status: str  # safe | warning | critical

    def to_dict(self) -> dict:
        return asdict(self)


def _status(actual: float, baseline: float) -> str:
    if actual < baseline * (1 - BAND):
        return "safe"
    if actual > baseline * (1 + BAND):
        return "critical"
    return "warning"


def build_admin_watchlist(
    donors: Iterable[Donor],
    config: SimulationConfig = DEFAULT_CONFIG,
) -> List[AdminWatchItem]:
    """Donors inside the ±10% band, largest absolute gap to baseline first."""
    items = []
    for donor in donors:
        baseline = config.baseline_admin_rate(donor.type) * 100
        actual = donor.admin_overhead_percent
        if baseline <= 0:
            continue
        if not (baseline * (1 - BAND) <= actual <= baseline * (1 + BAND)):
            continue
        items.append(AdminWatchItem(
            donor_id=donor.id,
            donor_name=donor.name,
            baseline_percent=baseline,
            actual_percent=actual,
            difference=actual - baseline,
            percent_of_baseline=actual / baseline * 100,
            status=_status(actual, baseline),
        ))
    return sorted(items, key=lambda i: abs(i.difference), reverse=True)
