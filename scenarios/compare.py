"""
Scenario runs and baseline comparison.

The comparison answers "what does this what-if do to my position?" for the
four headline figures: monthly burn, contributions, admin cost and runway.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import pandas as pd

from core.config import DEFAULT_CONFIG, SimulationConfig
from core.schema import Donor, Employee, Program
from core.utils import safe_ratio
from simulation.result import SimulationResult
from simulation.runner import run_simulation

from .base import ScenarioAdjustment

COMPARED_METRICS = (
    ("Monthly Burn", "monthly_burn"),
    ("Total Contributions", "total_contributions"),
    ("Total Admin Cost", "total_admin_cost"),
    ("Runway (months)", "runway_months"),
)


@dataclass(frozen=True)
class MetricDelta:
    metric: str
    before: float
    after: float
    delta: float
    pct_change: Optional[float]  # None when the baseline is 0

    @property
    def direction(self) -> str:
        if self.delta > 0:
            return "up"
        if self.delta < 0:
            return "down"
        return "flat"


@dataclass(frozen=True)
class ScenarioComparison:
    scenario_id: str
    baseline: SimulationResult
    adjusted: SimulationResult
    deltas: List[MetricDelta] = field(default_factory=list)

    def get(self, metric: str) -> MetricDelta:
        for d in self.deltas:
            if d.metric == metric:
                return d
        raise KeyError(f"Unknown metric '{metric}'. Available: {[d.metric for d in self.deltas]}")

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame([
            {
                "Metric": d.metric,
                "Before": d.before,
                "After": d.after,
                "Change": d.delta,
                "Change (%)": d.pct_change * 100 if d.pct_change is not None else None,
            }
            for d in self.deltas
        ])


def run_scenario(
    scenario: ScenarioAdjustment,
    donors: Sequence[Donor],
    programs: Sequence[Program],
    employees: Sequence[Employee],
    operational_overhead: Optional[float] = None,
    *,
    config: SimulationConfig = DEFAULT_CONFIG,
) -> SimulationResult:
    """Apply the scenario's multipliers to the snapshots and simulate."""
    if operational_overhead is None:
        operational_overhead = config.operational_overhead

    return run_simulation(
        scenario.apply_to_donors(donors),
        programs,
        scenario.apply_to_employees(employees, config),
        scenario.apply_to_overhead(operational_overhead),
        config=config,
    )


def compare_to_baseline(
    baseline: SimulationResult,
    adjusted: SimulationResult,
    *,
    scenario_id: str = "",
) -> ScenarioComparison:
    deltas = []
    for label, attr in COMPARED_METRICS:
        before = getattr(baseline, attr)
        after = getattr(adjusted, attr)
        ratio = safe_ratio(after, before)
        deltas.append(MetricDelta(
            metric=label,
            before=before,
            after=after,
            delta=after - before,
            pct_change=ratio - 1 if ratio is not None else None,
        ))
    return ScenarioComparison(
        scenario_id=scenario_id,
        baseline=baseline,
        adjusted=adjusted,
        deltas=deltas,
    )
