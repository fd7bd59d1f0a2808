"""
ScenarioAdjustment — a what-if expressed as three multipliers applied to the
merged snapshots before a simulation run.

  donor_multiplier     scales every contribution   (0.8 = 20% donor attrition)
  salary_multiplier    scales every monthly salary (1.1 = 10% increment)
  overhead_multiplier  scales operational overhead

Amounts are rounded half-up to whole currency units, and PF/TDS are re-derived
from the adjusted salary.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Sequence

from core.config import DEFAULT_CONFIG, SimulationConfig
from core.schema import Donor, Employee
from core.utils import round_half_up


@dataclass(frozen=True)
class ScenarioAdjustment:
    id: str
    name: str
    description: str = ""
    impact: str = ""
    donor_multiplier: float = 1.0
    salary_multiplier: float = 1.0
    overhead_multiplier: float = 1.0

    @property
    def is_identity(self) -> bool:
        return (
            self.donor_multiplier == 1.0
            and self.salary_multiplier == 1.0
            and self.overhead_multiplier == 1.0
        )

    def combine(
        self,
        *,
        donor_multiplier: float = 1.0,
        salary_multiplier: float = 1.0,
        overhead_multiplier: float = 1.0,
    ) -> "ScenarioAdjustment":
        """Stack extra factors (e.g. manual sliders) on top of this preset."""
        return replace(
            self,
            donor_multiplier=self.donor_multiplier * donor_multiplier,
            salary_multiplier=self.salary_multiplier * salary_multiplier,
            overhead_multiplier=self.overhead_multiplier * overhead_multiplier,
        )

    def apply_to_donors(self, donors: Sequence[Donor]) -> List[Donor]:
        return [
            replace(
                d,
                contribution_amount=round_half_up(d.contribution_amount * self.donor_multiplier),
            )
            for d in donors
        ]

    def apply_to_employees(
        self,
        employees: Sequence[Employee],
        config: SimulationConfig = DEFAULT_CONFIG,
    ) -> List[Employee]:
        return [
            e.with_salary(
                round_half_up(e.monthly_salary * self.salary_multiplier),
                pf_rate=config.pf_rate,
                tds_rate=config.tds_rate,
            )
            for e in employees
        ]

    def apply_to_overhead(self, operational_overhead: float) -> int:
        return round_half_up(operational_overhead * self.overhead_multiplier)
