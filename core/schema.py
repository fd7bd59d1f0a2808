"""
Entity records consumed by the engine.

Callers build these from static configuration plus any overrides they have
already merged (see data_prep.overrides). The engine never mutates them.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Dict, Tuple

from .utils import round_half_up

DONOR_TYPES: Tuple[str, ...] = ("International", "National", "CSR", "HNI")

GEOGRAPHIES: Tuple[str, ...] = ("Delhi NCR", "Uttar Pradesh", "Bihar")

# Every city belongs to exactly one geography.
CITIES_BY_GEOGRAPHY: Dict[str, Tuple[str, ...]] = {
    "Delhi NCR": ("Delhi",),
    "Uttar Pradesh": ("Prayagraj", "Banaras", "Lucknow"),
    "Bihar": ("Gaya", "Muzaffarpur"),
}


@dataclass(frozen=True)
class Program:
    id: str
    name: str
    description: str = ""
    geography: str = ""
    cities: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Employee:
    """
    One staff member, charged against exactly one program.

    pf_contribution and tds_deduction are derived from monthly_salary
    (12% and 10%). Use with_salary() to keep them consistent after an increment.
    """
    id: str
    name: str
    role: str
    joining_date: str
    monthly_salary: float
    pf_contribution: float
    tds_deduction: float
    geography: str
    city: str
    program_id: str
    photo_url: str = ""
    planned_increment: float = 0.0  # percent, 0-100

    @property
    def monthly_cost(self) -> float:
        return self.monthly_salary + self.pf_contribution + self.tds_deduction

    def with_salary(
        self,
        monthly_salary: float,
        *,
        pf_rate: float = 0.12,
        tds_rate: float = 0.10,
        **changes,
    ) -> "Employee":
        return replace(
            self,
            monthly_salary=monthly_salary,
            pf_contribution=round_half_up(monthly_salary * pf_rate),
            tds_deduction=round_half_up(monthly_salary * tds_rate),
            **changes,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DonorPreference:
    program_id: str
    weight: float  # percentage points of the donor's net amount


@dataclass(frozen=True)
class Donor:
    """
    A funding source.

    preferences is ordered; weights should sum to <= 100 and the remainder is
    the donor's general-fund share. Duplicate program_ids are not merged.
    """
    id: str
    name: str
    type: str
    contribution_amount: float
    admin_overhead_percent: float = 0.0
    fcra_approved: bool = False
    preferences: Tuple[DonorPreference, ...] = field(default_factory=tuple)

    @property
    def total_preference_weight(self) -> float:
        return sum(p.weight for p in self.preferences)

    def to_dict(self) -> dict:
        return asdict(self)
