"""
Snapshot loading — turn JSON / CSV records into core.schema entities.

Record models accept the dashboard's camelCase keys (contributionAmount,
programId, ...) as well as snake_case, and coerce numeric strings. They do not
enforce business rules: negative amounts or weight sums over 100 pass through
(see data_prep.validators for the non-blocking checks).
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.config import DEFAULT_CONFIG, SimulationConfig
from core.schema import Donor, DonorPreference, Employee, Program
from core.utils import round_half_up

logger = logging.getLogger(__name__)


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ProgramRecord(_Record):
    id: str
    name: str
    description: str = ""
    geography: str = ""
    cities: List[str] = Field(default_factory=list)

    def to_entity(self) -> Program:
        return Program(
            id=self.id,
            name=self.name,
            description=self.description,
            geography=self.geography,
            cities=tuple(self.cities),
        )


class PreferenceRecord(_Record):
    program_id: str
    weight: float


class DonorRecord(_Record):
    id: str
    name: str
    type: str
    contribution_amount: float
    admin_overhead_percent: float = 0.0
    fcra_approved: bool = False
    preferences: List[PreferenceRecord] = Field(default_factory=list)

    def to_entity(self) -> Donor:
        return Donor(
            id=self.id,
            name=self.name,
            type=self.type,
            contribution_amount=self.contribution_amount,
            admin_overhead_percent=self.admin_overhead_percent,
            fcra_approved=self.fcra_approved,
            preferences=tuple(
                DonorPreference(program_id=p.program_id, weight=p.weight)
                for p in self.preferences
            ),
        )


class EmployeeRecord(_Record):
    id: str
    name: str
    role: str = ""
    joining_date: str = ""
    monthly_salary: float
    pf_contribution: Optional[float] = None
    tds_deduction: Optional[float] = None
    geography: str = ""
    city: str = ""
    program_id: str
    photo_url: str = ""
    planned_increment: float = 0.0

    def to_entity(self, config: SimulationConfig = DEFAULT_CONFIG) -> Employee:
        pf = self.pf_contribution
        if pf is None:
            pf = round_half_up(self.monthly_salary * config.pf_rate)
        tds = self.tds_deduction
        if tds is None:
            tds = round_half_up(self.monthly_salary * config.tds_rate)
        return Employee(
            id=self.id,
            name=self.name,
            role=self.role,
            joining_date=self.joining_date,
            monthly_salary=self.monthly_salary,
            pf_contribution=pf,
            tds_deduction=tds,
            geography=self.geography,
            city=self.city,
            program_id=self.program_id,
            photo_url=self.photo_url,
            planned_increment=self.planned_increment,
        )


@dataclass(frozen=True)
class Snapshot:
    programs: List[Program]
    donors: List[Donor]
    employees: List[Employee]


def parse_programs(records: Iterable[dict]) -> List[Program]:
    return [ProgramRecord.model_validate(r).to_entity() for r in records]


def parse_donors(records: Iterable[dict]) -> List[Donor]:
    return [DonorRecord.model_validate(r).to_entity() for r in records]


def parse_employees(
    records: Iterable[dict],
    config: SimulationConfig = DEFAULT_CONFIG,
) -> List[Employee]:
    return [EmployeeRecord.model_validate(r).to_entity(config) for r in records]


def parse_snapshot(data: dict, config: SimulationConfig = DEFAULT_CONFIG) -> Snapshot:
    if not isinstance(data, dict):
        raise ValueError("Snapshot must be a JSON object with programs/donors/employees keys")
    return Snapshot(
        programs=parse_programs(data.get("programs", [])),
        donors=parse_donors(data.get("donors", [])),
        employees=parse_employees(data.get("employees", []), config),
    )


def load_snapshot(
    path: Union[str, Path],
    config: SimulationConfig = DEFAULT_CONFIG,
) -> Snapshot:
    """
    Load {"programs": [...], "donors": [...], "employees": [...]} from a JSON file.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    data = json.loads(path.read_text(encoding="utf-8"))
    snapshot = parse_snapshot(data, config)
    logger.info(
        f"Loaded snapshot {path.name}: {len(snapshot.programs)} programs, "
        f"{len(snapshot.donors)} donors, {len(snapshot.employees)} employees"
    )
    return snapshot


def load_employees_csv(
    path: Union[str, Path],
    config: SimulationConfig = DEFAULT_CONFIG,
) -> List[Employee]:
    """
    Load employees from a CSV with one row per employee (camelCase or
    snake_case headers). Blank pf/tds cells are derived from salary.
    """
    df = pd.read_csv(path, dtype={"id": str, "programId": str, "program_id": str})
    df = df.astype(object).where(df.notna(), None)
    records = [
        {k: v for k, v in row.items() if v is not None}
        for row in df.to_dict(orient="records")
    ]
    return parse_employees(records, config)
