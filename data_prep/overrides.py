"""
User overrides and how they are merged into base snapshots.

The engine never reads overrides. A caller holds an OverrideStore, merges it
into the base entities with merge_overrides(), and passes the merged snapshots
to simulation.run_simulation().

Three kinds of override, all keyed by entity id:
  - salary increments      employee_id → percent (clamped to 0-100)
  - employee overrides     employee_id → role / program_id / "city|geography"
  - donor preferences      donor_id    → full replacement preference list
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from core.config import DEFAULT_CONFIG, SimulationConfig
from core.schema import Donor, DonorPreference, Employee
from core.utils import clamp, round_half_up

logger = logging.getLogger(__name__)

MAX_INCREMENT_PCT = 100.0


class _Override(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class EmployeeOverride(_Override):
    role: Optional[str] = None
    program_id: Optional[str] = None
    city_geo: Optional[str] = None  # "city|geography"


class PreferenceOverride(_Override):
    program_id: str
    weight: float


class OverrideDocument(_Override):
    """On-disk shape of every override kind."""
    salary_increments: Dict[str, float] = Field(default_factory=dict)
    employee_overrides: Dict[str, EmployeeOverride] = Field(default_factory=dict)
    donor_preferences: Dict[str, List[PreferenceOverride]] = Field(default_factory=dict)


class OverrideStore:
    """Interface for a source of overrides (memory, file, database, ...)."""

    def salary_increments(self) -> Dict[str, float]:
        raise NotImplementedError

    def employee_overrides(self) -> Dict[str, EmployeeOverride]:
        raise NotImplementedError

    def donor_preference_overrides(self) -> Dict[str, List[PreferenceOverride]]:
        raise NotImplementedError


class InMemoryOverrideStore(OverrideStore):
    def __init__(self, document: Optional[OverrideDocument] = None):
        self._doc = document.model_copy(deep=True) if document else OverrideDocument()

    @property
    def document(self) -> OverrideDocument:
        return self._doc

    # --- reads ---
    def salary_increments(self) -> Dict[str, float]:
        return dict(self._doc.salary_increments)

    def employee_overrides(self) -> Dict[str, EmployeeOverride]:
        return dict(self._doc.employee_overrides)

    def donor_preference_overrides(self) -> Dict[str, List[PreferenceOverride]]:
        return {k: list(v) for k, v in self._doc.donor_preferences.items()}

    def get_increment(self, employee_id: str) -> float:
        return self._doc.salary_increments.get(employee_id, 0.0)

    @property
    def has_any_increments(self) -> bool:
        return any(v > 0 for v in self._doc.salary_increments.values())

    # --- writes ---
    def set_increment(self, employee_id: str, increment_pct: float) -> None:
        self._doc.salary_increments[employee_id] = clamp(increment_pct, 0.0, MAX_INCREMENT_PCT)
        self._changed()

    def reset_increment(self, employee_id: str) -> None:
        self._doc.salary_increments.pop(employee_id, None)
        self._changed()

    def reset_all_increments(self) -> None:
        self._doc.salary_increments.clear()
        self._changed()

    def set_employee_override(
        self,
        employee_id: str,
        *,
        role: Optional[str] = None,
        program_id: Optional[str] = None,
        city_geo: Optional[str] = None,
    ) -> None:
        """Partial update: only the given fields change."""
        current = self._doc.employee_overrides.get(employee_id, EmployeeOverride())
        patch = {k: v for k, v in
                 {"role": role, "program_id": program_id, "city_geo": city_geo}.items()
                 if v is not None}
        self._doc.employee_overrides[employee_id] = current.model_copy(update=patch)
        self._changed()

    def set_donor_preferences(
        self, donor_id: str, preferences: Sequence[Tuple[str, float]]
    ) -> None:
        self._doc.donor_preferences[donor_id] = [
            PreferenceOverride(program_id=pid, weight=w) for pid, w in preferences
        ]
        self._changed()

    def _changed(self) -> None:
        """Hook for persistent subclasses."""


class JsonFileOverrideStore(InMemoryOverrideStore):
    """
    Overrides persisted as one JSON document, rewritten on every change.
    Unreadable content is logged and treated as "no overrides".
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(self._read())

    def _read(self) -> OverrideDocument:
        if not self.path.exists():
            return OverrideDocument()
        try:
            return OverrideDocument.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (ValidationError, ValueError, OSError) as e:
            logger.warning(f"Ignoring unreadable overrides in {self.path}: {e}")
            return OverrideDocument()

    def reload(self) -> None:
        self._doc = self._read()

    def _changed(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(self._doc.model_dump(by_alias=True), indent=2),
            encoding="utf-8",
        )


# ---------------------------------------------------------------------------
# merging
# ---------------------------------------------------------------------------

def project_salary(monthly_salary: float, increment_pct: float) -> int:
    """Salary after a percentage increment, rounded half-up."""
    return round_half_up(monthly_salary * (1 + increment_pct / 100))


def apply_salary_increments(
    employees: Sequence[Employee],
    increments: Mapping[str, float],
    config: SimulationConfig = DEFAULT_CONFIG,
) -> List[Employee]:
    """Raise salaries by each employee's increment; PF/TDS follow the new salary."""
    out = []
    for emp in employees:
        increment = increments.get(emp.id)
        if increment is None:
            out.append(emp)
        elif increment > 0:
            out.append(emp.with_salary(
                project_salary(emp.monthly_salary, increment),
                pf_rate=config.pf_rate,
                tds_rate=config.tds_rate,
                planned_increment=increment,
            ))
        else:
            out.append(replace(emp, planned_increment=0.0))
    return out


def apply_employee_overrides(
    employees: Sequence[Employee],
    overrides: Mapping[str, EmployeeOverride],
) -> List[Employee]:
    out = []
    for emp in employees:
        override = overrides.get(emp.id)
        if override is None:
            out.append(emp)
            continue
        changes = {}
        if override.role:
            changes["role"] = override.role
        if override.program_id:
            changes["program_id"] = override.program_id
        if override.city_geo:
            city, _, geography = override.city_geo.partition("|")
            changes["city"] = city
            changes["geography"] = geography
        out.append(replace(emp, **changes))
    return out


def apply_donor_preference_overrides(
    donors: Sequence[Donor],
    overrides: Mapping[str, Sequence[PreferenceOverride]],
) -> List[Donor]:
    """A non-empty override replaces the donor's preferences entirely."""
    out = []
    for donor in donors:
        override = overrides.get(donor.id)
        if not override:
            out.append(donor)
            continue
        out.append(replace(
            donor,
            preferences=tuple(
                DonorPreference(program_id=p.program_id, weight=p.weight) for p in override
            ),
        ))
    return out


def merge_overrides(
    store: OverrideStore,
    donors: Sequence[Donor],
    employees: Sequence[Employee],
    config: SimulationConfig = DEFAULT_CONFIG,
) -> Tuple[List[Donor], List[Employee]]:
    """Base snapshots + store → fully merged snapshots ready for simulation."""
    merged_employees = apply_employee_overrides(
        apply_salary_increments(employees, store.salary_increments(), config),
        store.employee_overrides(),
    )
    merged_donors = apply_donor_preference_overrides(donors, store.donor_preference_overrides())
    return merged_donors, merged_employees
