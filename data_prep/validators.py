"""
Data quality checks for snapshots before they enter the engine.

The engine itself never rejects input (it is a what-if tool and falls back
silently), so these checks are advisory. Callers decide what to block on.

Catches:
- Duplicate ids
- Negative contributions, salaries, admin percentages
- Preference weights summing past 100 (allocations would exceed net funding)
- References to unknown programs
- PF/TDS out of step with salary after an edit
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from core.config import DEFAULT_CONFIG, SimulationConfig
from core.schema import Donor, Employee, Program
from core.utils import round_half_up


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a snapshot."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _duplicates(ids: Iterable[str]) -> List[str]:
    return [i for i, n in Counter(ids).items() if n > 1]


def validate_snapshot(
    programs: Sequence[Program],
    donors: Sequence[Donor],
    employees: Sequence[Employee],
    config: SimulationConfig = DEFAULT_CONFIG,
) -> ValidationResult:
    """
    Run all checks on a merged snapshot.
    Returns a ValidationResult with errors (nonsensical figures) and warnings
    (silently-tolerated inconsistencies).
    """
    result = ValidationResult()
    program_ids = {p.id for p in programs}

    # --- ids ---
    for kind, items in (("program", programs), ("donor", donors), ("employee", employees)):
        dups = _duplicates(i.id for i in items)
        if dups:
            result.warnings.append(f"Duplicate {kind} ids: {dups}")

    # --- donors ---
    for d in donors:
        if d.type not in config.admin_rate_by_type:
            result.warnings.append(
                f"Donor {d.id} has unknown type {d.type!r}; baseline admin rate is 0."
            )
        if d.contribution_amount < 0:
            result.errors.append(f"Donor {d.id} has negative contribution.")
        if d.admin_overhead_percent < 0:
            result.warnings.append(
                f"Donor {d.id} has negative admin percent; baseline rate will apply."
            )
        elif d.admin_overhead_percent > 100:
            result.errors.append(f"Donor {d.id} admin percent exceeds 100.")

        total_weight = d.total_preference_weight
        if total_weight > 100:
            result.warnings.append(
                f"Donor {d.id} preference weights sum to {total_weight:g} (> 100); "
                f"allocations will exceed net funding."
            )
        if any(p.weight < 0 for p in d.preferences):
            result.errors.append(f"Donor {d.id} has a negative preference weight.")
        unknown = [p.program_id for p in d.preferences if p.program_id not in program_ids]
        if unknown:
            result.warnings.append(
                f"Donor {d.id} prefers unknown programs {unknown}; "
                f"excluded from geography totals."
            )

    # --- employees ---
    for e in employees:
        if e.monthly_salary < 0:
            result.errors.append(f"Employee {e.id} has negative salary.")
        if e.program_id not in program_ids:
            result.warnings.append(f"Employee {e.id} belongs to unknown program {e.program_id!r}.")
        expected_pf = round_half_up(e.monthly_salary * config.pf_rate)
        expected_tds = round_half_up(e.monthly_salary * config.tds_rate)
        if abs(e.pf_contribution - expected_pf) > 1 or abs(e.tds_deduction - expected_tds) > 1:
            result.warnings.append(
                f"Employee {e.id} PF/TDS do not match salary "
                f"(expected {expected_pf}/{expected_tds})."
            )

    return result
