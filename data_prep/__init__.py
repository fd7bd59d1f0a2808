"""
Data preparation — loading snapshots, merging user overrides, validation.
"""

from .loader import Snapshot, load_employees_csv, load_snapshot, parse_snapshot
from .overrides import (
    InMemoryOverrideStore,
    JsonFileOverrideStore,
    OverrideStore,
    apply_donor_preference_overrides,
    apply_employee_overrides,
    apply_salary_increments,
    merge_overrides,
    project_salary,
)
from .validators import ValidationResult, validate_snapshot

__all__ = [
    "Snapshot",
    "load_employees_csv",
    "load_snapshot",
    "parse_snapshot",
    "InMemoryOverrideStore",
    "JsonFileOverrideStore",
    "OverrideStore",
    "apply_donor_preference_overrides",
    "apply_employee_overrides",
    "apply_salary_increments",
    "merge_overrides",
    "project_salary",
    "ValidationResult",
    "validate_snapshot",
]
