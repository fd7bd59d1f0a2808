"""
Payroll / burn calculator.

Burn = Σ(salary + PF + TDS) over all employees + flat operational overhead.
It is a single organisation-wide figure used for runway math.
"""

from __future__ import annotations

from typing import Dict, Iterable

from core.schema import Employee


def compute_monthly_burn(employees: Iterable[Employee], operational_overhead: float) -> float:
    payroll = sum(
        e.monthly_salary + e.pf_contribution + e.tds_deduction for e in employees
    )
    return payroll + operational_overhead


def compute_runway_months(total_monthly_funding: float, monthly_burn: float) -> float:
    """Months of funding at this burn. Zero or negative burn yields 0, never inf/nan."""
    if monthly_burn <= 0:
        return 0.0
    return total_monthly_funding / monthly_burn


def compute_payroll_by_program(employees: Iterable[Employee]) -> Dict[str, float]:
    """Monthly payroll cost (salary + PF + TDS) per program, first-seen order."""
    totals: Dict[str, float] = {}
    for e in employees:
        totals[e.program_id] = totals.get(e.program_id, 0.0) + e.monthly_cost
    return totals
