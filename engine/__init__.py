"""
Allocation engine — donor economics, allocation lines, geography rollup, burn.
The full run (with scoring and strategies) lives in simulation.runner.
"""

from .economics import DonorNet, compute_net, resolve_admin_rate
from .allocation import (
    AllocationLine,
    DonorAllocationSummary,
    build_allocation_lines,
    compute_general_fund,
    summarize_donor,
)
from .geography import GeographyAllocation, aggregate_by_geography
from .payroll import compute_monthly_burn, compute_payroll_by_program, compute_runway_months

__all__ = [
    "DonorNet",
    "compute_net",
    "resolve_admin_rate",
    "AllocationLine",
    "DonorAllocationSummary",
    "build_allocation_lines",
    "compute_general_fund",
    "summarize_donor",
    "GeographyAllocation",
    "aggregate_by_geography",
    "compute_monthly_burn",
    "compute_payroll_by_program",
    "compute_runway_months",
]
