"""
What-if scenarios — preset multipliers over donors, salaries and overhead,
plus before/after comparison against the unadjusted baseline.
"""

from .base import ScenarioAdjustment
from .presets import NAMED_SCENARIOS, get_named_scenario
from .compare import MetricDelta, ScenarioComparison, compare_to_baseline, run_scenario

__all__ = [
    "ScenarioAdjustment",
    "NAMED_SCENARIOS",
    "get_named_scenario",
    "MetricDelta",
    "ScenarioComparison",
    "compare_to_baseline",
    "run_scenario",
]
