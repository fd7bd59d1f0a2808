"""
Named what-if presets offered on the simulation screen.
"""

from __future__ import annotations

from typing import Dict

from .base import ScenarioAdjustment

NAMED_SCENARIOS: Dict[str, ScenarioAdjustment] = {
    "current": ScenarioAdjustment(
        id="current",
        name="Current State",
        description="Your actual funding and costs as they are today",
        impact="Shows your real financial position with no changes",
    ),
    "new-hire": ScenarioAdjustment(
        id="new-hire",
        name="New Hire Planning",
        description="Planning to hire 2-3 new employees",
        impact="Increases salaries by 15%, maintains current funding",
        salary_multiplier=1.15,
        overhead_multiplier=1.05,
    ),
    "donor-exit": ScenarioAdjustment(
        id="donor-exit",
        name="Donor Exit Scenario",
        description="What if a major donor withdraws?",
        impact="Reduces funding by 20%, maintains current costs",
        donor_multiplier=0.8,
    ),
    "salary-increment": ScenarioAdjustment(
        id="salary-increment",
        name="Annual Increment",
        description="Planning 10% annual salary increases",
        impact="Increases all salaries by 10%, maintains funding",
        salary_multiplier=1.1,
    ),
    "expansion": ScenarioAdjustment(
        id="expansion",
        name="Program Expansion",
        description="Adding new geography or program",
        impact="Increases funding 15%, costs 12%, overhead 10%",
        donor_multiplier=1.15,
        salary_multiplier=1.12,
        overhead_multiplier=1.1,
    ),
    "emergency": ScenarioAdjustment(
        id="emergency",
        name="Emergency Mode",
        description="Cost-cutting to extend runway",
        impact="Reduces costs 10%, funding may drop 5%",
        donor_multiplier=0.95,
        salary_multiplier=0.9,
        overhead_multiplier=0.85,
    ),
    "custom": ScenarioAdjustment(
        id="custom",
        name="Custom Scenario",
        description="Adjust all parameters manually",
        impact="Full control over all financial variables",
    ),
}


def get_named_scenario(scenario_id: str) -> ScenarioAdjustment:
    """
    Return a named preset.

    Parameters
    ----------
    scenario_id : str
        One of: "current", "new-hire", "donor-exit", "salary-increment",
        "expansion", "emergency", "custom"
    """
    if scenario_id not in NAMED_SCENARIOS:
        raise KeyError(
            f"Unknown scenario '{scenario_id}'. "
            f"Available: {list(NAMED_SCENARIOS.keys())}"
        )
    return NAMED_SCENARIOS[scenario_id]
