"""
Core package — entity records, configuration, and shared utilities.
No business logic lives here.
"""

from .schema import (
    CITIES_BY_GEOGRAPHY,
    DONOR_TYPES,
    GEOGRAPHIES,
    Donor,
    DonorPreference,
    Employee,
    Program,
)
from .config import (
    ADMIN_RATE_BY_TYPE,
    DEFAULT_CONFIG,
    OPERATIONAL_OVERHEAD,
    SimulationConfig,
)
from .utils import add_months, clamp, round_half_up

__all__ = [
    "CITIES_BY_GEOGRAPHY",
    "DONOR_TYPES",
    "GEOGRAPHIES",
    "Donor",
    "DonorPreference",
    "Employee",
    "Program",
    "ADMIN_RATE_BY_TYPE",
    "DEFAULT_CONFIG",
    "OPERATIONAL_OVERHEAD",
    "SimulationConfig",
    "add_months",
    "clamp",
    "round_half_up",
]
