"""
Simulation entry point — runs engine + insights over one snapshot.
"""

from .result import SimulationResult
from .runner import run_simulation

__all__ = ["SimulationResult", "run_simulation"]
