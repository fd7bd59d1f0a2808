"""
Insights — donor scoring, per-donor runway, allocation strategies, admin watchlist.
"""

from .scoring import DonorScore, rank_donors, score_donor
from .runway import DonorRunway, classify_runway, compute_donor_runway, project_donor_runways
from .strategies import AllocationStrategy, SimulationTotals, generate_allocation_strategies
from .watchlist import AdminWatchItem, build_admin_watchlist

__all__ = [
    "DonorScore",
    "rank_donors",
    "score_donor",
    "DonorRunway",
    "classify_runway",
    "compute_donor_runway",
    "project_donor_runways",
    "AllocationStrategy",
    "SimulationTotals",
    "generate_allocation_strategies",
    "AdminWatchItem",
    "build_admin_watchlist",
]
