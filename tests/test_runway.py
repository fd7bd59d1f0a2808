"""Tests for per-donor runway projection."""

import datetime as dt

import pytest

from core.config import SimulationConfig
from engine.allocation import DonorAllocationSummary, summarize_donor
from insights.runway import classify_runway, compute_donor_runway, project_donor_runways
from simulation import run_simulation

from conftest import make_donor


def summary_with_net(donor, net):
    return DonorAllocationSummary(
        donor_id=donor.id,
        donor_name=donor.name,
        donor_type=donor.type,
        contribution_amount=net,
        admin_percent=0.0,
        admin_amount=0.0,
        net_amount=net,
        allocated_amount=0.0,
        general_fund_amount=net,
    )


class TestClassifyRunway:
    @pytest.mark.parametrize("months,status", [
        (24, "healthy"),
        (12.01, "healthy"),
        (12, "warning"),
        (6.5, "warning"),
        (6, "critical"),
        (3, "critical"),
        (0, "critical"),
    ])
    def test_tiers(self, months, status):
        assert classify_runway(months) == status


class TestComputeDonorRunway:
    def test_three_months_is_critical(self, config):
        donor = make_donor("donor-a")
        runway = compute_donor_runway(donor, 400_000, summary_with_net(donor, 1_200_000), config)
        assert runway.donor_id == "donor-a"
        assert runway.available_funds == 1_200_000
        assert runway.monthly_allocation == 100_000
        assert runway.runway_months == 3.0
        assert runway.depletion_date == "2025-04-15"
        assert runway.status == "critical"

    def test_depletion_floors_fractional_months(self, config):
        donor = make_donor()
        runway = compute_donor_runway(donor, 100_000, summary_with_net(donor, 1_390_000), config)
        assert runway.runway_months == pytest.approx(13.9)
        assert runway.depletion_date == "2026-02-15"
        assert runway.status == "healthy"

    def test_month_end_clamps(self):
        config = SimulationConfig(as_of_date=dt.date(2025, 1, 31))
        donor = make_donor()
        runway = compute_donor_runway(donor, 100, summary_with_net(donor, 100), config)
        assert runway.depletion_date == "2025-02-28"

    def test_zero_burn_gives_zero_runway(self, config):
        donor = make_donor()
        runway = compute_donor_runway(donor, 0, summary_with_net(donor, 5_000_000), config)
        assert runway.runway_months == 0
        assert runway.depletion_date == "2025-01-15"
        assert runway.status == "critical"

    def test_defaults_to_today(self):
        donor = make_donor()
        runway = compute_donor_runway(donor, 1, summary_with_net(donor, 0))
        assert runway.depletion_date == dt.date.today().isoformat()


class TestProjectDonorRunways:
    def test_sorted_longest_first(self, donors, config):
        summaries = [summarize_donor(d, config)[0] for d in donors]
        runways = project_donor_runways(donors, 359_800, summaries, config)
        months = [r.runway_months for r in runways]
        assert months == sorted(months, reverse=True)
        assert runways[0].donor_id == "donor-aurora"
        assert len(runways) == len(donors)

    def test_missing_summary_skipped(self, donors, config):
        summaries = [summarize_donor(donors[0], config)[0]]
        runways = project_donor_runways(donors, 100_000, summaries, config)
        assert [r.donor_id for r in runways] == [donors[0].id]


class TestDepletionDateRange:
    def test_tiny_burn_saturates_at_max_date(self, config):
        donor = make_donor(contribution_amount=30_000_000)
        summary = summarize_donor(donor, config)[0]
        runway = compute_donor_runway(donor, 100, summary, config)
        assert runway.runway_months == pytest.approx(246_000)
        assert runway.depletion_date == dt.date.max.isoformat()
        assert runway.status == "healthy"

    def test_negative_funds_saturate_at_min_date(self, config):
        donor = make_donor()
        runway = compute_donor_runway(donor, 1, summary_with_net(donor, -30_000_000), config)
        assert runway.depletion_date == dt.date.min.isoformat()
        assert runway.status == "critical"

    def test_simulation_with_tiny_burn(self, programs, config):
        result = run_simulation(
            [make_donor(contribution_amount=30_000_000)], programs, [], 100, config=config
        )
        assert result.donor_runways[0].depletion_date == dt.date.max.isoformat()
