"""Tests for admin-rate resolution, net amounts and allocation lines."""

import pytest

from core.config import SimulationConfig
from engine.allocation import build_allocation_lines, compute_general_fund, summarize_donor
from engine.economics import compute_net, resolve_admin_rate

from conftest import make_donor


class TestResolveAdminRate:
    def test_override_wins_when_positive(self):
        donor = make_donor(type="International", admin_overhead_percent=7)
        assert resolve_admin_rate(donor) == pytest.approx(0.07)

    @pytest.mark.parametrize("donor_type,baseline", [
        ("International", 0.18),
        ("National", 0.12),
        ("CSR", 0.15),
        ("HNI", 0.10),
    ])
    def test_zero_falls_back_to_type_baseline(self, donor_type, baseline):
        donor = make_donor(type=donor_type, admin_overhead_percent=0)
        assert resolve_admin_rate(donor) == baseline

    def test_negative_falls_back_to_baseline(self):
        donor = make_donor(type="CSR", admin_overhead_percent=-5)
        assert resolve_admin_rate(donor) == 0.15

    def test_unknown_type_has_zero_baseline(self):
        donor = make_donor(type="Crowdfunding", admin_overhead_percent=0)
        assert resolve_admin_rate(donor) == 0.0

    def test_custom_baseline_table(self):
        config = SimulationConfig(admin_rate_by_type={"HNI": 0.05})
        donor = make_donor(type="HNI", admin_overhead_percent=0)
        assert resolve_admin_rate(donor, config) == 0.05


class TestComputeNet:
    def test_international_baseline(self):
        donor = make_donor(type="International", contribution_amount=1_000_000)
        net = compute_net(donor)
        assert net.admin_percent == 0.18
        assert net.admin_amount == pytest.approx(180_000)
        assert net.net_amount == pytest.approx(820_000)

    @pytest.mark.parametrize("amount,pct", [
        (1_234_567.89, 13.7),
        (0, 18),
        (999, 0),
        (-50_000, 10),
    ])
    def test_admin_plus_net_is_contribution(self, amount, pct):
        net = compute_net(make_donor(contribution_amount=amount, admin_overhead_percent=pct))
        assert net.admin_amount + net.net_amount == pytest.approx(amount)

    def test_negative_contribution_is_not_rejected(self):
        net = compute_net(make_donor(contribution_amount=-100_000, type="HNI"))
        assert net.net_amount == pytest.approx(-90_000)


class TestAllocationLines:
    def test_half_preference(self):
        donor = make_donor(preferences=[("dsp", 50)])
        lines = build_allocation_lines(donor, 820_000)
        assert len(lines) == 1
        assert lines[0].donor_id == "donor-x"
        assert lines[0].program_id == "dsp"
        assert lines[0].weight == 50
        assert lines[0].amount == pytest.approx(410_000)
        assert compute_general_fund(donor, 820_000) == pytest.approx(410_000)

    def test_preserves_preference_order_and_duplicates(self):
        donor = make_donor(preferences=[("cd", 10), ("dsp", 20), ("cd", 5)])
        lines = build_allocation_lines(donor, 1000)
        assert [l.program_id for l in lines] == ["cd", "dsp", "cd"]
        assert [l.amount for l in lines] == pytest.approx([100, 200, 50])

    def test_no_preferences_all_general_fund(self):
        donor = make_donor()
        assert build_allocation_lines(donor, 5000) == []
        assert compute_general_fund(donor, 5000) == pytest.approx(5000)

    def test_over_100_weights_clamp_general_fund(self):
        donor = make_donor(preferences=[("dsp", 80), ("mrs", 40)])
        lines = build_allocation_lines(donor, 1000)
        assert sum(l.amount for l in lines) == pytest.approx(1200)
        assert compute_general_fund(donor, 1000) == 0

    @pytest.mark.parametrize("prefs", [
        [],
        [("dsp", 100)],
        [("dsp", 33.3), ("mrs", 33.3), ("cd", 33.3)],
        [("dsp", 12.5), ("cd", 0)],
    ])
    def test_conservation_when_weights_at_most_100(self, prefs):
        donor = make_donor(contribution_amount=1_777_777, admin_overhead_percent=13, preferences=prefs)
        summary, lines = summarize_donor(donor)
        total = sum(l.amount for l in lines) + summary.general_fund_amount
        assert total == pytest.approx(summary.net_amount)
        assert summary.allocated_amount == pytest.approx(sum(l.amount for l in lines))


class TestSummarizeDonor:
    def test_summary_fields(self):
        donor = make_donor("donor-a", "International", 1_000_000, preferences=[("dsp", 50)],
                           name="Aurora")
        summary, lines = summarize_donor(donor)
        assert summary.donor_id == "donor-a"
        assert summary.donor_name == "Aurora"
        assert summary.donor_type == "International"
        assert summary.contribution_amount == 1_000_000
        assert summary.admin_percent == 0.18
        assert summary.net_amount == pytest.approx(820_000)
        assert summary.allocated_amount == pytest.approx(410_000)
        assert summary.general_fund_amount == pytest.approx(410_000)
        assert len(lines) == 1
