"""Tests for override stores and merging them into base snapshots."""

import json
from dataclasses import replace

import pytest

from data_prep.overrides import (
    InMemoryOverrideStore,
    JsonFileOverrideStore,
    PreferenceOverride,
    apply_donor_preference_overrides,
    merge_overrides,
    project_salary,
)

from conftest import make_donor, make_employee


class TestProjectSalary:
    def test_increment(self):
        assert project_salary(50_000, 10) == 55_000

    def test_rounds_half_up(self):
        assert project_salary(45_001, 50) == 67_502  # 67501.5
        assert project_salary(50_000, 0) == 50_000


class TestInMemoryOverrideStore:
    def test_increment_clamped(self):
        store = InMemoryOverrideStore()
        store.set_increment("emp-001", 150)
        store.set_increment("emp-002", -5)
        assert store.get_increment("emp-001") == 100
        assert store.get_increment("emp-002") == 0
        assert store.get_increment("emp-404") == 0

    def test_has_any_and_reset(self):
        store = InMemoryOverrideStore()
        assert not store.has_any_increments
        store.set_increment("emp-001", 10)
        store.set_increment("emp-002", 5)
        assert store.has_any_increments
        store.reset_increment("emp-001")
        assert store.salary_increments() == {"emp-002": 5}
        store.reset_all_increments()
        assert not store.has_any_increments

    def test_employee_override_is_partial(self):
        store = InMemoryOverrideStore()
        store.set_employee_override("emp-001", role="Lead")
        store.set_employee_override("emp-001", program_id="mrs")
        override = store.employee_overrides()["emp-001"]
        assert override.role == "Lead"
        assert override.program_id == "mrs"
        assert override.city_geo is None


class TestMergeOverrides:
    def test_salary_increment_rederives_costs(self, config):
        store = InMemoryOverrideStore()
        store.set_increment("emp-001", 10)
        _, employees = merge_overrides(
            store, [], [make_employee("emp-001", 50_000), make_employee("emp-002", 40_000)], config
        )
        raised, untouched = employees
        assert raised.monthly_salary == 55_000
        assert raised.pf_contribution == 6_600
        assert raised.tds_deduction == 5_500
        assert raised.planned_increment == 10
        assert untouched.monthly_salary == 40_000
        assert untouched.planned_increment == 0

    def test_city_geo_split(self):
        store = InMemoryOverrideStore()
        store.set_employee_override("emp-001", city_geo="Gaya|Bihar", program_id="cd")
        _, (emp,) = merge_overrides(store, [], [make_employee("emp-001")])
        assert emp.city == "Gaya"
        assert emp.geography == "Bihar"
        assert emp.program_id == "cd"
        assert emp.role == "Program Officer"

    def test_preferences_replaced(self):
        store = InMemoryOverrideStore()
        store.set_donor_preferences("donor-x", [("cd", 80)])
        donors, _ = merge_overrides(store, [make_donor(preferences=[("dsp", 50), ("mrs", 20)])], [])
        assert [(p.program_id, p.weight) for p in donors[0].preferences] == [("cd", 80)]

    def test_empty_preference_override_ignored(self):
        donor = make_donor(preferences=[("dsp", 50)])
        merged = apply_donor_preference_overrides([donor], {"donor-x": []})
        assert merged[0] == donor

    def test_loaded_planned_increment_kept_without_store_entry(self):
        employee = replace(make_employee("emp-001"), planned_increment=8.0)
        _, (merged,) = merge_overrides(InMemoryOverrideStore(), [], [employee])
        assert merged == employee

    def test_base_entities_untouched(self):
        store = InMemoryOverrideStore()
        store.set_increment("emp-001", 20)
        base = [make_employee("emp-001", 50_000)]
        merge_overrides(store, [], base)
        assert base[0].monthly_salary == 50_000


class TestJsonFileOverrideStore:
    def test_round_trip(self, tmp_path):
        path = tmp_path / "overrides.json"
        store = JsonFileOverrideStore(path)
        store.set_increment("emp-001", 12.5)
        store.set_employee_override("emp-002", city_geo="Lucknow|Uttar Pradesh")
        store.set_donor_preferences("donor-x", [("dsp", 70)])

        on_disk = json.loads(path.read_text())
        assert on_disk["salaryIncrements"] == {"emp-001": 12.5}
        assert on_disk["employeeOverrides"]["emp-002"]["cityGeo"] == "Lucknow|Uttar Pradesh"

        reopened = JsonFileOverrideStore(path)
        assert reopened.get_increment("emp-001") == 12.5
        assert reopened.employee_overrides()["emp-002"].city_geo == "Lucknow|Uttar Pradesh"
        assert reopened.donor_preference_overrides()["donor-x"] == [
            PreferenceOverride(program_id="dsp", weight=70)
        ]

    def test_missing_file_is_empty(self, tmp_path):
        store = JsonFileOverrideStore(tmp_path / "nope.json")
        assert store.salary_increments() == {}
        assert not (tmp_path / "nope.json").exists()

    @pytest.mark.parametrize("content", ["{not json", '{"salaryIncrements": "lots"}'])
    def test_unreadable_file_is_empty(self, tmp_path, content):
        path = tmp_path / "overrides.json"
        path.write_text(content)
        store = JsonFileOverrideStore(path)
        assert store.salary_increments() == {}
        assert store.employee_overrides() == {}

    def test_reload_picks_up_external_edits(self, tmp_path):
        path = tmp_path / "overrides.json"
        store = JsonFileOverrideStore(path)
        path.write_text(json.dumps({"salaryIncrements": {"emp-009": 7}}))
        store.reload()
        assert store.get_increment("emp-009") == 7

    def test_directory_path_is_empty(self, tmp_path):
        store = JsonFileOverrideStore(tmp_path)
        assert store.salary_increments() == {}
