"""Shared fixtures: the dashboard's demo programs and donors plus a small staff."""

import datetime as dt

import pytest

from core.config import SimulationConfig
from core.schema import Donor, DonorPreference, Employee, Program


def make_donor(
    id="donor-x",
    type="International",
    contribution_amount=1_000_000,
    admin_overhead_percent=0,
    fcra_approved=False,
    preferences=(),
    name=None,
):
    return Donor(
        id=id,
        name=name or id.title(),
        type=type,
        contribution_amount=contribution_amount,
        admin_overhead_percent=admin_overhead_percent,
        fcra_approved=fcra_approved,
        preferences=tuple(DonorPreference(pid, w) for pid, w in preferences),
    )


def make_employee(id="emp-001", salary=50_000, program_id="dsp", pf=None, tds=None):
    return Employee(
        id=id,
        name=id,
        role="Program Officer",
        joining_date="2019-01-15",
        monthly_salary=salary,
        pf_contribution=round(salary * 0.12) if pf is None else pf,
        tds_deduction=round(salary * 0.10) if tds is None else tds,
        geography="Delhi NCR",
        city="Delhi",
        program_id=program_id,
    )


@pytest.fixture
def config():
    return SimulationConfig(as_of_date=dt.date(2025, 1, 15))


@pytest.fixture
def programs():
    return [
        Program("dsp", "DSP", "Digital Skills Program", "Delhi NCR", ("Delhi",)),
        Program("mrs", "MRS", "Maternal and Reproductive Support", "Uttar Pradesh",
                ("Lucknow", "Prayagraj")),
        Program("cd", "C&D", "Community Development", "Bihar", ("Gaya", "Muzaffarpur")),
    ]


@pytest.fixture
def donors():
    return [
        make_donor("donor-aurora", "International", 2_500_000, 18, True,
                   [("dsp", 50), ("mrs", 30), ("cd", 20)], name="Aurora Global Trust"),
        make_donor("donor-saras", "National", 1_200_000, 12, False,
                   [("dsp", 60), ("mrs", 20)], name="Saras Foundation"),
        make_donor("donor-pragati", "CSR", 1_800_000, 15, False,
                   [("mrs", 50), ("cd", 35)], name="Pragati CSR Fund"),
        make_donor("donor-mehra", "HNI", 800_000, 10, False,
                   [("dsp", 70)], name="Mehra Family Office"),
        make_donor("donor-northstar", "International", 1_500_000, 18, True,
                   [("cd", 40), ("mrs", 40)], name="Northstar Impact"),
    ]


@pytest.fixture
def employees():
    return [
        make_employee("emp-001", 50_000, "dsp"),
        make_employee("emp-002", 40_000, "mrs"),
    ]
