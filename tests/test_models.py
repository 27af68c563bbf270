from decimal import Decimal

import pytest

from salarycalc.exceptions import InvalidYearMonthError
from salarycalc.models import (
    CATEGORY_POLICIES,
    CapabilityCategory,
    OvertimeCategory,
    OvertimeLine,
    Payslip,
    parse_year_month,
)

from conftest import build_employee


def test_capability_category_matches_exact_rank_codes():
    assert CapabilityCategory.from_rank("PL") is CapabilityCategory.PROJECT_LEADER
    assert CapabilityCategory.from_rank("PM") is CapabilityCategory.PROJECT_MANAGER
    assert CapabilityCategory.from_rank("pl") is CapabilityCategory.GENERAL
    assert CapabilityCategory.from_rank("PG") is CapabilityCategory.GENERAL


def test_category_policies_mark_leaders_and_managers_exempt():
    assert CATEGORY_POLICIES[CapabilityCategory.PROJECT_LEADER].overtime_exempt
    assert CATEGORY_POLICIES[CapabilityCategory.PROJECT_LEADER].allowance_bonus == 10000
    assert CATEGORY_POLICIES[CapabilityCategory.PROJECT_MANAGER].overtime_exempt
    assert CATEGORY_POLICIES[CapabilityCategory.PROJECT_MANAGER].allowance_bonus == 30000
    assert not CATEGORY_POLICIES[CapabilityCategory.GENERAL].overtime_exempt
    assert CATEGORY_POLICIES[CapabilityCategory.GENERAL].allowance_bonus == 0


def test_employee_deduction_amount_sums_fixed_deductions():
    employee = build_employee()

    assert employee.deduction_amount == 43000
    assert employee.policy.allowance_bonus == 0


def test_overtime_line_truncates_amount():
    line = OvertimeLine(OvertimeCategory.LATE_NIGHT, hours=Decimal("1.5"), rate=Decimal("1999") * Decimal("1.1"))

    assert line.amount == 3298


@pytest.mark.parametrize("value", [201504, "201504", " 201512 "])
def test_parse_year_month_accepts_yyyymm(value):
    assert parse_year_month(value) in (201504, 201512)


@pytest.mark.parametrize("value", [201500, 201513, 99912, 2015041, "2015-04", "abc", True])
def test_parse_year_month_rejects_invalid_values(value):
    with pytest.raises(InvalidYearMonthError):
        parse_year_month(value)


def test_invalid_year_month_is_a_value_error():
    with pytest.raises(ValueError):
        parse_year_month("201599")


def test_payslip_to_dict_includes_line_amounts():
    payslip = Payslip(
        employee_no=1,
        year_month=201504,
        duration_month=25,
        duration_year=2,
        role_amount=200000,
        capability_amount=50000,
        allowance=15000,
        overtime_amount=4400,
        total_salary=269400,
        deduction_amount=43000,
        take_home_amount=226400,
        annual_total_salary_plan=3000000,
        overtime_lines=[OvertimeLine(OvertimeCategory.LATE_NIGHT, Decimal("2"), Decimal("2200.0"))],
    )

    payload = payslip.to_dict()

    assert payload["total_salary"] == 269400
    assert payload["overtime_lines"] == [
        {"category": "late_night", "hours": 2.0, "rate": 2200.0, "amount": 4400}
    ]
    assert "join_date" not in payload
