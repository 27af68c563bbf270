from datetime import date

import pytest

from salarycalc.business_date import FixedBusinessDate
from salarycalc.exceptions import RecordNotFoundError
from salarycalc.wizard import PayrollPreview

from conftest import build_employee, build_store


def build_preview() -> PayrollPreview:
    store = build_store(
        build_employee(no=1),
        build_employee(no=2, role_rank="C1", capability_rank="PL"),
    )
    return PayrollPreview(store, FixedBusinessDate.of(date(2015, 4, 20)))


def test_preview_aggregates_totals():
    totals = build_preview().preview([1, 2], 201504)

    assert set(totals.employees.keys()) == {1, 2}
    assert totals.employees[1].total_salary == 291800
    assert totals.employees[2].total_salary == 250000 + 100000 + 25000
    assert totals.total_salary == 291800 + 375000
    assert totals.deduction_amount == 86000
    assert totals.take_home_amount == totals.total_salary - 86000
    assert totals.overtime_amount == 26800


def test_preview_aborts_on_unknown_employee():
    with pytest.raises(RecordNotFoundError):
        build_preview().preview([1, 3], 201504)


def test_preview_aborts_on_missing_month():
    with pytest.raises(RecordNotFoundError):
        build_preview().preview([1, 2], 201505)
