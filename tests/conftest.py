from datetime import date
from decimal import Decimal

import pytest

from salarycalc.business_date import FixedBusinessDate
from salarycalc.calculator import CalculationContext
from salarycalc.models import CapabilityGrade, Employee, RoleGrade, WorkRecord
from salarycalc.store import InMemoryPayrollStore


def build_employee(**overrides) -> Employee:
    values = dict(
        no=1,
        name="Taro Yamada",
        join_date=date(2013, 4, 1),
        role_rank="B1",
        capability_rank="PG",
        health_insurance_amount=10000,
        employee_pension_amount=20000,
        income_tax_amount=5000,
        inhabitant_tax_amount=8000,
        commute_amount=10000,
        rent_amount=5000,
        work_overtime_1h_amount=2000,
    )
    values.update(overrides)
    return Employee(**values)


def build_store(*employees: Employee) -> InMemoryPayrollStore:
    store = InMemoryPayrollStore(
        employees=employees,
        roles=[RoleGrade("B1", 200000), RoleGrade("C1", 250000)],
        capabilities=[
            CapabilityGrade("PG", 50000),
            CapabilityGrade("PL", 100000),
            CapabilityGrade("PM", 150000),
        ],
    )
    for employee in employees:
        store.add_work(
            WorkRecord(
                employee_no=employee.no,
                year_month=201504,
                work_overtime=Decimal("10"),
                late_night_overtime=Decimal("2"),
                holiday_work_time=Decimal("1"),
                holiday_late_night_overtime=Decimal("0"),
            )
        )
    return store


def build_context(employee: Employee, today: date, store=None) -> CalculationContext:
    store = store or build_store(employee)
    return CalculationContext.for_employee(store, employee, FixedBusinessDate.of(today))


@pytest.fixture
def employee() -> Employee:
    return build_employee()
