from datetime import date
from decimal import Decimal

import pytest

from salarycalc.business_date import FixedBusinessDate
from salarycalc.calculator import CalculationContext, EmployeeSalaryCalculator
from salarycalc.db.seed import seed
from salarycalc.db.session import build_engine, build_session_factory, init_db
from salarycalc.db.store import SqlPayrollStore
from salarycalc.exceptions import RecordNotFoundError, StoreUnavailableError
from salarycalc.store import InMemoryPayrollStore


@pytest.fixture
def session():
    engine = build_engine("sqlite://")
    init_db(engine)
    db = build_session_factory(engine)()
    seed(db)
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


def test_get_employee_maps_row(session):
    employee = SqlPayrollStore(session).get_employee(1)

    assert employee.name == "Taro Yamada"
    assert employee.join_date == date(2012, 4, 1)
    assert employee.capability_rank == "PG"
    assert employee.deduction_amount == 43000
    assert employee.work_overtime_1h_amount == 2000


def test_get_grades_by_rank(session):
    store = SqlPayrollStore(session)

    assert store.get_role("B1").amount == 200000
    assert store.get_capability("PL").amount == 100000


def test_get_work_returns_decimal_hours(session):
    work = SqlPayrollStore(session).get_work(2, 201504)

    assert work.work_overtime == Decimal("25.5")
    assert work.holiday_late_night_overtime == Decimal("1.5")
    assert isinstance(work.late_night_overtime, Decimal)


@pytest.mark.parametrize(
    "lookup,entity",
    [
        (lambda s: s.get_employee(99), "Employee"),
        (lambda s: s.get_role("Z9"), "Role"),
        (lambda s: s.get_capability("XX"), "Capability"),
        (lambda s: s.get_work(1, 201505), "Work"),
    ],
)
def test_missing_rows_raise_not_found(session, lookup, entity):
    with pytest.raises(RecordNotFoundError) as excinfo:
        lookup(SqlPayrollStore(session))

    assert excinfo.value.entity == entity


def test_rank_lookup_is_parameterized(session):
    with pytest.raises(RecordNotFoundError):
        SqlPayrollStore(session).get_capability("PG' OR '1'='1")


def test_connection_failure_is_store_unavailable(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'missing' / 'salary.db'}")
    db = build_session_factory(engine)()
    try:
        with pytest.raises(StoreUnavailableError):
            SqlPayrollStore(db).get_role("B1")
    finally:
        db.close()


def test_sql_store_matches_in_memory_calculation(session):
    sql_store = SqlPayrollStore(session)
    employee = sql_store.get_employee(1)
    memory_store = InMemoryPayrollStore(
        employees=[employee],
        roles=[sql_store.get_role("B1")],
        capabilities=[sql_store.get_capability("PG")],
        works=[sql_store.get_work(1, 201504)],
    )
    today = FixedBusinessDate.of(date(2015, 4, 20))
    calc = EmployeeSalaryCalculator(employee)

    from_sql = calc.payslip(CalculationContext.for_employee(sql_store, employee, today), 201504)
    from_memory = calc.payslip(CalculationContext.for_employee(memory_store, employee, today), 201504)

    assert from_sql == from_memory
    assert from_sql.total_salary == 291800
