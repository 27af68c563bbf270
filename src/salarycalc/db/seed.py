from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from salarycalc.db.tables import CapabilityRow, EmployeeRow, RoleRow, WorkRow


def seed(session: Session) -> bool:
    """Load demo data; returns False when grades are already present."""
    if session.query(RoleRow).first() is not None:
        return False

    session.add_all(
        [
            RoleRow(rank="A1", name="Associate", amount=180000),
            RoleRow(rank="B1", name="Staff", amount=200000),
            RoleRow(rank="C1", name="Senior", amount=250000),
            CapabilityRow(rank="PG", name="Programmer", amount=50000),
            CapabilityRow(rank="SE", name="Systems Engineer", amount=80000),
            CapabilityRow(rank="PL", name="Project Leader", amount=100000),
            CapabilityRow(rank="PM", name="Project Manager", amount=150000),
        ]
    )
    session.flush()

    session.add_all(
        [
            EmployeeRow(
                no=1,
                name="Taro Yamada",
                join_date=date(2012, 4, 1),
                role_rank="B1",
                capability_rank="PG",
                health_insurance_amount=10000,
                employee_pension_amount=20000,
                income_tax_amount=5000,
                inhabitant_tax_amount=8000,
                commute_amount=10000,
                rent_amount=5000,
                work_overtime_1h_amount=2000,
            ),
            EmployeeRow(
                no=2,
                name="Hanako Suzuki",
                join_date=date(2008, 10, 1),
                role_rank="C1",
                capability_rank="PL",
                health_insurance_amount=15000,
                employee_pension_amount=28000,
                income_tax_amount=9000,
                inhabitant_tax_amount=12000,
                commute_amount=12000,
                rent_amount=20000,
                work_overtime_1h_amount=2500,
            ),
        ]
    )
    session.flush()

    session.add_all(
        [
            WorkRow(
                employee_no=1,
                year_month=201504,
                work_overtime=Decimal("10"),
                late_night_overtime=Decimal("2"),
                holiday_work_time=Decimal("1"),
                holiday_late_night_overtime=Decimal("0"),
            ),
            WorkRow(
                employee_no=2,
                year_month=201504,
                work_overtime=Decimal("25.5"),
                late_night_overtime=Decimal("4"),
                holiday_work_time=Decimal("8"),
                holiday_late_night_overtime=Decimal("1.5"),
            ),
        ]
    )
    session.commit()
    return True
