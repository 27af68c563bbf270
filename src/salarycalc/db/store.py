from __future__ import annotations

from decimal import Decimal
from typing import Any, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from salarycalc.core.logging import get_logger
from salarycalc.db.tables import CapabilityRow, EmployeeRow, RoleRow, WorkRow
from salarycalc.exceptions import RecordNotFoundError, StoreUnavailableError
from salarycalc.models import CapabilityGrade, Employee, RoleGrade, WorkRecord
from salarycalc.store import PayrollStore

logger = get_logger(__name__)


class SqlPayrollStore(PayrollStore):
    """Primary-key lookups against the relational schema through one session."""

    def __init__(self, session: Session):
        self.session = session

    def _fetch(self, entity: str, row_type: Type[Any], key: Any) -> Any:
        try:
            row = self.session.get(row_type, key)
        except SQLAlchemyError as exc:
            logger.error("store_unavailable", entity=entity, key=str(key), error=str(exc))
            raise StoreUnavailableError(f"Select failure on {entity}") from exc
        if row is None:
            logger.warning("record_not_found", entity=entity, key=str(key))
            raise RecordNotFoundError(entity, key)
        return row

    def get_employee(self, no: int) -> Employee:
        row = self._fetch("Employee", EmployeeRow, no)
        return Employee(
            no=row.no,
            name=row.name,
            join_date=row.join_date,
            role_rank=row.role_rank,
            capability_rank=row.capability_rank,
            health_insurance_amount=row.health_insurance_amount,
            employee_pension_amount=row.employee_pension_amount,
            income_tax_amount=row.income_tax_amount,
            inhabitant_tax_amount=row.inhabitant_tax_amount,
            commute_amount=row.commute_amount,
            rent_amount=row.rent_amount,
            work_overtime_1h_amount=row.work_overtime_1h_amount,
        )

    def get_role(self, rank: str) -> RoleGrade:
        row = self._fetch("Role", RoleRow, rank)
        return RoleGrade(rank=row.rank, amount=row.amount)

    def get_capability(self, rank: str) -> CapabilityGrade:
        row = self._fetch("Capability", CapabilityRow, rank)
        return CapabilityGrade(rank=row.rank, amount=row.amount)

    def get_work(self, employee_no: int, year_month: int) -> WorkRecord:
        row = self._fetch("Work", WorkRow, (employee_no, year_month))
        return WorkRecord(
            employee_no=row.employee_no,
            year_month=row.year_month,
            work_overtime=Decimal(row.work_overtime),
            late_night_overtime=Decimal(row.late_night_overtime),
            holiday_work_time=Decimal(row.holiday_work_time),
            holiday_late_night_overtime=Decimal(row.holiday_late_night_overtime),
        )
