from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from .exceptions import RecordNotFoundError
from .models import CapabilityGrade, Employee, RoleGrade, WorkRecord


class PayrollStore:
    """Exact-key lookups the salary calculator depends on.

    Every lookup raises :class:`RecordNotFoundError` when no row matches and
    :class:`StoreUnavailableError` when the backing store cannot answer.
    """

    def get_employee(self, no: int) -> Employee:
        raise NotImplementedError

    def get_role(self, rank: str) -> RoleGrade:
        raise NotImplementedError

    def get_capability(self, rank: str) -> CapabilityGrade:
        raise NotImplementedError

    def get_work(self, employee_no: int, year_month: int) -> WorkRecord:
        raise NotImplementedError


class InMemoryPayrollStore(PayrollStore):
    def __init__(
        self,
        employees: Optional[Iterable[Employee]] = None,
        roles: Optional[Iterable[RoleGrade]] = None,
        capabilities: Optional[Iterable[CapabilityGrade]] = None,
        works: Optional[Iterable[WorkRecord]] = None,
    ) -> None:
        self.employees: Dict[int, Employee] = {e.no: e for e in employees or []}
        self.roles: Dict[str, RoleGrade] = {r.rank: r for r in roles or []}
        self.capabilities: Dict[str, CapabilityGrade] = {c.rank: c for c in capabilities or []}
        self.works: Dict[Tuple[int, int], WorkRecord] = {
            (w.employee_no, w.year_month): w for w in works or []
        }

    def add_work(self, work: WorkRecord) -> None:
        self.works[(work.employee_no, work.year_month)] = work

    def get_employee(self, no: int) -> Employee:
        try:
            return self.employees[no]
        except KeyError:
            raise RecordNotFoundError("Employee", no) from None

    def get_role(self, rank: str) -> RoleGrade:
        try:
            return self.roles[rank]
        except KeyError:
            raise RecordNotFoundError("Role", rank) from None

    def get_capability(self, rank: str) -> CapabilityGrade:
        try:
            return self.capabilities[rank]
        except KeyError:
            raise RecordNotFoundError("Capability", rank) from None

    def get_work(self, employee_no: int, year_month: int) -> WorkRecord:
        try:
            return self.works[(employee_no, year_month)]
        except KeyError:
            raise RecordNotFoundError("Work", (employee_no, year_month)) from None
