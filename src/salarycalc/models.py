from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, List

from .exceptions import InvalidYearMonthError


class CapabilityCategory(str, Enum):
    PROJECT_LEADER = "PL"
    PROJECT_MANAGER = "PM"
    GENERAL = "GENERAL"

    @classmethod
    def from_rank(cls, rank: str) -> "CapabilityCategory":
        for category in (cls.PROJECT_LEADER, cls.PROJECT_MANAGER):
            if rank == category.value:
                return category
        return cls.GENERAL


@dataclass(frozen=True)
class CategoryPolicy:
    overtime_exempt: bool = False
    allowance_bonus: int = 0


CATEGORY_POLICIES: Dict[CapabilityCategory, CategoryPolicy] = {
    CapabilityCategory.PROJECT_LEADER: CategoryPolicy(overtime_exempt=True, allowance_bonus=10000),
    CapabilityCategory.PROJECT_MANAGER: CategoryPolicy(overtime_exempt=True, allowance_bonus=30000),
    CapabilityCategory.GENERAL: CategoryPolicy(),
}

# tenure year -> one-off bonus paid in the month that year is reached
MILESTONE_BONUSES: Dict[int, int] = {3: 3000, 5: 5000, 10: 10000, 20: 20000}


@dataclass(frozen=True)
class Employee:
    no: int
    name: str
    join_date: date
    role_rank: str
    capability_rank: str
    health_insurance_amount: int = 0
    employee_pension_amount: int = 0
    income_tax_amount: int = 0
    inhabitant_tax_amount: int = 0
    commute_amount: int = 0
    rent_amount: int = 0
    work_overtime_1h_amount: int = 0

    @property
    def category(self) -> CapabilityCategory:
        return CapabilityCategory.from_rank(self.capability_rank)

    @property
    def policy(self) -> CategoryPolicy:
        return CATEGORY_POLICIES[self.category]

    @property
    def deduction_amount(self) -> int:
        return (
            self.health_insurance_amount
            + self.employee_pension_amount
            + self.income_tax_amount
            + self.inhabitant_tax_amount
        )


@dataclass(frozen=True)
class RoleGrade:
    rank: str
    amount: int


@dataclass(frozen=True)
class CapabilityGrade:
    rank: str
    amount: int


@dataclass(frozen=True)
class WorkRecord:
    employee_no: int
    year_month: int
    work_overtime: Decimal = Decimal("0")
    late_night_overtime: Decimal = Decimal("0")
    holiday_work_time: Decimal = Decimal("0")
    holiday_late_night_overtime: Decimal = Decimal("0")


class OvertimeCategory(str, Enum):
    REGULAR = "regular"
    LATE_NIGHT = "late_night"
    HOLIDAY = "holiday"
    HOLIDAY_LATE_NIGHT = "holiday_late_night"


OVERTIME_MULTIPLIERS: Dict[OvertimeCategory, Decimal] = {
    OvertimeCategory.REGULAR: Decimal("1.0"),
    OvertimeCategory.LATE_NIGHT: Decimal("1.1"),
    OvertimeCategory.HOLIDAY: Decimal("1.2"),
    OvertimeCategory.HOLIDAY_LATE_NIGHT: Decimal("1.3"),
}


@dataclass(frozen=True)
class OvertimeLine:
    category: OvertimeCategory
    hours: Decimal
    rate: Decimal

    @property
    def amount(self) -> int:
        # int() on a Decimal truncates toward zero
        return int(self.rate * self.hours)


@dataclass
class Payslip:
    employee_no: int
    year_month: int
    duration_month: int
    duration_year: int
    role_amount: int
    capability_amount: int
    allowance: int
    overtime_amount: int
    total_salary: int
    deduction_amount: int
    take_home_amount: int
    annual_total_salary_plan: int
    overtime_lines: List[OvertimeLine] = field(default_factory=list)

    def to_dict(self) -> dict:
        payload = {k: v for k, v in self.__dict__.items() if k != "overtime_lines"}
        payload["overtime_lines"] = [
            {
                "category": line.category.value,
                "hours": float(line.hours),
                "rate": float(line.rate),
                "amount": line.amount,
            }
            for line in self.overtime_lines
        ]
        return payload


def parse_year_month(value) -> int:
    """Validate a YYYYMM value and return it as an int."""
    if isinstance(value, bool):
        raise InvalidYearMonthError(value)
    try:
        year_month = int(str(value).strip())
    except ValueError:
        raise InvalidYearMonthError(value) from None
    if not 100001 <= year_month <= 999912 or not 1 <= year_month % 100 <= 12:
        raise InvalidYearMonthError(value)
    return year_month
