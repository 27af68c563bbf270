from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional

from .business_date import BusinessDateProvider, SystemBusinessDate
from .core.logging import get_logger
from .models import (
    MILESTONE_BONUSES,
    OVERTIME_MULTIPLIERS,
    CapabilityGrade,
    Employee,
    OvertimeCategory,
    OvertimeLine,
    Payslip,
    RoleGrade,
    WorkRecord,
    parse_year_month,
)
from .store import PayrollStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class CalculationContext:
    role: RoleGrade
    capability: CapabilityGrade
    business_date: BusinessDateProvider
    store: PayrollStore

    @classmethod
    def for_employee(
        cls,
        store: PayrollStore,
        employee: Employee,
        business_date: Optional[BusinessDateProvider] = None,
    ) -> "CalculationContext":
        return cls(
            role=store.get_role(employee.role_rank),
            capability=store.get_capability(employee.capability_rank),
            business_date=business_date or SystemBusinessDate(),
            store=store,
        )


def add_months(start: date, months: int) -> date:
    """Shift ``start`` by whole months, clamping to the target month's last day."""
    index = start.year * 12 + (start.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


class EmployeeSalaryCalculator:
    def __init__(self, employee: Employee):
        self.employee = employee

    @property
    def no(self) -> int:
        return self.employee.no

    def duration_month(self, ctx: CalculationContext) -> int:
        """Month of service the employee is in as of the business date.

        The joining month is month 1: joining on 2013-04-01 gives 12 on
        2014-03-31 and 13 on 2014-04-01. Each step moves on from the previous
        (possibly clamped) date, so a 01-31 join counts 02-28, 03-28, ...
        """
        return self._months_until(ctx.business_date.today())

    def _months_until(self, today: date) -> int:
        cursor = self.employee.join_date
        months = 0
        while cursor <= today:
            cursor = add_months(cursor, 1)
            months += 1
        return months

    def duration_year(self, ctx: CalculationContext) -> int:
        return self.duration_month(ctx) // 12

    def milestone_bonus(self, duration_month: int) -> int:
        if duration_month % 12 != 0:
            return 0
        return MILESTONE_BONUSES.get(duration_month // 12, 0)

    def allowance(self, ctx: CalculationContext, duration_month: Optional[int] = None) -> int:
        if duration_month is None:
            duration_month = self.duration_month(ctx)
        allowance = self.employee.commute_amount + self.employee.rent_amount
        allowance += self.employee.policy.allowance_bonus
        allowance += self.milestone_bonus(duration_month)
        return allowance

    def overtime_lines(self, work: WorkRecord) -> List[OvertimeLine]:
        base_rate = Decimal(self.employee.work_overtime_1h_amount)
        hours = {
            OvertimeCategory.REGULAR: work.work_overtime,
            OvertimeCategory.LATE_NIGHT: work.late_night_overtime,
            OvertimeCategory.HOLIDAY: work.holiday_work_time,
            OvertimeCategory.HOLIDAY_LATE_NIGHT: work.holiday_late_night_overtime,
        }
        return [
            OvertimeLine(
                category=category,
                hours=Decimal(hours[category]),
                rate=base_rate * multiplier,
            )
            for category, multiplier in OVERTIME_MULTIPLIERS.items()
        ]

    def overtime_amount(self, ctx: CalculationContext, year_month: int) -> int:
        work = ctx.store.get_work(self.employee.no, parse_year_month(year_month))
        if self.employee.policy.overtime_exempt:
            return 0
        return sum(line.amount for line in self.overtime_lines(work))

    def total_salary(self, ctx: CalculationContext, year_month: int) -> int:
        total = ctx.role.amount + ctx.capability.amount
        total += self.allowance(ctx)
        total += self.overtime_amount(ctx, year_month)
        return total

    def take_home_amount(self, ctx: CalculationContext, year_month: int) -> int:
        return self.total_salary(ctx, year_month) - self.employee.deduction_amount

    def annual_total_salary_plan(self, ctx: CalculationContext) -> int:
        """Guaranteed yearly pay: grades plus the category bonus, times 12.

        Commute, rent, tenure milestones and overtime are left out.
        """
        monthly = ctx.role.amount + ctx.capability.amount + self.employee.policy.allowance_bonus
        return monthly * 12

    def payslip(self, ctx: CalculationContext, year_month: int) -> Payslip:
        year_month = parse_year_month(year_month)
        work = ctx.store.get_work(self.employee.no, year_month)
        exempt = self.employee.policy.overtime_exempt
        lines = [] if exempt else self.overtime_lines(work)
        overtime = sum(line.amount for line in lines)
        duration_month = self.duration_month(ctx)
        allowance = self.allowance(ctx, duration_month)
        total = ctx.role.amount + ctx.capability.amount + allowance + overtime
        deduction = self.employee.deduction_amount

        payslip = Payslip(
            employee_no=self.employee.no,
            year_month=year_month,
            duration_month=duration_month,
            duration_year=duration_month // 12,
            role_amount=ctx.role.amount,
            capability_amount=ctx.capability.amount,
            allowance=allowance,
            overtime_amount=overtime,
            total_salary=total,
            deduction_amount=deduction,
            take_home_amount=total - deduction,
            annual_total_salary_plan=self.annual_total_salary_plan(ctx),
            overtime_lines=lines,
        )
        logger.info(
            "payslip_calculated",
            employee_no=payslip.employee_no,
            year_month=year_month,
            total_salary=payslip.total_salary,
            take_home_amount=payslip.take_home_amount,
        )
        return payslip
