from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from .business_date import BusinessDateProvider, SystemBusinessDate
from .calculator import CalculationContext, EmployeeSalaryCalculator
from .models import Payslip, parse_year_month
from .store import PayrollStore


@dataclass
class PreviewTotals:
    year_month: int
    employees: Dict[int, Payslip]
    total_salary: int
    deduction_amount: int
    take_home_amount: int
    overtime_amount: int


class PayrollPreview:
    """Runs a month of payslips for several employees and sums them.

    A failed lookup for any employee aborts the whole preview.
    """

    def __init__(self, store: PayrollStore, business_date: Optional[BusinessDateProvider] = None):
        self.store = store
        self.business_date = business_date or SystemBusinessDate()

    def payslip_for(self, employee_no: int, year_month: int) -> Payslip:
        employee = self.store.get_employee(employee_no)
        ctx = CalculationContext.for_employee(self.store, employee, self.business_date)
        return EmployeeSalaryCalculator(employee).payslip(ctx, year_month)

    def preview(self, employee_nos: Iterable[int], year_month: int) -> PreviewTotals:
        year_month = parse_year_month(year_month)
        payslips: Dict[int, Payslip] = {}
        for employee_no in employee_nos:
            payslips[employee_no] = self.payslip_for(employee_no, year_month)

        return PreviewTotals(
            year_month=year_month,
            employees=payslips,
            total_salary=sum(p.total_salary for p in payslips.values()),
            deduction_amount=sum(p.deduction_amount for p in payslips.values()),
            take_home_amount=sum(p.take_home_amount for p in payslips.values()),
            overtime_amount=sum(p.overtime_amount for p in payslips.values()),
        )
