from datetime import date
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from salarycalc.business_date import BusinessDateProvider, FixedBusinessDate, SystemBusinessDate
from salarycalc.calculator import CalculationContext, EmployeeSalaryCalculator
from salarycalc.db.session import get_session
from salarycalc.db.store import SqlPayrollStore
from salarycalc.exceptions import (
    InvalidYearMonthError,
    RecordNotFoundError,
    SalaryCalculationError,
    StoreUnavailableError,
)
from salarycalc.models import Payslip
from salarycalc.wizard import PayrollPreview

router = APIRouter(tags=["salaries"])


class OvertimeLineOut(BaseModel):
    category: str
    hours: float
    rate: float
    amount: int


class PayslipOut(BaseModel):
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
    overtime_lines: list[OvertimeLineOut] = []


class AnnualPlanOut(BaseModel):
    employee_no: int
    annual_total_salary_plan: int


class PreviewOut(BaseModel):
    year_month: int
    total_salary: int
    deduction_amount: int
    take_home_amount: int
    overtime_amount: int
    employees: list[PayslipOut]


def business_date_for(as_of: date | None) -> BusinessDateProvider:
    return FixedBusinessDate.of(as_of) if as_of else SystemBusinessDate()


def payslip_out(payslip: Payslip) -> PayslipOut:
    return PayslipOut(**payslip.to_dict())


def raise_http(exc: SalaryCalculationError) -> NoReturn:
    if isinstance(exc, RecordNotFoundError):
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    if isinstance(exc, InvalidYearMonthError):
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if isinstance(exc, StoreUnavailableError):
        raise HTTPException(status_code=503, detail="Salary store unavailable") from exc
    raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.get("/employees/{employee_no}/payslips/{year_month}", response_model=PayslipOut)
def get_payslip(
    employee_no: int,
    year_month: int,
    as_of: date | None = None,
    db: Session = Depends(get_session),
) -> PayslipOut:
    preview = PayrollPreview(SqlPayrollStore(db), business_date_for(as_of))
    try:
        return payslip_out(preview.payslip_for(employee_no, year_month))
    except SalaryCalculationError as exc:
        raise_http(exc)


@router.get("/employees/{employee_no}/annual-plan", response_model=AnnualPlanOut)
def get_annual_plan(employee_no: int, db: Session = Depends(get_session)) -> AnnualPlanOut:
    store = SqlPayrollStore(db)
    try:
        employee = store.get_employee(employee_no)
        ctx = CalculationContext.for_employee(store, employee)
        plan = EmployeeSalaryCalculator(employee).annual_total_salary_plan(ctx)
    except SalaryCalculationError as exc:
        raise_http(exc)
    return AnnualPlanOut(employee_no=employee_no, annual_total_salary_plan=plan)


@router.get("/payroll/{year_month}", response_model=PreviewOut)
def get_preview(
    year_month: int,
    employee_no: list[int] = Query(...),
    as_of: date | None = None,
    db: Session = Depends(get_session),
) -> PreviewOut:
    preview = PayrollPreview(SqlPayrollStore(db), business_date_for(as_of))
    try:
        totals = preview.preview(employee_no, year_month)
    except SalaryCalculationError as exc:
        raise_http(exc)
    return PreviewOut(
        year_month=totals.year_month,
        total_salary=totals.total_salary,
        deduction_amount=totals.deduction_amount,
        take_home_amount=totals.take_home_amount,
        overtime_amount=totals.overtime_amount,
        employees=[payslip_out(p) for p in totals.employees.values()],
    )
