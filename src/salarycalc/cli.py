from __future__ import annotations

import argparse
import json
import sys
from datetime import date

from sqlalchemy.exc import SQLAlchemyError

from .business_date import BusinessDateProvider, FixedBusinessDate, SystemBusinessDate
from .calculator import CalculationContext, EmployeeSalaryCalculator
from .core.config import get_settings
from .core.logging import configure_logging, get_logger
from .db.seed import seed
from .db.session import build_engine, build_session_factory, init_db, session_scope
from .db.store import SqlPayrollStore
from .exceptions import RecordNotFoundError, SalaryCalculationError, StoreUnavailableError
from .wizard import PayrollPreview

logger = get_logger(__name__)

EXIT_NOT_FOUND = 2
EXIT_UNAVAILABLE = 3


def parse_date(value: str) -> date:
    return date.fromisoformat(value)


def business_date_from_args(args: argparse.Namespace) -> BusinessDateProvider:
    return FixedBusinessDate.of(args.as_of) if args.as_of else SystemBusinessDate()


def engine_from_args(args: argparse.Namespace):
    return build_engine(args.database_url or get_settings().database_url)


def session_factory_from_args(args: argparse.Namespace):
    return build_session_factory(engine_from_args(args))


def emit(payload: dict) -> None:
    print(json.dumps(payload, indent=2, default=str))


def cmd_init_db(args: argparse.Namespace) -> None:
    engine = engine_from_args(args)
    seeded = False
    try:
        init_db(engine)
        if args.seed:
            with session_scope(build_session_factory(engine)) as session:
                seeded = seed(session)
    except SQLAlchemyError as exc:
        logger.error("store_unavailable", step="init-db", error=str(exc))
        raise StoreUnavailableError("Could not initialise the salary tables") from exc
    logger.info("database_initialised", url=engine.url.render_as_string(hide_password=True), seeded=seeded)
    if args.seed and not seeded:
        print("Database initialised, demo data already present")
    else:
        print("Database initialised" + (" with demo data" if seeded else ""))


def cmd_payslip(args: argparse.Namespace) -> None:
    with session_scope(session_factory_from_args(args)) as session:
        preview = PayrollPreview(SqlPayrollStore(session), business_date_from_args(args))
        payslip = preview.payslip_for(args.employee, args.year_month)
    emit(payslip.to_dict())


def cmd_annual_plan(args: argparse.Namespace) -> None:
    with session_scope(session_factory_from_args(args)) as session:
        store = SqlPayrollStore(session)
        employee = store.get_employee(args.employee)
        ctx = CalculationContext.for_employee(store, employee)
        plan = EmployeeSalaryCalculator(employee).annual_total_salary_plan(ctx)
    emit({"employee_no": employee.no, "annual_total_salary_plan": plan})


def cmd_preview(args: argparse.Namespace) -> None:
    with session_scope(session_factory_from_args(args)) as session:
        preview = PayrollPreview(SqlPayrollStore(session), business_date_from_args(args))
        totals = preview.preview(args.employees, args.year_month)
    emit(
        {
            "year_month": totals.year_month,
            "total_salary": totals.total_salary,
            "deduction_amount": totals.deduction_amount,
            "take_home_amount": totals.take_home_amount,
            "overtime_amount": totals.overtime_amount,
            "employees": [p.to_dict() for p in totals.employees.values()],
        }
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Monthly salary calculation CLI")
    parser.add_argument("--database-url", help="SQLAlchemy URL, defaults to SALARYCALC_DATABASE_URL")
    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser("init-db", help="Create the salary tables")
    init.add_argument("--seed", action="store_true", help="Load demo grades, employees and work records")
    init.set_defaults(func=cmd_init_db)

    payslip = sub.add_parser("payslip", help="Calculate one employee's payslip for a month")
    payslip.add_argument("employee", type=int)
    payslip.add_argument("year_month", help="Work month as YYYYMM")
    payslip.add_argument("--as-of", type=parse_date, help="Business date used for tenure")
    payslip.set_defaults(func=cmd_payslip)

    annual = sub.add_parser("annual-plan", help="Projected annual base salary")
    annual.add_argument("employee", type=int)
    annual.set_defaults(func=cmd_annual_plan)

    preview = sub.add_parser("preview", help="Aggregate payslips for several employees")
    preview.add_argument("year_month")
    preview.add_argument("employees", type=int, nargs="+")
    preview.add_argument("--as-of", type=parse_date)
    preview.set_defaults(func=cmd_preview)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(get_settings().log_level)
    try:
        args.func(args)
    except RecordNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except StoreUnavailableError as exc:
        print(f"error: salary store unavailable ({exc})", file=sys.stderr)
        return EXIT_UNAVAILABLE
    except SalaryCalculationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
