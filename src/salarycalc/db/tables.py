from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String

from salarycalc.db.session import Base


class RoleRow(Base):
    __tablename__ = "role"

    rank = Column(String(10), primary_key=True)
    name = Column(String(100), nullable=True)
    amount = Column(Integer, nullable=False)


class CapabilityRow(Base):
    __tablename__ = "capability"

    rank = Column(String(10), primary_key=True)
    name = Column(String(100), nullable=True)
    amount = Column(Integer, nullable=False)


class EmployeeRow(Base):
    __tablename__ = "employee"

    no = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False)
    join_date = Column(Date, nullable=False)
    role_rank = Column(String(10), ForeignKey("role.rank"), nullable=False)
    capability_rank = Column(String(10), ForeignKey("capability.rank"), nullable=False)

    # fixed monthly deductions
    health_insurance_amount = Column(Integer, nullable=False, default=0)
    employee_pension_amount = Column(Integer, nullable=False, default=0)
    income_tax_amount = Column(Integer, nullable=False, default=0)
    inhabitant_tax_amount = Column(Integer, nullable=False, default=0)

    commute_amount = Column(Integer, nullable=False, default=0)
    rent_amount = Column(Integer, nullable=False, default=0)
    work_overtime_1h_amount = Column(Integer, nullable=False, default=0)


class WorkRow(Base):
    __tablename__ = "work"

    employee_no = Column(Integer, ForeignKey("employee.no"), primary_key=True)
    year_month = Column(Integer, primary_key=True)  # YYYYMM
    work_overtime = Column(Numeric(5, 2), nullable=False, default=0)
    late_night_overtime = Column(Numeric(5, 2), nullable=False, default=0)
    holiday_work_time = Column(Numeric(5, 2), nullable=False, default=0)
    holiday_late_night_overtime = Column(Numeric(5, 2), nullable=False, default=0)
