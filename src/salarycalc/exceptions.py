from __future__ import annotations

from typing import Any


class SalaryCalculationError(Exception):
    """Base class for every failure raised while calculating salaries."""


class StoreUnavailableError(SalaryCalculationError):
    """The backing store could not be reached or rejected the query."""


class RecordNotFoundError(SalaryCalculationError):
    def __init__(self, entity: str, key: Any):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}")


class InvalidYearMonthError(SalaryCalculationError, ValueError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Year-month must be YYYYMM with a month in 1..12, got {value!r}")
