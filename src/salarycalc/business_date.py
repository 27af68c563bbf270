from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


class BusinessDateProvider:
    """Supplies the date salary durations are measured against."""

    def now(self) -> datetime:
        raise NotImplementedError

    def today(self) -> date:
        return self.now().date()


class SystemBusinessDate(BusinessDateProvider):
    def now(self) -> datetime:
        return datetime.now()


@dataclass(frozen=True)
class FixedBusinessDate(BusinessDateProvider):
    value: datetime

    @classmethod
    def of(cls, value: date) -> "FixedBusinessDate":
        if isinstance(value, datetime):
            return cls(value)
        return cls(datetime(value.year, value.month, value.day))

    def now(self) -> datetime:
        return self.value
