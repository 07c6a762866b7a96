from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .description import WeekDescription


@dataclass(frozen=True)
class WeekCodeResult:
    """
    A resolved week code.

    ``week_number`` and ``year`` are 0 for catalogue codes with a fixed
    suffix; ``resolved_date`` is then the requested date.
    """

    catalogue_code: str
    week_code: str
    week_number: int
    year: int
    resolved_date: date
    description: WeekDescription
    time_zone: str
    locale: str

    @property
    def week_code_short(self) -> str:
        return self.week_code[len(self.catalogue_code):]


@dataclass(frozen=True)
class WeekCodeFulfilledResult:
    requested_week_code: str
    current_week_code_result: WeekCodeResult
    is_fulfilled: bool
