from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .description import WeekDescription

YEAR_PLAN_HEADER: tuple[str, ...] = (
    "Katalogkode",
    "DBCKat ugekode start",
    "DBCKat ugekode slut",
    "DBCKat ugeafslutning",
    "Bogvogn",
    "Ugekorrekturen køres",
    "Ugekorrektur",
    "Slutredaktion (ugekorrektur)",
    "BKM-red.",
    "Udgivelsesdato",
    "Ugenummer",
)


@dataclass(frozen=True)
class YearPlanResult:
    """One week description per week of ``year``, in order."""

    year: int
    catalogue_code: str
    weeks: tuple[WeekDescription, ...]

    def __post_init__(self) -> None:
        if len(self.weeks) not in (52, 53):
            raise ValueError(
                f"A year plan has 52 or 53 weeks; got {len(self.weeks)} for {self.year}."
            )

    def __len__(self) -> int:
        return len(self.weeks)

    def __iter__(self) -> Iterator[WeekDescription]:
        return iter(self.weeks)

    def rows(self, include_header: bool = True) -> list[tuple[str, ...]]:
        rows = [week.to_row() for week in self.weeks]
        return [YEAR_PLAN_HEADER, *rows] if include_header else rows
