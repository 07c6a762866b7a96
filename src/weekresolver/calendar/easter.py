from __future__ import annotations

from datetime import date, timedelta
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from .._exceptions import DateOutOfSupportedRange
from .weeks import sunday_of

# Easter Sunday falls between 22 March and 25 April, Whitsunday seven weeks later.
_EASTER_MONTHS = (3, 4)
_PENTECOST_MONTHS = (5, 6)


class EasterSundayTable(Mapping[int, date]):
    """
    Read-only year → Easter Sunday lookup over a contiguous range of years.

    ``get(year)`` returns ``None`` for an unknown year; ``easter_sunday(year)``
    raises :class:`DateOutOfSupportedRange` instead.
    """

    def __init__(self, sundays: Iterable[date]) -> None:
        table: dict[int, date] = {}
        for sunday in sundays:
            if sunday.isoweekday() != 7:
                raise ValueError(f"Easter Sunday {sunday} is not a Sunday.")
            if sunday.year in table:
                raise ValueError(f"Duplicate Easter Sunday for {sunday.year}.")
            table[sunday.year] = sunday
        if not table:
            raise ValueError("Easter Sunday table must not be empty.")

        self._first: int = min(table)
        self._last: int = max(table)
        missing = set(range(self._first, self._last + 1)) - table.keys()
        if missing:
            raise ValueError(f"Easter Sunday table has gaps: {sorted(missing)}.")
        self._table = MappingProxyType(table)

    def __getitem__(self, year: int) -> date:
        return self._table[year]

    def __iter__(self) -> Iterator[int]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def easter_sunday(self, year: int) -> date:
        try:
            return self._table[year]
        except KeyError:
            raise DateOutOfSupportedRange(year, self._first, self._last) from None

    def is_easter_week(self, d: date) -> bool:
        """
        True when the Sunday of d's week is Easter Sunday.

        Sundays outside March and April never consult the table.
        """
        sunday = sunday_of(d)
        if sunday.month not in _EASTER_MONTHS:
            return False
        return sunday == self.easter_sunday(sunday.year)

    def is_pentecost_week(self, d: date) -> bool:
        sunday = sunday_of(d)
        if sunday.month not in _PENTECOST_MONTHS:
            return False
        return sunday == self.easter_sunday(sunday.year) + timedelta(weeks=7)

    @property
    def first_year(self) -> int:
        return self._first

    @property
    def last_year(self) -> int:
        return self._last

    def __repr__(self) -> str:
        return f"EasterSundayTable(years={self._first}..{self._last})"


EASTER_SUNDAYS = EasterSundayTable([
    date(2016, 3, 27), date(2017, 4, 16), date(2018, 4, 1),  date(2019, 4, 21),
    date(2020, 4, 12), date(2021, 4, 4),  date(2022, 4, 17), date(2023, 4, 9),
    date(2024, 3, 31), date(2025, 4, 20), date(2026, 4, 5),  date(2027, 3, 28),
    date(2028, 4, 16), date(2029, 4, 1),  date(2030, 4, 21), date(2031, 4, 13),
    date(2032, 3, 28), date(2033, 4, 17), date(2034, 4, 9),  date(2035, 3, 25),
    date(2036, 4, 13), date(2037, 4, 5),  date(2038, 4, 25), date(2039, 4, 10),
    date(2040, 4, 1),
])
