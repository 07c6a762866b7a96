from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Union

from .._exceptions import UnknownCatalogueCodeError
from ..calendar.weeks import DayOfWeek


@dataclass(frozen=True)
class FixedCode:
    """The catalogue always reports ``suffix``, whatever the date."""

    suffix: str

    def __post_init__(self) -> None:
        if not self.suffix:
            raise ValueError("Fixed week-code suffix must not be empty.")


@dataclass(frozen=True)
class ComputedCode:
    add_weeks: int = 0
    shift_day: DayOfWeek | None = None
    allow_end_of_year: bool = False
    ignore_closing_days: bool = False
    use_month_number: bool = False

    def __post_init__(self) -> None:
        if self.add_weeks < 0:
            raise ValueError(f"add_weeks must be >= 0; got {self.add_weeks}.")


CatalogueCodeConfiguration = Union[FixedCode, ComputedCode]


@dataclass(frozen=True)
class UnknownCatalogueCode:
    """Result variant for a catalogue code the registry does not know."""

    code: str

    def error(self) -> UnknownCatalogueCodeError:
        return UnknownCatalogueCodeError(self.code)

    def __bool__(self) -> bool:
        return False


class CatalogueRegistry(Mapping[str, CatalogueCodeConfiguration]):
    """Read-only, case-insensitive catalogue code → configuration table."""

    def __init__(self, codes: Mapping[str, CatalogueCodeConfiguration]) -> None:
        table: dict[str, CatalogueCodeConfiguration] = {}
        for code, config in codes.items():
            key = code.strip().upper()
            if len(key) != 3 or not key.isalpha():
                raise ValueError(f"Catalogue codes are three letters; got {code!r}.")
            if key in table:
                raise ValueError(f"Duplicate catalogue code {key!r}.")
            table[key] = config
        self._codes = MappingProxyType(table)

    def __getitem__(self, code: str) -> CatalogueCodeConfiguration:
        return self._codes[code.strip().upper()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def lookup(self, code: str) -> CatalogueCodeConfiguration | UnknownCatalogueCode:
        try:
            return self[code]
        except KeyError:
            return UnknownCatalogueCode(code.strip().upper())

    def sorted(self) -> dict[str, CatalogueCodeConfiguration]:
        return {code: self._codes[code] for code in sorted(self._codes)}

    def __repr__(self) -> str:
        return f"CatalogueRegistry(codes={len(self._codes)})"


# ── registry contents ────────────────────────────────────────────────────────

_PUBLISHED = ComputedCode(allow_end_of_year=True, ignore_closing_days=True)
_BKM_FRIDAY = ComputedCode(add_weeks=2, shift_day=DayOfWeek.FRIDAY)
_NEXT_WEEK_FRIDAY = ComputedCode(add_weeks=1, shift_day=DayOfWeek.FRIDAY)
_PERIODICA = ComputedCode(add_weeks=3, shift_day=DayOfWeek.FRIDAY, allow_end_of_year=True)
_EMEDIA = ComputedCode(add_weeks=1, allow_end_of_year=True, ignore_closing_days=True)
_NEXT_WEEK = ComputedCode(add_weeks=1)
_MONTHLY = ComputedCode(shift_day=DayOfWeek.FRIDAY, use_month_number=True)

DEFAULT_REGISTRY = CatalogueRegistry({
    **dict.fromkeys(
        ["ACC", "ACE", "ACF", "ACK", "ACM", "ACN", "ACP", "ACT", "ARK", "BLG"], _PUBLISHED,
    ),
    **dict.fromkeys(["BKX", "UTI", "BKR"], _NEXT_WEEK_FRIDAY),
    **dict.fromkeys(["DPF", "FPF", "GPF"], _PERIODICA),
    **dict.fromkeys(["EMO", "EMS"], _EMEDIA),
    **dict.fromkeys(["DAN", "DAR"], _NEXT_WEEK),
    **dict.fromkeys(
        [
            "DBR", "DLR", "DBF", "DLF", "DBI", "FSB", "BKM", "DMO", "FSC", "IDU",
            "SNE", "LEK", "MMV", "FIV", "ERA", "ERE", "NLL", "NLY", "ERL", "GBF",
        ],
        _BKM_FRIDAY,
    ),
    **dict.fromkeys(["PLA", "PLN"], _MONTHLY),
    "DIS": FixedCode("197605"),
    "OPR": FixedCode("197601"),
    **dict.fromkeys(["DBT", "SDT", "FFK", "FSF"], FixedCode("999999")),
    "DIG": FixedCode("198507"),
    "HOB": FixedCode("197300"),
})
