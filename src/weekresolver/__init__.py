"""
weekresolver
~~~~~~~~~~~~

Holiday-aware week codes for catalogued library records.  A week code is a
catalogue code followed by the production year and week, e.g. ``BKM202311``.

Basic usage::

    from datetime import date
    import weekresolver

    weekresolver.resolve_week_code("DPF", date(2019, 10, 10)).week_code          # → 'DPF201944'
    weekresolver.resolve_current_week_code("BKM", date(2023, 3, 10)).week_code  # → 'BKM202311'
    rows = weekresolver.build_year_plan("BKM", 2023)                             # header + 52 rows

Unknown catalogue codes come back as an :class:`UnknownCatalogueCode` value
rather than an exception; call ``.error()`` on it to get one to raise.

Public API
----------
resolve_week_code          Forward week code for a new record.
resolve_current_week_code  Week code production is working on.
build_year_plan            Year plan as rows of strings.
resolve_day_plan           Forward week code per day over a date range.
check_week_code_fulfilled  Whether production has reached a week code.
list_codes                 Supported catalogue codes and their configuration.
WeekResolver               The underlying calculator.
WeekResolverError          Base exception for all week-resolution errors.
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache

from weekresolver._exceptions import (
    DateOutOfSupportedRange,
    UnknownCatalogueCodeError,
    WeekResolverError,
)
from weekresolver.codes import (
    DEFAULT_REGISTRY,
    CatalogueCodeConfiguration,
    ComputedCode,
    FixedCode,
    UnknownCatalogueCode,
)
from weekresolver.config import Settings, load_settings
from weekresolver.resolver import (
    WeekCodeFulfilledResult,
    WeekCodeResult,
    WeekDescription,
    WeekResolver,
    YearPlanResult,
)


@lru_cache(maxsize=1)
def _default_settings() -> Settings:
    return load_settings()


def _resolver(time_zone: str | None, locale: str | None) -> WeekResolver:
    return WeekResolver(_default_settings().replace(time_zone=time_zone, locale=locale))


def resolve_week_code(
    code: str,
    d: date | None = None,
    time_zone: str | None = None,
    locale: str | None = None,
) -> WeekCodeResult | UnknownCatalogueCode:
    return _resolver(time_zone, locale).get_week_code(code, d)


def resolve_current_week_code(
    code: str,
    d: date | None = None,
    time_zone: str | None = None,
    locale: str | None = None,
) -> WeekCodeResult | UnknownCatalogueCode:
    return _resolver(time_zone, locale).get_current_week_code(code, d)


def build_year_plan(
    code: str,
    year: int,
    include_header: bool = True,
    locale: str | None = None,
) -> list[tuple[str, ...]] | UnknownCatalogueCode:
    plan = _resolver(None, locale).get_year_plan(code, year)
    if isinstance(plan, UnknownCatalogueCode):
        return plan
    return plan.rows(include_header)


def resolve_day_plan(
    code: str,
    start: date,
    end: date,
    locale: str | None = None,
) -> dict[date, str] | UnknownCatalogueCode:
    return _resolver(None, locale).get_day_plan(code, start, end)


def check_week_code_fulfilled(
    week_code: str,
    d: date | None = None,
    time_zone: str | None = None,
    locale: str | None = None,
) -> WeekCodeFulfilledResult | UnknownCatalogueCode:
    return _resolver(time_zone, locale).is_week_code_fulfilled(week_code, d)


def list_codes() -> dict[str, CatalogueCodeConfiguration]:
    return DEFAULT_REGISTRY.sorted()


__all__ = [
    "CatalogueCodeConfiguration",
    "ComputedCode",
    "DateOutOfSupportedRange",
    "FixedCode",
    "Settings",
    "UnknownCatalogueCode",
    "UnknownCatalogueCodeError",
    "WeekCodeFulfilledResult",
    "WeekCodeResult",
    "WeekDescription",
    "WeekResolver",
    "WeekResolverError",
    "YearPlanResult",
    "build_year_plan",
    "check_week_code_fulfilled",
    "list_codes",
    "load_settings",
    "resolve_current_week_code",
    "resolve_day_plan",
    "resolve_week_code",
]
