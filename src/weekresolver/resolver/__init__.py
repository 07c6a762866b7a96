"""
weekresolver.resolver
~~~~~~~~~~~~~~~~~~~~~

Week-code calculation and the production schedule derived from it.

Public API
----------
WeekResolver              Forward and current week codes, year and day plans.
adjust_shift_day          Effective cut-over weekday of a week.
WeekCodeResult            A resolved week code with its week description.
WeekDescription           Production schedule of one week.
YearPlanResult            One WeekDescription per week of a year.
WeekCodeFulfilledResult   Whether production has reached a week code.
"""

from __future__ import annotations

from weekresolver.resolver.description import WeekDescription, build_week_description
from weekresolver.resolver.resolver import WeekResolver
from weekresolver.resolver.results import WeekCodeFulfilledResult, WeekCodeResult
from weekresolver.resolver.shiftday import adjust_shift_day
from weekresolver.resolver.yearplan import YEAR_PLAN_HEADER, YearPlanResult

__all__ = [
    "WeekCodeFulfilledResult",
    "WeekCodeResult",
    "WeekDescription",
    "WeekResolver",
    "YEAR_PLAN_HEADER",
    "YearPlanResult",
    "adjust_shift_day",
    "build_week_description",
]
