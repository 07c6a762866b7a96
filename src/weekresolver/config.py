"""
Runtime settings: the time zone that defines "today" and the locale that
selects the week-numbering strategy.

Values come from the process environment, falling back to a ``.env`` file
and then to the Danish defaults::

    WEEKRESOLVER_TIME_ZONE=Europe/Copenhagen
    WEEKRESOLVER_LOCALE=da_DK
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import dotenv_values, find_dotenv

from .calendar.weeks import WeekFields, week_fields_for_locale

logger = logging.getLogger(__name__)

DEFAULT_TIME_ZONE = "Europe/Copenhagen"
DEFAULT_LOCALE = "da_DK"

TIME_ZONE_VAR = "WEEKRESOLVER_TIME_ZONE"
LOCALE_VAR = "WEEKRESOLVER_LOCALE"


def zone_for(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown time zone {name!r}.") from exc


@dataclass(frozen=True)
class Settings:
    time_zone: str = DEFAULT_TIME_ZONE
    locale: str = DEFAULT_LOCALE

    def __post_init__(self) -> None:
        zone_for(self.time_zone)
        week_fields_for_locale(self.locale)

    @property
    def zone(self) -> ZoneInfo:
        return zone_for(self.time_zone)

    @property
    def week_fields(self) -> WeekFields:
        return week_fields_for_locale(self.locale)

    def today(self) -> date:
        return datetime.now(self.zone).date()

    def replace(self, time_zone: str | None = None, locale: str | None = None) -> Settings:
        return Settings(
            time_zone=time_zone or self.time_zone,
            locale=locale or self.locale,
        )


def load_settings(env_file: str | os.PathLike | None = None) -> Settings:
    """
    Build :class:`Settings` from the environment.  Variables already set in
    the process environment take precedence over the ``.env`` file.
    """
    path = Path(env_file) if env_file is not None else find_dotenv(usecwd=True)
    values = {k: v for k, v in dotenv_values(path).items() if v} if path else {}
    if path:
        logger.debug("Read %d setting(s) from %s", len(values), path)

    def pick(name: str, default: str) -> str:
        return os.environ.get(name) or values.get(name) or default

    settings = Settings(
        time_zone=pick(TIME_ZONE_VAR, DEFAULT_TIME_ZONE),
        locale=pick(LOCALE_VAR, DEFAULT_LOCALE),
    )
    logger.info("Using time zone %s and locale %s", settings.time_zone, settings.locale)
    return settings
