from __future__ import annotations


class WeekResolverError(Exception):
    """Base exception for all week-resolution errors."""


class DateOutOfSupportedRange(WeekResolverError, LookupError):
    """No Easter Sunday is known for the requested year."""

    def __init__(self, year: int, first: int, last: int) -> None:
        self.year = year
        super().__init__(
            f"No Easter Sunday known for {year}; supported years are {first} to {last}."
        )


class UnknownCatalogueCodeError(WeekResolverError, KeyError):
    """Raised by callers that prefer an exception over the result variant."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Catalogue code {code!r} is not supported.")

    def __str__(self) -> str:
        return str(self.args[0])
