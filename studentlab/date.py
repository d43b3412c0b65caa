"""Calendar dates for scheduled games, with interactive entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TextIO

MIN_YEAR = 2022
MAX_YEAR = 2100

_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_SHORT_MONTHS = frozenset({4, 6, 9, 11})

Reader = Callable[[], str]


@dataclass
class Date:
    """A month/day/year date; defaults to January 1, 2000."""

    day: int = 1
    month: int = 1
    year: int = 2000

    def __str__(self) -> str:
        return f"{self.month}/{self.day}/{self.year}"


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in ``month``; every fourth year is a leap year."""
    if month in _LONG_MONTHS:
        return 31
    if month in _SHORT_MONTHS:
        return 30
    if month == 2:
        return 29 if year % 4 == 0 else 28
    raise ValueError(f"month must be between 1 and 12, got {month}")


def _ask_int(
    reader: Reader,
    out: TextIO,
    prompt: str,
    retry_prompt: str,
    accept: Callable[[int], bool],
) -> int:
    out.write(prompt)
    while True:
        text = reader()
        try:
            value = int(text.strip())
        except ValueError:
            pass
        else:
            if accept(value):
                return value
        out.write("\nInvalid\n\n")
        out.write(retry_prompt)


def input_date(reader: Reader, out: TextIO) -> Date:
    """Prompt for a year, month and day until each is valid and return the date."""
    year = _ask_int(
        reader,
        out,
        "\nEnter Year: ",
        "Enter Year(2022- ): ",
        lambda value: MIN_YEAR <= value <= MAX_YEAR,
    )
    month = _ask_int(
        reader,
        out,
        "Enter Month: ",
        "Enter Month(1-12): ",
        lambda value: 1 <= value <= 12,
    )
    limit = days_in_month(month, year)
    day = _ask_int(
        reader,
        out,
        "Enter Day: ",
        f"Enter Day(1-{limit}): ",
        lambda value: 1 <= value <= limit,
    )
    return Date(day=day, month=month, year=year)