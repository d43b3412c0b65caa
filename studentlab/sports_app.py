"""Interactive menu for entering, listing and comparing sports."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, Sequence, TextIO

from studentlab.sport import Sport, populate_sport

Reader = Callable[[], str]

_RULE = "-" * 69
_BANNER = "=" * 69
_MENU = (
    f"\n{_RULE}\n"
    "a) Display all Sports\n"
    "b) Add a team to an existing Sport\n"
    "c) Display a particular Sport\n"
    "d) Display the Sport that has the highest number of teams playing\n"
    "e) Exit\n"
    "Enter Your Choice: "
)
_CHOICES = frozenset("abcde")


def find_sport(sports: Iterable[Sport], name: str) -> Sport | None:
    """Return the first sport called ``name``, or None if there is none."""
    return next((sport for sport in sports if sport.name == name), None)


def _numbered_matches(sports: Sequence[Sport], name: str) -> list[tuple[int, Sport]]:
    return [
        (number, sport)
        for number, sport in enumerate(sports, start=1)
        if sport.name == name
    ]


def sports_with_most_teams(sports: Sequence[Sport]) -> list[tuple[int, Sport]]:
    """Return ``(number, sport)`` pairs for every sport with the most teams.

    Numbers count from 1 in list order; an empty list gives an empty result.
    """
    if not sports:
        return []
    most = max(len(sport.teams) for sport in sports)
    return [
        (number, sport)
        for number, sport in enumerate(sports, start=1)
        if len(sport.teams) == most
    ]


def format_sport_listing(number: int, sport: Sport) -> str:
    """Return the numbered heading followed by the sport's description."""
    return f"\n\tSport {number}\n" + sport.format()


def _read_choice(reader: Reader, out: TextIO) -> str:
    out.write(_MENU)
    while True:
        text = reader().strip()
        if not text:
            continue
        choice = text[0].lower()
        if choice in _CHOICES:
            return choice
        out.write("\n\tError: Invalid Entry\nEnter Your Choice: ")


def _back_to_menu(reader: Reader, out: TextIO) -> bool:
    out.write("\n\tInvalid Name\n")
    out.write("\nBack to menu? (Y/N)\n")
    return reader().strip()[:1].lower() == "y"


def _add_team(sports: Sequence[Sport], reader: Reader, out: TextIO) -> None:
    while True:
        out.write("\nEnter Sport Name to add Team: ")
        name = reader()
        matches = _numbered_matches(sports, name)
        if matches:
            out.write("\nEnter Team Name: ")
            team = reader()
            for _, sport in matches:
                sport.add_team(team)
            return
        if _back_to_menu(reader, out):
            return


def _display_sport(sports: Sequence[Sport], reader: Reader, out: TextIO) -> None:
    while True:
        out.write("\nEnter Sport Name to Display: ")
        name = reader()
        matches = _numbered_matches(sports, name)
        if matches:
            for number, sport in matches:
                out.write(format_sport_listing(number, sport))
            return
        if _back_to_menu(reader, out):
            return


def _display_all(sports: Sequence[Sport], out: TextIO) -> None:
    out.write(f"\n{_RULE}\n")
    for number, sport in enumerate(sports, start=1):
        out.write(format_sport_listing(number, sport))


def run_menu(sports: Sequence[Sport], reader: Reader, out: TextIO) -> None:
    """Run the menu until the user chooses to exit or input runs out."""
    try:
        while True:
            choice = _read_choice(reader, out)
            if choice == "a":
                _display_all(sports, out)
            elif choice == "b":
                _add_team(sports, reader, out)
            elif choice == "c":
                _display_sport(sports, reader, out)
            elif choice == "d":
                for number, sport in sports_with_most_teams(sports):
                    out.write(format_sport_listing(number, sport))
            else:
                return
    except EOFError:
        return


def _stdin_reader() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\n")


def _ask_count(reader: Reader, out: TextIO) -> int:
    out.write("\nHow many Sports need to be processed: ")
    while True:
        text = reader()
        try:
            count = int(text.strip())
        except ValueError:
            pass
        else:
            if count >= 0:
                return count
        out.write("\n\tError: Invalid Entry\n")
        out.write("How many Sports need to be processed: ")


def main(argv: Sequence[str] | None = None) -> int:
    """Enter a number of sports and then work with them through the menu."""
    parser = argparse.ArgumentParser(description="Sport information system.")
    parser.parse_args(argv)
    out = sys.stdout
    reader = _stdin_reader

    out.write(f"{_BANNER}\n{'Sport Information':>43}\n{_BANNER}\n")
    try:
        count = _ask_count(reader, out)
        sports = [populate_sport(reader, out) for _ in range(count)]
    except EOFError:
        return 0
    run_menu(sports, reader, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())