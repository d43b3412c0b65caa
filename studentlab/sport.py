"""Sports with a scheduled game and a list of teams."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, TextIO

from studentlab.date import Date, input_date

_LABEL_WIDTH = 30
_TEAM_PAD_WIDTH = 24


@dataclass
class Sport:
    """A sport, the date of its next game and the teams that play it."""

    name: str = ""
    next_game: Date = field(default_factory=Date)
    teams: list[str] = field(default_factory=list)

    def add_team(self, team: str) -> None:
        """Add a team to the end of the team list."""
        self.teams.append(team)

    def format(self) -> str:
        """Return the dotted-leader description of the sport."""
        lines = [
            f"\t\t{'Sport Name '.ljust(_LABEL_WIDTH, '.')} {self.name}",
            f"\t\t{'Scheduled Date (M/D/YY) '.ljust(_LABEL_WIDTH, '.')} {self.next_game}",
            "",
            f"\t\t{'Number of Teams '.ljust(_LABEL_WIDTH, '.')} {len(self.teams)}",
        ]
        leader = " ".ljust(_TEAM_PAD_WIDTH, ".")
        lines.extend(
            f"\t\tTeam {number}{leader} {team}"
            for number, team in enumerate(self.teams, start=1)
        )
        return "\n".join(lines) + "\n"


def _ask_team_count(reader: Callable[[], str], out: TextIO) -> int:
    out.write("\nEnter the number of teams: ")
    while True:
        text = reader()
        try:
            count = int(text.strip())
        except ValueError:
            pass
        else:
            if count >= 0:
                return count
        out.write("\nInvalid\n\n")
        out.write("Enter the number of teams: ")


def populate_sport(reader: Callable[[], str], out: TextIO) -> Sport:
    """Prompt for a sport's name, next game and teams and return the sport."""
    out.write("\nEnter the name of the sport: ")
    sport = Sport(name=reader())

    out.write("Sport has a scheduled game? (Y/N)\n")
    if reader().strip()[:1].upper() == "Y":
        out.write("\nNext Scheduled Game")
        sport.next_game = input_date(reader, out)
    else:
        out.write("\nDefault date will be set to January 1, 2000\n")

    count = _ask_team_count(reader, out)
    for number in range(1, count + 1):
        out.write(f"Enter the name of team {number}: ")
        sport.add_team(reader())
    return sport