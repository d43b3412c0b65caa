"""Employee records kept in a text file, with a command to list and add them."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Sequence, TextIO

DEFAULT_FILE = "Employees.txt"


@dataclass
class EmploymentDate:
    """The date an employee was hired."""

    month: int
    day: int
    year: int

    def __str__(self) -> str:
        return f"{self.month}/{self.day}/{self.year}"


@dataclass
class Employee:
    """An employee's name, age and date of employment."""

    name: str
    age: int
    date: EmploymentDate


def parse_employee(line: str) -> Employee:
    """Parse a ``name,age,month/day/year`` line."""
    parts = line.strip().split(",")
    if len(parts) != 3:
        raise ValueError(f"expected 'name,age,month/day/year', got {line!r}")
    name, age_text, date_text = parts
    date_parts = date_text.split("/")
    if len(date_parts) != 3:
        raise ValueError(f"expected a month/day/year date, got {date_text!r}")
    month, day, year = (int(part) for part in date_parts)
    return Employee(name=name, age=int(age_text), date=EmploymentDate(month, day, year))


def format_employee_line(employee: Employee) -> str:
    """Return the file line for ``employee``, without a newline."""
    return f"{employee.name},{employee.age},{employee.date}"


def read_employees(path: str | Path) -> list[Employee]:
    """Read the employee count and that many employee lines from ``path``."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    if not lines:
        raise ValueError(f"{path}: missing employee count")
    count = int(lines[0].strip())
    records = lines[1 : 1 + count]
    if len(records) < count:
        raise ValueError(f"{path}: expected {count} employees, found {len(records)}")
    return [parse_employee(line) for line in records]


def write_employees(path: str | Path, employees: Sequence[Employee]) -> None:
    """Write the employee count followed by one line per employee."""
    lines = [str(len(employees))]
    lines.extend(format_employee_line(employee) for employee in employees)
    Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")


def format_employees(employees: Iterable[Employee]) -> str:
    """Return the employee table with its header."""
    parts = [
        "\nName".ljust(30) + "Age".ljust(20) + "Date Employed\n",
        "-" * 63 + "\n",
    ]
    for employee in employees:
        date = employee.date
        parts.append(
            employee.name.ljust(30)
            + str(employee.age).ljust(23)
            + f"{date.month:>2}/{date.day:>2}/{date.year:>4}\n"
        )
    return "".join(parts)


def _stdin_reader() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\n")


def _ask_int(reader: Callable[[], str], out: TextIO, prompt: str, minimum: int = 0) -> int:
    out.write(prompt)
    while True:
        text = reader()
        try:
            value = int(text.strip())
        except ValueError:
            pass
        else:
            if value >= minimum:
                return value
        out.write("\nInvalid entry\n")
        out.write(prompt)


def _input_employees(reader: Callable[[], str], out: TextIO) -> list[Employee]:
    count = _ask_int(reader, out, "\nHow many?\n")
    added = []
    for _ in range(count):
        out.write("\nName: ")
        name = reader()
        age = _ask_int(reader, out, "Age: ")
        out.write("\nDate Employed\n")
        month = _ask_int(reader, out, "Month: ")
        day = _ask_int(reader, out, "Day: ")
        year = _ask_int(reader, out, "Year: ")
        added.append(Employee(name=name, age=age, date=EmploymentDate(month, day, year)))
    return added


def main(argv: Sequence[str] | None = None) -> int:
    """List the employees in the file and add new ones on request."""
    parser = argparse.ArgumentParser(description="List and add employees.")
    parser.add_argument("path", nargs="?", default=DEFAULT_FILE, help="employee file")
    args = parser.parse_args(argv)
    path = Path(args.path)
    out = sys.stdout

    try:
        while True:
            try:
                employees = read_employees(path)
            except OSError:
                print("Error: Unable to open file", file=sys.stderr)
                return 1
            except ValueError as exc:
                print(f"Error: {exc}", file=sys.stderr)
                return 1

            out.write(format_employees(employees))
            out.write("\nAny additional employees need to be added? (Y/N)\n")
            if _stdin_reader().strip()[:1].upper() != "Y":
                return 0

            employees.extend(_input_employees(_stdin_reader, out))
            write_employees(path, employees)
            out.write(format_employees(employees))
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())