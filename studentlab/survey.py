"""Survey of how many cricket matches students played in a year."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, TextIO

MAX_STUDENTS = 5000
_NAME_WIDTH = 30
_RULE = "-" * 49


@dataclass
class StudentRecord:
    """A student's name and the number of matches they played."""

    name: str
    matches: int


def format_record(number: int, record: StudentRecord) -> str:
    """Return the numbered, dot-padded line for ``record``, without a newline."""
    return f"{number}  {record.name.ljust(_NAME_WIDTH, '.')} Matches: {record.matches}"


def format_records(records: Iterable[StudentRecord]) -> str:
    """Return one numbered line per record."""
    return "".join(
        format_record(number, record) + "\n"
        for number, record in enumerate(records, start=1)
    )


def most_matches(records: Sequence[StudentRecord]) -> tuple[int, StudentRecord]:
    """Return ``(number, record)`` of the first student with the most matches."""
    if not records:
        raise ValueError("no student records")
    index = max(range(len(records)), key=lambda position: records[position].matches)
    return index + 1, records[index]


def mean_matches(records: Sequence[StudentRecord]) -> float:
    """Return the average number of matches played."""
    if not records:
        raise ValueError("no student records")
    return sum(record.matches for record in records) / len(records)


def sort_by_name(records: Iterable[StudentRecord]) -> list[StudentRecord]:
    """Return the records in ascending name order, by selection sort."""
    items = list(records)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=lambda position: items[position].name)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def _stdin_reader() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\r\n")


def _ask_int(
    reader: Callable[[], str],
    out: TextIO,
    prompt: str,
    accept: Callable[[int], bool],
) -> int:
    while True:
        out.write(prompt)
        text = reader()
        try:
            value = int(text.strip())
        except ValueError:
            value = None
        if value is not None and accept(value):
            return value
        sys.stderr.write("\nError: Invalid Entry\n")


def _input_records(reader: Callable[[], str], out: TextIO, count: int) -> list[StudentRecord]:
    records = []
    for number in range(1, count + 1):
        out.write(f"\nEnter name of student {number}: ")
        name = reader()
        matches = _ask_int(
            reader, out, f"Enter number of matches for {name}: ", lambda value: value >= 0
        )
        records.append(StudentRecord(name=name, matches=matches))
    return records


def main(argv: Sequence[str] | None = None) -> int:
    """Collect survey entries and report the listing, leader, average and sorted list."""
    parser = argparse.ArgumentParser(description="Cricket matches survey.")
    parser.parse_args(argv)
    out = sys.stdout
    reader = _stdin_reader

    out.write(f"{_RULE}\n Cricket Matches College Students Play in a Year\n{_RULE}\n")
    try:
        count = _ask_int(
            reader,
            out,
            f"How many students were surveyed? (1-{MAX_STUDENTS}): ",
            lambda value: 0 < value <= MAX_STUDENTS,
        )
        records = _input_records(reader, out, count)
    except EOFError:
        return 0

    out.write(f"\n{_RULE}\n\tStudent Names & Matches Played\n{_RULE}\n")
    out.write(format_records(records))

    out.write(f"\n{_RULE}\n\tStudent Who Played Most Matches\n{_RULE}\n")
    number, leader = most_matches(records)
    out.write(format_record(number, leader) + "\n")

    out.write(f"\n{_RULE}\n\tAverage Matches Played for Students\n{_RULE}\n")
    out.write(f"Average: {mean_matches(records):g}\n")

    out.write(f"\n{_RULE}\nStudent Names & Matches Played ~ Ascending Order\n{_RULE}\n")
    out.write(format_records(sort_by_name(records)))
    return 0


if __name__ == "__main__":
    sys.exit(main())