"""Search and sort a list of student names."""

from __future__ import annotations

import argparse
import operator
import sys
from pathlib import Path
from typing import Iterable, Sequence

DEFAULT_FILE = "StudentNames.txt"
NUM_NAMES = 10

_RULE = "-" * 33


def read_names(path: str | Path, count: int = NUM_NAMES) -> list[str]:
    """Read ``count`` lines from ``path``; missing lines become empty names."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    with open(path, encoding="utf-8") as handle:
        names = [line.rstrip("\r\n") for _, line in zip(range(count), handle)]
    names.extend([""] * (count - len(names)))
    return names


def format_names(names: Iterable[str]) -> str:
    """Return the numbered list of names, one per line."""
    return "".join(
        f"\t{number}  {name}\n" for number, name in enumerate(names, start=1)
    )


def linear_search(names: Sequence[str], name: str) -> int | None:
    """Return the index of the first ``name`` in ``names``, or None."""
    return next((index for index, item in enumerate(names) if item == name), None)


def binary_search(names: Sequence[str], name: str) -> int | None:
    """Return an index of ``name`` in the ascending ``names``, or None."""
    first, last = 0, len(names) - 1
    while first <= last:
        middle = (first + last) // 2
        current = names[middle]
        if current == name:
            return middle
        if current > name:
            last = middle - 1
        else:
            first = middle + 1
    return None


def bubble_sort(names: Iterable[str], reverse: bool = False) -> list[str]:
    """Return the names sorted by repeated adjacent swaps."""
    items = list(names)
    out_of_order = operator.lt if reverse else operator.gt
    swapped = True
    while swapped:
        swapped = False
        for index in range(len(items) - 1):
            if out_of_order(items[index], items[index + 1]):
                items[index], items[index + 1] = items[index + 1], items[index]
                swapped = True
    return items


def selection_sort(names: Iterable[str], reverse: bool = False) -> list[str]:
    """Return the names sorted by repeatedly selecting the next extreme value."""
    items = list(names)
    pick = max if reverse else min
    for start in range(len(items) - 1):
        best = pick(range(start, len(items)), key=items.__getitem__)
        items[start], items[best] = items[best], items[start]
    return items


def format_search_result(position: int | None) -> str:
    """Return the report for a search result (a 0-based index or None)."""
    if position is None:
        return "-1\nName Not Found\n"
    return f"\nName Found: {position + 1}\n"


def _read_line() -> str:
    line = sys.stdin.readline()
    return line.rstrip("\r\n")


def _report(position: int | None) -> None:
    stream = sys.stderr if position is None else sys.stdout
    stream.write(format_search_result(position))


def _heading(title: str, leading: bool = True) -> str:
    prefix = "\n" if leading else ""
    return f"{prefix}{_RULE}\n{title}\n{_RULE}\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Show, search and sort the student names read from a file."""
    parser = argparse.ArgumentParser(description="Search and sort student names.")
    parser.add_argument("path", nargs="?", default=DEFAULT_FILE, help="names file")
    args = parser.parse_args(argv)
    out = sys.stdout

    try:
        names = read_names(args.path)
    except OSError:
        print("Error: Unable to open file", file=sys.stderr)
        names = [""] * NUM_NAMES

    out.write(_heading("\tStudent Names", leading=False))
    out.write(format_names(names))
    out.write(
        "\nFind a Students place in the list\n"
        "Enter Student name (e.g., last name, first name): \n"
    )
    name = _read_line()
    _report(linear_search(names, name))

    names = bubble_sort(names)
    out.write(_heading(" Student Names: Ascending Order"))
    out.write(format_names(names))
    _report(linear_search(names, name))

    names = bubble_sort(names, reverse=True)
    out.write(_heading(" Student Names: Descending Order"))
    out.write(format_names(names))
    _report(linear_search(names, name))

    names = selection_sort(names)
    out.write(_heading(" Student Names: Ascending Order"))
    out.write(format_names(names))
    out.write(
        "\nFind another Students place in the ascending list\n"
        "Enter Student name (e.g., last name, first name): \n"
    )
    name = _read_line()
    _report(binary_search(names, name))

    names = selection_sort(names, reverse=True)
    out.write(_heading(" Student Names: Descending Order"))
    out.write(format_names(names))
    _report(linear_search(names, name))
    return 0


if __name__ == "__main__":
    sys.exit(main())