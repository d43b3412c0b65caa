"""Tester records kept in a fixed-size binary file, and the test that updates them."""

from __future__ import annotations

import argparse
import random
import struct
import sys
from pathlib import Path
from typing import Callable, Sequence, TextIO

from studentlab.translation import (
    NAME_SIZE,
    TestDate,
    Tester,
    Translation,
    format_testers,
    format_translations,
    read_testers,
    read_translations,
    take_test,
)

NUM_TESTS = 3
NUM_QUESTIONS = 10
DEFAULT_TRANSLATIONS = "Translation.txt"
DEFAULT_TEXT_TESTERS = "Testers.txt"
DEFAULT_BINARY_TESTERS = "Testers.dat"

# name[20], padding to align the score, score, month, day, year, trailing padding
_RECORD = struct.Struct(f"<{NAME_SIZE}s4xd3i4x")
_COUNT = struct.Struct("<i")
RECORD_SIZE = _RECORD.size
HEADER_SIZE = _COUNT.size

_WIDE_RULE = "-" * 51
_WIDE_BANNER = "=" * 51
_RULE = "-" * 33
_BANNER = "=" * 33

Reader = Callable[[], str]


def pack_tester(tester: Tester) -> bytes:
    """Return the fixed-size binary record for ``tester``."""
    name = tester.name.encode("utf-8")[: NAME_SIZE - 1]
    date = tester.test_taken
    return _RECORD.pack(name, tester.score, date.month, date.day, date.year)


def unpack_tester(data: bytes) -> Tester:
    """Decode one binary record into a tester."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
    raw_name, score, month, day, year = _RECORD.unpack(data)
    name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="ignore")
    return Tester(name=name, score=score, test_taken=TestDate(month, day, year))


def write_binary(path: str | Path, testers: Sequence[Tester]) -> None:
    """Write the tester count followed by one record per tester."""
    with open(path, "wb") as handle:
        handle.write(_COUNT.pack(len(testers)))
        for tester in testers:
            handle.write(pack_tester(tester))


def _read_count(data: bytes, path: str | Path) -> int:
    if len(data) < HEADER_SIZE:
        raise ValueError(f"{path}: missing tester count")
    (count,) = _COUNT.unpack_from(data)
    if count < 0:
        raise ValueError(f"{path}: negative tester count {count}")
    return count


def read_binary(path: str | Path) -> list[Tester]:
    """Read every tester record from the binary file at ``path``."""
    data = Path(path).read_bytes()
    count = _read_count(data, path)
    end = HEADER_SIZE + count * RECORD_SIZE
    if len(data) < end:
        raise ValueError(f"{path}: expected {count} records, file is too short")
    return [
        unpack_tester(data[offset : offset + RECORD_SIZE])
        for offset in range(HEADER_SIZE, end, RECORD_SIZE)
    ]


def _record_offset(handle, path: str | Path, index: int) -> int:
    count = _read_count(handle.read(HEADER_SIZE), path)
    if not 0 <= index < count:
        raise IndexError(f"record {index} out of range for {count} testers")
    return HEADER_SIZE + index * RECORD_SIZE


def _read_record(path: str | Path, index: int) -> Tester:
    with open(path, "rb") as handle:
        handle.seek(_record_offset(handle, path, index))
        data = handle.read(RECORD_SIZE)
    return unpack_tester(data)


def update_record(path: str | Path, index: int, tester: Tester) -> None:
    """Overwrite the record at 0-based ``index`` in place."""
    with open(path, "r+b") as handle:
        handle.seek(_record_offset(handle, path, index))
        handle.write(pack_tester(tester))


def convert(text_path: str | Path, binary_path: str | Path) -> int:
    """Copy the testers from a text file into a binary file and return their number."""
    testers = read_testers(text_path)
    write_binary(binary_path, testers)
    return len(testers)


def convert_main(argv: Sequence[str] | None = None) -> int:
    """Convert the text tester file into the binary tester file."""
    parser = argparse.ArgumentParser(description="Convert tester records to binary.")
    parser.add_argument("text", nargs="?", default=DEFAULT_TEXT_TESTERS, help="text file")
    parser.add_argument(
        "binary", nargs="?", default=DEFAULT_BINARY_TESTERS, help="binary file"
    )
    args = parser.parse_args(argv)
    try:
        convert(args.text, args.binary)
    except OSError:
        print("Error: Unable to open file", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _stdin_reader() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\r\n")


def _ask_int(reader: Reader, out: TextIO, prompt: str) -> int:
    out.write(prompt)
    while True:
        text = reader()
        try:
            return int(text.strip())
        except ValueError:
            out.write("\nInvalid entry\n")
            out.write(prompt)


def _run_tests(
    translations: Sequence[Translation],
    path: str | Path,
    count: int,
    reader: Reader,
    out: TextIO,
    rng: random.Random,
) -> None:
    out.write(f"\n{_RULE}\n      Enter Today's Date\n{_RULE}\n")
    month = _ask_int(reader, out, "Enter month: ")
    day = _ask_int(reader, out, "Enter day: ")
    year = _ask_int(reader, out, "Enter year: ")
    out.write(
        f"\n\n{_RULE}\n            Questions\n{_RULE}\n"
        "    Ten American words will be\n"
        " randomly selected from the list.\n"
        "  Enter the English translation.\n"
    )
    for _ in range(NUM_TESTS):
        index = rng.randrange(count)
        tester = _read_record(path, index)
        tester.test_taken = TestDate(month, day, year)
        out.write(
            f"\n{_BANNER}\n"
            + "#".ljust(3)
            + "NAME".ljust(20)
            + "TEST TAKEN\n"
            + f"{_RULE}\n"
            + str(index + 1).ljust(3)
            + tester.name.ljust(20)
            + f"{tester.test_taken}\n"
        )
        tester.score = take_test(translations, NUM_QUESTIONS, reader, out, rng)
        update_record(path, index, tester)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the translation test for three random testers, updating the binary file."""
    parser = argparse.ArgumentParser(description="Translation test with binary records.")
    parser.add_argument("--translations", default=DEFAULT_TRANSLATIONS, help="translation file")
    parser.add_argument("--testers", default=DEFAULT_BINARY_TESTERS, help="binary tester file")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    out = sys.stdout
    reader = _stdin_reader
    rng = random.Random(args.seed)

    try:
        translations = read_translations(args.translations)
        testers = read_binary(args.testers)
    except OSError:
        print("Error: Unable to open file", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if not translations or not testers:
        print("Error: no translations or testers to work with", file=sys.stderr)
        return 1

    out.write(format_testers(testers))
    out.write(
        f"\n{_WIDE_RULE}\n\tAmerican to English Translation Test\n{_WIDE_RULE}\n"
        "   Three people from this list will be randomly\n"
        "            selected to take the test \n\n"
        "Would you like to study before the test? (Y/N)\n"
    )
    try:
        if reader().strip()[:1].upper() == "Y":
            out.write(format_translations(translations))
            out.write("\nPress enter to continue...\n")
            reader()
            out.write("Good Luck!\n")
        else:
            out.write("\nGood Luck!\n")
        _run_tests(translations, args.testers, len(testers), reader, out, rng)
    except EOFError:
        return 0

    out.write(f"{_WIDE_BANNER}\n\t\tUpdated Information\n{_WIDE_BANNER}")
    out.write(format_testers(read_binary(args.testers)))
    return 0


if __name__ == "__main__":
    sys.exit(main())