"""Character statistics for a sentence."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Sequence

DEFAULT_SENTENCE = "This is a 101 SAMPLE to demonstrate string processing"
PROBE_INDEX = 12

_RULE = "-" * 54


@dataclass(frozen=True)
class SentenceStats:
    """Counts and positions gathered from a sentence."""

    length: int
    letters: int
    digits: int
    lowercase: int
    uppercase: int
    probe: str
    first: str
    last: str
    first_s: int
    second_s: int


def analyze(sentence: str) -> SentenceStats:
    """Gather counts of ASCII letters and digits and positions of the letter 's'.

    Raises IndexError if the sentence has no character at index 12.
    """
    if len(sentence) <= PROBE_INDEX:
        raise IndexError(f"sentence has no character at index {PROBE_INDEX}")
    ascii_chars = [char for char in sentence if char.isascii()]
    first_s = sentence.find("s")
    return SentenceStats(
        length=len(sentence),
        letters=sum(char.isalpha() for char in ascii_chars),
        digits=sum(char.isdigit() for char in ascii_chars),
        lowercase=sum(char.islower() for char in ascii_chars),
        uppercase=sum(char.isupper() for char in ascii_chars),
        probe=sentence[PROBE_INDEX],
        first=sentence[0],
        last=sentence[-1],
        first_s=first_s,
        second_s=sentence.find("s", first_s + 1),
    )


def format_stats(stats: SentenceStats) -> str:
    """Return the report of the statistics, one per line."""
    return (
        f"The size of the string: {stats.length}\n"
        f"The number of letters in the string: {stats.letters}\n"
        f"The number of digits in the string: {stats.digits}\n"
        f"The number of lower case letters in the string: {stats.lowercase}\n"
        f"The number of upper case letters in the string: {stats.uppercase}\n"
        f"The character that is at index {PROBE_INDEX} of the string: {stats.probe}\n"
        f"The first character of the string: {stats.first}\n"
        f"The last character of the string: {stats.last}\n"
        f"The index of the first 's' in the string: {stats.first_s}\n"
        f"The index of the second 's' in the string: {stats.second_s}\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print the statistics of a sentence."""
    parser = argparse.ArgumentParser(description="Sentence statistics.")
    parser.add_argument("sentence", nargs="?", default=DEFAULT_SENTENCE)
    args = parser.parse_args(argv)
    try:
        stats = analyze(args.sentence)
    except IndexError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(f"{_RULE}\n{args.sentence}\n{_RULE}\n")
    sys.stdout.write(format_stats(stats))
    return 0


if __name__ == "__main__":
    sys.exit(main())