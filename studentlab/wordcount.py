"""Count the words in a line that ends with a period."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

NUM_LINES = 3
MAX_LENGTH = 49


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def count_words(text: str) -> int:
    """Count runs of ASCII letters that end at a non-letter, up to the first period.

    A run of letters at the very end of ``text`` with nothing after it is not counted.
    """
    total = 0
    in_word = False
    for char in text:
        if _is_letter(char):
            in_word = True
        elif in_word:
            total += 1
            in_word = False
        if char == ".":
            break
    return total


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\r\n")[:MAX_LENGTH]


def main(argv: Sequence[str] | None = None) -> int:
    """Read three period-terminated lines and print the word count of each."""
    parser = argparse.ArgumentParser(description="Count words in sentences.")
    parser.parse_args(argv)
    prompt = "\nEnter a line of words (less than 50 characters), ended by '.': \n"
    try:
        for _ in range(NUM_LINES):
            sys.stdout.write(prompt)
            line = _read_line()
            while not line.endswith("."):
                sys.stderr.write("ERROR: Input must end with a period '.'\n")
                sys.stdout.write(prompt)
                line = _read_line()
            sys.stdout.write(f"Total words: {count_words(line)}\n")
    except EOFError:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())