"""American to English translation test with tester records kept in text files."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Sequence, TextIO

NAME_SIZE = 20
NUM_TESTS = 3
NUM_QUESTIONS = 5
DEFAULT_TRANSLATIONS = "Translation.txt"
DEFAULT_TESTERS = "Testers.txt"

_WIDE_RULE = "-" * 51
_WIDE_BANNER = "=" * 51
_RULE = "-" * 33
_BANNER = "=" * 33

Reader = Callable[[], str]


@dataclass
class Translation:
    """An American word and its English equivalent."""

    american: str
    english: str


@dataclass
class TestDate:
    """The date a test was taken."""

    __test__ = False

    month: int
    day: int
    year: int

    def __str__(self) -> str:
        return f"{self.month}/{self.day}/{self.year}"


@dataclass
class Tester:
    """A person who takes the test, with their last score and test date."""

    name: str
    score: float
    test_taken: TestDate


def _read_lines(path: str | Path) -> list[str]:
    return Path(path).read_text(encoding="utf-8").splitlines()


def _parse_count(lines: Sequence[str], path: str | Path) -> int:
    if not lines:
        raise ValueError(f"{path}: missing record count")
    try:
        count = int(lines[0].strip())
    except ValueError:
        raise ValueError(f"{path}: invalid record count {lines[0]!r}") from None
    if count < 0:
        raise ValueError(f"{path}: negative record count {count}")
    return count


def _parse_date(text: str) -> TestDate:
    parts = text.strip().split("/")
    if len(parts) != 3:
        raise ValueError(f"expected a month/day/year date, got {text!r}")
    month, day, year = (int(part) for part in parts)
    return TestDate(month, day, year)


def read_translations(path: str | Path) -> list[Translation]:
    """Read the count and that many ``american,english`` lines from ``path``."""
    lines = _read_lines(path)
    count = _parse_count(lines, path)
    body = lines[1 : 1 + count]
    if len(body) < count:
        raise ValueError(f"{path}: expected {count} translations, found {len(body)}")
    translations = []
    for line in body:
        american, separator, english = line.partition(",")
        if not separator:
            raise ValueError(f"{path}: expected 'american,english', got {line!r}")
        translations.append(Translation(american, english))
    return translations


def read_testers(path: str | Path) -> list[Tester]:
    """Read the count and, per tester, a name line and a ``score,m/d/y`` line."""
    lines = _read_lines(path)
    count = _parse_count(lines, path)
    body = lines[1 : 1 + 2 * count]
    if len(body) < 2 * count:
        raise ValueError(f"{path}: expected {count} testers, found {len(body) // 2}")
    testers = []
    for name, data in zip(body[0::2], body[1::2]):
        score_text, separator, date_text = data.partition(",")
        if not separator:
            raise ValueError(f"{path}: expected 'score,month/day/year', got {data!r}")
        testers.append(
            Tester(
                name=name[: NAME_SIZE - 1],
                score=float(score_text),
                test_taken=_parse_date(date_text),
            )
        )
    return testers


def write_testers(path: str | Path, testers: Sequence[Tester]) -> None:
    """Write the tester count and each tester's name and ``score,m/d/y`` lines."""
    lines = [str(len(testers))]
    for tester in testers:
        lines.append(tester.name)
        lines.append(f"{tester.score:g},{tester.test_taken}")
    Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")


def format_score(score: float) -> str:
    """Return the score with one decimal place."""
    return f"{score:.1f}"


def format_testers(testers: Iterable[Tester]) -> str:
    """Return the numbered table of testers with their scores and dates."""
    parts = [
        f"\n{_WIDE_RULE}\n",
        "#".ljust(3) + "NAME".ljust(20) + "SCORE %".ljust(15) + "TEST TAKEN\n",
        f"{_WIDE_RULE}\n",
    ]
    for number, tester in enumerate(testers, start=1):
        parts.append(
            str(number).ljust(3)
            + tester.name.ljust(20)
            + format_score(tester.score).ljust(15)
            + f"{tester.test_taken}\n"
        )
    return "".join(parts)


def _question_header() -> str:
    return (
        f"\n{_RULE}\n"
        + "#".ljust(3)
        + "American".ljust(18)
        + "English\n"
        + f"{_RULE}\n"
    )


def format_translations(translations: Iterable[Translation]) -> str:
    """Return the numbered list of translations with dotted leaders."""
    parts = [_question_header()]
    for number, translation in enumerate(translations, start=1):
        parts.append(
            str(number).ljust(3)
            + translation.american.ljust(18, ".")
            + f"{translation.english}\n"
        )
    return "".join(parts)


def score_answers(correct: int, total: int) -> float:
    """Return the percentage of ``total`` answers that were correct."""
    if total <= 0:
        raise ValueError(f"total must be positive, got {total}")
    if not 0 <= correct <= total:
        raise ValueError(f"correct must be between 0 and {total}, got {correct}")
    return correct / total * 100


def take_test(
    translations: Sequence[Translation],
    questions: int,
    reader: Reader,
    out: TextIO,
    rng: random.Random,
) -> float:
    """Ask ``questions`` randomly chosen words and return the percentage score."""
    if not translations:
        raise ValueError("no translations to ask")
    out.write(_question_header())
    correct = 0
    for _ in range(questions):
        index = rng.randrange(len(translations))
        translation = translations[index]
        out.write(str(index + 1).ljust(3) + translation.american.ljust(18, "."))
        guess = reader().strip()
        if guess == translation.english:
            out.write("\n\t    Correct!\n")
            correct += 1
        else:
            out.write(f"\n\t   Incorrect!\n\nAnswer: {translation.english}\n")
        out.write("\n")
    return score_answers(correct, questions)


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
    testers: Sequence[Tester],
    reader: Reader,
    out: TextIO,
    rng: random.Random,
) -> None:
    out.write(f"\n{_RULE}\n        Enter Today's Date\n{_RULE}\n")
    month = _ask_int(reader, out, "Enter month: ")
    day = _ask_int(reader, out, "Enter day: ")
    year = _ask_int(reader, out, "Enter year: ")
    out.write(
        f"\n\n{_RULE}\n            Questions\n{_RULE}\n"
        "   Five American words will be\n"
        " randomly selected from the list\n"
        "  Enter the English translation.\n"
    )
    for _ in range(NUM_TESTS):
        index = rng.randrange(len(testers))
        tester = testers[index]
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


def main(argv: Sequence[str] | None = None) -> int:
    """Run the translation test for three random testers and save their results."""
    parser = argparse.ArgumentParser(description="American to English translation test.")
    parser.add_argument("--translations", default=DEFAULT_TRANSLATIONS, help="translation file")
    parser.add_argument("--testers", default=DEFAULT_TESTERS, help="tester file")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    out = sys.stdout
    reader = _stdin_reader
    rng = random.Random(args.seed)

    try:
        translations = read_translations(args.translations)
        testers = read_testers(args.testers)
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
        _run_tests(translations, testers, reader, out, rng)
    except EOFError:
        return 0

    out.write(f"{_WIDE_BANNER}\n\t\tUpdated Information\n{_WIDE_BANNER}")
    out.write(format_testers(testers))
    write_testers(args.testers, testers)
    return 0


if __name__ == "__main__":
    sys.exit(main())