"""A speakers' bureau: record, update and look up speakers by name or topic."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence, TextIO

CAPACITY = 10

_LABEL_WIDTH = 30
_RULE = "-" * 63
_SUMMARY_RULE = "-" * 61

Reader = Callable[[], str]


@dataclass
class Speaker:
    """A speaker's contact details, topic and fee."""

    name: str
    phone: str
    topic: str
    fee: float

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("the name could not be empty")
        if not self.phone:
            raise ValueError("the telephone number could not be empty")
        if not self.topic:
            raise ValueError("the topic could not be empty")
        if self.fee < 0:
            raise ValueError("the fee could not be negative")


class SpeakerBureau:
    """An ordered collection of at most ``capacity`` speakers."""

    def __init__(self, capacity: int = CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.speakers: list[Speaker] = []

    def __len__(self) -> int:
        return len(self.speakers)

    def __iter__(self) -> Iterator[Speaker]:
        return iter(self.speakers)

    def add(self, speaker: Speaker) -> int:
        """Append ``speaker`` and return its number, counting from 1."""
        if len(self.speakers) >= self.capacity:
            raise ValueError(f"the bureau holds at most {self.capacity} speakers")
        self.speakers.append(speaker)
        return len(self.speakers)

    def find(self, name: str) -> list[tuple[int, Speaker]]:
        """Return ``(number, speaker)`` for every speaker called ``name``."""
        return [
            (number, speaker)
            for number, speaker in enumerate(self.speakers, start=1)
            if speaker.name == name
        ]

    def with_topic(self, topic: str) -> list[tuple[int, Speaker]]:
        """Return ``(number, speaker)`` for every speaker on ``topic``."""
        return [
            (number, speaker)
            for number, speaker in enumerate(self.speakers, start=1)
            if speaker.topic == topic
        ]

    def replace(self, name: str, speaker: Speaker) -> int:
        """Replace the first speaker called ``name`` and return its number."""
        matches = self.find(name)
        if not matches:
            raise KeyError(name)
        number = matches[0][0]
        self.speakers[number - 1] = speaker
        return number


def format_fee(fee: float) -> str:
    """Return the fee with up to six significant digits and no trailing zeros."""
    return f"{fee:g}"


def format_speaker(number: int, speaker: Speaker) -> str:
    """Return the numbered, dot-led description of ``speaker``."""
    rows = [
        ("Name ", speaker.name),
        ("Telephone Number ", speaker.phone),
        ("Topic ", speaker.topic),
        ("Fee ", format_fee(speaker.fee)),
    ]
    body = "".join(
        f"\n\t{label.ljust(_LABEL_WIDTH, '.')} {value}" for label, value in rows
    )
    return f"\nSpeaker {number}{body}\n"


def _stdin_reader() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\r\n")


def _ask_text(reader: Reader, out: TextIO, label: str, what: str) -> str:
    out.write(f"{label}: ")
    while True:
        text = reader()
        if text:
            return text
        sys.stderr.write(f"\nSorry but the {what} could not be empty\n\n")
        out.write(f"{label}: ")


def _ask_fee(reader: Reader, out: TextIO) -> float:
    out.write("Fee: ")
    while True:
        text = reader()
        try:
            fee = float(text.strip())
        except ValueError:
            sys.stderr.write("\nSorry but the fee must be a number\n\n")
        else:
            if fee >= 0:
                return fee
            sys.stderr.write("\nSorry but the fees could not be negative\n\n")
        out.write("Fee: ")


def _input_speaker(reader: Reader, out: TextIO) -> Speaker:
    name = _ask_text(reader, out, "Name", "name")
    phone = _ask_text(reader, out, "Telephone Number", "telephone number")
    topic = _ask_text(reader, out, "Topic", "topic")
    fee = _ask_fee(reader, out)
    return Speaker(name=name, phone=phone, topic=topic, fee=fee)


def _yes_no(reader: Reader) -> str:
    return reader().strip()[:1].upper()


def _ask_existing_name(
    bureau: SpeakerBureau, reader: Reader, out: TextIO, title: str
) -> str:
    while True:
        out.write(f"\n{_RULE}\n{title}\n{_RULE}\nName: ")
        name = reader()
        if bureau.find(name):
            return name
        sys.stderr.write("\nSorry but the name does not exist\n")


def _input_speakers(bureau: SpeakerBureau, reader: Reader, out: TextIO) -> None:
    for number in range(1, bureau.capacity + 1):
        out.write(
            f"\n{_RULE}\n\tEnter the following information of speaker {number}.\n{_RULE}\n"
        )
        bureau.add(_input_speaker(reader, out))
        out.write("Do you have another entry? (Y/N): \n")
        if _yes_no(reader) == "N":
            return


def _ask_topic(bureau: SpeakerBureau, reader: Reader, out: TextIO) -> str:
    while True:
        out.write(
            f"\n{_RULE}\n     Enter the topic you would like to display names for\n"
            f"{_RULE}\nTopic: "
        )
        topic = reader()
        if bureau.with_topic(topic):
            return topic
        sys.stderr.write("\nSorry but nobody is speaking about this topic\n\n")
        out.write("Do you have another topic? (Y/N)\n")
        if _yes_no(reader) == "N":
            return topic


def main(argv: Sequence[str] | None = None) -> int:
    """Enter speakers, update one, and show speakers by name, by topic and in full."""
    parser = argparse.ArgumentParser(description="Speakers' bureau.")
    parser.parse_args(argv)
    out = sys.stdout
    reader = _stdin_reader
    bureau = SpeakerBureau(CAPACITY)

    try:
        _input_speakers(bureau, reader, out)

        name = _ask_existing_name(
            bureau, reader, out, "    Enter the name of the speaker you would like to update"
        )
        out.write(f"\n{_RULE}\n\tPlease enter the speaker's updated information\n{_RULE}\n")
        for number, _ in bureau.find(name):
            bureau.speakers[number - 1] = _input_speaker(reader, out)

        name = _ask_existing_name(
            bureau, reader, out, "   Enter the name of the speaker you would like to display"
        )
        for number, speaker in bureau.find(name):
            out.write(format_speaker(number, speaker))

        topic = _ask_topic(bureau, reader, out)
        for number, speaker in bureau.with_topic(topic):
            out.write(format_speaker(number, speaker))
    except EOFError:
        return 0

    out.write(
        f"\n\n{_SUMMARY_RULE}\n\t\tSpeakers' Bureau Information\n{_SUMMARY_RULE}\n"
    )
    for number, speaker in enumerate(bureau, start=1):
        out.write(format_speaker(number, speaker))
    return 0


if __name__ == "__main__":
    sys.exit(main())