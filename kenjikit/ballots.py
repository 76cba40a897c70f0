"""Reading ice-cream ballots: four flavour names followed by one record per voter."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

FLAVOUR_COUNT = 4
VOTER_COUNT = 102
COMMENT_PREFIX = "//"

_INTEGER = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class Participant:
    """One voter and the number (1 to 4) of the flavour they chose."""

    last_name: str
    first_name: str
    flavour: int


class CommentSkippingReader:
    """Reads lines from a text stream, skipping those that start with ``//``."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def _next_line(self) -> str:
        while True:
            line = self._stream.readline()
            if not line:
                return ""
            if line.endswith("\n"):
                line = line[:-1]
            if not line.startswith(COMMENT_PREFIX):
                return line

    def read_string(self) -> str:
        """Return the next non-comment line, or an empty string at end of input."""
        return self._next_line()

    def read_int(self) -> int:
        """Return the integer that starts the next non-comment line.

        Leading whitespace is skipped and anything after the digits is ignored.
        Raises ValueError when the line does not start with an integer or the
        value does not fit in a 32-bit signed integer.
        """
        line = self._next_line()
        match = _INTEGER.match(line)
        if match is None:
            raise ValueError(f"expected an integer, got {line!r}")
        value = int(match.group(1))
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueError(f"integer out of range: {value}")
        return value


def read_ballot(
    stream: TextIO, valid_only: bool = False
) -> tuple[list[str], list[Participant]]:
    """Read the four flavour names and the voters' records from ``stream``.

    With ``valid_only`` set, voters whose choice is not between 1 and 4 are
    dropped.
    """
    reader = CommentSkippingReader(stream)
    flavours = [reader.read_string() for _ in range(FLAVOUR_COUNT)]
    participants = []
    for _ in range(VOTER_COUNT):
        last_name = reader.read_string()
        first_name = reader.read_string()
        flavour = reader.read_int()
        if valid_only and not 1 <= flavour <= FLAVOUR_COUNT:
            continue
        participants.append(Participant(last_name, first_name, flavour))
    return flavours, participants


def count_votes(participants: Iterable[Participant]) -> list[int]:
    """Return the number of votes for each flavour; other choices are ignored."""
    votes = [0] * FLAVOUR_COUNT
    for participant in participants:
        if 1 <= participant.flavour <= FLAVOUR_COUNT:
            votes[participant.flavour - 1] += 1
    return votes


def by_first_name(participant: Participant) -> str:
    """Sort key ordering participants by first name."""
    return participant.first_name


def format_flavours(flavours: Iterable[str]) -> str:
    """Return the flavour names, each followed by a tab."""
    return "".join(f"{name}\t" for name in flavours)


def format_participants(participants: Iterable[Participant]) -> str:
    """Return each participant as three lines: last name, first name, flavour."""
    return "".join(
        f"{p.last_name}\n{p.first_name}\n{p.flavour}\n" for p in participants
    )