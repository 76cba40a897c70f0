"""Proportional system: 16 seats shared out by vote share, rounded down."""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Sequence

from kenjikit.ballots import VOTER_COUNT, count_votes, format_flavours, read_ballot

TOTAL_SEATS = 16


def _float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _percent(count: int, total: int) -> float:
    return _float32(_float32(count * 100.0) / total)


def proportional_seats(
    votes: Sequence[int], total: int = VOTER_COUNT, seats: int = TOTAL_SEATS
) -> list[int]:
    """Return the seats of each flavour: its share of ``seats``, truncated."""
    return [
        int(_float32(_float32(_percent(count, total) * seats) / 100))
        for count in votes
    ]


def render_proportional(flavours: Sequence[str], votes: Sequence[int]) -> str:
    """Return the vote shares and the proportional allocation as printed text."""
    lines = ["", "Résultats du vote proportionnel :"]
    lines += [
        f"{name} : {count} votes ({_percent(count, VOTER_COUNT):.2f}%)"
        for name, count in zip(flavours, votes)
    ]
    lines += ["", "Répartition proportionnelle des places :"]
    lines += [
        f"{name} : {seats} places"
        for name, seats in zip(flavours, proportional_seats(votes))
    ]
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Read a ballot from standard input and print the proportional allocation."""
    parser = argparse.ArgumentParser(
        description="Proportional seat allocation read from standard input."
    )
    parser.parse_args(argv)
    try:
        flavours, participants = read_ballot(sys.stdin, valid_only=True)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(format_flavours(flavours))
    sys.stdout.write(render_proportional(flavours, count_votes(participants)))
    return 0