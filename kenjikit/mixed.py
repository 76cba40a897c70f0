"""Mixed system: seats handed out 8, 4, 2, 2 in order of vote share."""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Sequence

from kenjikit.ballots import VOTER_COUNT, count_votes, format_flavours, read_ballot

MIXED_SEATS = (8, 4, 2, 2)


def _float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def rank_by_share(votes: Sequence[int], total: int) -> list[tuple[float, int]]:
    """Return (percentage, flavour index) pairs, highest share first.

    Equal shares are ordered with the higher index first.
    """
    shares = [(_float32(count * 100.0 / total), index) for index, count in enumerate(votes)]
    return sorted(shares, reverse=True)


def mixed_seats(ranking: Sequence[tuple[float, int]]) -> list[tuple[int, int]]:
    """Pair the ranked flavour indices with the fixed 8, 4, 2, 2 seat split."""
    if len(ranking) < len(MIXED_SEATS):
        raise ValueError(
            f"need at least {len(MIXED_SEATS)} ranked flavours, got {len(ranking)}"
        )
    return [(index, seats) for (_, index), seats in zip(ranking, MIXED_SEATS)]


def render_mixed(flavours: Sequence[str], votes: Sequence[int]) -> str:
    """Return the shares and the mixed seat allocation as printed text."""
    lines = [
        f"{_float32(count * 100.0 / VOTER_COUNT):.2f}% {name} ({count} votes)"
        for name, count in zip(flavours, votes)
    ]
    allocation = mixed_seats(rank_by_share(votes, VOTER_COUNT))
    lines += ["", "Résultats du système mixte:"]
    lines += [f"{seats} places pour la glace {flavours[index]}" for index, seats in allocation]
    top_index, top_seats = allocation[0]
    lines += [
        "",
        f"La glace {flavours[top_index]} remporte le plus de places avec {top_seats} places.",
    ]
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Read a ballot from standard input and print the mixed allocation."""
    parser = argparse.ArgumentParser(
        description="Mixed seat allocation read from standard input."
    )
    parser.parse_args(argv)
    try:
        flavours, participants = read_ballot(sys.stdin, valid_only=True)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(format_flavours(flavours))
    sys.stdout.write(render_mixed(flavours, count_votes(participants)))
    return 0