"""Majority vote over the four flavours: the flavour with most votes wins."""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from kenjikit.ballots import VOTER_COUNT, count_votes, format_flavours, read_ballot


def _float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _percent(count: int) -> float:
    return _float32(_float32(count * 100.0) / VOTER_COUNT)


@dataclass(frozen=True)
class MajorityResult:
    """The indices of the winning flavours and their vote count."""

    winners: tuple[int, ...]
    max_votes: int

    @property
    def is_tie(self) -> bool:
        return len(self.winners) != 1


def majority_vote(votes: Sequence[int]) -> MajorityResult:
    """Find the flavour(s) with the most votes; every tied flavour wins."""
    max_votes = 0
    winners: list[int] = []
    for index, count in enumerate(votes):
        if count > max_votes:
            max_votes = count
            winners = [index]
        elif count == max_votes:
            winners.append(index)
    return MajorityResult(tuple(winners), max_votes)


def render_majority(flavours: Sequence[str], votes: Sequence[int]) -> str:
    """Return the detailed results and the winner announcement."""
    lines = ["", "Résultats du vote majoritaire :"]
    for name, count in zip(flavours, votes):
        lines.append(f"{name} : {count} votes ({_percent(count):.2f}%)")
    lines.append("")
    result = majority_vote(votes)
    if not result.is_tie:
        winner = flavours[result.winners[0]]
        lines.append(
            f"La glace {winner} remporte l'élection avec {result.max_votes} votes "
            f"({_percent(result.max_votes):.2f}%)"
        )
    else:
        lines.append("Il y a une égalité entre les glaces suivantes :")
        lines.extend(
            f"- {flavours[index]} avec {result.max_votes} votes"
            for index in result.winners
        )
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Read a ballot from standard input and print the majority result."""
    parser = argparse.ArgumentParser(
        description="Majority vote read from standard input."
    )
    parser.parse_args(argv)
    try:
        flavours, participants = read_ballot(sys.stdin, valid_only=False)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(format_flavours(flavours))
    sys.stdout.write(render_majority(flavours, count_votes(participants)))
    return 0