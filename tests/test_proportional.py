import io

import pytest

from kenjikit.proportional import (
    TOTAL_SEATS,
    main,
    proportional_seats,
    render_proportional,
)

FLAVOURS = ["Vanille", "Chocolat", "Fraise", "Pistache"]


def test_unanimous_vote_takes_every_seat():
    assert proportional_seats([102, 0, 0, 0], 102, 16) == [TOTAL_SEATS, 0, 0, 0]


def test_even_split_halves_the_seats():
    assert proportional_seats([0, 51, 0, 51], 102, 16) == [0, 8, 0, 8]


@pytest.mark.parametrize(
    "votes", [[25, 25, 26, 26], [1, 2, 3, 96], [30, 30, 30, 12], [0, 0, 0, 0]]
)
def test_seats_never_exceed_total(votes):
    seats = proportional_seats(votes, 102, 16)
    assert sum(seats) <= 16
    assert all(s >= 0 for s in seats)
    assert all(s <= v * 16 // 102 + 1 for s, v in zip(seats, votes))


def test_more_votes_never_mean_fewer_seats():
    votes = [5, 20, 33, 44]
    seats = proportional_seats(votes, 102, 16)
    assert seats == sorted(seats)


def test_render_lists_seats_per_flavour():
    text = render_proportional(FLAVOURS, [0, 0, 0, 102])
    assert "\nRésultats du vote proportionnel :\n" in text
    assert "Pistache : 102 votes (100.00%)" in text
    assert "Pistache : 16 places" in text
    assert "Vanille : 0 places" in text


def test_main_reads_stdin(monkeypatch, capsys):
    lines = ["// glaces"] + FLAVOURS
    for number in range(102):
        lines += [f"Nom{number}", f"Prenom{number}", "2" if number < 51 else "3"]
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(lines) + "\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Chocolat : 8 places" in out
    assert "Fraise : 8 places" in out