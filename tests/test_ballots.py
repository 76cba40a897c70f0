import io

import pytest

from kenjikit.ballots import (
    FLAVOUR_COUNT,
    VOTER_COUNT,
    CommentSkippingReader,
    Participant,
    by_first_name,
    count_votes,
    format_flavours,
    format_participants,
    read_ballot,
)

FLAVOURS = ["Vanille", "Chocolat", "Fraise", "Pistache"]


def make_ballot(choices):
    lines = ["// flavours"] + FLAVOURS + ["// voters"]
    for number, choice in enumerate(choices):
        lines += [f"Nom{number}", f"Prenom{number}", "// choice", str(choice)]
    return io.StringIO("\n".join(lines) + "\n")


def test_read_string_skips_comments():
    reader = CommentSkippingReader(io.StringIO("// one\n// two\nhello\nworld\n"))
    assert reader.read_string() == "hello"
    assert reader.read_string() == "world"


def test_read_string_at_end_of_input_is_empty():
    reader = CommentSkippingReader(io.StringIO("// only a comment"))
    assert reader.read_string() == ""


def test_read_string_keeps_last_line_without_newline():
    reader = CommentSkippingReader(io.StringIO("last"))
    assert reader.read_string() == "last"


def test_read_int_skips_comments_and_trailing_text():
    reader = CommentSkippingReader(io.StringIO("// c\n  42xyz\n-7\n"))
    assert reader.read_int() == 42
    assert reader.read_int() == -7


@pytest.mark.parametrize("text", ["", "abc\n", "// nothing\n", "99999999999\n"])
def test_read_int_rejects_bad_input(text):
    reader = CommentSkippingReader(io.StringIO(text))
    with pytest.raises(ValueError):
        reader.read_int()


def test_read_ballot_keeps_every_voter_by_default():
    choices = [1, 2, 3, 4, 5, 0] * 17
    flavours, participants = read_ballot(make_ballot(choices))
    assert flavours == FLAVOURS
    assert len(participants) == VOTER_COUNT
    assert [p.flavour for p in participants] == choices
    assert participants[0] == Participant("Nom0", "Prenom0", 1)


def test_read_ballot_valid_only_drops_out_of_range():
    choices = [1, 2, 3, 4, 5, 0] * 17
    _, participants = read_ballot(make_ballot(choices), valid_only=True)
    assert all(1 <= p.flavour <= FLAVOUR_COUNT for p in participants)
    assert len(participants) == sum(1 for c in choices if 1 <= c <= 4)


def test_read_ballot_short_input_raises():
    with pytest.raises(ValueError):
        read_ballot(make_ballot([1, 2, 3]))


def test_count_votes_ignores_invalid_choices():
    participants = [Participant("a", "b", c) for c in [1, 1, 4, 7, 0, 3]]
    votes = count_votes(participants)
    assert votes == [2, 0, 1, 1]
    assert len(votes) == FLAVOUR_COUNT


def test_by_first_name_orders_participants():
    people = [Participant("X", "Zoe", 1), Participant("Y", "Anna", 2)]
    ordered = sorted(people, key=by_first_name)
    assert [p.first_name for p in ordered] == ["Anna", "Zoe"]


def test_format_flavours_uses_tabs():
    assert format_flavours(["a", "b"]) == "a\tb\t"


def test_format_participants_three_lines_each():
    text = format_participants([Participant("Dupont", "Jean", 3)])
    assert text.splitlines() == ["Dupont", "Jean", "3"]