# kenjikit

A small toolkit with two parts:

- **Ballot counting**: reads a ballot of four ice-cream flavours and 102
  voters from standard input and reports the outcome under three systems:
  majority, mixed and proportional seat allocation.
- **2D toolkit**: integer vectors (`Vec2D`), RGBA colours (`RGBAColor`),
  shapes (`Circle`, `Line`, `Rectangle`, `Triangle`), a mouse event queue
  (`EventManager`), a time-based transition engine (`TransitionEngine`),
  `.si2` sprite loading (`Sprite`) and the maze data of a two-player maze
  game (`kenjikit.maze`).

## Install

```
pip install .
```

## Counting a ballot

The input is line based. Lines starting with `//` are comments and are
skipped. First come the four flavour names, then, for each of exactly 102
voters, a last name, a first name and the number (1 to 4) of the chosen
flavour. A choice line that does not start with an integer stops the command
with an error message and exit status 1.

```
kenjikit-majority < ballot.txt
kenjikit-mixed < ballot.txt
kenjikit-proportional < ballot.txt
```

Each command first prints the four flavour names separated by tabs, then:

- `kenjikit-majority`: each flavour's votes and share of the 102 voters, then
  the winner, or every flavour tied for first place.
- `kenjikit-mixed`: each flavour's share, then the flavours ranked by share
  and granted 8, 4, 2 and 2 places.
- `kenjikit-proportional`: each flavour's votes and share, then its share of
  16 places, rounded down.

Shares are always taken over 102 voters, whatever choices were valid.

The same results are available from Python:

```python
from kenjikit.majority import majority_vote
from kenjikit.mixed import rank_by_share, mixed_seats
from kenjikit.proportional import proportional_seats

votes = [40, 30, 20, 12]
result = majority_vote(votes)
print(result.winners, result.max_votes, result.is_tie)
print(mixed_seats(rank_by_share(votes, 102)))   # [(flavour index, places), ...]
print(proportional_seats(votes, 102, 16))       # places per flavour
```

`kenjikit.ballots` holds the reading side: `read_ballot`, `count_votes`,
`CommentSkippingReader` and the `Participant` record.

## 2D toolkit

```python
from kenjikit.vec2d import Vec2D
from kenjikit.color import RED, TRANSPARENT
from kenjikit.shapes import Rectangle
from kenjikit.transition import TransitionContract, TransitionEngine

box = Rectangle.from_size(Vec2D(10, 10), 20, 20, RED, TRANSPARENT)
engine = TransitionEngine()
engine.start_contract(
    TransitionContract(box, Rectangle.TransitionId.FIRST_POSITION, 1.0, [100, 100])
)
engine.update(0.5)            # halfway there
print(box.first_position)     # (55, 55)
```

- `Vec2D` compares equal by coordinates and orders by magnitude; integer
  division and modulo truncate toward zero.
- `RGBAColor` channels must lie between 0 and 255; `+` saturates and `*`
  scales red, green and blue.
- Transitions take durations and delays in seconds or as `timedelta`, and
  support the modes of `TransitionMode` (`FINITE`, `FINITE_REVERSE`, `LOOP`,
  `LOOP_SMOOTH`) and the finish modes of `FinishMode`.
- `Sprite.from_file` and `Sprite.from_bytes` read the `.si2` format;
  `Sprite(pixels, row_size)` builds one from a list of colours.
- `kenjikit.maze` gives the maze (`initial_map`, `reference_map`),
  `count_cells`, `frame_delay`, `MoveDirection` and the `KeyParams` key
  bindings.

Errors raised by the toolkit are `kenjikit.errors.MinGLError`, which carries
an `ErrorCode`; `error_message` gives the standard text of a code. Malformed
sprite data raises `kenjikit.sprite.SpriteFormatError`, which is also a
`ValueError`.

## What this package does not do

Nothing here opens a window, draws, plays sound or reads the keyboard: the
shapes and sprites hold their data only. `kenjikit.maze` supplies the maze and
its constants, but there is no playable game: no player movement, scoring,
computer opponent or end screen, and no loading of key bindings from a file.

## Tests

```
pip install .[test]
pytest
```