# mahjang

Builds a mahjong tile set and draws the table, with its four walls, in a
terminal using ANSI colour sequences.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Showing the table

```
mahjang
mahjang --seed 42
```

This prints a 27 × 37 cell table on a dark green background. A tile set
with red fives and without seasons or flowers (136 tiles) is shuffled and
laid out face up across four walls of 34 tiles each, two tiles to a stack.
Full-width row and column numbers (each taken modulo 10) run along all four
edges so that each cell can be found.

`--seed` fixes the shuffle, so the same seed always gives the same table.

The terminal must support 24-bit colour and show full-width characters
two columns wide.

## Using the library

`mahjang.pai` holds the tile model:

- `Tileset`: the face family of a tile (`DOTS`, `BAMBOOS`, `CHARACTERS`,
  `WINDS`, `DRAGONS`, `SEASONS`, `FLOWERS`).
- `Tiletype`: `SUITED`, `HONORS` or `BONUS`.
- `Pai`: a single tile, a dataclass with fields such as `face`, `settype`,
  `idx`, `number`, `value`, `doralv`, `red` and `es`.
  `Pai.get_number()` gives the face character of a suited tile (kanji
  numerals for characters, full-width digits for dots and bamboos).
  `Pai.make_es()` builds the coloured escape sequence that draws the tile,
  stores it in `es` and returns it; a tile whose `doralv` is above zero is
  underlined, and a tile with `visible` set is drawn as an empty table cell.

`mahjang.board` holds `Board`, the game settings: `akadra` (red fives),
`seasons`, `flowers`, `sanma` (three-player play, which drops the 2 to 8 of
characters) and so on. `Board.create_board()` returns the list of tiles for
those settings in a fixed order, each with its serial number and its drawn
face. It does not change `Board.pais`.

`mahjang.tablemap` draws the table:

- `TableMap`: a grid of cells, 27 × 37 by default.
  `TableMap.place(row, col, cell)` puts a drawn tile in a cell and raises
  `IndexError` for a position outside the grid. `TableMap.render(show_indices)`
  returns the whole grid as text, with or without the numbers on the edges.
- `to_fullwidth_digit(n)` turns a digit 0–9 into its full-width form and
  raises `ValueError` for anything else; `get_fullwidth_number(number)`
  writes a whole number in full-width digits.
- `main(argv)` is what the `mahjang` command runs.

## What it does not do

There is no game here yet: no dealing of hands, no turns, no player input,
no winning hands and no scoring. The command only shows one shuffled table.