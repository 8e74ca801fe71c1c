"""The table map: a grid of cells showing the walls around the table."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field

from mahjang.board import Board

ROWS = 27
COLS = 37
TABLE_CELL = "\x1b[48;2;0;60;0m\u3000\x1b[0m"
WALL_LENGTH = 34


def to_fullwidth_digit(n: int) -> str:
    """Return the full-width form of a single digit 0-9."""
    if not 0 <= n <= 9:
        raise ValueError("only digits 0-9 are supported")
    return chr(0xFF10 + n)


def get_fullwidth_number(number: int) -> str:
    """Return ``number`` written with full-width digits."""
    return "".join(to_fullwidth_digit(int(c)) if c.isdigit() else c for c in str(number))


def _wall_positions() -> list[list[tuple[int, int]]]:
    """Grid positions of the four walls, two tiles per stack."""
    east = [(23 + i % 2, 10 + i // 2) for i in range(WALL_LENGTH)]
    south = [(21 - i // 2, 33 + i % 2) for i in range(WALL_LENGTH)]
    west = [(3 - i % 2, 26 - i // 2) for i in range(WALL_LENGTH)]
    north = [(5 + i // 2, 3 - i % 2) for i in range(WALL_LENGTH)]
    return [east, south, west, north]


@dataclass
class TableMap:
    """A fixed-size grid of rendered cells."""

    rows: int = ROWS
    cols: int = COLS
    cells: list[list[str]] = field(init=False)

    def __post_init__(self) -> None:
        self.cells = [[TABLE_CELL] * self.cols for _ in range(self.rows)]

    def place(self, row: int, col: int, cell: str) -> None:
        """Put ``cell`` at the given position."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"position ({row}, {col}) is outside the table")
        self.cells[row][col] = cell

    def render(self, show_indices: bool = True) -> str:
        """Return the grid as text, optionally framed by row and column numbers."""
        index_line = BLANK_CORNER + "".join(
            get_fullwidth_number(col % 10) for col in range(self.cols)
        )
        lines = []
        if show_indices:
            lines.append(index_line)
        for number, row in enumerate(self.cells):
            body = "".join(row)
            if show_indices:
                label = get_fullwidth_number(number % 10)
                body = f"{label}{body}{label}"
            lines.append(body)
        if show_indices:
            lines.append(index_line)
        return "\n".join(lines) + "\n"


BLANK_CORNER = "\u3000"


def main(argv: list[str] | None = None) -> int:
    """Shuffle a full set, lay it out as four walls and print the table."""
    parser = argparse.ArgumentParser(description="Show a shuffled mahjong table.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the shuffle")
    args = parser.parse_args(argv)

    board = Board(akadra=True, back=True)
    board.pais = board.create_board()
    random.Random(args.seed).shuffle(board.pais)

    table = TableMap()
    tiles = iter(board.pais)
    for wall in _wall_positions():
        for (row, col), tile in zip(wall, tiles):
            table.place(row, col, tile.es)

    print(table.render(show_indices=True), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())