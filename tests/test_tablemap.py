import pytest

from mahjang.tablemap import (
    COLS,
    ROWS,
    TABLE_CELL,
    TableMap,
    get_fullwidth_number,
    main,
    to_fullwidth_digit,
)

HEADER = "　０１２３４５６７８９０１２３４５６７８９０１２３４５６７８９０１２３４５６"


@pytest.mark.parametrize("n,expected", [(0, "０"), (5, "５"), (9, "９")])
def test_to_fullwidth_digit(n, expected):
    assert to_fullwidth_digit(n) == expected


@pytest.mark.parametrize("n", [10, -1])
def test_to_fullwidth_digit_rejects_out_of_range(n):
    with pytest.raises(ValueError):
        to_fullwidth_digit(n)


def test_get_fullwidth_number_multi_digit():
    assert get_fullwidth_number(36) == "３６"
    assert get_fullwidth_number(7) == "７"


def test_render_with_indices_matches_frame():
    lines = TableMap().render(show_indices=True).splitlines()
    assert len(lines) == ROWS + 2
    assert lines[0] == HEADER
    assert lines[-1] == HEADER
    assert lines[1] == "０" + TABLE_CELL * COLS + "０"
    assert lines[27] == "６" + TABLE_CELL * COLS + "６"


def test_render_without_indices():
    text = TableMap().render(show_indices=False)
    assert text.endswith("\n")
    assert text.splitlines() == [TABLE_CELL * COLS] * ROWS


def test_place_sets_cell():
    table = TableMap()
    table.place(2, 10, "X")
    line = table.render(show_indices=False).splitlines()[2]
    assert line == TABLE_CELL * 10 + "X" + TABLE_CELL * (COLS - 11)


@pytest.mark.parametrize("row,col", [(ROWS, 0), (0, COLS), (-1, 0)])
def test_place_out_of_range(row, col):
    with pytest.raises(IndexError):
        TableMap().place(row, col, "X")


def test_main_lays_out_all_tiles(capsys):
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert len(lines) == ROWS + 2
    assert lines[0] == HEADER
    assert out.count(TABLE_CELL) == ROWS * COLS - 136


def test_main_is_reproducible_with_seed(capsys):
    main(["--seed", "3"])
    first = capsys.readouterr().out
    main(["--seed", "3"])
    assert capsys.readouterr().out == first