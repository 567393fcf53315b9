import pytest

from tictactoe.core.board import Board


def test_new_board_is_empty():
    b = Board()
    assert len(b) == 9
    assert all(b[i] is None for i in range(9))
    assert b.moves == 0
    assert b.empty_cells() == list(range(9))
    assert not b.is_full()


def test_place_counts_moves_and_refuses_overwrite():
    b = Board()
    b.place(4, "X")
    b.place(0, "O")
    assert b.moves == 2
    assert b[4] == "X" and b[0] == "O"

    with pytest.raises(ValueError):
        b.place(4, "O")
    assert b[4] == "X"
    assert b.moves == 2


@pytest.mark.parametrize("index", [-1, 9, 42])
def test_place_out_of_range(index):
    with pytest.raises(ValueError):
        Board().place(index, "X")


def test_index_of_is_row_major():
    b = Board()
    assert [b.index_of(r, c) for r in range(3) for c in range(3)] == list(range(9))


@pytest.mark.parametrize("row,col", [(-1, 0), (3, 0), (0, 3), (0, -1)])
def test_index_of_rejects_bad_coordinates(row, col):
    with pytest.raises(ValueError):
        Board().index_of(row, col)


def test_cell_at(make_board):
    b = make_board("X...O...X")
    assert b.cell_at(0, 0) == "X"
    assert b.cell_at(1, 1) == "O"
    assert b.cell_at(2, 2) == "X"
    assert b.cell_at(2, 1) is None


def test_board_from_layout_counts_existing_marks(make_board):
    assert make_board("XX.OO....").moves == 4


def test_wrong_cell_count_rejected():
    with pytest.raises(ValueError):
        Board(cells=[None] * 8)


def test_copy_is_independent(make_board):
    b = make_board("X........")
    b2 = b.copy()
    b2.place(4, "O")
    assert b[4] is None
    assert b.moves == 1
    assert b2.moves == 2


@pytest.mark.parametrize("size", [0, 4, 8, 10, 16])
def test_only_nine_cells_make_a_board(size):
    if size == 0:
        assert len(Board(cells=[])) == 9  # empty list means a fresh board
        return
    with pytest.raises(ValueError):
        Board(cells=[None] * size)


def test_board_size_is_not_configurable():
    with pytest.raises(TypeError):
        Board(rows=2, cols=4)


@pytest.mark.parametrize("mark", ["Z", "x", "", 1])
def test_foreign_mark_cannot_be_placed(mark):
    b = Board()
    with pytest.raises(ValueError):
        b.place(0, mark)
    assert b[0] is None
    assert b.moves == 0


def test_foreign_mark_in_layout_rejected():
    with pytest.raises(ValueError):
        Board(cells=["Z"] + [None] * 8)
