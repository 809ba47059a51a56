import pytest

from kata.board import Board


def test_default_board_is_minimum_size():
    board = Board()
    assert (board.width, board.height) == (Board.MIN_WIDTH, Board.MIN_HEIGHT)
    assert list(board) == [None] * (Board.MIN_WIDTH * Board.MIN_HEIGHT)


def test_explicit_size_is_not_clamped():
    board = Board(5, 3, default=0)
    assert (board.width, board.height) == (5, 3)
    assert len(list(board)) == 15


def test_set_and_get_round_trip():
    board = Board(5, 4, default=0)
    board.set(4, 3, 7)
    assert board.get(4, 3) == 7
    assert board.get(3, 4) == 0


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (5, 0), (0, 4)])
def test_get_outside_returns_default(x, y):
    board = Board(5, 4, default="dead")
    assert board.get(x, y) == "dead"


@pytest.mark.parametrize("x, y", [(-1, 0), (5, 0), (0, 4)])
def test_set_outside_raises(x, y):
    board = Board(5, 4, default=0)
    with pytest.raises(IndexError):
        board.set(x, y, 1)


def test_clear_resets_cells():
    board = Board(3, 3, default=False)
    board.set(1, 1, True)
    assert board.get(1, 1) is True
    board.clear()
    assert list(board) == [False] * 9
    assert board.get(1, 1) is False


def test_width_below_minimum_is_clamped_and_cleared():
    board = Board(default=0)
    board.set(0, 0, 9)
    board.width = 5
    assert board.width == Board.MIN_WIDTH
    assert board.get(0, 0) == 0


def test_larger_height_is_kept():
    board = Board(default=0)
    board.height = Board.MIN_HEIGHT + 10
    assert board.height == Board.MIN_HEIGHT + 10
    assert len(list(board)) == Board.MIN_WIDTH * (Board.MIN_HEIGHT + 10)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Board(-1, 5)