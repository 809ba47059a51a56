import random

import pytest

from kata.life import LifeBoard, Shape, main


def alive_cells(board):
    return {
        (x, y)
        for y in range(board.height)
        for x in range(board.width)
        if board.is_alive(x, y)
    }


def test_small_sizes_fall_back_to_minimum():
    board = LifeBoard(5, 50)
    assert (board.width, board.height) == (20, 20)


def test_large_sizes_kept():
    board = LifeBoard(30, 25)
    assert (board.width, board.height) == (30, 25)
    assert alive_cells(board) == set()


def test_outside_cells_are_dead():
    board = LifeBoard()
    assert board.is_alive(-1, 0) is False
    assert board.is_alive(0, 20) is False


def test_set_alive_outside_raises():
    with pytest.raises(IndexError):
        LifeBoard().set_alive(20, 0, True)


def test_lonely_cell_dies():
    board = LifeBoard()
    board.set_alive(5, 5, True)
    board.next_generation()
    assert alive_cells(board) == set()


def test_block_is_still():
    board = LifeBoard()
    board.draw_shape(Shape.BLOCK, 3, 3)
    assert alive_cells(board) == {(4, 4), (5, 4), (4, 5), (5, 5)}
    board.next_generation()
    assert alive_cells(board) == {(4, 4), (5, 4), (4, 5), (5, 5)}


def test_boat_is_still():
    board = LifeBoard()
    board.draw_shape(Shape.BOAT, 5, 5)
    before = alive_cells(board)
    board.next_generation()
    assert alive_cells(board) == before


@pytest.mark.parametrize("shape", [Shape.BLINKER, Shape.BEACON])
def test_period_two_oscillators(shape):
    board = LifeBoard()
    board.draw_shape(shape, 6, 6)
    before = alive_cells(board)
    board.next_generation()
    assert alive_cells(board) != before
    board.next_generation()
    assert alive_cells(board) == before


def test_glider_moves_diagonally():
    board = LifeBoard()
    board.draw_shape(Shape.GLIDER, 0, 0)
    before = alive_cells(board)
    for _ in range(4):
        board.next_generation()
    assert alive_cells(board) == {(x + 1, y + 1) for x, y in before}


def test_pulsar_is_symmetric():
    board = LifeBoard(30, 30)
    board.draw_shape(Shape.PULSAR, 0, 0)
    cells = alive_cells(board)
    assert cells
    assert cells == {(y, x) for x, y in cells}
    assert cells == {(16 - x, y) for x, y in cells}


def test_pentadecathlon_cells():
    board = LifeBoard(30, 20)
    board.draw_shape(Shape.PENTADECATHLON, 0, 0)
    cells = alive_cells(board)
    assert len(cells) == 12
    assert cells == {(17 - x, y) for x, y in cells}
    assert cells == {(x, 10 - y) for x, y in cells}


def test_draw_shape_clears_its_box():
    board = LifeBoard()
    board.set_alive(0, 0, True)
    board.draw_shape(Shape.BLINKER, 0, 0)
    assert alive_cells(board) == {(1, 2), (2, 2), (3, 2)}


def test_draw_shape_is_clipped():
    board = LifeBoard()
    board.draw_shape(Shape.BLINKER, 18, 0)
    assert alive_cells(board) == {(19, 2)}


def test_randomize_is_reproducible():
    first, second = LifeBoard(), LifeBoard()
    first.randomize(random.Random(7))
    second.randomize(random.Random(7))
    assert alive_cells(first) == alive_cells(second)
    assert 0 < len(alive_cells(first)) < 400


def test_render_layout():
    board = LifeBoard()
    board.set_alive(0, 0, True)
    lines = board.render().splitlines()
    assert len(lines) == board.height + 2
    assert all(len(line) == board.width + 2 for line in lines)
    assert lines[1][0] == lines[0][0]
    assert lines[1][1] == "@"
    assert lines[1][2] == " "


def test_main_prints_generations(capsys):
    assert main(["2"]) == 0
    out = capsys.readouterr().out
    assert out.count("@") == 10


def test_main_rejects_bad_count(capsys):
    assert main(["many"]) == 1
    assert "many" in capsys.readouterr().err