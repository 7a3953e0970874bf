import pytest

from .boards import make_board, reveal


@pytest.fixture
def one_two_one():
    """ [M][ ][M]
        [1][2][1]
        [0][0][0]
        with the two bottom rows revealed.
    """
    board = make_board(3, 3, [(0, 0), (2, 0)])
    reveal(board, [(x, y) for y in (1, 2) for x in range(3)])
    return board


@pytest.fixture
def diagonal():
    """ Mines on the diagonal of a 3x3 board, with only the 2 at (0, 1) revealed. """
    board = make_board(3, 3, [(0, 0), (1, 1), (2, 2)])
    reveal(board, [(0, 1)])
    return board


@pytest.fixture
def two_islands():
    """ [M][1][0][1][M] with the middle three cells revealed. """
    board = make_board(5, 1, [(0, 0), (4, 0)])
    reveal(board, [(1, 0), (2, 0), (3, 0)])
    return board
