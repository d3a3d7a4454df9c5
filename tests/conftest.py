import pytest

from sudoku_csp.board import Board

CLASSIC = """
530070000
600195000
098000060
800060003
400803001
700020006
060000280
000419005
000080079
"""

CLASSIC_SOLUTION = """
534678912
672195348
198342567
859761423
426853791
713924856
961537284
287419635
345286179
"""


@pytest.fixture
def puzzle():
    return Board.from_string(CLASSIC)


@pytest.fixture
def solution():
    return Board.from_string(CLASSIC_SOLUTION)


@pytest.fixture
def one_blank(solution):
    board = solution.copy()
    board.values[4][4] = 0
    board.init_candidates()
    return board


@pytest.fixture
def dead_end():
    # (0, 0) sees 1-8 in its row and 9 in its column, yet no two givens clash
    board = Board.empty()
    board.values[0] = [0, 1, 2, 3, 4, 5, 6, 7, 8]
    board.values[3][0] = 9
    board.init_candidates()
    return board
