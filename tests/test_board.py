import pytest

from sudoku_csp.board import BOXES, PEERS, UNITS, Board, InvalidBoardError


def test_from_grid_accepts_blank_markers():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][:4] = ['', '.', None, '7']
    grid[8][8] = 3
    board = Board.from_grid(grid)
    assert board.values[0][:4] == [0, 0, 0, 7]
    assert board.values[8][8] == 3
    assert board.count_empty() == 79


@pytest.mark.parametrize("grid", [
    [[0] * 9 for _ in range(8)],
    [[0] * 8 for _ in range(9)],
    "0" * 81,
    None,
])
def test_from_grid_rejects_bad_shapes(grid):
    with pytest.raises(InvalidBoardError):
        Board.from_grid(grid)


@pytest.mark.parametrize("cell", [10, -1, "x", True, 2.5, float("inf"), [1]])
def test_from_grid_rejects_bad_values(cell):
    grid = [[0] * 9 for _ in range(9)]
    grid[2][5] = cell
    with pytest.raises(InvalidBoardError):
        Board.from_grid(grid)


def test_from_string_ignores_whitespace(puzzle):
    assert puzzle.values[0] == [5, 3, 0, 0, 7, 0, 0, 0, 0]
    assert puzzle.values[8] == [0, 0, 0, 0, 8, 0, 0, 7, 9]


def test_from_string_wrong_length():
    with pytest.raises(InvalidBoardError):
        Board.from_string("123")


def test_unit_tables():
    assert len(UNITS) == 27
    assert all(len(unit) == 9 for unit in UNITS)
    assert BOXES[4][0] == (3, 3)
    assert all(len(peers) == 20 for peers in PEERS.values())
    assert (0, 0) not in PEERS[(0, 0)]
    assert (2, 2) in PEERS[(0, 0)]
    assert (3, 3) not in PEERS[(0, 0)]


def test_candidates_match_peers(puzzle):
    for row in range(9):
        for col in range(9):
            if puzzle.values[row][col]:
                assert puzzle.candidates[row][col] == set()
                continue
            seen = {puzzle.values[r][c] for r, c in PEERS[(row, col)]}
            for value in range(1, 10):
                assert (value in puzzle.candidates[row][col]) == (value not in seen)


def test_copy_is_independent(puzzle):
    clone = puzzle.copy()
    assert clone == puzzle
    clone.values[0][2] = 4
    clone.candidates[0][3].clear()
    assert puzzle.values[0][2] == 0
    assert puzzle.candidates[0][3]
    assert clone != puzzle


def test_snapshot_restore_and_filled_since(puzzle):
    saved = puzzle.snapshot()
    puzzle.values[0][2] = 4
    puzzle.values[1][1] = 7
    puzzle.candidates[0][2] = set()
    assert puzzle.filled_since(saved) == [(0, 2), (1, 1)]
    puzzle.restore(saved)
    assert puzzle == saved
    assert puzzle.filled_since(saved) == []


def test_str_uses_dots_for_blanks(puzzle):
    assert str(puzzle).splitlines()[0] == "5 3 . . 7 . . . ."


def test_grid_returns_a_copy(solution):
    grid = solution.grid()
    grid[0][0] = 0
    assert solution.values[0][0] == 5
    assert solution.is_complete()


def test_board_does_not_share_rows_with_caller():
    grid = [[0] * 9 for _ in range(9)]
    board = Board(grid)
    board.values[0][0] = 5
    assert grid[0][0] == 0
