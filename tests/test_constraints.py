from sudoku_csp.board import PEERS, Board
from sudoku_csp.constraints import assign, conflicts, eliminate, is_solved, is_valid_placement


def test_duplicate_in_row_is_invalid_at_both_positions():
    board = Board.empty()
    board.values[2][1] = 6
    board.values[2][7] = 6
    assert not is_valid_placement(board, 2, 1, 6)
    assert not is_valid_placement(board, 2, 7, 6)
    assert is_valid_placement(board, 2, 1, 5)


def test_valid_placement_checks_column_and_box(puzzle):
    # 8 sits in column 0 and 9 in the top-left box
    assert not is_valid_placement(puzzle, 1, 0, 8)
    assert not is_valid_placement(puzzle, 0, 2, 9)
    assert is_valid_placement(puzzle, 0, 2, 4)


def test_filled_cell_is_not_compared_with_itself(solution):
    for row in range(9):
        for col in range(9):
            assert is_valid_placement(solution, row, col, solution.values[row][col])


def test_eliminate_touches_peers_only():
    board = Board.empty()
    removed = eliminate(board, 4, 4, 5)
    assert removed == 20
    for row in range(9):
        for col in range(9):
            if (row, col) in PEERS[(4, 4)]:
                assert 5 not in board.candidates[row][col]
            else:
                assert board.candidates[row][col] == set(range(1, 10))
    assert board.values[4][4] == 0


def test_eliminate_counts_only_real_removals():
    board = Board.empty()
    eliminate(board, 0, 0, 1)
    # (0, 0) itself plus the six column cells below the box
    assert eliminate(board, 0, 1, 1) == 7


def test_assign_updates_cell_and_peers():
    board = Board.empty()
    assign(board, 8, 8, 3)
    assert board.values[8][8] == 3
    assert board.candidates[8][8] == set()
    assert 3 not in board.candidates[8][0]
    assert 3 in board.candidates[0][0]


def test_conflicts_reports_both_cells():
    board = Board.empty()
    board.values[0][0] = 4
    board.values[1][1] = 4
    board.values[5][5] = 4
    assert conflicts(board) == {(0, 0), (1, 1)}


def test_no_conflicts_in_puzzle(puzzle):
    assert conflicts(puzzle) == set()


def test_is_solved(solution, one_blank):
    assert is_solved(solution)
    assert not is_solved(one_blank)
    swapped = solution.copy()
    swapped.values[0][0], swapped.values[0][1] = swapped.values[0][1], swapped.values[0][0]
    assert not is_solved(swapped)
