from sudoku_csp.board import BOX_SIZE, EMPTY, PEERS, SIZE, UNITS, VALUES


# Checks if the number placed in the cell (at the row and col coordinates passed in)
# is a valid placement according to the row, column and box constraints. The cell
# itself is skipped so a value already sitting there can be re-checked.
def is_valid_placement(board, row, col, num):
    grid = board.values

    for i in range(SIZE):
        if i != col and grid[row][i] == num:
            return False

    for i in range(SIZE):
        if i != row and grid[i][col] == num:
            return False

    # Top left corner of the box the current cell is in
    box_start_row, box_start_col = BOX_SIZE * (row // BOX_SIZE), BOX_SIZE * (col // BOX_SIZE)
    for i in range(BOX_SIZE):
        for j in range(BOX_SIZE):
            r, c = box_start_row + i, box_start_col + j
            if (r, c) != (row, col) and grid[r][c] == num:
                return False

    return True


# Removes num from the candidates of every peer of the cell. Values are never
# touched. Returns how many candidates were actually removed.
def eliminate(board, row, col, num):
    removed = 0
    for (r, c) in PEERS[(row, col)]:
        if num in board.candidates[r][c]:
            board.candidates[r][c].discard(num)
            removed += 1
    return removed


# Writes num into the cell, empties the cell's own candidate set and prunes
# num from its peers.
def assign(board, row, col, num):
    board.values[row][col] = num
    board.candidates[row][col] = set()
    eliminate(board, row, col, num)


# Returns every filled cell whose value is repeated somewhere in one of its
# units, which is what a front end highlights as a conflict.
def conflicts(board):
    conflicting_cells = set()
    for unit in UNITS:
        seen = {}
        for (r, c) in unit:
            value = board.values[r][c]
            if value == EMPTY:
                continue
            seen.setdefault(value, []).append((r, c))
        for cells in seen.values():
            if len(cells) > 1:
                conflicting_cells.update(cells)
    return conflicting_cells


def is_solved(board):
    expected = set(VALUES)
    for unit in UNITS:
        if {board.values[r][c] for (r, c) in unit} != expected:
            return False
    return True
