SIZE = 9
BOX_SIZE = 3
EMPTY = 0
VALUES = tuple(range(1, SIZE + 1))

# Every unit of the grid as a tuple of (row, col) coordinates. Rows, then
# columns, then boxes numbered left to right, top to bottom.
ROWS = tuple(tuple((row, col) for col in range(SIZE)) for row in range(SIZE))
COLS = tuple(tuple((row, col) for row in range(SIZE)) for col in range(SIZE))
BOXES = tuple(
    tuple(
        (box_row + i, box_col + j)
        for i in range(BOX_SIZE)
        for j in range(BOX_SIZE)
    )
    for box_row in range(0, SIZE, BOX_SIZE)
    for box_col in range(0, SIZE, BOX_SIZE)
)
UNITS = ROWS + COLS + BOXES


# Returns all the cells that the cell parameter can see, that is every cell
# sharing its row, column or box, without the cell itself.
def _peers_of(cell):
    row, col = cell
    neighbors = set()

    for i in range(SIZE):
        if i != col:
            neighbors.add((row, i))
        if i != row:
            neighbors.add((i, col))

    # Top left corner of the box the current cell is in
    box_start_row, box_start_col = BOX_SIZE * (row // BOX_SIZE), BOX_SIZE * (col // BOX_SIZE)
    for i in range(BOX_SIZE):
        for j in range(BOX_SIZE):
            r, c = box_start_row + i, box_start_col + j
            if (r, c) != cell:
                neighbors.add((r, c))

    return frozenset(neighbors)


PEERS = {(row, col): _peers_of((row, col)) for row in range(SIZE) for col in range(SIZE)}

# Characters accepted as a blank cell, both in grids sent by a client and in
# the 81 character string form.
BLANKS = ('', '.', '0', None)


class InvalidBoardError(ValueError):
    pass


# A 9x9 Sudoku grid together with the candidate set of every cell. Values are
# stored row-major, 0 meaning empty. Candidate sets are only meaningful for
# empty cells; a filled cell always holds an empty set.
class Board:

    def __init__(self, values=None):
        if values is None:
            values = [[EMPTY] * SIZE for _ in range(SIZE)]
        # Rows are copied so the board never shares lists with the caller
        self.values = [list(row) for row in values]
        self.candidates = [[set() for _ in range(SIZE)] for _ in range(SIZE)]
        self.init_candidates()

    @classmethod
    def empty(cls):
        return cls()

    # Builds a board out of a 9x9 nested sequence. Cells may be ints, digit
    # strings or one of the blank markers; anything else is rejected.
    @classmethod
    def from_grid(cls, grid):
        if isinstance(grid, Board):
            return grid.copy()
        if not isinstance(grid, (list, tuple)) or len(grid) != SIZE:
            raise InvalidBoardError(f"expected {SIZE} rows")

        values = []
        for row_index, row in enumerate(grid):
            if not isinstance(row, (list, tuple)) or len(row) != SIZE:
                raise InvalidBoardError(f"row {row_index} must have {SIZE} cells")
            values.append([_parse_cell(cell, row_index, col_index) for col_index, cell in enumerate(row)])
        return cls(values)

    # Parses the common one-line puzzle form: 81 characters of digits with
    # 0 or '.' for blanks. Whitespace is ignored so the grid can be laid out
    # over several lines.
    @classmethod
    def from_string(cls, text):
        chars = [ch for ch in text if not ch.isspace()]
        if len(chars) != SIZE * SIZE:
            raise InvalidBoardError(f"expected {SIZE * SIZE} cells, got {len(chars)}")
        return cls.from_grid([chars[i:i + SIZE] for i in range(0, SIZE * SIZE, SIZE)])

    # Rebuilds every candidate set from the current values: all of 1-9 for an
    # empty cell minus whatever its peers already hold.
    def init_candidates(self):
        for row in range(SIZE):
            for col in range(SIZE):
                if self.values[row][col] == EMPTY:
                    seen = {self.values[r][c] for r, c in PEERS[(row, col)]}
                    self.candidates[row][col] = set(VALUES) - seen
                else:
                    self.candidates[row][col] = set()

    def copy(self):
        clone = Board.__new__(Board)
        clone.values = [row[:] for row in self.values]
        clone.candidates = [[set(cell) for cell in row] for row in self.candidates]
        return clone

    # A snapshot is a full copy of values and candidates
    def snapshot(self):
        return self.copy()

    def restore(self, state):
        self.values = [row[:] for row in state.values]
        self.candidates = [[set(cell) for cell in row] for row in state.candidates]

    # Cells that are empty in the snapshot but hold a value now, row-major.
    def filled_since(self, state):
        return [
            (row, col)
            for row in range(SIZE)
            for col in range(SIZE)
            if state.values[row][col] == EMPTY and self.values[row][col] != EMPTY
        ]

    def grid(self):
        return [row[:] for row in self.values]

    def empty_cells(self):
        return [
            (row, col)
            for row in range(SIZE)
            for col in range(SIZE)
            if self.values[row][col] == EMPTY
        ]

    def is_complete(self):
        return all(value != EMPTY for row in self.values for value in row)

    def count_empty(self):
        return sum(1 for row in self.values for value in row if value == EMPTY)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.values == other.values and self.candidates == other.candidates

    def __repr__(self):
        return f"Board({self.values!r})"

    # Same layout as the classic print_board: one row per line, '.' for blanks
    def __str__(self):
        return "\n".join(
            " ".join(str(num) if num != EMPTY else '.' for num in row)
            for row in self.values
        )


def _parse_cell(cell, row, col):
    if cell in BLANKS:
        return EMPTY
    if isinstance(cell, bool):
        raise InvalidBoardError(f"invalid value {cell!r} at ({row}, {col})")
    try:
        value = int(cell)
    except (TypeError, ValueError, OverflowError):
        raise InvalidBoardError(f"invalid value {cell!r} at ({row}, {col})") from None
    if isinstance(cell, float) and cell != value:
        raise InvalidBoardError(f"invalid value {cell!r} at ({row}, {col})")
    if not 0 <= value <= SIZE:
        raise InvalidBoardError(f"value {value} at ({row}, {col}) is out of range")
    return value
