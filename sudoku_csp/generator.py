import logging
import random

from sudoku_csp.board import EMPTY, SIZE, VALUES, Board
from sudoku_csp.constraints import is_valid_placement

log = logging.getLogger(__name__)

DEFAULT_REMOVALS = 40

# Number of cells cleared for each named difficulty
DIFFICULTY_REMOVALS = {
    "easy": 35,
    "medium": DEFAULT_REMOVALS,
    "normal": 45,
    "hard": 55,
}


def removals_for(difficulty):
    try:
        return DIFFICULTY_REMOVALS[difficulty]
    except KeyError:
        raise ValueError(f"unknown difficulty {difficulty!r}") from None


class SudokuGenerator:
    def __init__(self, seed=None, rng=None):
        self.rng = rng if rng is not None else random.Random(seed)

    # Same row-major recursion as the brute force solver, but each cell tries
    # the numbers 1-9 in a freshly shuffled order so every run gives a
    # different grid.
    def fill_completely(self, board):
        for row in range(SIZE):
            for col in range(SIZE):
                if board.values[row][col] == EMPTY:
                    nums = list(VALUES)
                    self.rng.shuffle(nums)
                    for num in nums:
                        if is_valid_placement(board, row, col, num):
                            board.values[row][col] = num
                            if self.fill_completely(board):
                                return True
                            board.values[row][col] = EMPTY  # Backtrack
                    return False  # No valid number found
        return True  # Grid is filled

    def generate_filled_grid(self):
        board = Board.empty()
        if not self.fill_completely(board):
            # An empty grid always has a completion
            raise RuntimeError("could not fill an empty grid")
        board.init_candidates()
        return board

    # Clears exactly target_removals random cells of a freshly filled grid.
    # Picking a cell that is already empty is simply retried. There is no
    # uniqueness check; the puzzle is solvable because the filled grid is a
    # solution of it.
    def create_puzzle(self, target_removals=DEFAULT_REMOVALS):
        if not 0 <= target_removals <= SIZE * SIZE:
            raise ValueError(f"removals must be between 0 and {SIZE * SIZE}, got {target_removals}")

        puzzle = self.generate_filled_grid()
        removed = 0
        while removed < target_removals:
            row = self.rng.randrange(SIZE)
            col = self.rng.randrange(SIZE)
            if puzzle.values[row][col] == EMPTY:
                continue
            puzzle.values[row][col] = EMPTY
            removed += 1

        puzzle.init_candidates()
        log.debug("Generated puzzle with %d empty cells", removed)
        return puzzle


def generate(removals=DEFAULT_REMOVALS, seed=None):
    return SudokuGenerator(seed=seed).create_puzzle(removals)
