import collections
import enum
import logging

from sudoku_csp.board import EMPTY, PEERS, SIZE, VALUES
from sudoku_csp.constraints import assign, conflicts, is_valid_placement
from sudoku_csp.propagation import Outcome, propagate

log = logging.getLogger(__name__)

# One recursion level per cell; anything deeper means the search has run away.
MAX_DEPTH = SIZE * SIZE


class StepKind(enum.Enum):
    PLACE = "place"
    RETRACT = "retract"


# Emitted once per placement or retraction so an observer can follow the
# search. A retraction always carries value 0.
StepEvent = collections.namedtuple("StepEvent", ["row", "col", "value", "kind"])


class Strategy(enum.Enum):
    BASIC = "basic"
    OPTIMIZED = "optimized"


class Status(enum.Enum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


# Outcome of one solve: the solved board (None when unsolvable), the number
# of placements plus retractions, and the wall time in milliseconds.
SolveResult = collections.namedtuple("SolveResult", ["status", "board", "steps", "elapsed_ms"])


# Shared plumbing of both search strategies: the board being searched, the
# step counter and the generator protocol. Subclasses implement _search as a
# generator that yields a StepEvent after every placement and retraction and
# returns True once the board is solved.
class Solver:

    strategy = None

    def __init__(self, board):
        self.board = board
        self.step_counter = 0
        self.status = None

    # Runs the search lazily. Every yielded event is a point where the caller
    # may render the board, interleave another solver or stop altogether.
    def iter_steps(self):
        self.step_counter = 0
        self.status = None

        if conflicts(self.board):
            log.info("%s solver: the givens already conflict", self.strategy.value)
            self.status = Status.UNSOLVABLE
            return

        self._prepare()
        solved = yield from self._search(0)
        self.status = Status.SOLVED if solved else Status.UNSOLVABLE

    # Drains iter_steps, handing each event to on_step when one is supplied.
    def solve(self, on_step=None):
        for event in self.iter_steps():
            if on_step is not None:
                on_step(event)
        return self.status is Status.SOLVED

    def get_steps(self):
        return self.step_counter

    def _place(self, row, col, value):
        self.step_counter += 1
        return StepEvent(row, col, value, StepKind.PLACE)

    def _retract(self, row, col):
        self.step_counter += 1
        return StepEvent(row, col, EMPTY, StepKind.RETRACT)

    def _prepare(self):
        pass

    def _search(self, depth):
        raise NotImplementedError


# This class represents a brute force approach towards solving a sudoku problem,
# which is obviously much less efficient but serves as the benchmark for the
# propagation based solver below. Cells are scanned row-major and the numbers
# 1-9 are tried in ascending order; validity is recomputed from the grid alone.
class BruteForceSolver(Solver):

    strategy = Strategy.BASIC

    def _search(self, depth):
        # Finds the first empty cell in the grid, if there are no more empty cells left
        # the grid has been solved
        empty = self.find_empty()
        if not empty:
            return True
        row, col = empty

        # Tries every number 1-9 and checks if it is a valid placement. Both the
        # placement and the retraction after a failed branch count as a step.
        for num in VALUES:
            if is_valid_placement(self.board, row, col, num):
                self.board.values[row][col] = num
                yield self._place(row, col, num)

                if (yield from self._search(depth + 1)):
                    return True

                self.board.values[row][col] = EMPTY
                yield self._retract(row, col)

        return False

    # Method that finds the first empty cell in the grid
    def find_empty(self):
        for row in range(SIZE):
            for col in range(SIZE):
                if self.board.values[row][col] == EMPTY:
                    return (row, col)
        return None


# Solves sudoku grids as a CSP: naked and hidden singles are propagated before
# every decision, the next cell is the one with the minimum remaining values
# (MRV) and its values are tried least constraining (LCV) first. The idea is
# that these heuristics cut the number of placements needed compared to the
# brute force approach.
class CSPSolver(Solver):

    strategy = Strategy.OPTIMIZED

    # Candidate sets are rebuilt from the grid so a board edited by hand
    # still starts the search consistent.
    def _prepare(self):
        self.board.init_candidates()

    def _search(self, depth):
        # Safety check to prevent runaway recursion
        if depth > MAX_DEPTH:
            log.warning("Maximum recursion depth %d reached", MAX_DEPTH)
            return False

        # Deduced placements count as steps and are reported like any other
        outcome, placed = propagate(self.board)
        for (row, col, value) in placed:
            yield self._place(row, col, value)
        if outcome is Outcome.CONTRADICTION:
            log.debug("Constraint propagation failed at depth %d", depth)
            return False

        for (row, col) in self.board.empty_cells():
            if not self.board.candidates[row][col]:
                log.debug("Contradiction found at (%d, %d), depth %d", row, col, depth)
                return False

        cell = most_constrained_cell(self.board)
        if cell is None:
            log.debug("Puzzle solved at depth %d", depth)
            return True
        row, col = cell

        for value in order_values(self.board, row, col):
            saved = self.board.snapshot()

            if not is_valid_placement(self.board, row, col, value):
                log.warning("Candidate %d at (%d, %d) clashes with the grid", value, row, col)
                continue

            assign(self.board, row, col, value)
            yield self._place(row, col, value)

            if (yield from self._search(depth + 1)):
                return True

            # Undo this value and everything propagation deduced from it, the
            # trial cell itself last.
            filled = self.board.filled_since(saved)
            filled.remove((row, col))
            filled.append((row, col))
            self.board.restore(saved)
            for (r, c) in filled:
                yield self._retract(r, c)

        log.debug("All values failed at (%d, %d), depth %d", row, col, depth)
        return False


# Returns the empty cell with the fewest candidates, the first one in row-major
# order on ties. A cell with a single candidate ends the scan straight away.
def most_constrained_cell(board):
    min_cell = None
    min_values = SIZE + 1
    for row in range(SIZE):
        for col in range(SIZE):
            if board.values[row][col] != EMPTY:
                continue
            count = len(board.candidates[row][col])
            if count > SIZE:
                log.warning("Invalid candidate count %d at (%d, %d)", count, row, col)
                continue
            if count < min_values:
                min_cell = (row, col)
                min_values = count
                if count == 1:
                    return min_cell
    return min_cell


# Returns the candidates of a cell sorted by how many peer candidates each one
# would eliminate, fewest first. Ties keep ascending order.
def order_values(board, row, col):

    # Helper function that counts the number of peers still considering num
    def num_conflicts(num):
        return sum(1 for (r, c) in PEERS[(row, col)] if num in board.candidates[r][c])

    return sorted(sorted(board.candidates[row][col]), key=num_conflicts)


SOLVERS = {
    Strategy.BASIC: BruteForceSolver,
    Strategy.OPTIMIZED: CSPSolver,
}


def make_solver(strategy, board):
    return SOLVERS[Strategy(strategy)](board)
