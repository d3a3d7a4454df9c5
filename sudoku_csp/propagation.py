import enum
import logging

from sudoku_csp.board import EMPTY, SIZE, UNITS, VALUES
from sudoku_csp.constraints import assign, is_valid_placement

log = logging.getLogger(__name__)

# Upper bound on propagation passes. Every productive pass fills at least one
# cell so a well-formed board never gets close to it.
MAX_PASSES = 100


class Outcome(enum.Enum):
    CONSISTENT = "consistent"
    CONTRADICTION = "contradiction"


# Fills every cell that can be deduced with naked and hidden singles, running
# passes until one places nothing. Returns the outcome together with the list
# of (row, col, value) placements made, in the order they were made. On a
# contradiction the board is left as it was at that moment; restoring it is
# up to the caller.
def propagate(board, max_passes=MAX_PASSES):
    placed = []
    changed = True
    passes = 0

    while changed:
        if passes >= max_passes:
            log.warning("Constraint propagation hit the limit of %d passes", max_passes)
            return Outcome.CONTRADICTION, placed
        passes += 1
        changed = False

        # Naked singles: cells with only one possibility
        for row in range(SIZE):
            for col in range(SIZE):
                if board.values[row][col] != EMPTY:
                    continue
                options = board.candidates[row][col]
                if not options:
                    log.debug("Contradiction at (%d, %d): no candidates left", row, col)
                    return Outcome.CONTRADICTION, placed
                if len(options) == 1:
                    value = next(iter(options))
                    if not _place_single(board, row, col, value, placed, "naked"):
                        return Outcome.CONTRADICTION, placed
                    changed = True

        # Hidden singles: values that can only go in one place in a unit
        for unit in UNITS:
            for value in VALUES:
                spots = []
                already_placed = False
                for (r, c) in unit:
                    if board.values[r][c] == value:
                        already_placed = True
                        break
                    if board.values[r][c] == EMPTY and value in board.candidates[r][c]:
                        spots.append((r, c))
                if already_placed:
                    continue
                if not spots:
                    log.debug("Contradiction: no place left for %d in unit %s", value, unit[0])
                    return Outcome.CONTRADICTION, placed
                if len(spots) == 1:
                    r, c = spots[0]
                    if not _place_single(board, r, c, value, placed, "hidden"):
                        return Outcome.CONTRADICTION, placed
                    changed = True

        # A placement late in the pass can empty a cell that was already scanned
        for row in range(SIZE):
            for col in range(SIZE):
                if board.values[row][col] == EMPTY and not board.candidates[row][col]:
                    log.debug("Contradiction at (%d, %d) after pass %d", row, col, passes)
                    return Outcome.CONTRADICTION, placed

    return Outcome.CONSISTENT, placed


def _place_single(board, row, col, value, placed, technique):
    # Singles come from the candidate sets, so a clash with the grid means the
    # sets are out of sync with the values.
    if not is_valid_placement(board, row, col, value):
        log.warning("Invalid %s single: %d at (%d, %d)", technique, value, row, col)
        return False
    assign(board, row, col, value)
    placed.append((row, col, value))
    log.debug("%s single: placed %d at (%d, %d)", technique.capitalize(), value, row, col)
    return True
