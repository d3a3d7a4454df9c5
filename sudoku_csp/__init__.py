from sudoku_csp.board import EMPTY, Board, InvalidBoardError
from sudoku_csp.constraints import conflicts, eliminate, is_solved, is_valid_placement
from sudoku_csp.generator import SudokuGenerator, generate, removals_for
from sudoku_csp.propagation import Outcome, propagate
from sudoku_csp.solver import compare, solve
from sudoku_csp.strategies import (
    BruteForceSolver,
    CSPSolver,
    SolveResult,
    Status,
    StepEvent,
    StepKind,
    Strategy,
)

__all__ = [
    "EMPTY",
    "Board",
    "BruteForceSolver",
    "CSPSolver",
    "InvalidBoardError",
    "Outcome",
    "SolveResult",
    "Status",
    "StepEvent",
    "StepKind",
    "Strategy",
    "SudokuGenerator",
    "compare",
    "conflicts",
    "eliminate",
    "generate",
    "is_solved",
    "is_valid_placement",
    "propagate",
    "removals_for",
]
