import logging
import time

from sudoku_csp.board import Board
from sudoku_csp.strategies import SolveResult, Status, Strategy, make_solver

log = logging.getLogger(__name__)


def _elapsed_ms(start):
    return (time.perf_counter() - start) * 1000.0


def _result(solver, elapsed_ms):
    board = solver.board if solver.status is Status.SOLVED else None
    return SolveResult(solver.status, board, solver.get_steps(), elapsed_ms)


# Solves a copy of board with the given strategy. board may be a Board or a
# raw 9x9 grid and is never modified. Each placement and retraction is passed
# to on_step as a StepEvent.
def solve(board, strategy=Strategy.OPTIMIZED, on_step=None):
    solver = make_solver(strategy, Board.from_grid(board))
    start = time.perf_counter()
    solver.solve(on_step)
    elapsed = _elapsed_ms(start)
    log.info("%s solver finished: %s in %d steps, %.1f ms",
             solver.strategy.value, solver.status.value, solver.get_steps(), elapsed)
    return _result(solver, elapsed)


# Runs both strategies on separate copies of board, one step each in turn, so
# a shared on_step(strategy, event) sink sees both streams as they happen.
# Each solver keeps its own board and step counter. Elapsed times are measured
# from the common start and so include time spent in the other search.
def compare(board, on_step=None):
    solvers = {strategy: make_solver(strategy, Board.from_grid(board)) for strategy in Strategy}
    running = {strategy: solver.iter_steps() for strategy, solver in solvers.items()}
    results = {}

    start = time.perf_counter()
    while running:
        for strategy in list(running):
            try:
                event = next(running[strategy])
            except StopIteration:
                del running[strategy]
                results[strategy] = _result(solvers[strategy], _elapsed_ms(start))
                continue
            if on_step is not None:
                on_step(strategy, event)

    for strategy, result in results.items():
        log.info("%s solver finished: %s in %d steps", strategy.value, result.status.value, result.steps)
    return {strategy: results[strategy] for strategy in Strategy}
