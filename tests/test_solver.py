from sudoku_csp.constraints import is_solved
from sudoku_csp.solver import compare, solve
from sudoku_csp.strategies import Status, StepKind, Strategy


def test_solve_leaves_input_untouched(puzzle):
    before = puzzle.copy()
    result = solve(puzzle, Strategy.OPTIMIZED)
    assert result.status is Status.SOLVED
    assert is_solved(result.board)
    assert puzzle == before
    assert result.elapsed_ms >= 0


def test_solve_accepts_raw_grid(puzzle):
    result = solve(puzzle.grid(), "basic")
    assert result.status is Status.SOLVED
    assert is_solved(result.board)


def test_unsolvable_result_has_no_board(dead_end):
    result = solve(dead_end)
    assert result.status is Status.UNSOLVABLE
    assert result.board is None


def test_solve_forwards_events(one_blank):
    events = []
    result = solve(one_blank, on_step=events.append)
    assert result.steps == 1
    assert [event.kind for event in events] == [StepKind.PLACE]


def test_strategies_agree(puzzle):
    results = compare(puzzle)
    basic = results[Strategy.BASIC]
    optimized = results[Strategy.OPTIMIZED]
    assert basic.status is optimized.status is Status.SOLVED
    assert basic.board.values == optimized.board.values
    assert optimized.steps < basic.steps


def test_compare_interleaves_both_streams(puzzle):
    seen = []
    results = compare(puzzle, on_step=lambda strategy, event: seen.append(strategy))
    assert set(seen[:2]) == {Strategy.BASIC, Strategy.OPTIMIZED}
    for strategy in Strategy:
        assert seen.count(strategy) == results[strategy].steps


def test_compare_agrees_on_unsolvable(dead_end):
    results = compare(dead_end)
    assert all(result.status is Status.UNSOLVABLE for result in results.values())
