import argparse
import logging
import sys

from sudoku_csp.board import Board, InvalidBoardError
from sudoku_csp.generator import generate, removals_for
from sudoku_csp.solver import compare
from sudoku_csp.strategies import Status, Strategy

PUZZLES = {
    "classic": """
        530070000
        600195000
        098000060
        800060003
        400803001
        700020006
        060000280
        000419005
        000080079
    """,
    "nyt_easy": """
        415830090
        003009104
        002150006
        900783000
        200000381
        500012400
        004900063
        380500040
        009307500
    """,
    "nyt_medium": """
        500000300
        009000027
        400105009
        200000070
        000006000
        006049000
        300027900
        080600000
        000034012
    """,
    "nyt_hard": """
        000030400
        900400300
        300000072
        009005000
        800010000
        700600529
        000100700
        601050008
        040000010
    """,
}


def print_result(strategy, result):
    print(f"{strategy.value} backtracking:")
    if result.status is Status.SOLVED:
        print(result.board)
    else:
        print("No solution exists")
    print(f"Total steps made: {result.steps} ({result.elapsed_ms:.1f} ms)")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="sudoku_csp",
        description="Solve a Sudoku with basic and optimized backtracking and compare them.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--puzzle", choices=sorted(PUZZLES), default="classic",
                        help="bundled puzzle to solve")
    source.add_argument("--grid", help="81 characters, 0 or '.' for blanks")
    source.add_argument("--generate", metavar="DIFFICULTY", choices=["easy", "medium", "normal", "hard"],
                        help="solve a freshly generated puzzle")
    parser.add_argument("--seed", type=int, help="seed for --generate")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every search step")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.grid:
            board = Board.from_string(args.grid)
        elif args.generate:
            board = generate(removals_for(args.generate), seed=args.seed)
        else:
            board = Board.from_string(PUZZLES[args.puzzle])
    except InvalidBoardError as exc:
        parser.error(str(exc))

    print("Puzzle:")
    print(board)
    print()

    results = compare(board)
    for strategy in Strategy:
        print_result(strategy, results[strategy])
        print()

    basic = results[Strategy.BASIC]
    optimized = results[Strategy.OPTIMIZED]
    if basic.status is Status.SOLVED and optimized.status is Status.SOLVED and basic.steps:
        reduction = (basic.steps - optimized.steps) / basic.steps * 100
        print(f"Optimized backtracking used {reduction:.1f}% fewer steps")
    return 0 if optimized.status is Status.SOLVED else 1


if __name__ == "__main__":
    sys.exit(main())
