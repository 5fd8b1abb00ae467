"""Solve a puzzle given on the command line.

Usage::

    python -m sudokulib "53  7    6  195    98    6 8   6   34  8 3  17 ..."
"""

import argparse
import sys

from .grids import format_blanks, format_grid, grid_from_string
from .reporters import BaseReporter
from .solvers import SolutionImpossible, Solver


class CountingReporter(BaseReporter):
    def __init__(self):
        self.assignments = 0
        self.rejections = 0
        self.backtracks = 0

    def assigning(self, blank, value):
        self.assignments += 1

    def rejecting(self, blank, value):
        self.rejections += 1

    def backtracking(self, blank):
        self.backtracks += 1

    def summary(self):
        return (
            f"{self.assignments} assignments, {self.rejections} rejections, "
            f"{self.backtracks} backtracks"
        )


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="sudokulib",
        description="Solve a 9x9 Sudoku puzzle by backtracking.",
    )
    parser.add_argument(
        "puzzle",
        metavar="PUZZLE",
        help=(
            "The puzzle as a row-major string of up to 81 characters. "
            "Digits 1-9 are clues, anything else is a blank."
        ),
    )
    parser.add_argument(
        "--show-blanks",
        action="store_true",
        help="Print the candidate table of the blank cells before solving.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print search statistics after solving.",
    )
    return parser


def main(argv=None):
    options = _build_parser().parse_args(argv)
    grid, _ = grid_from_string(options.puzzle)
    reporter = CountingReporter()
    solver = Solver(reporter)

    print("Initial puzzle:")
    print(format_grid(grid))
    print()

    try:
        result = solver.solve(grid)
    except SolutionImpossible as e:
        if options.show_blanks:
            print(format_blanks(e.blanks))
            print()
        print("No solution found")
    else:
        if options.show_blanks:
            print(format_blanks(result.blanks))
            print()
        print("Solved puzzle:")
        print(format_grid(result.grid))

    if options.verbose:
        print(reporter.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
