from __future__ import annotations

from typing import TYPE_CHECKING

from ..reporters import BaseReporter
from ..structs import BOX_SIZE, DIGITS, EMPTY, SIZE, BlankCell
from .abstract import AbstractSolver, Result
from .exceptions import SolutionImpossible

if TYPE_CHECKING:
    from typing import Sequence

    from ..structs import Grid


def is_valid_region(
    grid: Grid, row_min: int, row_max: int, col_min: int, col_max: int
) -> bool:
    """Check a rectangle of the grid for duplicated digits.

    Bounds are half-open. Empty cells are ignored.
    """
    seen = set()
    for row in range(row_min, row_max):
        for column in range(col_min, col_max):
            value = grid[row, column]
            if value == EMPTY:
                continue
            if value in seen:
                return False
            seen.add(value)
    return True


def is_admissible(grid: Grid, row: int, column: int) -> bool:
    """Whether the value currently in a cell breaks no Sudoku rule.

    The cell itself is part of the row, column and box being scanned, so the
    value to test must be written into the grid first.
    """
    top = (row // BOX_SIZE) * BOX_SIZE
    left = (column // BOX_SIZE) * BOX_SIZE
    return (
        is_valid_region(grid, row, row + 1, 0, SIZE)
        and is_valid_region(grid, 0, SIZE, column, column + 1)
        and is_valid_region(grid, top, top + BOX_SIZE, left, left + BOX_SIZE)
    )


def _scan_blank(grid: Grid, row: int, column: int) -> BlankCell:
    flags = []
    for value in DIGITS:
        grid[row, column] = value
        flags.append(is_admissible(grid, row, column))
    grid[row, column] = EMPTY
    return BlankCell(row, column, tuple(flags))


def compute_blanks(grid: Grid) -> list[BlankCell]:
    """Build a descriptor for each empty cell, in row-major order.

    The order of the returned list is the order in which the solver fills
    cells in. Each digit is tried in the cell with all other cells left as
    they are; the grid is restored before this returns.
    """
    return [
        _scan_blank(grid, row, column)
        for row in range(SIZE)
        for column in range(SIZE)
        if grid[row, column] == EMPTY
    ]


def solve(
    grid: Grid,
    blanks: Sequence[BlankCell],
    reporter: BaseReporter | None = None,
) -> bool:
    """Fill in the blank cells of ``grid`` in place.

    ``blanks`` should come from ``compute_blanks()`` on the same grid. Cells
    are filled in the order given, each trying its precomputed candidates in
    ascending order and checking them against the current grid. A cell that
    runs out of candidates is emptied and the previous cell moves on to its
    next candidate.

    Returns whether a complete grid was reached. If not, every cell the
    search touched has been reset to empty.
    """
    if reporter is None:
        reporter = BaseReporter()
    reporter.starting(grid, blanks)

    # Nothing to fill in; the grid is complete as given.
    if not blanks:
        reporter.ending(grid)
        return True

    index = 0
    while index < len(blanks):
        blank = blanks[index]
        key = (blank.row, blank.column)

        value = next(blank.iter_candidates(grid[key]), EMPTY)
        grid[key] = value

        if value == EMPTY:
            reporter.backtracking(blank)
            if index == 0:
                reporter.exhausted(grid)
                return False
            index -= 1
        elif is_admissible(grid, blank.row, blank.column):
            reporter.assigning(blank, value)
            index += 1
        else:
            # Stay on this cell; the next pass scans on from this value.
            reporter.rejecting(blank, value)

    reporter.ending(grid)
    return True


class Solver(AbstractSolver):
    """Solve puzzles by backtracking over their blank cells in row-major order."""

    def solve(self, grid: Grid) -> Result:
        """Take a puzzle grid, spit out the solved grid.

        The given grid is not modified. The return value is a tuple subclass
        with two members:

        * `grid`: The completed grid.
        * `blanks`: A list of `BlankCell` descriptors for the cells that were
            empty in the puzzle, in the order they were filled in.

        `SolutionImpossible` is raised if the puzzle has no solution. This is
        also what happens if the clues already conflict with each other.
        """
        work = grid.copy()
        blanks = compute_blanks(work)
        if not solve(work, blanks, self.reporter):
            raise SolutionImpossible(work, blanks)
        return Result(grid=work, blanks=blanks)
