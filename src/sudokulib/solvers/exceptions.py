from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..structs import BlankCell, Grid


class SolverException(Exception):
    """A base class for all exceptions raised by this module.

    Exceptions derived by this class should all be handled in this module. Any
    bubbling pass the solver should be treated as a bug.
    """


class SolutionError(SolverException):
    pass


class SolutionImpossible(SolutionError):
    def __init__(self, grid: Grid, blanks: Sequence[BlankCell]):
        super().__init__(grid, blanks)
        self.grid = grid
        self.blanks = blanks

    def __str__(self) -> str:
        return f"No solution found for {len(self.blanks)} blank cells"
