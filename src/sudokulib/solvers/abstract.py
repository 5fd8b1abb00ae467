from __future__ import annotations

import collections
from typing import TYPE_CHECKING, NamedTuple

from ..reporters import BaseReporter
from .exceptions import SolverException

if TYPE_CHECKING:
    from ..structs import BlankCell, Grid

    class Result(NamedTuple):
        grid: Grid
        blanks: list[BlankCell]

else:
    Result = collections.namedtuple("Result", ["grid", "blanks"])


class AbstractSolver:
    """The thing that performs the actual solving work."""

    base_exception = SolverException

    def __init__(self, reporter: BaseReporter | None = None) -> None:
        self.reporter = reporter if reporter is not None else BaseReporter()

    def solve(self, grid: Grid) -> Result:
        """Take a puzzle grid, and return a solution.

        A solution is a `Result` instance holding the completed grid and the
        blank cells that were filled in.

        A subclass may raise `SolutionError` if a solution cannot be found.
        """
        raise NotImplementedError
