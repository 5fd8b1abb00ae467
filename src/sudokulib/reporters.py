from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .structs import BlankCell, Grid


class BaseReporter:
    """Delegate class to provide progress reporting for the solver."""

    def starting(self, grid: Grid, blanks: Sequence[BlankCell]) -> None:
        """Called before the search actually starts.

        This is called even if there is nothing to fill in.
        """

    def assigning(self, blank: BlankCell, value: int) -> None:
        """Called when a value is kept for a blank cell.

        The value passed the check against the current grid, and the search
        moves on to the next blank cell.
        """

    def rejecting(self, blank: BlankCell, value: int) -> None:
        """Called when a candidate value conflicts with the current grid.

        The search then tries the next candidate of the same cell.
        """

    def backtracking(self, blank: BlankCell) -> None:
        """Called when a blank cell runs out of candidates.

        The cell has been reset to empty, and the search goes back to the
        previous blank cell. This is also called for the first blank cell
        right before the search gives up.
        """

    def ending(self, grid: Grid) -> None:
        """Called before the search ends successfully."""

    def exhausted(self, grid: Grid) -> None:
        """Called before the search ends without finding a solution."""
