from __future__ import annotations

from collections import namedtuple
from typing import TYPE_CHECKING, Iterable, Iterator, NamedTuple, Sequence, Tuple

SIZE = 9
BOX_SIZE = SIZE // 3
EMPTY = 0
DIGITS = range(1, SIZE + 1)

Cell = Tuple[int, int]  # (row, column)

if TYPE_CHECKING:

    class _BlankCell(NamedTuple):
        row: int
        column: int
        candidates: tuple[bool, ...]

else:
    _BlankCell = namedtuple("_BlankCell", ["row", "column", "candidates"])


class BlankCell(_BlankCell):
    """A cell that was empty when the puzzle was loaded.

    ``candidates`` holds one flag per digit (index ``v - 1`` for digit ``v``)
    telling whether that digit was admissible when the cell was scanned, with
    every other cell holding its initial value. This is only a filter on the
    search order; the solver re-checks each digit against the live grid.

    The descriptor refers to its cell by coordinates only.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        digits = "".join(str(v) for v in self.iter_candidates())
        return f"BlankCell(({self.row}, {self.column}), candidates={digits!r})"

    def iter_candidates(self, lower: int = EMPTY) -> Iterator[int]:
        """Iterate over admissible digits strictly greater than ``lower``."""
        for index in range(lower, SIZE):
            if self.candidates[index]:
                yield index + 1


class Grid:
    """A 9x9 Sudoku grid. Empty cells hold ``EMPTY``.

    Cells are addressed with ``(row, column)`` tuples::

        grid[0, 4] = 7
    """

    def __init__(self, rows: Iterable[Sequence[int]] | None = None) -> None:
        if rows is None:
            self._rows = [[EMPTY] * SIZE for _ in range(SIZE)]
            return
        self._rows = [list(row) for row in rows]
        if len(self._rows) != SIZE:
            raise ValueError(f"expected {SIZE} rows, got {len(self._rows)}")
        for index, row in enumerate(self._rows):
            if len(row) != SIZE:
                raise ValueError(
                    f"row {index} has {len(row)} cells, expected {SIZE}"
                )
            for value in row:
                if value != EMPTY and value not in DIGITS:
                    raise ValueError(f"invalid cell value {value!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.serialize()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._rows == other._rows

    def __len__(self) -> int:
        return SIZE

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return (tuple(row) for row in self._rows)

    def __getitem__(self, key: Cell) -> int:
        row, column = key
        return self._rows[row][column]

    def __setitem__(self, key: Cell, value: int) -> None:
        row, column = key
        self._rows[row][column] = value

    def copy(self) -> Grid:
        """Return an independent copy of this grid."""
        other = type(self)()
        other._rows = [list(row) for row in self._rows]
        return other

    def count_blanks(self) -> int:
        return sum(row.count(EMPTY) for row in self._rows)

    def is_complete(self) -> bool:
        """Whether every row, column and box holds each digit exactly once."""
        units = [list(row) for row in self._rows]
        units.extend([row[c] for row in self._rows] for c in range(SIZE))
        units.extend(
            [
                self._rows[r][c]
                for r in range(top, top + BOX_SIZE)
                for c in range(left, left + BOX_SIZE)
            ]
            for top in range(0, SIZE, BOX_SIZE)
            for left in range(0, SIZE, BOX_SIZE)
        )
        expected = sorted(DIGITS)
        return all(sorted(unit) == expected for unit in units)

    def serialize(self) -> str:
        """Row-major 81-character string, with a space for empty cells."""
        return "".join(
            str(value) if value != EMPTY else " "
            for row in self._rows
            for value in row
        )
