"""Building grids from puzzle text, and rendering them back as text.

Puzzle text uses the characters ``'1'`` to ``'9'`` for clues. Any other
character, and any position past the end of the text, is an empty cell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .structs import BOX_SIZE, EMPTY, SIZE, Grid

if TYPE_CHECKING:
    from typing import Iterable, Optional, Sequence

    from .structs import BlankCell

_SEPARATOR_LINE = "-" * (SIZE * 2 + BOX_SIZE)


def _cell_value(char: str) -> int:
    if "1" <= char <= "9":
        return ord(char) - ord("0")
    return EMPTY


def _parse_row(text: str) -> list[int]:
    text = text[:SIZE]
    return [_cell_value(c) for c in text] + [EMPTY] * (SIZE - len(text))


def _ensure_text(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"puzzle text expected, not {type(value).__name__}")
    return value


def grid_from_rows(rows: Iterable[Optional[str]]) -> tuple[Grid, int]:
    """Build a grid from up to nine row strings.

    A ``None`` or missing row is a row of empty cells. Rows past the ninth,
    and characters past the ninth of a row, are ignored.

    Returns the grid and the number of empty cells in it.
    """
    if isinstance(rows, str):
        raise TypeError("a sequence of rows expected, use grid_from_string()")
    parsed = []
    for row in rows:
        if len(parsed) == SIZE:
            break
        parsed.append(_parse_row("" if row is None else _ensure_text(row)))
    parsed.extend([EMPTY] * SIZE for _ in range(SIZE - len(parsed)))
    grid = Grid(parsed)
    return grid, grid.count_blanks()


def grid_from_string(text: str) -> tuple[Grid, int]:
    """Build a grid from a single row-major string of up to 81 characters.

    Returns the grid and the number of empty cells in it.
    """
    return grid_from_rows(split_string(_ensure_text(text)))


def split_string(text: str) -> list[str]:
    """Cut a row-major puzzle string into nine row strings.

    Rows are shorter, or empty, where the text runs out.
    """
    _ensure_text(text)
    return [text[start : start + SIZE] for start in range(0, SIZE * SIZE, SIZE)]


def format_grid(grid: Grid) -> str:
    """Render a grid with separators between boxes. Empty cells show as 0."""
    lines = []
    for row_index, row in enumerate(grid):
        if row_index and row_index % BOX_SIZE == 0:
            lines.append(_SEPARATOR_LINE)
        parts = []
        for column_index, value in enumerate(row):
            if column_index and column_index % BOX_SIZE == 0:
                parts.append("| ")
            parts.append(f"{value} ")
        lines.append("".join(parts))
    return "\n".join(lines)


def format_blanks(blanks: Sequence[BlankCell]) -> str:
    """Render blank cell descriptors, one per line, flags as 1 or 0."""
    return "\n".join(
        "BlankCell[{}]: ({},{}),{}".format(
            index,
            blank.row,
            blank.column,
            ",".join("1" if flag else "0" for flag in blank.candidates),
        )
        for index, blank in enumerate(blanks)
    )
