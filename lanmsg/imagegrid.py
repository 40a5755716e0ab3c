"""Grid of pictures from which one is picked, such as the smiley chooser.

Pictures are laid out row by row in a fixed number of columns. The last row
may be only partly filled; its empty cells cannot be picked. Each cell is
the picture size plus 8 pixels, and the table adds 8 pixels of padding in
each direction.
"""

from __future__ import annotations

import math
from typing import Callable, Sequence

_CELL_PADDING = 8
_TABLE_PADDING = 8


class ImageGrid:
    """Lays pictures out in a grid and records which one was picked.

    on_select is called with the index of a picture whenever it is picked.
    """

    def __init__(
        self,
        source: Sequence[str],
        pic_size: int = 19,
        columns: int = 10,
        on_select: Callable[[int], None] | None = None,
    ) -> None:
        if columns < 1:
            raise ValueError("columns must be at least 1")
        if pic_size < 0:
            raise ValueError("pic_size must not be negative")
        self.source = list(source)
        self.pic_size = pic_size
        self.columns = columns
        self.on_select = on_select
        self.selected: int | None = None

    @property
    def rows(self) -> int:
        """Number of rows needed to hold every picture."""
        return math.ceil(len(self.source) / self.columns)

    @property
    def cell_size(self) -> int:
        """Width and height of one cell in pixels."""
        return self.pic_size + _CELL_PADDING

    def _check(self, row: int, column: int) -> None:
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(f"cell ({row}, {column}) is outside the grid")

    def index_at(self, row: int, column: int) -> int:
        """Return the picture index that the cell at row and column stands for."""
        self._check(row, column)
        return row * self.columns + column

    def cell(self, row: int, column: int) -> str | None:
        """Return the picture in a cell, or None for an empty cell."""
        index = self.index_at(row, column)
        return self.source[index] if index < len(self.source) else None

    def select(self, row: int, column: int) -> int | None:
        """Pick the picture in a cell and return its index.

        An empty cell leaves the selection as it was and returns None.
        """
        if self.cell(row, column) is None:
            return None
        index = self.index_at(row, column)
        self.selected = index
        if self.on_select is not None:
            self.on_select(index)
        return index

    def table_size(self) -> tuple[int, int]:
        """Return the width and height of the whole table, padding included."""
        return (
            self.columns * self.cell_size + _TABLE_PADDING,
            self.rows * self.cell_size + _TABLE_PADDING,
        )