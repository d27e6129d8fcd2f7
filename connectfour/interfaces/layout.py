"""
layout.py - Fit the grid onto a drawing surface

Square cells are sized to the limiting dimension of the surface and the
grid is centred along the other one. Front-ends use ``column_at`` to map
a pointer position to the column under it.
"""

from typing import List, NamedTuple, Optional, Tuple

from connectfour.utils import (ROWS, COLS, GRID_CIRCLE, MARGIN,
                               COLOR_FRAME, COLOR_FRAME_BUTT)


class CellRect(NamedTuple):
    left: float
    top: float
    size: float

    @property
    def right(self) -> float:
        return self.left + self.size

    @property
    def bottom(self) -> float:
        return self.top + self.size

    @property
    def center(self):
        return self.left + self.size / 2, self.top + self.size / 2

    def contains(self, x: float, y: float) -> bool:
        return self.left < x < self.right and self.top < y < self.bottom


class Layout:
    """Geometry of a ``rows`` x ``cols`` grid on a ``width`` x ``height`` surface."""

    def __init__(self, width: float, height: float,
                 rows: int = ROWS, cols: int = COLS,
                 margin_fraction: float = MARGIN):
        self.width = width
        self.height = height
        self.rows = rows
        self.cols = cols
        self.margin = margin_fraction * min(width, height)

        # Portrait when the width limits the cell size
        if (width - self.margin * 2) * rows / cols < height - self.margin * 2:
            self.cell_size = (width - self.margin * 2) / cols
            self.margin_x = self.margin
            self.margin_y = (height - self.cell_size * rows) / 2
        else:
            self.cell_size = (height - self.margin * 2) / rows
            self.margin_x = (width - self.cell_size * cols) / 2
            self.margin_y = self.margin

    @property
    def disc_radius(self) -> float:
        return self.cell_size * GRID_CIRCLE / 2

    def cell_rect(self, row: int, col: int) -> CellRect:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Cell ({row}, {col}) outside the grid")
        return CellRect(self.margin_x + col * self.cell_size,
                        self.margin_y + row * self.cell_size,
                        self.cell_size)

    def frame_parts(self) -> List[Tuple[str, Tuple[float, float, float, float]]]:
        """
        Colour and (left, top, width, height) of the grid frame and the
        base bar under it, in drawing order.
        """
        width = self.cell_size * self.cols
        height = self.cell_size * self.rows
        frame = (self.margin_x, self.margin_y, width, height)
        base = (self.margin_x - self.margin / 2, self.margin_y + height - self.margin / 2,
                width + self.margin, self.margin)
        return [(COLOR_FRAME, frame), (COLOR_FRAME_BUTT, base)]

    def column_at(self, x: float, y: float) -> Optional[int]:
        """Column under the point, or None outside the grid."""
        for col in range(self.cols):
            for row in range(self.rows):
                if self.cell_rect(row, col).contains(x, y):
                    return col
        return None
