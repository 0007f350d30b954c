"""Swatch grid geometry.

Pure arithmetic over pre-clamped inputs. Items fill rows left to right,
top to bottom, in the order they are handed to the rasteriser.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Grid:
    """Canvas size and cell geometry for one palette render."""

    cols: int
    rows: int
    swatch_width: int
    swatch_height: int
    gap_h: int
    gap_v: int

    @property
    def canvas_width(self) -> int:
        return self.cols * self.swatch_width + max(0, self.cols - 1) * self.gap_h

    @property
    def canvas_height(self) -> int:
        return self.rows * self.swatch_height + max(0, self.rows - 1) * self.gap_v

    @property
    def canvas_size(self) -> tuple[int, int]:
        return (self.canvas_width, self.canvas_height)

    @property
    def block_size(self) -> tuple[int, int]:
        """Swatch plus its trailing gaps: the pitch between neighbouring cells."""
        return (self.swatch_width + self.gap_h, self.swatch_height + self.gap_v)

    def position(self, i: int) -> tuple[int, int]:
        """Top-left pixel of the cell at sequence position i (0-based)."""
        bw, bh = self.block_size
        return ((i % self.cols) * bw, (i // self.cols) * bh)

    def cell_box(self, i: int) -> tuple[int, int, int, int]:
        """(x1, y1, x2, y2) of cell i, right and bottom exclusive."""
        x, y = self.position(i)
        return (x, y, x + self.swatch_width, y + self.swatch_height)


def compute(count: int, row_len: int, swatch_width: int, swatch_height: int, gap_h: int, gap_v: int) -> Grid:
    """Lay out count swatches, row_len per row."""
    cols = max(1, row_len)
    rows = max(1, math.ceil(count / cols))
    return Grid(
        cols=cols,
        rows=rows,
        swatch_width=swatch_width,
        swatch_height=swatch_height,
        gap_h=gap_h,
        gap_v=gap_v,
    )
