"""Grid geometry: column count, cell size and item frames for one section.

Cells are uniform squares laid out row-major. The column count depends only
on the available width, so everything here is a pure function of its inputs.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from ..core.errors import LayoutConfigError
from .config import LayoutConfig
from .geometry import EdgeInsets, Point, Rect, Size, ZERO_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnLayout:
    """Horizontal cell positioning for a given width."""

    column_count: int
    cell_dimension: float

    def content_width(self, spacing: float) -> float:
        """Width occupied by one full row of cells."""
        return (
            self.column_count * self.cell_dimension
            + (self.column_count - 1) * spacing
        )


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero.

    Python's ``round`` uses banker's rounding, which would make 72.5 -> 72.
    """
    return math.copysign(math.floor(abs(value) + 0.5), value)


def compute_column_layout(
    available_width: float,
    left_inset: float,
    right_inset: float,
    min_cell_dimension: float,
    spacing: float,
    strict: bool = False,
) -> ColumnLayout:
    """Compute how many square cells fit across ``available_width``.

    Parameters
    ----------
    available_width : width of the container (after safe-area insets)
    left_inset, right_inset : section insets on each side
    min_cell_dimension : smallest acceptable cell edge
    spacing : gap between neighbouring cells
    strict : raise ``LayoutConfigError`` on degenerate input instead of
        clamping to a single column of width ``max(usable_width, 0)``

    Returns
    -------
    ColumnLayout with ``column_count >= 1``.
    """
    usable_width = available_width - left_inset - right_inset
    pitch = min_cell_dimension + spacing

    if (
        not math.isfinite(usable_width)
        or not math.isfinite(pitch)
        or pitch <= 0
        or usable_width <= 0
    ):
        message = (
            f"Cannot lay out a grid: usable width {usable_width} "
            f"(available {available_width} - insets {left_inset}+{right_inset}), "
            f"min cell {min_cell_dimension} + spacing {spacing}."
        )
        if strict:
            raise LayoutConfigError(message)
        logger.warning("%s Clamping to one column.", message)
        clamped = max(usable_width, 0.0) if math.isfinite(usable_width) else 0.0
        return ColumnLayout(column_count=1, cell_dimension=clamped)

    column_count = max(1, int(math.floor(usable_width / pitch)))
    remaining = usable_width - (column_count - 1) * spacing
    cell_dimension = round_half_away(remaining / column_count)
    return ColumnLayout(column_count=column_count, cell_dimension=cell_dimension)


def column_layout_for(width: float, config: LayoutConfig) -> ColumnLayout:
    """``compute_column_layout`` with the insets and sizes from ``config``."""
    inset = config.section_inset
    return compute_column_layout(
        width,
        inset.left,
        inset.right,
        config.min_cell_dimension,
        config.interitem_spacing,
        strict=config.strict,
    )


def compute_item_origins(
    item_count: int,
    column_count: int,
    cell_dimension: float,
    spacing: float,
    section_inset: EdgeInsets,
    origin: Point,
) -> np.ndarray:
    """Return an ``(item_count, 2)`` array of item ``(x, y)`` origins.

    Item ``i`` sits at column ``i % column_count`` and row
    ``i // column_count``.
    """
    if column_count < 1:
        raise LayoutConfigError(f"column_count must be >= 1, got {column_count}.")
    indices = np.arange(item_count, dtype=np.int64)
    columns = indices % column_count
    rows = indices // column_count
    pitch = cell_dimension + spacing

    origins = np.empty((item_count, 2), dtype=np.float64)
    origins[:, 0] = columns * pitch + section_inset.left + origin.x
    origins[:, 1] = rows * pitch + section_inset.top + origin.y
    origins.flags.writeable = False
    return origins


def frames_from_origins(origins: np.ndarray, cell_dimension: float) -> tuple[Rect, ...]:
    """Square frames of edge ``cell_dimension`` at each ``(x, y)`` origin."""
    return tuple(
        Rect(x=float(x), y=float(y), width=cell_dimension, height=cell_dimension)
        for x, y in origins.tolist()
    )


def compute_item_frames(
    item_count: int,
    column_count: int,
    cell_dimension: float,
    spacing: float,
    section_inset: EdgeInsets,
    origin: Point,
) -> tuple[tuple[Rect, ...], float]:
    """Compute the frame of every item in a section.

    ``origin`` is where the item area begins: it already accounts for the
    header height and the spacing below the header.

    Returns
    -------
    (frames, max_y) where ``max_y`` is the bottom edge of the last item,
    or 0 when there are no items.
    """
    origins = compute_item_origins(
        item_count, column_count, cell_dimension, spacing, section_inset, origin,
    )
    frames = frames_from_origins(origins, cell_dimension)
    max_y = frames[-1].bottom if frames else 0.0
    return frames, max_y


def estimate_section_height(
    width: float,
    item_count: int,
    max_rows: int,
    config: LayoutConfig,
) -> Size:
    """Size a section for ``item_count`` items without running a layout pass.

    At most ``max_rows`` rows are counted. Headers are not included.
    """
    if item_count <= 0 or max_rows <= 0:
        return ZERO_SIZE

    columns = column_layout_for(width, config)
    rows = min(max_rows, -(-item_count // columns.column_count))

    spacing = config.interitem_spacing
    height = (
        rows * columns.cell_dimension
        + (rows - 1) * spacing
        + config.section_inset.vertical
    )
    return Size(width=width, height=height)
