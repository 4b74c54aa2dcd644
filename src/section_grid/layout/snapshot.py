"""Immutable results of a layout pass."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np

from .geometry import AffineTransform, EdgeInsets, Rect, Size


class ElementKind(enum.Enum):
    """The two kinds of element a section lays out."""

    HEADER = "header"
    ITEM = "item"


class IndexPath(NamedTuple):
    """A (section, item) pair. Headers use item 0."""

    section: int
    item: int

    def __str__(self) -> str:
        return f"[{self.section}, {self.item}]"


@dataclass(frozen=True)
class LayoutAttributes:
    """Everything the view layer needs to place one element."""

    kind: ElementKind
    index_path: IndexPath
    frame: Rect
    transform: AffineTransform | None = None
    z_index: int = 0

    def to_dict(self) -> dict:
        d = {
            "kind": self.kind.value,
            "section": self.index_path.section,
            "item": self.index_path.item,
            "frame": self.frame.to_dict(),
        }
        if self.transform is not None:
            d["transform"] = self.transform.to_dict()
        if self.z_index:
            d["zIndex"] = self.z_index
        return d


@dataclass(frozen=True)
class SectionLayout:
    """Header frame and item frames of one section.

    ``frame`` spans from the header top to the bottom inset below the last
    row. ``item_origins`` mirrors ``item_frames`` as an ``(n, 2)`` array for
    vectorised hit-testing.
    """

    header_frame: Rect
    item_frames: tuple[Rect, ...]
    frame: Rect
    column_count: int
    cell_dimension: float
    item_origins: np.ndarray = field(compare=False, repr=False, default=None)

    def __post_init__(self) -> None:
        if self.item_origins is None:
            origins = np.array(
                [(f.x, f.y) for f in self.item_frames], dtype=np.float64,
            ).reshape(-1, 2)
            origins.flags.writeable = False
            object.__setattr__(self, "item_origins", origins)

    @property
    def item_count(self) -> int:
        return len(self.item_frames)

    def item_index_at(self, px: float, py: float) -> int | None:
        """Index of the first item whose frame contains the point, or None."""
        if self.item_count == 0:
            return None
        xs = self.item_origins[:, 0]
        ys = self.item_origins[:, 1]
        size = self.cell_dimension
        mask = (xs <= px) & (px < xs + size) & (ys <= py) & (py < ys + size)
        hits = np.flatnonzero(mask)
        if len(hits) == 0:
            return None
        return int(hits[0])

    def item_indices_intersecting(self, rect: Rect) -> list[int]:
        """Indices of the items whose frames overlap ``rect``, in order."""
        if self.item_count == 0 or rect.is_empty or self.cell_dimension <= 0:
            return []
        xs = self.item_origins[:, 0]
        ys = self.item_origins[:, 1]
        size = self.cell_dimension
        mask = (
            (xs < rect.right) & (rect.x < xs + size)
            & (ys < rect.bottom) & (rect.y < ys + size)
        )
        return np.flatnonzero(mask).tolist()

    def to_dict(self) -> dict:
        return {
            "header": self.header_frame.to_dict(),
            "frame": self.frame.to_dict(),
            "columnCount": self.column_count,
            "cellDimension": self.cell_dimension,
            "items": [f.to_dict() for f in self.item_frames],
        }


@dataclass(frozen=True)
class LayoutSnapshot:
    """The complete, immutable output of one layout pass."""

    sections: tuple[SectionLayout, ...]
    content_size: Size
    container_width: float
    safe_area: EdgeInsets = EdgeInsets()

    @property
    def number_of_sections(self) -> int:
        return len(self.sections)

    @property
    def item_counts(self) -> tuple[int, ...]:
        return tuple(s.item_count for s in self.sections)

    def to_dict(self) -> dict:
        """Serialize to a dict for JSON transfer."""
        return {
            "containerWidth": self.container_width,
            "safeArea": self.safe_area.to_dict(),
            "contentSize": self.content_size.to_dict(),
            "sections": [s.to_dict() for s in self.sections],
        }

