"""LayoutConfig: the externally supplied knobs of the grid layout."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from ..core.validation import validate_non_negative, validate_positive
from .geometry import EdgeInsets


# Default sizes
DEFAULT_SECTION_INSET = EdgeInsets(top=0.0, left=20.0, bottom=10.0, right=20.0)
DEFAULT_INTERITEM_SPACING = 10.0
DEFAULT_HEADER_HEIGHT = 50.0
DEFAULT_MIN_CELL_DIMENSION = 100.0


@dataclass(frozen=True)
class LayoutConfig:
    """Section insets, spacing, header height and minimum cell size.

    Read-only during a layout pass. ``strict`` turns degenerate column math
    (a container too narrow for its insets) into a ``LayoutConfigError``
    instead of clamping to a single column.
    """

    section_inset: EdgeInsets = field(default_factory=lambda: DEFAULT_SECTION_INSET)
    interitem_spacing: float = DEFAULT_INTERITEM_SPACING
    header_height: float = DEFAULT_HEADER_HEIGHT
    min_cell_dimension: float = DEFAULT_MIN_CELL_DIMENSION
    strict: bool = False

    def __post_init__(self) -> None:
        inset = self.section_inset
        for side in ("top", "left", "bottom", "right"):
            validate_non_negative(getattr(inset, side), f"section_inset.{side}")
        validate_non_negative(self.interitem_spacing, "interitem_spacing")
        validate_non_negative(self.header_height, "header_height")
        validate_positive(self.min_cell_dimension, "min_cell_dimension")

    @property
    def has_header(self) -> bool:
        return self.header_height > 0

    def replace(self, **changes) -> LayoutConfig:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "sectionInset": self.section_inset.to_dict(),
            "interitemSpacing": self.interitem_spacing,
            "headerHeight": self.header_height,
            "minCellDimension": self.min_cell_dimension,
        }
