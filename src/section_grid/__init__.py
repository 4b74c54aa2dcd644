"""section-grid: a sectioned grid layout engine with drag-reorder support."""

import logging

from ._version import __version__
from .core.data_source import ListDataSource, SectionDataSource
from .core.errors import (
    DataSourceContractError,
    IndexOutOfRangeError,
    LayoutConfigError,
    LayoutError,
    ReentrantLayoutError,
    StaleLayoutError,
)
from .layout.config import LayoutConfig
from .layout.engine import GridLayoutEngine, LayoutState, rotation_feedback
from .layout.geometry import AffineTransform, EdgeInsets, Point, Rect, Size
from .layout.grid import (
    compute_column_layout,
    compute_item_frames,
    estimate_section_height,
)
from .layout.snapshot import (
    ElementKind,
    IndexPath,
    LayoutAttributes,
    LayoutSnapshot,
    SectionLayout,
)
from .interaction.move import InteractiveMove

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "GridLayoutEngine",
    "LayoutState",
    "LayoutConfig",
    "LayoutSnapshot",
    "SectionLayout",
    "LayoutAttributes",
    "ElementKind",
    "IndexPath",
    "Rect",
    "Point",
    "Size",
    "EdgeInsets",
    "AffineTransform",
    "ListDataSource",
    "SectionDataSource",
    "InteractiveMove",
    "compute_column_layout",
    "compute_item_frames",
    "estimate_section_height",
    "rotation_feedback",
    "LayoutError",
    "LayoutConfigError",
    "DataSourceContractError",
    "StaleLayoutError",
    "IndexOutOfRangeError",
    "ReentrantLayoutError",
]
