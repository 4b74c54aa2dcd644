"""GridLayoutEngine: caches the layout of every section and answers queries.

The engine is either STALE or VALID. ``recompute`` builds a complete new
``LayoutSnapshot`` and swaps it in only once it is finished, so a reader
never observes a half-built layout. Every read operation requires a VALID
engine and raises ``StaleLayoutError`` otherwise.
"""

from __future__ import annotations

import enum
import logging
import math
from typing import Callable, Optional

from ..core.data_source import SectionDataSource
from ..core.errors import (
    DataSourceContractError,
    IndexOutOfRangeError,
    ReentrantLayoutError,
    StaleLayoutError,
)
from ..core.validation import validate_item_count, validate_section_count
from .config import LayoutConfig
from .geometry import AffineTransform, EdgeInsets, Point, Rect, Size
from .grid import column_layout_for, compute_item_origins, frames_from_origins
from .snapshot import (
    ElementKind,
    IndexPath,
    LayoutAttributes,
    LayoutSnapshot,
    SectionLayout,
)

logger = logging.getLogger(__name__)

DEFAULT_DRAG_ROTATION = math.pi / 8
MOVING_ITEM_Z_INDEX = 1

MoveFeedback = Callable[[LayoutAttributes], Optional[AffineTransform]]


def rotation_feedback(angle: float = DEFAULT_DRAG_ROTATION) -> MoveFeedback:
    """Feedback hook that tilts the dragged item by a fixed angle."""
    transform = AffineTransform.rotation(angle)

    def feedback(attributes: LayoutAttributes) -> AffineTransform:
        return transform

    return feedback


class LayoutState(enum.Enum):
    STALE = "stale"
    VALID = "valid"


class GridLayoutEngine:
    """Lays out sections of square cells under full-width headers.

    Parameters
    ----------
    config : LayoutConfig, optional
        Insets, spacing, header height and minimum cell size.
    move_feedback : callable, optional
        ``fn(attributes) -> AffineTransform | None`` deciding the visual
        transform of an item while it is being dragged. Defaults to a
        rotation of pi/8.
    """

    def __init__(
        self,
        config: LayoutConfig | None = None,
        move_feedback: MoveFeedback | None = None,
    ) -> None:
        self._config = config if config is not None else LayoutConfig()
        self._move_feedback = move_feedback if move_feedback is not None else rotation_feedback()
        self._state = LayoutState.STALE
        self._snapshot: LayoutSnapshot | None = None
        self._recomputing = False

    # --- State ---

    @property
    def config(self) -> LayoutConfig:
        return self._config

    @property
    def state(self) -> LayoutState:
        return self._state

    @property
    def is_valid(self) -> bool:
        return self._state is LayoutState.VALID

    @property
    def snapshot(self) -> LayoutSnapshot:
        """The current snapshot. Requires a VALID engine."""
        return self._require_valid()

    def invalidate(self) -> None:
        """Mark the layout stale. The next read fails until ``recompute``."""
        if self._state is not LayoutState.STALE:
            logger.debug("Layout invalidated")
        self._state = LayoutState.STALE

    @staticmethod
    def should_invalidate(old_width: float, new_width: float) -> bool:
        """Only the width feeds into the layout, so only it invalidates."""
        return old_width != new_width

    def should_invalidate_for_bounds_change(self, new_bounds: Size) -> bool:
        """True when ``new_bounds`` differs in width from the last pass."""
        if self._snapshot is None:
            return True
        return self.should_invalidate(self._snapshot.container_width, new_bounds.width)

    # --- Layout pass ---

    def recompute(
        self,
        container_width: float,
        data_source: SectionDataSource,
        safe_area: EdgeInsets = EdgeInsets(),
    ) -> LayoutSnapshot:
        """Lay out every section from scratch and mark the engine VALID.

        Raises ``DataSourceContractError`` if the data source reports
        invalid counts; the engine's state and snapshot are then left as
        they were. Raises ``ReentrantLayoutError`` if called from within a
        running recompute (for example from a data source callback).
        """
        if self._recomputing:
            raise ReentrantLayoutError(
                "recompute() called while a recompute is already running."
            )
        self._recomputing = True
        try:
            item_counts = self._capture_item_counts(data_source)
            snapshot = self._build_snapshot(container_width, safe_area, item_counts)
        finally:
            self._recomputing = False

        self._snapshot = snapshot
        self._state = LayoutState.VALID
        logger.debug(
            "Layout recomputed: width=%s sections=%d items=%d content=%sx%s",
            container_width,
            snapshot.number_of_sections,
            sum(item_counts),
            snapshot.content_size.width,
            snapshot.content_size.height,
        )
        return snapshot

    def ensure_valid(
        self,
        container_width: float,
        data_source: SectionDataSource,
        safe_area: EdgeInsets = EdgeInsets(),
    ) -> LayoutSnapshot:
        """Recompute only when stale or when the width or safe area changed."""
        if self._snapshot is not None and (
            self.should_invalidate(self._snapshot.container_width, container_width)
            or self._snapshot.safe_area != safe_area
        ):
            self.invalidate()
        if self._state is LayoutState.STALE:
            return self.recompute(container_width, data_source, safe_area)
        return self._snapshot

    @staticmethod
    def _capture_item_counts(data_source: SectionDataSource) -> tuple[int, ...]:
        """Read the item count table once, failing fast on bad answers."""
        n_sections = validate_section_count(data_source.number_of_sections())
        counts = tuple(
            validate_item_count(data_source.number_of_items(section), section)
            for section in range(n_sections)
        )
        n_after = validate_section_count(data_source.number_of_sections())
        if n_after != n_sections:
            raise DataSourceContractError(
                f"Section count changed while reading item counts "
                f"({n_sections} -> {n_after})."
            )
        return counts

    def _build_snapshot(
        self,
        container_width: float,
        safe_area: EdgeInsets,
        item_counts: tuple[int, ...],
    ) -> LayoutSnapshot:
        config = self._config
        inset = config.section_inset
        spacing = config.interitem_spacing

        available = container_width - safe_area.horizontal
        width = available if math.isfinite(available) and available > 0 else 0.0
        origin_x = float(safe_area.left)
        columns = column_layout_for(width, config)

        sections: list[SectionLayout] = []
        offset_y = spacing
        for item_count in item_counts:
            header_frame = Rect(x=origin_x, y=offset_y, width=width, height=config.header_height)
            if config.has_header:
                items_top = header_frame.bottom + spacing
            else:
                items_top = offset_y

            origins = compute_item_origins(
                item_count,
                columns.column_count,
                columns.cell_dimension,
                spacing,
                inset,
                Point(origin_x, items_top),
            )
            item_frames = frames_from_origins(origins, columns.cell_dimension)
            max_y = item_frames[-1].bottom if item_frames else items_top

            section_height = max_y + inset.bottom - offset_y
            sections.append(SectionLayout(
                header_frame=header_frame,
                item_frames=item_frames,
                frame=Rect(x=origin_x, y=offset_y, width=width, height=section_height),
                column_count=columns.column_count,
                cell_dimension=columns.cell_dimension,
                item_origins=origins,
            ))
            offset_y += section_height

        return LayoutSnapshot(
            sections=tuple(sections),
            content_size=Size(width=width, height=offset_y),
            container_width=container_width,
            safe_area=safe_area,
        )

    # --- Queries ---

    def content_size(self) -> Size:
        return self._require_valid().content_size

    def frame_for_item(self, section: int, item: int) -> Rect:
        frames = self._section(section).item_frames
        if not 0 <= item < len(frames):
            raise IndexOutOfRangeError(
                f"Item {item} out of range for section {section} with "
                f"{len(frames)} items. Invalidate and recompute after changing "
                f"the data source."
            )
        return frames[item]

    def frame_for_header(self, section: int) -> Rect:
        return self._section(section).header_frame

    def elements_intersecting(self, rect: Rect) -> list[tuple[ElementKind, IndexPath]]:
        """Headers and items whose frames overlap ``rect``.

        Linear in the number of elements; there is no spatial index.
        """
        found: list[tuple[ElementKind, IndexPath]] = []
        for section_index, section in enumerate(self._require_valid().sections):
            if section.header_frame.intersects(rect):
                found.append((ElementKind.HEADER, IndexPath(section_index, 0)))
            for item_index in section.item_indices_intersecting(rect):
                found.append((ElementKind.ITEM, IndexPath(section_index, item_index)))
        return found

    def item_at_point(self, point: Point) -> IndexPath | None:
        """First item (section-major, then item order) containing ``point``."""
        for section_index, section in enumerate(self._require_valid().sections):
            item_index = section.item_index_at(point.x, point.y)
            if item_index is not None:
                return IndexPath(section_index, item_index)
        return None

    def section_at_point(self, point: Point) -> int | None:
        """Section whose bounding frame contains ``point``."""
        for section_index, section in enumerate(self._require_valid().sections):
            if section.frame.contains_point(point):
                return section_index
        return None

    def scroll_target_frame(self, index_path: IndexPath) -> Rect:
        """Frame to hand to a scroll-into-view mechanism."""
        return self.frame_for_item(index_path.section, index_path.item)

    # --- View-layer attributes ---

    def attributes_for_elements(self, rect: Rect) -> list[LayoutAttributes]:
        attributes = []
        for kind, index_path in self.elements_intersecting(rect):
            if kind is ElementKind.HEADER:
                attributes.append(self.attributes_for_header(index_path.section))
            else:
                attributes.append(self.attributes_for_item(index_path))
        return attributes

    def attributes_for_item(self, index_path: IndexPath) -> LayoutAttributes:
        return LayoutAttributes(
            kind=ElementKind.ITEM,
            index_path=IndexPath(*index_path),
            frame=self.frame_for_item(index_path.section, index_path.item),
        )

    def attributes_for_header(self, section: int) -> LayoutAttributes:
        return LayoutAttributes(
            kind=ElementKind.HEADER,
            index_path=IndexPath(section, 0),
            frame=self.frame_for_header(section),
        )

    def attributes_for_interactively_moving_item(
        self,
        index_path: IndexPath,
        target_position: Point,
    ) -> LayoutAttributes:
        """Attributes of an item being dragged, centred on ``target_position``.

        The frame is not snapped to the grid. Its transform comes from the
        ``move_feedback`` hook.
        """
        logger.debug("Moving item %s to target position (%s, %s)",
                     index_path, target_position.x, target_position.y)
        base = self.attributes_for_item(index_path)
        moving = LayoutAttributes(
            kind=ElementKind.ITEM,
            index_path=base.index_path,
            frame=Rect.centered_at(target_position, base.frame.size),
            z_index=MOVING_ITEM_Z_INDEX,
        )
        transform = self._move_feedback(moving)
        return LayoutAttributes(
            kind=moving.kind,
            index_path=moving.index_path,
            frame=moving.frame,
            transform=transform,
            z_index=moving.z_index,
        )

    # Names used by view layers that mirror collection-view APIs.
    index_path_at = item_at_point
    scroll_frame = scroll_target_frame

    # --- Internals ---

    def _require_valid(self) -> LayoutSnapshot:
        if self._state is not LayoutState.VALID or self._snapshot is None:
            raise StaleLayoutError(
                "Layout is stale. Call recompute() before querying it."
            )
        return self._snapshot

    def _section(self, section: int) -> SectionLayout:
        sections = self._require_valid().sections
        if not 0 <= section < len(sections):
            raise IndexOutOfRangeError(
                f"Section {section} out of range ({len(sections)} sections). "
                f"Invalidate and recompute after changing the data source."
            )
        return sections[section]

    def __repr__(self) -> str:
        return f"GridLayoutEngine(state={self._state.value}, config={self._config!r})"
