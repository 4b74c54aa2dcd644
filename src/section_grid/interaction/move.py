"""InteractiveMove: drag-reorder of one item across the grid."""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..core.data_source import ListDataSource
from ..layout.engine import GridLayoutEngine
from ..layout.geometry import Point
from ..layout.snapshot import IndexPath, LayoutAttributes

logger = logging.getLogger(__name__)

MoveCallback = Callable[[IndexPath, IndexPath], Any]


class InteractiveMove:
    """Tracks a single drag from pick-up to drop.

    The engine provides hit-testing and the dragged item's attributes; the
    data source is the backing store that the drop mutates. After a drop the
    engine is invalidated, since its snapshot no longer matches the data.
    """

    def __init__(self, engine: GridLayoutEngine, data_source: ListDataSource) -> None:
        self._engine = engine
        self._data_source = data_source
        self._source: IndexPath | None = None
        self._callbacks: list[MoveCallback] = []

    @property
    def source(self) -> IndexPath | None:
        """Index path of the item being dragged, or None when idle."""
        return self._source

    @property
    def is_active(self) -> bool:
        return self._source is not None

    def begin(self, point: Point) -> IndexPath | None:
        """Pick up the item under ``point``. Returns None if there is none."""
        index_path = self._engine.item_at_point(point)
        if index_path is None or not self._data_source.can_move_item(index_path):
            self._source = None
            return None
        self._source = index_path
        logger.debug("Began moving item %s", index_path)
        return index_path

    def update(self, position: Point) -> LayoutAttributes:
        """Attributes for drawing the dragged item at ``position``."""
        return self._engine.attributes_for_interactively_moving_item(
            self._require_source(), position,
        )

    def target_index_path(self, position: Point) -> IndexPath | None:
        """Where the item would land if dropped at ``position``.

        The item under the point, else the end of the section under the
        point, else None.
        """
        index_path = self._engine.item_at_point(position)
        if index_path is not None:
            return index_path
        section = self._engine.section_at_point(position)
        if section is None:
            return None
        count = self._engine.snapshot.sections[section].item_count
        source = self._require_source()
        if source.section == section:
            count -= 1
        return IndexPath(section, count)

    def end(self, position: Point) -> IndexPath | None:
        """Drop the item at ``position`` and return its new index path.

        Returns None (and leaves the data untouched) when there is no target.
        """
        source = self._require_source()
        destination = self.target_index_path(position)
        if destination is None:
            self._source = None
            logger.debug("Move of %s cancelled: no drop target", source)
            return None

        self._data_source.move_item(source, destination)
        self._source = None
        self._engine.invalidate()
        logger.debug("Moved item %s -> %s", source, destination)
        for cb in self._callbacks:
            cb(source, destination)
        return destination

    def cancel(self) -> None:
        self._source = None

    def on_move(self, callback: MoveCallback) -> None:
        """Register a callback: fn(source, destination)."""
        self._callbacks.append(callback)

    def _require_source(self) -> IndexPath:
        if self._source is None:
            raise RuntimeError("No move in progress. Call begin() first.")
        return self._source

    def __repr__(self) -> str:
        return f"InteractiveMove(source={self._source})"
