"""Data sources: the item counts the layout engine is driven by."""

from __future__ import annotations

from typing import Any, Hashable, Protocol, Sequence, runtime_checkable

import pandas as pd

from ..layout.snapshot import IndexPath
from .errors import IndexOutOfRangeError


@runtime_checkable
class SectionDataSource(Protocol):
    """What the layout engine asks of its data source."""

    def number_of_sections(self) -> int: ...

    def number_of_items(self, section: int) -> int: ...


class ListDataSource:
    """Items held as one list per section.

    This is the backing store that drag-reorder mutates. The layout engine
    only ever reads counts from it.
    """

    def __init__(self, sections: Sequence[Sequence[Any]] = ()) -> None:
        self._sections: list[list[Any]] = [list(items) for items in sections]
        self._section_keys: list[Hashable] | None = None

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        by: str,
        item_column: str | None = None,
    ) -> ListDataSource:
        """Group the rows of ``df`` into sections by the values of column ``by``.

        Sections appear in order of first appearance; rows keep their order
        within a section. Items are the values of ``item_column`` or, when
        omitted, the row index labels.
        """
        if by not in df.columns:
            raise KeyError(
                f"Column '{by}' not found. Available: {list(df.columns)}"
            )
        if item_column is not None and item_column not in df.columns:
            raise KeyError(
                f"Column '{item_column}' not found. Available: {list(df.columns)}"
            )
        source = cls()
        source._section_keys = []
        for key, group in df.groupby(by, sort=False):
            items = group.index if item_column is None else group[item_column]
            source._sections.append(items.tolist())
            source._section_keys.append(key)
        return source

    @property
    def section_keys(self) -> list[Hashable] | None:
        """Group keys when built with ``from_dataframe``, else None."""
        return None if self._section_keys is None else list(self._section_keys)

    def number_of_sections(self) -> int:
        return len(self._sections)

    def number_of_items(self, section: int) -> int:
        return len(self._section(section))

    def sections(self) -> list[list[Any]]:
        """Copy of the items, one list per section."""
        return [list(items) for items in self._sections]

    def item_at(self, index_path: IndexPath) -> Any:
        items = self._section(index_path.section)
        if not 0 <= index_path.item < len(items):
            raise IndexOutOfRangeError(
                f"Item {index_path.item} out of range for section "
                f"{index_path.section} with {len(items)} items."
            )
        return items[index_path.item]

    def can_move_item(self, index_path: IndexPath) -> bool:
        self.item_at(index_path)
        return True

    def move_item(self, source: IndexPath, destination: IndexPath) -> None:
        """Remove the item at ``source`` and insert it at ``destination``.

        ``destination.item`` may equal the destination section's length
        (after removal) to append.
        """
        item = self.item_at(source)
        target = self._section(destination.section)
        limit = len(target) - (1 if source.section == destination.section else 0)
        if not 0 <= destination.item <= limit:
            raise IndexOutOfRangeError(
                f"Cannot insert at item {destination.item} in section "
                f"{destination.section} (valid range 0..{limit})."
            )
        del self._sections[source.section][source.item]
        target.insert(destination.item, item)

    def _section(self, section: int) -> list[Any]:
        if not 0 <= section < len(self._sections):
            raise IndexOutOfRangeError(
                f"Section {section} out of range ({len(self._sections)} sections)."
            )
        return self._sections[section]

    def __repr__(self) -> str:
        counts = [len(items) for items in self._sections]
        return f"ListDataSource(counts={counts})"
