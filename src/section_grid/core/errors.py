"""Exception types raised by the layout engine.

Configuration problems are reported as ``ValueError`` subclasses and can be
clamped instead of raised (see ``LayoutConfig.strict``). Everything else is a
contract violation that aborts the current operation.
"""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for all section-grid errors."""


class LayoutConfigError(LayoutError, ValueError):
    """Configuration values that cannot produce a valid grid."""


class DataSourceContractError(LayoutError, RuntimeError):
    """The data source returned counts that violate its contract."""


class StaleLayoutError(LayoutError, RuntimeError):
    """A query was made against a layout that has not been recomputed."""


class IndexOutOfRangeError(LayoutError, IndexError):
    """A section or item index lies outside the current snapshot."""


class ReentrantLayoutError(LayoutError, RuntimeError):
    """``recompute`` was called while a recompute was already running."""
