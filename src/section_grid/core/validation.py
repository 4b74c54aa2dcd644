"""Validation of data source answers and configuration values."""

from __future__ import annotations

import math
import numbers
from typing import Any

from .errors import DataSourceContractError, LayoutConfigError


def validate_section_count(count: Any) -> int:
    """Validate a ``number_of_sections()`` answer and return it as an int."""
    if isinstance(count, bool) or not isinstance(count, numbers.Integral):
        raise DataSourceContractError(
            f"number_of_sections() must return an int, got {type(count).__name__}."
        )
    if count < 0:
        raise DataSourceContractError(
            f"number_of_sections() returned a negative count ({count})."
        )
    return int(count)


def validate_item_count(count: Any, section: int) -> int:
    """Validate a ``number_of_items(section)`` answer and return it as an int."""
    if isinstance(count, bool) or not isinstance(count, numbers.Integral):
        raise DataSourceContractError(
            f"number_of_items({section}) must return an int, "
            f"got {type(count).__name__}."
        )
    if count < 0:
        raise DataSourceContractError(
            f"Cannot return a negative count for number of items in section "
            f"{section} (got {count})."
        )
    return int(count)


def validate_non_negative(value: float, name: str) -> float:
    """Validate a length that may be zero but not negative."""
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise LayoutConfigError(f"{name} must be a number, got {type(value).__name__}.")
    if not math.isfinite(value):
        raise LayoutConfigError(f"{name} must be finite, got {value}.")
    if value < 0:
        raise LayoutConfigError(f"{name} must be >= 0, got {value}.")
    return float(value)


def validate_positive(value: float, name: str) -> float:
    """Validate a length that must be strictly positive."""
    value = validate_non_negative(value, name)
    if value == 0:
        raise LayoutConfigError(f"{name} must be > 0, got {value}.")
    return value
