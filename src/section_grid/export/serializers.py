"""Serializers: convert layout results to JSON."""

from __future__ import annotations

import json
from typing import Iterable

from ..layout.config import LayoutConfig
from ..layout.snapshot import LayoutAttributes, LayoutSnapshot


def serialize_snapshot(snapshot: LayoutSnapshot) -> str:
    """Serialize a layout snapshot as JSON string."""
    return json.dumps(snapshot.to_dict())


def serialize_attributes(attributes: Iterable[LayoutAttributes]) -> str:
    """Serialize a list of element attributes as JSON string."""
    return json.dumps([a.to_dict() for a in attributes])


def serialize_config(config: LayoutConfig) -> str:
    """Serialize layout configuration as JSON string."""
    return json.dumps(config.to_dict())
