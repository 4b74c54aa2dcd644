"""Shared test fixtures for section-grid."""

import pytest

from section_grid.core.data_source import ListDataSource
from section_grid.layout.config import LayoutConfig
from section_grid.layout.engine import GridLayoutEngine


@pytest.fixture
def config():
    """Default configuration: insets (0, 20, 10, 20), spacing 10, header 50, min cell 100."""
    return LayoutConfig()


@pytest.fixture
def items():
    """Four sections of string items (6, 6, 4, 4)."""
    return [
        ["1", "2", "3", "4", "5", "6"],
        ["7", "8", "9", "10", "11", "12"],
        ["13", "14", "15", "16"],
        ["17", "18", "19", "20"],
    ]


@pytest.fixture
def data_source(items):
    return ListDataSource(items)


@pytest.fixture
def engine(config, data_source):
    """Engine laid out at width 340: 2 columns of 145px cells."""
    eng = GridLayoutEngine(config)
    eng.recompute(340.0, data_source)
    return eng


class CountsSource:
    """Data source answering from a plain list of counts."""

    def __init__(self, counts):
        self.counts = list(counts)

    def number_of_sections(self):
        return len(self.counts)

    def number_of_items(self, section):
        return self.counts[section]


@pytest.fixture
def make_source():
    """Factory for count-only data sources: make_source([6, 0, 3])."""
    return CountsSource
