"""Pytest configuration and fixtures."""

import random

import pytest


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--fast",
        action="store_true",
        default=False,
        help="Skip slow tests (large random shapes)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests when --fast flag is used."""
    if config.getoption("--fast"):
        skip_slow = pytest.mark.skip(reason="skipped with --fast flag")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so shapes are reproducible."""
    return random.Random(20240601)


@pytest.fixture
def route() -> list:
    """A short (lon, lat) route along the Pacific coast."""
    return [
        (-122.419416, 37.774929),
        (-122.418301, 37.776512),
        (-122.402712, 37.790107),
        (-122.399876, 37.793214),
        (-121.894955, 37.339386),
        (-118.243685, 34.052234),
    ]
