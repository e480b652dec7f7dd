"""Shared test fixtures — sample geolocations and logging reset."""

import logging

import pytest
import structlog

from geoaccuracy import AccuracyScale, Geolocation


@pytest.fixture()
def san_francisco() -> Geolocation:
    """City-level geolocation for San Francisco."""
    return Geolocation(37.77493, -122.41942, AccuracyScale.City)


@pytest.fixture()
def null_island() -> Geolocation:
    """Address-level geolocation at latitude 0, longitude 0."""
    return Geolocation(0.0, 0.0, AccuracyScale.Address)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any logging configuration a test (or the CLI) applied."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)
