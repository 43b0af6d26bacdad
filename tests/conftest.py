"""Shared fixtures for region map tests."""

import pytest
import structlog

from urn_regions.config import Settings
from urn_regions.core import InMemoryRegionPatch, RegionMetadata, RegionMetadataFile


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any logging configuration done by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def metadata():
    """Metadata for the regions used across the tests."""
    return RegionMetadataFile(regions=[
        RegionMetadata(editor_id="Forest", color=(34, 139, 34), map_name="The Forest", priority=40),
        RegionMetadata(editor_id="urnEastmarch", color="#4A6B8C", map_name="Eastmarch", priority=60),
        RegionMetadata(editor_id="urnWinterhold", color=(200, 200, 255), map_name="Winterhold"),
    ])


@pytest.fixture
def patch():
    """Fresh in-memory patch."""
    return InMemoryRegionPatch(mod_key="Test.esp")


@pytest.fixture
def test_settings():
    """Settings independent of the environment."""
    return Settings(_env_file=None)
