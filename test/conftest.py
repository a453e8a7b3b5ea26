"""Pytest configuration and shared fixtures for Minecraft Data Extractor tests."""

import pytest
import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import Mock

# Add src to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mcdata_extractor.data.item_resolver import ItemResolver
from mcdata_extractor.data.provider import GameData


@pytest.fixture
def mock_logger():
    """Create a mock logger for unit tests."""
    return Mock()


@pytest.fixture
def items_by_id():
    """Items table keyed by id, as the data package ships it."""
    return {
        1: {"id": 1, "name": "oak_log", "displayName": "Oak Log", "stackSize": 64},
        2: {"id": 2, "name": "oak_planks", "displayName": "Oak Planks", "stackSize": 64},
        3: {"id": 3, "name": "stick", "displayName": "Stick", "stackSize": 64},
        4: {"id": 4, "name": "birch_wood", "displayName": "Birch Wood", "stackSize": 64},
        5: {"id": 5, "name": "glowstone_dust", "displayName": "Glowstone Dust", "stackSize": 64},
        6: {"id": 6, "name": "stone", "displayName": "Stone", "stackSize": 64},
        7: {"id": 7, "name": "apple", "displayName": "Apple", "stackSize": 64},
        8: {"id": 8, "name": "sugar", "displayName": "Sugar", "stackSize": 64},
        9: {"id": 9, "name": "crafting_table", "displayName": "Crafting Table", "stackSize": 64},
    }


@pytest.fixture
def resolver(items_by_id):
    """Item resolver over the sample items table."""
    return ItemResolver(items_by_id)


@pytest.fixture
def synthetic_source(items_by_id):
    """Stand-in for a loaded ``minecraft_data`` version object."""
    return SimpleNamespace(
        version="1.21.8",
        items=items_by_id,
        recipes={
            "2": [
                {"inShape": [[1, None], [None, None]], "result": {"id": 2, "count": 4}},
                {"inShape": [[1, None], [None, None]], "result": {"id": 2, "count": 4}},
            ],
            "9": [
                {"inShape": [[2, 2], [2, 2]], "result": {"id": 9, "count": 1}},
            ],
            "8": [
                {"ingredients": [3], "result": {"id": 8}},
            ],
        },
        effects=[
            {"id": 1, "name": "speed", "displayName": "Speed", "type": "good"},
            {"id": 2, "name": "mystery", "displayName": "Mystery"},
        ],
        foods={
            7: {"id": 7, "name": "apple", "foodPoints": 4, "saturation": 2.4},
        },
        biomes=[
            {"id": 1, "name": "plains", "displayName": "Plains", "category": "plains", "dimension": "overworld"},
            {"id": 2, "name": "void", "displayName": "The Void"},
        ],
        enchantments={
            0: {"id": 0, "name": "sharpness", "displayName": "Sharpness", "maxLevel": 5,
                "category": "weapon", "exclude": ["smite"]},
            1: {"id": 1, "name": "mending", "displayName": "Mending", "maxLevel": 1,
                "category": "breakable"},
        },
        entities_list=[
            {"id": 1, "name": "zombie", "displayName": "Zombie", "type": "hostile",
             "category": "Hostile mobs", "width": 0.6, "height": 1.95},
        ],
    )


@pytest.fixture
def game_data(synthetic_source):
    """Game data built from the synthetic source."""
    return GameData.from_source(synthetic_source)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on file location."""
    for item in items:
        if "unit" in str(item.path):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.path):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration overrides from the shell out of tests."""
    for var in ["MCDATA_VERSION", "MCDATA_EDITION", "MCDATA_OUTPUT_DIR",
                "MCDATA_LOG_LEVEL", "MCDATA_DEBUG"]:
        monkeypatch.delenv(var, raising=False)
