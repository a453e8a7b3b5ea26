"""Flat category extractors.

Each extractor projects the source records of one category onto the fields
written to its output file. Records arrive as ordered sequences from
``GameData``; table-shape handling lives in the provider.
"""
from typing import Any, Dict, Iterable, List

from mcdata_extractor.data.item_resolver import ItemResolver


BREWING_KEYWORDS = (
    "nether_wart", "glowstone", "redstone", "fermented_spider_eye",
    "magma_cream", "sugar", "glistering_melon", "blaze_powder",
    "ghast_tear", "dragon_breath", "phantom_membrane", "gunpowder",
)

UNKNOWN = "unknown"

Record = Dict[str, Any]


def extract_effects(effects: Iterable[Record]) -> List[Record]:
    return [
        {
            "name": effect.get("name"),
            "displayName": effect.get("displayName"),
            "type": effect.get("type") or UNKNOWN,
        }
        for effect in effects
    ]


def extract_items(items: Iterable[Record]) -> List[Record]:
    return [
        {
            "name": item.get("name"),
            "displayName": item.get("displayName"),
            "stackSize": item.get("stackSize"),
        }
        for item in items
    ]


def extract_foods(foods: Iterable[Record], resolver: ItemResolver) -> List[Record]:
    """Project foods, naming each through the item table.

    ``foodPoints`` counts half hunger bars. A food without it gets ``None``.
    """
    return [
        {
            "name": resolver.resolve(food.get("id")),
            "hungerBarsRestored": _half(food.get("foodPoints")),
            "saturation": food.get("saturation"),
        }
        for food in foods
    ]


def _half(points: Any) -> Any:
    if points is None:
        return None
    half = points * 0.5
    # Whole numbers are written without a fraction (4 -> 2, not 2.0)
    return int(half) if float(half).is_integer() else half


def is_brewing_ingredient(name: str) -> bool:
    lowered = name.lower()
    return any(keyword in lowered for keyword in BREWING_KEYWORDS)


def filter_brewing_ingredients(items: Iterable[Record]) -> List[Record]:
    """Keep items whose name contains a known brewing keyword."""
    return [
        {"name": item.get("name"), "displayName": item.get("displayName")}
        for item in items
        if is_brewing_ingredient(item.get("name", ""))
    ]


def extract_biomes(biomes: Iterable[Record]) -> List[Record]:
    return [
        {
            "name": biome.get("name"),
            "displayName": biome.get("displayName"),
            "category": biome.get("category") or UNKNOWN,
            "dimension": biome.get("dimension") or UNKNOWN,
        }
        for biome in biomes
    ]


def extract_enchantments(enchantments: Iterable[Record]) -> List[Record]:
    return [
        {
            "name": enchant.get("name"),
            "displayName": enchant.get("displayName"),
            "maxLevel": enchant.get("maxLevel"),
            "category": enchant.get("category"),
            # enchantments this one cannot be combined with
            "exclude": enchant.get("exclude") or [],
        }
        for enchant in enchantments
    ]


def extract_entities(entities: Iterable[Record]) -> List[Record]:
    return [
        {
            "name": entity.get("name"),
            "displayName": entity.get("displayName"),
            "type": entity.get("type"),
            "category": entity.get("category"),
            "width": entity.get("width"),
            "height": entity.get("height"),
        }
        for entity in entities
    ]
