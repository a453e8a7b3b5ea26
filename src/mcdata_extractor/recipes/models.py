"""Normalized recipe variants.

A normalized recipe is exactly one of shaped, shapeless or other, and only
carries the fields valid for its kind.
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union


# Dedup key text for recipes with neither pattern nor ingredients
NO_LAYOUT_SENTINEL = "undefined"


@dataclass(frozen=True)
class ResultingItem:
    """Output item of a recipe."""
    item: Optional[str]
    item_count: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {"item": self.item, "itemCount": self.item_count}


@dataclass(frozen=True)
class ShapedRecipe:
    """Recipe defined by a fixed grid of ingredient cells."""
    resulting_item: ResultingItem
    pattern: Tuple[Tuple[str, ...], ...]

    type = "shaped"

    def layout(self) -> Any:
        return [list(row) for row in self.pattern]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "resultingItem": self.resulting_item.to_dict(),
            "type": self.type,
            "pattern": self.layout(),
        }


@dataclass(frozen=True)
class ShapelessRecipe:
    """Recipe defined by an unordered ingredient list."""
    resulting_item: ResultingItem
    ingredients: Tuple[str, ...]

    type = "shapeless"

    def layout(self) -> Any:
        return list(self.ingredients)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "resultingItem": self.resulting_item.to_dict(),
            "type": self.type,
            "ingredients": self.layout(),
        }


@dataclass(frozen=True)
class OtherRecipe:
    """Recipe with neither a grid nor an ingredient list."""
    resulting_item: ResultingItem

    type = "other"

    def layout(self) -> Any:
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "resultingItem": self.resulting_item.to_dict(),
            "type": self.type,
        }


NormalizedRecipe = Union[ShapedRecipe, ShapelessRecipe, OtherRecipe]


def dedup_key(recipe: NormalizedRecipe) -> str:
    """Build the key that identifies duplicate recipes.

    Result name joined to the compact JSON of the pattern or ingredient list.
    """
    name = recipe.resulting_item.item
    layout = recipe.layout()
    layout_text = NO_LAYOUT_SENTINEL if layout is None else json.dumps(
        layout, separators=(",", ":"), ensure_ascii=False
    )
    return f"{'null' if name is None else name}_{layout_text}"
