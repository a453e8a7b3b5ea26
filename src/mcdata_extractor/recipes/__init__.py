"""Crafting recipe normalization."""
from mcdata_extractor.recipes.models import (
    NormalizedRecipe,
    OtherRecipe,
    ResultingItem,
    ShapedRecipe,
    ShapelessRecipe,
)
from mcdata_extractor.recipes.normalizer import RecipeNormalizer, generalize_item_name

__all__ = [
    "NormalizedRecipe",
    "OtherRecipe",
    "ResultingItem",
    "ShapedRecipe",
    "ShapelessRecipe",
    "RecipeNormalizer",
    "generalize_item_name",
]
