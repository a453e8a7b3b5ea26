"""Recipe normalization and deduplication.

Flattens the per-result recipe lists of the data package into one collection,
classifies each recipe as shaped, shapeless or other, collapses wood-family
ingredients into family tokens and keeps the first recipe seen for each
(result, layout) pair.
"""

from typing import Any, Dict, List, Mapping, Optional
import structlog

from mcdata_extractor import RecipeNormalizationError
from mcdata_extractor.data.item_resolver import ItemResolver
from mcdata_extractor.recipes.models import (
    NormalizedRecipe,
    OtherRecipe,
    ResultingItem,
    ShapedRecipe,
    ShapelessRecipe,
    dedup_key,
)


EMPTY_CELL = "empty"

# Checked in order, first match wins
FAMILY_SUFFIXES = (
    ("_planks", "planks"),
    ("_log", "logs"),
    ("_wood", "wood"),
)


def generalize_item_name(name: str) -> str:
    """Collapse a material-specific item name into its family token.

    >>> generalize_item_name("oak_planks")
    'planks'
    >>> generalize_item_name("stick")
    'stick'
    """
    for suffix, family in FAMILY_SUFFIXES:
        if name.endswith(suffix):
            return family
    return name


def _present(recipe: Mapping[str, Any], key: str) -> bool:
    return recipe.get(key) is not None


class RecipeNormalizer:
    """Builds the deduplicated list of generalized crafting recipes."""

    def __init__(self, resolver: ItemResolver, logger: Optional[structlog.BoundLogger] = None):
        self.resolver = resolver
        self.logger = logger or structlog.get_logger(__name__)

    def normalize(self, recipes_by_result: Mapping[Any, Any]) -> List[NormalizedRecipe]:
        """Normalize every raw recipe and drop duplicates.

        Args:
            recipes_by_result: Result item id -> list of raw recipes

        Returns:
            Unique recipes in first-seen order
        """
        unique: Dict[str, NormalizedRecipe] = {}
        seen = 0
        skipped = 0

        for result_id, recipe_list in recipes_by_result.items():
            result_name = self.resolver.resolve(result_id)

            if not isinstance(recipe_list, list):
                skipped += 1
                self.logger.debug("Skipping non-list recipe entry",
                                  result_id=result_id,
                                  entry_type=type(recipe_list).__name__)
                continue

            for raw in recipe_list:
                seen += 1
                recipe = self.normalize_recipe(result_name, raw)
                key = dedup_key(recipe)
                if key not in unique:
                    unique[key] = recipe

        self.logger.debug("Recipe normalization finished",
                          raw_recipes=seen,
                          duplicates=seen - len(unique),
                          skipped_entries=skipped)

        return list(unique.values())

    def normalize_recipe(self, result_name: Optional[str], raw: Mapping[str, Any]) -> NormalizedRecipe:
        """Classify one raw recipe and generalize its ingredients."""
        result = raw.get("result") or {}
        resulting_item = ResultingItem(
            item=result_name,
            item_count=result.get("count") or 1,
        )

        if _present(raw, "inShape"):
            pattern = tuple(
                tuple(self._shaped_cell(item_id) for item_id in row)
                for row in raw["inShape"]
            )
            return ShapedRecipe(resulting_item=resulting_item, pattern=pattern)

        if _present(raw, "ingredients"):
            ingredients = tuple(
                self._shapeless_ingredient(result_name, item_id)
                for item_id in raw["ingredients"]
            )
            return ShapelessRecipe(resulting_item=resulting_item, ingredients=ingredients)

        return OtherRecipe(resulting_item=resulting_item)

    def _shaped_cell(self, item_id: Any) -> str:
        name = self.resolver.resolve(item_id)
        if not name:
            return EMPTY_CELL
        return generalize_item_name(name)

    def _shapeless_ingredient(self, result_name: Optional[str], item_id: Any) -> str:
        # No "empty" substitution here, unlike shaped cells
        name = self.resolver.resolve(item_id)
        if name is None:
            raise RecipeNormalizationError(
                f"Shapeless recipe for {result_name!r} has an ingredient with no item name"
            )
        return generalize_item_name(name)
