"""Main application entry point for Minecraft Data Extractor."""
import sys
import argparse
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple
import structlog
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mcdata_extractor import DataDependencyError
from mcdata_extractor.utils.logging_utils import setup_logging
from mcdata_extractor.core.config_manager import ConfigManager
from mcdata_extractor.data.item_resolver import ItemResolver
from mcdata_extractor.data.provider import GameData, load_game_data
from mcdata_extractor.recipes.normalizer import RecipeNormalizer
from mcdata_extractor.export.export_manager import ExportManager, OUTPUT_FILES
from mcdata_extractor.extraction.extractors import (
    extract_biomes,
    extract_effects,
    extract_enchantments,
    extract_entities,
    extract_foods,
    extract_items,
    filter_brewing_ingredients,
)


# (output file, summary label)
SUMMARY_LABELS: List[Tuple[str, str]] = [
    ("crafting_recipes.json", "Crafting Recipes"),
    ("effects.json", "Status Effects"),
    ("items.json", "Items"),
    ("foods.json", "Foods"),
    ("brewing_ingredients.json", "Brewing Ingredients"),
    ("biomes.json", "Biomes"),
    ("enchantments.json", "Enchantments"),
    ("entities.json", "Entities"),
]


class MinecraftDataExtractor:
    """Main application class for the Minecraft Data Extractor."""

    def __init__(self, config_path: Optional[Path] = None,
                 overrides: Optional[Dict[str, Any]] = None,
                 loader: Optional[Callable[[str, str], GameData]] = None,
                 console: Optional[Console] = None):
        """Initialize the extractor application.

        Args:
            config_path: Optional path to configuration file
            overrides: Command-line values that replace configured ones
                (version, edition, output_dir, log_level)
            loader: Returns the game data for a version and edition
            console: Console used for the final summary
        """
        self.logger = setup_logging()
        self.config_manager = ConfigManager(config_path, self.logger)
        self.config = self.config_manager.config
        self._apply_overrides(overrides or {})

        level = "DEBUG" if self.config.debug else self.config.log_level
        if level.upper() != "INFO":
            self.logger = setup_logging(level=level)

        self.loader = loader or load_game_data
        self.console = console or Console()

    def _apply_overrides(self, overrides: Dict[str, Any]) -> None:
        if overrides.get("version"):
            self.config.data.version = overrides["version"]
        if overrides.get("edition"):
            self.config.data.edition = overrides["edition"]
        if overrides.get("output_dir"):
            self.config.output.directory = str(overrides["output_dir"])
        if overrides.get("log_level"):
            self.config.log_level = overrides["log_level"]

    def extract(self, game_data: GameData) -> Dict[str, List[Any]]:
        """Run every extraction step and return output file -> records."""
        resolver = ItemResolver(game_data.items_by_id)

        self.logger.info("Extracting crafting recipes...")
        recipes = RecipeNormalizer(resolver, self.logger).normalize(game_data.recipes)
        crafting_recipes = [recipe.to_dict() for recipe in recipes]
        self.logger.info(f"Found {len(crafting_recipes)} unique generalized crafting recipes")

        steps = [
            ("effects.json", "status effects", lambda: extract_effects(game_data.effects)),
            ("items.json", "items", lambda: extract_items(game_data.items)),
            ("foods.json", "food items", lambda: extract_foods(game_data.foods, resolver)),
            ("brewing_ingredients.json", "brewing ingredients",
             lambda: filter_brewing_ingredients(game_data.items)),
            ("biomes.json", "biomes", lambda: extract_biomes(game_data.biomes)),
            ("enchantments.json", "enchantments", lambda: extract_enchantments(game_data.enchantments)),
            ("entities.json", "entities", lambda: extract_entities(game_data.entities)),
        ]

        collections: Dict[str, List[Any]] = {"crafting_recipes.json": crafting_recipes}
        for filename, label, step in steps:
            self.logger.info(f"Extracting {label}...")
            collections[filename] = step()
            self.logger.info(f"Found {len(collections[filename])} {label}")

        return collections

    def run(self) -> Dict[str, int]:
        """Load, extract and write every category.

        Returns:
            Record count per output file
        """
        version = self.config.data.version
        self.logger.info(f"Loading Minecraft data for version {version}...")
        game_data = self.loader(version, self.config.data.edition)

        collections = self.extract(game_data)

        exporter = ExportManager(Path(self.config.output.directory),
                                 indent=self.config.output.indent,
                                 logger=self.logger)
        self.logger.info("Saving data to JSON files...")
        exporter.write_all({name: collections[name] for name in OUTPUT_FILES})

        counts = {filename: len(records) for filename, records in collections.items()}
        self.logger.info("Data extraction complete!", **exporter.get_stats())
        self.print_summary(counts)
        return counts

    def print_summary(self, counts: Dict[str, int]) -> None:
        table = Table(title="📊 Summary")
        table.add_column("Category", style="cyan")
        table.add_column("Count", justify="right", style="green")
        for filename, label in SUMMARY_LABELS:
            table.add_row(label, str(counts.get(filename, 0)))
        self.console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcdata-extractor",
        description="Minecraft Data Extractor - export static game data to JSON"
    )
    parser.add_argument("--config", type=Path, help="Path to configuration file")
    parser.add_argument("--mc-version", dest="version", help="Minecraft version to extract")
    parser.add_argument("--edition", choices=["pc", "bedrock"], help="Game edition")
    parser.add_argument("--output-dir", type=Path, help="Directory for the JSON files")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Log level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    err_console = Console(stderr=True)

    try:
        extractor = MinecraftDataExtractor(args.config, overrides={
            "version": args.version,
            "edition": args.edition,
            "output_dir": args.output_dir,
            "log_level": args.log_level,
        })
        extractor.run()
        return 0

    except DataDependencyError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
        return 1
    except KeyboardInterrupt:
        err_console.print("\nStopped by user")
        return 1
    except Exception as e:
        structlog.get_logger(__name__).error("Extraction failed", error=str(e))
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
        err_console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
