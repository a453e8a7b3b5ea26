"""Minecraft Data Extractor: static game-data export for Minecraft.

This package loads the game-data tables that ship with the ``minecraft-data``
package for one game version and writes each category to a JSON file.

Main Components:
- MinecraftDataExtractor: Main application class
- ConfigManager: Configuration management
- ItemResolver: Item id to name lookup
- RecipeNormalizer: Recipe generalization and deduplication
- ExportManager: JSON file writer
"""

__version__ = "1.0.0"
__author__ = "Minecraft Data Extractor Team"


class ExtractorError(Exception):
    """Base error for the extractor."""


class ConfigurationError(ExtractorError):
    """Raised when configuration cannot be loaded or is invalid."""


class DataDependencyError(ExtractorError):
    """Raised when the game-data package or requested version is unavailable."""


class SourceDataError(ExtractorError):
    """Raised when a game-data table has an unexpected shape."""


class RecipeNormalizationError(ExtractorError):
    """Raised when a raw recipe cannot be normalized."""


class ExportError(ExtractorError):
    """Raised when an output directory or file cannot be written."""


__all__ = [
    "ExtractorError",
    "ConfigurationError",
    "DataDependencyError",
    "SourceDataError",
    "RecipeNormalizationError",
    "ExportError",
    "__version__",
    "__author__",
]
