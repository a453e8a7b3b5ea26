"""Export manager for writing extracted categories to JSON files."""

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
import structlog

from mcdata_extractor import ExportError


# Output files in the order they are written
OUTPUT_FILES = (
    "crafting_recipes.json",
    "effects.json",
    "items.json",
    "foods.json",
    "brewing_ingredients.json",
    "biomes.json",
    "enchantments.json",
    "entities.json",
)


class ExportManager:
    """Writes category collections as pretty-printed JSON arrays."""

    def __init__(self, exports_dir: Optional[Path] = None, indent: int = 2,
                 logger: Optional[structlog.BoundLogger] = None):
        """Initialize export manager.

        Args:
            exports_dir: Directory to save exports (defaults to ./minecraft_data_output)
            indent: JSON indentation width
            logger: Structured logger instance

        Raises:
            ExportError: If the output directory cannot be created
        """
        self.logger = logger or structlog.get_logger(__name__)
        self.exports_dir = Path(exports_dir) if exports_dir else Path("minecraft_data_output")
        self.indent = indent
        self.written_files: List[Path] = []

        existed = self.exports_dir.is_dir()
        try:
            self.exports_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ExportError(f"Cannot create output directory {self.exports_dir}: {e}") from e

        if not existed:
            self.logger.info("Created directory", exports_dir=str(self.exports_dir))

    def write(self, filename: str, data: Any) -> Path:
        """Serialize ``data`` to ``<exports_dir>/<filename>``, replacing any existing file.

        Raises:
            ExportError: If serialization or the write fails
        """
        target = self.exports_dir / filename
        try:
            payload = json.dumps(data, indent=self.indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise ExportError(f"Cannot serialize {filename}: {e}") from e

        try:
            with open(target, 'w', encoding='utf-8') as f:
                f.write(payload)
        except OSError as e:
            raise ExportError(f"Cannot write {target}: {e}") from e

        self.written_files.append(target)
        self.logger.info(f"✓ Saved {filename}", path=str(target),
                         records=len(data) if isinstance(data, list) else None)
        return target

    def write_all(self, collections: Mapping[str, Any]) -> List[Path]:
        """Write each filename -> data pair in mapping order.

        Stops at the first failure; files already written are left in place.
        """
        return [self.write(filename, data) for filename, data in collections.items()]

    def get_stats(self) -> Dict[str, Any]:
        """Get export statistics for the current run."""
        return {
            'exports_dir': str(self.exports_dir),
            'files_written': len(self.written_files),
            'files': [path.name for path in self.written_files],
        }
