"""Game-data provider boundary.

Wraps the ``minecraft-data`` package. Every category table is turned into an
ordered sequence of records here, whether the package exposes it as a list or
as a mapping keyed by id, so downstream code never branches on table shape.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional
import structlog

from mcdata_extractor import DataDependencyError, SourceDataError


logger = structlog.get_logger(__name__)

INSTALL_HINT = (
    "minecraft-data package not found!\n\n"
    "Please install it first:\n"
    "  pip install minecraft-data\n\n"
    "Then run this command again:\n"
    "  mcdata-extractor"
)

# Category tables read from the data package, in extraction order.
TABLE_NAMES = ("items", "recipes", "effects", "foods", "biomes", "enchantments", "entities")


def as_records(table: Any) -> List[Dict[str, Any]]:
    """Return the records of a list-or-mapping table in natural order.

    ``None`` (a category the version does not ship) yields an empty list.
    """
    if table is None:
        return []
    if isinstance(table, Mapping):
        return list(table.values())
    return list(table)


def coerce_id(value: Any) -> Any:
    """Parse an item reference to its id.

    Table keys are numeric strings (``"42"`` -> ``42``). Recipes of versions
    before 1.13 reference items as ``{"id": 3, "metadata": 0}`` or
    ``[3, 0]``; only the id is kept.
    """
    if isinstance(value, Mapping):
        value = value.get("id")
    elif isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None or isinstance(value, (bool, int)):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return value


def index_items_by_id(table: Any) -> Dict[Any, Dict[str, Any]]:
    """Build the id -> item record lookup used by the item resolver."""
    if table is None:
        return {}
    if isinstance(table, Mapping):
        return {coerce_id(key): item for key, item in table.items()}
    return {coerce_id(item.get("id")): item for item in table if isinstance(item, Mapping)}


@dataclass(frozen=True)
class GameData:
    """Category tables for one game version."""
    version: str
    items_by_id: Dict[Any, Dict[str, Any]] = field(default_factory=dict)
    items: List[Dict[str, Any]] = field(default_factory=list)
    recipes: Dict[Any, Any] = field(default_factory=dict)
    effects: List[Dict[str, Any]] = field(default_factory=list)
    foods: List[Dict[str, Any]] = field(default_factory=list)
    biomes: List[Dict[str, Any]] = field(default_factory=list)
    enchantments: List[Dict[str, Any]] = field(default_factory=list)
    entities: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_source(cls, source: Any, version: Optional[str] = None) -> "GameData":
        """Build from any object exposing the category tables as attributes."""
        tables = {name: _read_table(source, name) for name in TABLE_NAMES}
        recipes = tables["recipes"]
        if recipes is not None and not isinstance(recipes, Mapping):
            # Recipes must stay keyed by result item id
            raise SourceDataError(
                f"recipes table must be a mapping of result id to recipes, got {type(recipes).__name__}"
            )
        return cls(
            version=version or str(getattr(source, "version", "unknown")),
            items_by_id=index_items_by_id(tables["items"]),
            items=as_records(tables["items"]),
            recipes=dict(recipes or {}),
            effects=as_records(tables["effects"]),
            foods=as_records(tables["foods"]),
            biomes=as_records(tables["biomes"]),
            enchantments=as_records(tables["enchantments"]),
            entities=as_records(tables["entities"]),
        )


def _read_table(source: Any, name: str) -> Any:
    # The data package exposes some tables only as "<name>_list"
    for attr in (name, f"{name}_list"):
        value = getattr(source, attr, None)
        if value is not None:
            return value
    logger.debug("Category table not available", table=name)
    return None


def load_game_data(version: str, edition: str = "pc") -> GameData:
    """Load category tables for ``version`` from the ``minecraft-data`` package.

    Raises:
        DataDependencyError: If the package is not installed or does not know
            the requested version.
    """
    try:
        import minecraft_data
    except ImportError as e:
        raise DataDependencyError(INSTALL_HINT) from e

    logger.info("Loading Minecraft data", version=version, edition=edition)
    try:
        source = minecraft_data(version, edition)
    except Exception as e:
        raise DataDependencyError(
            f"minecraft-data has no data for {edition} version {version!r}: {e}\n\n"
            "Upgrade the package to a release that ships this version:\n"
            "  pip install --upgrade minecraft-data"
        ) from e

    return GameData.from_source(source, version=version)
