"""Item id to item name resolution."""
from typing import Any, Dict, Optional

from mcdata_extractor.data.provider import coerce_id


class ItemResolver:
    """Resolves item ids against the items table captured at startup."""

    def __init__(self, items_by_id: Dict[Any, Dict[str, Any]]):
        self._items_by_id = {coerce_id(key): item for key, item in items_by_id.items()}

    def resolve(self, item_id: Any) -> Optional[str]:
        """Return the item name for ``item_id``.

        ``item_id`` may also be a pre-1.13 ``{"id": ..., "metadata": ...}``
        reference or an ``[id, metadata]`` pair. ``None`` resolves to ``None``;
        ids missing from the table resolve to the placeholder ``Unknown(<id>)``.
        """
        key = coerce_id(item_id)
        if key is None:
            return None
        item = self._items_by_id.get(key)
        if item is None:
            return f"Unknown({key})"
        return item.get("name")
