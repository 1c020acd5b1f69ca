"""
ItemStore - the current, unordered collection of items.

Items are keyed by identity (``item.id``). Every mutation leaves exactly
one item per identity; the latest value for an identity wins.
"""
from typing import Any, Dict, Iterable, List


def item_identity(item_or_id: Any) -> Any:
    """Return the identity of an item, or the value itself if it is a bare id."""
    return getattr(item_or_id, "id", item_or_id)


class ItemStore:
    """
    Identity-keyed item collection preserving insertion order.

    Example:
        store = ItemStore()
        store.set_items([mail, maps])
        store.add_or_update([mail_v2, music])  # mail replaced in place
        store.remove([maps, "missing.id"])     # absent ids ignored
    """

    def __init__(self):
        self._items: Dict[Any, Any] = {}

    def set_items(self, items: Iterable[Any]) -> bool:
        """
        Replace the entire collection.

        Args:
            items: New items; for a repeated identity the last one wins

        Returns:
            True if the contents changed
        """
        new_items: Dict[Any, Any] = {}
        for item in items:
            new_items[item_identity(item)] = item

        changed = list(new_items.items()) != list(self._items.items())
        self._items = new_items
        return changed

    def add_or_update(self, items: Iterable[Any]) -> bool:
        """
        Merge items by identity.

        Known identities are replaced in place; new ones are appended.

        Returns:
            True if the contents changed
        """
        changed = False
        for item in items:
            key = item_identity(item)
            if key not in self._items or self._items[key] != item:
                changed = True
            self._items[key] = item
        return changed

    def remove(self, items: Iterable[Any]) -> bool:
        """
        Remove items (or bare identities). Absent identities are ignored.

        Returns:
            True if anything was removed
        """
        changed = False
        for item in items:
            if self._items.pop(item_identity(item), None) is not None:
                changed = True
        return changed

    def clear(self):
        self._items.clear()

    @property
    def items(self) -> List[Any]:
        """Snapshot of the stored items in insertion order."""
        return list(self._items.values())

    def get(self, item_id: Any) -> Any:
        return self._items.get(item_id)

    def __contains__(self, item_or_id: Any) -> bool:
        return item_identity(item_or_id) in self._items

    def __len__(self) -> int:
        return len(self._items)
