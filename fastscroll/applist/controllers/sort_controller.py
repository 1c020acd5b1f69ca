"""
SortController - canonical ordering of items before sectioning.
"""
from typing import Any, Callable, List
from loguru import logger

from fastscroll.applist.models.app_item import SortMode


def first_char_key(item: Any) -> str:
    """Case-folded first character of the title ("" for an empty title)."""
    return item.title[:1].casefold()


def full_title_key(item: Any) -> str:
    return item.title.casefold()


_SORT_KEYS: dict[SortMode, Callable[[Any], str]] = {
    SortMode.FIRST_CHAR: first_char_key,
    SortMode.FULL_TITLE: full_title_key,
}


class SortController:
    """
    Orders items for display.

    Sorting is always stable: items with equal keys keep their input
    order, so rebuilding from the same input yields the same order.

    Modes:
    - FIRST_CHAR: group same-initial titles, nothing more (the default)
    - FULL_TITLE: true alphabetical order by case-folded title

    Example:
        controller = SortController(SortMode.FULL_TITLE)
        ordered = controller.apply(items)
    """

    def __init__(self, mode: SortMode = SortMode.FIRST_CHAR):
        self._mode = SortMode(mode)

    @property
    def mode(self) -> SortMode:
        """Current sort mode."""
        return self._mode

    def set_mode(self, mode: SortMode):
        self._mode = SortMode(mode)
        logger.debug(f"Sort mode set: {self._mode.value}")

    def apply(self, items: List[Any]) -> List[Any]:
        """
        Apply current sort to items.

        Args:
            items: Items to sort

        Returns:
            Sorted list (new list, original unchanged)
        """
        return sorted(items, key=_SORT_KEYS[self._mode])
