"""
SectionController - turns sorted items into adapter entries and sections.
"""
from typing import Any, List, Tuple

from fastscroll.applist.models.adapter_entry import AdapterEntry, FastScrollSection
from fastscroll.applist.section_cache import SectionNameCache


class SectionController:
    """
    Groups consecutive items with equal section names.

    Unlike a dict-based grouping, runs are never merged: if the order puts
    the same section name in two separate places, two sections result.
    Section names are looked up by full title through the cache.

    Example:
        controller = SectionController(cache)
        entries, sections = controller.apply(sorted_items)
    """

    def __init__(self, cache: SectionNameCache):
        self._cache = cache

    @property
    def cache(self) -> SectionNameCache:
        return self._cache

    def apply(self, items: List[Any]) -> Tuple[List[AdapterEntry], List[FastScrollSection]]:
        """
        Build entries and sections for already sorted items.

        Args:
            items: Items in display order

        Returns:
            (entries, sections); sections carry no touch fraction yet
        """
        entries: List[AdapterEntry] = []
        sections: List[FastScrollSection] = []
        last_section_name = None

        for position, item in enumerate(items):
            section_name = self._cache.section_name_for(item.title)
            # No header items: position and item index coincide.
            entry = AdapterEntry(
                position=position,
                section_name=section_name,
                item=item,
                item_index=position,
            )
            if section_name != last_section_name:
                last_section_name = section_name
                sections.append(FastScrollSection(section_name=section_name, scroll_to_entry=entry))
            entries.append(entry)

        return entries, sections
