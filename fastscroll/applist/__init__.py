"""
AppList Module - alphabetical item list with fast-scroll sections.

Turns an unordered set of titled items into:
- a stably sorted sequence of adapter entries, one per item
- sections (runs of equal section names) with fast-scroll touch fractions
- grid rows and columns for a given row width

Usage:
    from fastscroll.applist import AlphabeticalItemList, AppItem

    apps = AlphabeticalItemList(num_apps_per_row=4)
    apps.set_items([AppItem(id="mail", title="Mail"), AppItem(id="maps", title="Maps")])
    apps.fast_scroll_sections[0].section_name  # "M"
"""
from fastscroll.applist.models import (
    AppItem,
    SortMode,
    FractionPolicy,
    AdapterEntry,
    FastScrollSection,
    ListSnapshot,
)
from fastscroll.applist.indexer import AlphabeticIndex
from fastscroll.applist.item_store import ItemStore
from fastscroll.applist.section_cache import SectionNameCache
from fastscroll.applist.alphabetical_list import AlphabeticalItemList

__all__ = [
    # Engine
    "AlphabeticalItemList",
    # Building blocks
    "ItemStore",
    "SectionNameCache",
    "AlphabeticIndex",
    # Data types
    "AppItem",
    "SortMode",
    "FractionPolicy",
    "AdapterEntry",
    "FastScrollSection",
    "ListSnapshot",
]
