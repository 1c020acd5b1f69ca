"""
AppList Models Package.
"""
from fastscroll.applist.models.app_item import AppItem, SortMode, FractionPolicy, DEFAULT_FALLBACK_SECTION
from fastscroll.applist.models.adapter_entry import AdapterEntry, FastScrollSection, ListSnapshot

__all__ = [
    "AppItem",
    "SortMode",
    "FractionPolicy",
    "DEFAULT_FALLBACK_SECTION",
    "AdapterEntry",
    "FastScrollSection",
    "ListSnapshot",
]
