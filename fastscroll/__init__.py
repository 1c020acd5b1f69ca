"""
fastscroll - alphabetical item grid with a fast-scroll index.

Sorts, sections and row-packs a set of titled items and derives the touch
fractions a letter rail needs to jump between sections.
"""

# Core systems
from fastscroll.core.events import Signal
from fastscroll.core.logging import setup_logging
from fastscroll.core.config import (
    ConfigManager,
    AppConfig,
    AppListSettings,
    GeneralSettings,
)

# App list
from fastscroll.applist import (
    AlphabeticalItemList,
    AlphabeticIndex,
    SectionNameCache,
    ItemStore,
    AppItem,
    SortMode,
    FractionPolicy,
    AdapterEntry,
    FastScrollSection,
    ListSnapshot,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Signal",
    "setup_logging",
    "ConfigManager",
    "AppConfig",
    "AppListSettings",
    "GeneralSettings",
    # App list
    "AlphabeticalItemList",
    "AlphabeticIndex",
    "SectionNameCache",
    "ItemStore",
    "AppItem",
    "SortMode",
    "FractionPolicy",
    "AdapterEntry",
    "FastScrollSection",
    "ListSnapshot",
]
