"""
SectionNameCache - memoized title classification.

Classification can be expensive (locale-aware bucketing), so each distinct
title is classified once for the lifetime of the cache.
"""
from typing import Callable, Dict
from loguru import logger

from fastscroll.applist.models.app_item import DEFAULT_FALLBACK_SECTION


class SectionNameCache:
    """
    Maps exact title text to its section name.

    The classifier is invoked at most once per distinct title. Entries are
    never evicted; only clear() empties the cache. A classifier that
    returns nothing or raises yields the fallback section, which is cached
    like any other result.

    Example:
        cache = SectionNameCache(AlphabeticIndex())
        cache.section_name_for("Mail")  # classifies
        cache.section_name_for("Mail")  # cached
    """

    def __init__(
        self,
        classifier: Callable[[str], str],
        fallback_section: str = DEFAULT_FALLBACK_SECTION
    ):
        """
        Initialize the cache.

        Args:
            classifier: Function(title) returning a section name
            fallback_section: Name used when classification fails
        """
        self._classifier = classifier
        self._fallback_section = fallback_section
        self._cache: Dict[str, str] = {}
        self.hits = 0
        self.misses = 0

    @property
    def fallback_section(self) -> str:
        return self._fallback_section

    def section_name_for(self, title: str) -> str:
        """
        Return the cached section name for title, classifying on first use.

        Args:
            title: Display title, used verbatim as the cache key

        Returns:
            Section name (never empty)
        """
        section_name = self._cache.get(title)
        if section_name is not None:
            self.hits += 1
            return section_name

        self.misses += 1
        section_name = self._classify(title)
        self._cache[title] = section_name
        return section_name

    def _classify(self, title: str) -> str:
        try:
            section_name = self._classifier(title)
        except Exception as e:
            logger.warning(f"Classifier failed for title {title!r}: {e}; using fallback section")
            return self._fallback_section

        if not section_name:
            logger.debug(f"No section name for title {title!r}; using fallback section")
            return self._fallback_section
        return section_name

    def clear(self):
        """Drop every cached name (e.g. after a locale change)."""
        self._cache.clear()
        self.hits = 0
        self.misses = 0

    def __contains__(self, title: str) -> bool:
        return title in self._cache

    def __len__(self) -> int:
        return len(self._cache)
