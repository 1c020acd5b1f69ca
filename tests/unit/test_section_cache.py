"""
Tests for SectionNameCache and the default AlphabeticIndex classifier.
"""
import pytest
from unittest.mock import MagicMock

from fastscroll.applist.indexer import AlphabeticIndex
from fastscroll.applist.section_cache import SectionNameCache


class TestSectionNameCache:
    """Memoization and fallback behavior."""

    def test_classifies_once_per_title(self, classifier):
        cache = SectionNameCache(classifier)

        assert cache.section_name_for("Mail") == "M"
        assert cache.section_name_for("Mail") == "M"

        classifier.assert_called_once_with("Mail")
        assert cache.hits == 1
        assert cache.misses == 1

    def test_keyed_by_exact_title(self, classifier):
        cache = SectionNameCache(classifier)

        cache.section_name_for("mail")
        cache.section_name_for("Mail")

        assert classifier.call_count == 2
        assert len(cache) == 2
        assert "mail" in cache and "Mail" in cache

    def test_empty_result_uses_fallback(self):
        cache = SectionNameCache(MagicMock(return_value=""), fallback_section="?")

        assert cache.section_name_for("x") == "?"
        assert "x" in cache

    def test_none_result_uses_fallback(self):
        cache = SectionNameCache(MagicMock(return_value=None), fallback_section="?")
        assert cache.section_name_for("x") == "?"

    def test_raising_classifier_uses_fallback(self):
        failing = MagicMock(side_effect=ValueError("unclassifiable"))
        cache = SectionNameCache(failing, fallback_section="?")

        assert cache.section_name_for("x") == "?"
        assert cache.section_name_for("x") == "?"
        assert failing.call_count == 1

    def test_clear(self, classifier):
        cache = SectionNameCache(classifier)
        cache.section_name_for("Mail")

        cache.clear()

        assert len(cache) == 0
        cache.section_name_for("Mail")
        assert classifier.call_count == 2


class TestAlphabeticIndex:
    """Default classifier buckets."""

    @pytest.mark.parametrize("title, expected", [
        ("apple", "A"),
        ("Banana", "B"),
        ("  cherry", "C"),
        ("éclair", "E"),
        ("7zip", "#"),
        ("_underscore", "_"),
        ("", "∙"),
        ("   ", "∙"),
    ])
    def test_compute_section_name(self, title, expected):
        assert AlphabeticIndex().compute_section_name(title) == expected

    def test_custom_fallback(self):
        index = AlphabeticIndex(fallback_section="…")
        assert index("") == "…"
