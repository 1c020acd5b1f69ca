"""
Tests for the sort, section, row packing and fast-scroll controllers.
"""
import pytest

from fastscroll.applist.controllers import FastScrollController, RowPacker, SectionController, SortController
from fastscroll.applist.models.app_item import FractionPolicy, SortMode
from fastscroll.applist.section_cache import SectionNameCache


def _titles(items):
    return [item.title for item in items]


class TestSortController:
    """Stable ordering by first character or full title."""

    def test_first_char_case_folded(self, make_items):
        items = make_items(["Banana", "apple", "Cherry", "avocado"])

        ordered = SortController().apply(items)

        assert _titles(ordered) == ["apple", "avocado", "Banana", "Cherry"]

    def test_first_char_is_stable(self, make_items):
        items = make_items(["avocado", "Apple", "apricot"])

        ordered = SortController(SortMode.FIRST_CHAR).apply(items)

        # Same initial: input order kept, not alphabetical.
        assert _titles(ordered) == ["avocado", "Apple", "apricot"]

    def test_full_title(self, make_items):
        items = make_items(["avocado", "Apple", "apricot"])

        ordered = SortController(SortMode.FULL_TITLE).apply(items)

        assert _titles(ordered) == ["Apple", "apricot", "avocado"]

    def test_empty_title_sorts_first(self, make_items):
        items = make_items(["b", "", "a"])
        assert _titles(SortController().apply(items)) == ["", "a", "b"]

    def test_does_not_mutate_input(self, make_items):
        items = make_items(["b", "a"])
        SortController().apply(items)
        assert _titles(items) == ["b", "a"]

    def test_set_mode_accepts_value(self):
        controller = SortController()
        controller.set_mode("full_title")
        assert controller.mode is SortMode.FULL_TITLE


class TestSectionController:
    """Entries and section runs."""

    def test_sections_follow_key_changes(self, make_items, classifier):
        items = make_items(["apple", "avocado", "Banana", "Cherry"])

        entries, sections = SectionController(SectionNameCache(classifier)).apply(items)

        assert [e.position for e in entries] == [0, 1, 2, 3]
        assert [e.item_index for e in entries] == [0, 1, 2, 3]
        assert [e.section_name for e in entries] == ["a", "a", "B", "C"]
        assert [s.section_name for s in sections] == ["a", "B", "C"]
        assert [s.scroll_to_entry.position for s in sections] == [0, 2, 3]

    def test_split_runs_are_separate_sections(self, make_items, classifier):
        items = make_items(["alpha", "beta", "apex"])

        _, sections = SectionController(SectionNameCache(classifier)).apply(items)

        assert [s.section_name for s in sections] == ["a", "b", "a"]

    def test_keyed_by_full_title(self, make_items, classifier):
        items = make_items(["Mail", "Mail", "Maps"])

        SectionController(SectionNameCache(classifier)).apply(items)

        assert classifier.call_count == 2

    def test_empty(self, classifier):
        entries, sections = SectionController(SectionNameCache(classifier)).apply([])
        assert entries == [] and sections == []


class TestRowPacker:
    """Row and column assignment."""

    @pytest.fixture
    def entries(self, make_items, classifier):
        items = make_items(["a1", "a2", "b1", "b2", "b3", "c1", "d1"])
        entries, _ = SectionController(SectionNameCache(classifier)).apply(items)
        return entries

    def test_seven_entries_width_three(self, entries):
        packed, num_rows = RowPacker().apply(entries, 3)

        assert num_rows == 3
        assert [e.row_index for e in packed] == [0, 0, 0, 1, 1, 1, 2]
        assert [e.row_column for e in packed] == [0, 1, 2, 0, 1, 2, 0]

    def test_sections_do_not_break_rows(self, entries):
        packed, _ = RowPacker().apply(entries, 4)
        # "b1" starts a section but stays in row 0.
        assert (packed[2].row_index, packed[2].row_column) == (0, 2)

    def test_exact_fit(self, entries):
        packed, num_rows = RowPacker().apply(entries[:6], 3)
        assert num_rows == 2
        assert [e.row_column for e in packed] == [0, 1, 2, 0, 1, 2]

    @pytest.mark.parametrize("width", [0, -2])
    def test_unknown_layout_skips_packing(self, entries, width):
        packed, num_rows = RowPacker().apply(entries, width)

        assert num_rows == 0
        assert all(e.row_index is None and e.row_column is None for e in packed)
        assert [e.position for e in packed] == list(range(7))

    def test_empty(self):
        assert RowPacker().apply([], 4) == ([], 0)


class TestFastScrollController:
    """Fraction policies and floor lookup."""

    @pytest.fixture
    def packed(self, make_items, classifier):
        # sections: a(2) b(3) c(1) d(1)
        items = make_items(["a1", "a2", "b1", "b2", "b3", "c1", "d1"])
        entries, sections = SectionController(SectionNameCache(classifier)).apply(items)
        packed, num_rows = RowPacker().apply(entries, 3)
        return sections, packed, num_rows

    def test_distribute_by_sections(self, packed):
        sections, entries, num_rows = packed

        result = FastScrollController().apply(sections, entries, num_rows, 3)

        assert [s.touch_fraction for s in result] == [0 / 4, 1 / 4, 2 / 4, 3 / 4]

    def test_distribute_by_rows(self, packed):
        sections, entries, num_rows = packed
        controller = FastScrollController(FractionPolicy.DISTRIBUTE_BY_ROWS_FRACTION)

        result = controller.apply(sections, entries, num_rows, 3)

        # First entries at positions 0, 2, 5, 6 in a 3x3 grid.
        expected = [0.0, 2 / 9, 1 / 3 + 2 / 9, 2 / 3]
        assert [s.touch_fraction for s in result] == pytest.approx(expected)

    @pytest.mark.parametrize("policy", list(FractionPolicy))
    def test_fractions_strictly_increasing(self, packed, policy):
        sections, entries, num_rows = packed

        fractions = [s.touch_fraction for s in FastScrollController(policy).apply(sections, entries, num_rows, 3)]

        assert fractions[0] == 0
        assert all(0 <= f < 1 for f in fractions)
        assert all(a < b for a, b in zip(fractions, fractions[1:]))

    def test_sections_point_at_packed_entries(self, packed):
        sections, entries, num_rows = packed

        result = FastScrollController().apply(sections, entries, num_rows, 3)

        assert result[2].scroll_to_entry is entries[5]
        assert result[2].scroll_to_entry.row_index == 1

    def test_unknown_layout_leaves_fractions_unset(self, packed):
        sections, entries, _ = packed
        unpacked, _ = RowPacker().apply(entries, 0)

        result = FastScrollController().apply(sections, unpacked, 0, 0)

        assert all(s.touch_fraction is None for s in result)
        assert FastScrollController.section_for_fraction(result, 0.5) is None

    @pytest.mark.parametrize("fraction, expected", [
        (0.0, "a"),
        (0.2, "a"),
        (0.25, "b"),
        (0.74, "c"),
        (0.75, "d"),
        (1.0, "d"),
        (-3.0, "a"),
        (7.0, "d"),
    ])
    def test_section_for_fraction(self, packed, fraction, expected):
        sections, entries, num_rows = packed
        result = FastScrollController().apply(sections, entries, num_rows, 3)

        assert FastScrollController.section_for_fraction(result, fraction).section_name == expected

    def test_section_for_fraction_without_sections(self):
        assert FastScrollController.section_for_fraction([], 0.5) is None
