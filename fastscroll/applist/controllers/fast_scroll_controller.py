"""
FastScrollController - touch fractions for the fast-scroll rail.

Each section gets a fraction in [0, 1). A touch on the rail at fraction f
selects the section with the greatest fraction not above f.
"""
from bisect import bisect_right
from dataclasses import replace
from typing import List, Optional, Sequence
from loguru import logger

from fastscroll.applist.models.adapter_entry import AdapterEntry, FastScrollSection
from fastscroll.applist.models.app_item import FractionPolicy


class FastScrollController:
    """
    Computes and looks up section touch fractions.

    Policies (exactly one is in force):
    - DISTRIBUTE_BY_NUM_SECTIONS: evenly spaced, ``i / len(sections)``,
      regardless of how many entries each section holds
    - DISTRIBUTE_BY_ROWS_FRACTION: proportional to where the section's
      first entry sits in the grid

    Example:
        controller = FastScrollController()
        sections = controller.apply(sections, entries, num_rows=4, row_width=3)
        target = controller.section_for_fraction(sections, 0.5)
    """

    def __init__(self, policy: FractionPolicy = FractionPolicy.DISTRIBUTE_BY_NUM_SECTIONS):
        self._policy = FractionPolicy(policy)

    @property
    def policy(self) -> FractionPolicy:
        return self._policy

    def set_policy(self, policy: FractionPolicy):
        self._policy = FractionPolicy(policy)
        logger.debug(f"Fast-scroll policy set: {self._policy.value}")

    # --- Compute ---

    def apply(
        self,
        sections: Sequence[FastScrollSection],
        entries: Sequence[AdapterEntry],
        num_rows: int,
        row_width: int
    ) -> List[FastScrollSection]:
        """
        Rebind sections to the given entries and assign touch fractions.

        Args:
            sections: Sections from the sectioning pass
            entries: Packed entries; a section's target is looked up by position
            num_rows: Total rows in the grid
            row_width: Entries per row; fractions stay None when <= 0

        Returns:
            New sections pointing at ``entries``
        """
        if row_width <= 0 or num_rows <= 0:
            return [
                replace(section, scroll_to_entry=entries[section.scroll_to_entry.position], touch_fraction=None)
                for section in sections
            ]

        if self._policy is FractionPolicy.DISTRIBUTE_BY_ROWS_FRACTION:
            return self._distribute_by_rows(sections, entries, num_rows, row_width)
        return self._distribute_by_sections(sections, entries)

    def _distribute_by_sections(self, sections, entries) -> List[FastScrollSection]:
        count = len(sections)
        return [
            replace(
                section,
                scroll_to_entry=entries[section.scroll_to_entry.position],
                touch_fraction=index / count,
            )
            for index, section in enumerate(sections)
        ]

    def _distribute_by_rows(self, sections, entries, num_rows, row_width) -> List[FastScrollSection]:
        row_fraction = 1 / num_rows
        result = []
        for section in sections:
            entry = entries[section.scroll_to_entry.position]
            sub_row_fraction = entry.row_column * (row_fraction / row_width)
            result.append(replace(
                section,
                scroll_to_entry=entry,
                touch_fraction=entry.row_index * row_fraction + sub_row_fraction,
            ))
        return result

    # --- Lookup ---

    @staticmethod
    def section_for_fraction(
        sections: Sequence[FastScrollSection],
        fraction: float
    ) -> Optional[FastScrollSection]:
        """
        Find the section a rail touch at ``fraction`` selects.

        Args:
            sections: Sections with touch fractions, in order
            fraction: Normalized touch position, clamped to [0, 1]

        Returns:
            Section with the greatest touch_fraction <= fraction, or None
            if there are no sections or fractions are not computed
        """
        if not sections or sections[0].touch_fraction is None:
            return None

        fraction = min(max(fraction, 0.0), 1.0)
        fractions = [section.touch_fraction for section in sections]
        index = bisect_right(fractions, fraction) - 1
        # The first fraction is always 0, so index >= 0 after clamping.
        return sections[max(index, 0)]
