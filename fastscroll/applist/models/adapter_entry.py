"""
Display-side records produced by a rebuild.

All three types are frozen: a rebuild creates new instances and publishes
them in a new ListSnapshot, so a consumer holding an older snapshot never
sees it change underneath.
"""
from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class AdapterEntry:
    """
    One item projected into display order.

    Attributes:
        position: Index in the full entry sequence
        section_name: Classifier key of the item's title
        item: The item itself (referenced, not copied)
        item_index: Rank among items, ignoring section boundaries
        row_index: Grid row, None while the row width is unknown
        row_column: Column inside the row, None while the row width is unknown
    """
    position: int
    section_name: str
    item: Any
    item_index: int
    row_index: Optional[int] = None
    row_column: Optional[int] = None

    @property
    def title(self) -> str:
        return self.item.title


@dataclass(frozen=True)
class FastScrollSection:
    """
    A fast-scroll target: one maximal run of entries sharing a section name.

    Attributes:
        section_name: Shared section name of the run
        scroll_to_entry: First entry of the run
        touch_fraction: Rail position in [0, 1), None while the row width is unknown
    """
    section_name: str
    scroll_to_entry: AdapterEntry
    touch_fraction: Optional[float] = None


@dataclass(frozen=True)
class ListSnapshot:
    """Consistent result of one rebuild."""
    entries: Tuple[AdapterEntry, ...] = ()
    sections: Tuple[FastScrollSection, ...] = ()
    num_rows: int = 0
    row_width: int = 0

    @property
    def layout_ready(self) -> bool:
        return self.row_width > 0

    def __len__(self) -> int:
        return len(self.entries)
