"""
AlphabeticalItemList - the alphabetically sorted, sectioned item list.

Feeds a grid UI with a fast-scroll rail. Every mutation runs the whole
pipeline synchronously and publishes one immutable ListSnapshot:

    store -> sort -> section (cached names) -> pack rows -> touch fractions

A row width change only repeats the last two steps.
"""
import threading
from typing import Any, Callable, Iterable, List, Optional, Tuple, TYPE_CHECKING
from loguru import logger

from fastscroll.core.events import Signal
from fastscroll.applist.indexer import AlphabeticIndex
from fastscroll.applist.item_store import ItemStore
from fastscroll.applist.section_cache import SectionNameCache
from fastscroll.applist.controllers.sort_controller import SortController
from fastscroll.applist.controllers.section_controller import SectionController
from fastscroll.applist.controllers.row_packer import RowPacker
from fastscroll.applist.controllers.fast_scroll_controller import FastScrollController
from fastscroll.applist.models.adapter_entry import AdapterEntry, FastScrollSection, ListSnapshot
from fastscroll.applist.models.app_item import DEFAULT_FALLBACK_SECTION, FractionPolicy, SortMode

if TYPE_CHECKING:
    from fastscroll.core.config import AppListSettings, ConfigManager


class AlphabeticalItemList:
    """
    Sorted, sectioned and row-packed view over a set of items.

    Items are any objects with ``id`` and ``title`` attributes (see AppItem).

    Signals:
        dataset_changed(snapshot): emitted once after every completed rebuild

    Example:
        apps = AlphabeticalItemList(num_apps_per_row=4)
        apps.dataset_changed.connect(grid_model.on_dataset_changed)
        apps.set_items(items)
        target = apps.scroll_target(0.5)
    """

    def __init__(
        self,
        classifier: Optional[Callable[[str], str]] = None,
        num_apps_per_row: int = 0,
        sort_mode: SortMode = SortMode.FIRST_CHAR,
        fraction_policy: FractionPolicy = FractionPolicy.DISTRIBUTE_BY_NUM_SECTIONS,
        fallback_section: str = DEFAULT_FALLBACK_SECTION
    ):
        """
        Initialize the list.

        Args:
            classifier: Function(title) returning a section name;
                defaults to AlphabeticIndex
            num_apps_per_row: Row width; 0 until the layout is known
            sort_mode: Item ordering before sectioning
            fraction_policy: Touch fraction distribution
            fallback_section: Section name for unclassifiable titles
        """
        if classifier is None:
            classifier = AlphabeticIndex(fallback_section)

        self._store = ItemStore()
        self._cache = SectionNameCache(classifier, fallback_section)
        self.sort_controller = SortController(sort_mode)
        self.section_controller = SectionController(self._cache)
        self.row_packer = RowPacker()
        self.fast_scroll_controller = FastScrollController(fraction_policy)

        self._num_apps_per_row = max(0, num_apps_per_row)
        # Output of the sectioning pass, kept for layout-only rebuilds.
        self._sectioned: Tuple[List[AdapterEntry], List[FastScrollSection]] = ([], [])
        self._snapshot = ListSnapshot(row_width=self._num_apps_per_row)
        self._lock = threading.RLock()

        self.dataset_changed = Signal("DatasetChanged")

    @classmethod
    def from_settings(
        cls,
        settings: 'AppListSettings',
        classifier: Optional[Callable[[str], str]] = None
    ) -> 'AlphabeticalItemList':
        """Create a list configured from AppListSettings."""
        return cls(
            classifier=classifier,
            num_apps_per_row=settings.num_apps_per_row,
            sort_mode=settings.sort_mode,
            fraction_policy=settings.fraction_policy,
            fallback_section=settings.fallback_section,
        )

    def bind_config(self, config: 'ConfigManager'):
        """Follow applist setting changes made through a ConfigManager."""
        config.on_changed.connect(self._on_config_changed)

    def _on_config_changed(self, section: str, key: str, value: Any):
        if section != "applist":
            return
        if key == "num_apps_per_row":
            self.set_num_apps_per_row(value)
        elif key == "sort_mode":
            self.set_sort_mode(value)
        elif key == "fraction_policy":
            self.set_fraction_policy(value)
        else:
            logger.debug(f"Setting applist.{key} applies to newly created lists only")

    # --- Items ---

    def set_items(self, items: Iterable[Any]):
        """Replace all items."""
        with self._lock:
            self._store.set_items(items)
            snapshot = self._on_items_updated()
        self._publish(snapshot)

    def add_or_update_items(self, items: Iterable[Any]):
        """Add new items and replace items whose id is already known."""
        with self._lock:
            self._store.add_or_update(items)
            snapshot = self._on_items_updated()
        self._publish(snapshot)

    def remove_items(self, items: Iterable[Any]):
        """Remove items (or bare ids). Unknown ids are ignored."""
        with self._lock:
            self._store.remove(items)
            snapshot = self._on_items_updated()
        self._publish(snapshot)

    # --- Layout & Ordering ---

    def set_num_apps_per_row(self, num_apps_per_row: int):
        """
        Set the row width. Values <= 0 mean the layout is not known yet.

        Only rows and fractions are recomputed.
        """
        with self._lock:
            self._num_apps_per_row = max(0, int(num_apps_per_row))
            snapshot = self._update_adapter_items()
        self._publish(snapshot)

    def set_sort_mode(self, mode: SortMode):
        with self._lock:
            self.sort_controller.set_mode(mode)
            snapshot = self._on_items_updated()
        self._publish(snapshot)

    def set_fraction_policy(self, policy: FractionPolicy):
        with self._lock:
            self.fast_scroll_controller.set_policy(policy)
            snapshot = self._update_adapter_items()
        self._publish(snapshot)

    # --- Accessors ---

    @property
    def snapshot(self) -> ListSnapshot:
        """The latest consistent result; immutable."""
        return self._snapshot

    @property
    def adapter_entries(self) -> Tuple[AdapterEntry, ...]:
        return self._snapshot.entries

    @property
    def fast_scroll_sections(self) -> Tuple[FastScrollSection, ...]:
        return self._snapshot.sections

    @property
    def num_rows(self) -> int:
        """Number of grid rows; 0 while the row width is unknown."""
        return self._snapshot.num_rows

    @property
    def num_apps_per_row(self) -> int:
        return self._num_apps_per_row

    @property
    def items(self) -> List[Any]:
        """Copy of the stored items, unordered."""
        with self._lock:
            return self._store.items

    @property
    def section_cache(self) -> SectionNameCache:
        return self._cache

    def section_for_fraction(self, fraction: float) -> Optional[FastScrollSection]:
        """Section selected by a rail touch at ``fraction``; None if there is none."""
        return self.fast_scroll_controller.section_for_fraction(self._snapshot.sections, fraction)

    def scroll_target(self, fraction: float) -> Optional[AdapterEntry]:
        """Entry to scroll to for a rail touch at ``fraction``."""
        section = self.section_for_fraction(fraction)
        return section.scroll_to_entry if section is not None else None

    # --- Rebuild ---

    def _on_items_updated(self) -> ListSnapshot:
        """Re-sort and re-section everything, then repack."""
        ordered = self.sort_controller.apply(self._store.items)
        self._sectioned = self.section_controller.apply(ordered)
        return self._update_adapter_items()

    def _update_adapter_items(self) -> ListSnapshot:
        entries, sections = self._sectioned
        width = self._num_apps_per_row

        packed, num_rows = self.row_packer.apply(entries, width)
        fast_scroll_sections = self.fast_scroll_controller.apply(sections, packed, num_rows, width)

        snapshot = ListSnapshot(
            entries=tuple(packed),
            sections=tuple(fast_scroll_sections),
            num_rows=num_rows,
            row_width=width,
        )
        # Single reference swap: readers see the old or the new snapshot.
        self._snapshot = snapshot
        logger.debug(
            f"Rebuilt list: {len(packed)} entries, {len(fast_scroll_sections)} sections, "
            f"{num_rows} rows of {width}"
        )
        return snapshot

    def _publish(self, snapshot: ListSnapshot):
        # Called outside the lock so subscribers may mutate the list again.
        # A snapshot replaced meanwhile is not delivered to the remaining
        # subscribers; they already got (or will get) the newer one.
        self.dataset_changed.emit_while(lambda: self._snapshot is snapshot, snapshot)
