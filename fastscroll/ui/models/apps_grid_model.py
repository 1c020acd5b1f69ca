from PySide6.QtCore import QAbstractListModel, Qt, QModelIndex, Signal
from typing import Optional
from loguru import logger

from fastscroll.applist.alphabetical_list import AlphabeticalItemList
from fastscroll.applist.controllers.fast_scroll_controller import FastScrollController
from fastscroll.applist.models.adapter_entry import ListSnapshot


class AppsGridModel(QAbstractListModel):
    """
    Model for the alphabetical apps grid.

    Mirrors the entries of an AlphabeticalItemList and resets itself on
    every dataset_changed notification. Each model row is one adapter
    entry; grid placement is exposed through RowIndexRole/RowColumnRole.
    """

    # Roles
    IdRole = Qt.UserRole + 1
    SectionNameRole = Qt.UserRole + 2
    RowIndexRole = Qt.UserRole + 3
    RowColumnRole = Qt.UserRole + 4

    countChanged = Signal()

    def __init__(self, apps: Optional[AlphabeticalItemList] = None, parent=None):
        super().__init__(parent)
        self._snapshot = ListSnapshot()
        self._apps: Optional[AlphabeticalItemList] = None
        if apps is not None:
            self.set_apps(apps)

    def set_apps(self, apps: AlphabeticalItemList):
        """Attach to a list and show its current snapshot."""
        if self._apps is not None:
            self._apps.dataset_changed.disconnect(self.on_dataset_changed)
        self._apps = apps
        apps.dataset_changed.connect(self.on_dataset_changed)
        self.on_dataset_changed(apps.snapshot)

    def on_dataset_changed(self, snapshot: ListSnapshot):
        self.beginResetModel()
        self._snapshot = snapshot
        self.endResetModel()
        self.countChanged.emit()
        logger.debug(f"AppsGridModel reset with {len(snapshot)} entries")

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._snapshot.entries)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None

        row = index.row()
        if row >= len(self._snapshot.entries):
            return None

        entry = self._snapshot.entries[row]

        if role == Qt.DisplayRole:
            return entry.title
        if role == self.IdRole:
            return str(entry.item.id)
        elif role == self.SectionNameRole:
            return entry.section_name
        elif role == self.RowIndexRole:
            return entry.row_index
        elif role == self.RowColumnRole:
            return entry.row_column

        return None

    def roleNames(self):
        return {
            self.IdRole: b"itemId",
            self.SectionNameRole: b"sectionName",
            self.RowIndexRole: b"rowIndex",
            self.RowColumnRole: b"rowColumn",
        }

    # --- Fast scroll ---

    def section_names(self) -> list[str]:
        """Labels for the fast-scroll rail, top to bottom."""
        return [section.section_name for section in self._snapshot.sections]

    def fast_scroll_row(self, fraction: float) -> int:
        """
        Model row to scroll to for a rail touch at ``fraction``.

        Returns:
            Position of the section's first entry, or -1 if there is nothing to scroll to
        """
        section = FastScrollController.section_for_fraction(self._snapshot.sections, fraction)
        if section is None:
            return -1
        return section.scroll_to_entry.position
