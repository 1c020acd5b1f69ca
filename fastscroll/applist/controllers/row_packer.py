"""
RowPacker - assigns grid rows and columns to adapter entries.
"""
from dataclasses import replace
from typing import List, Sequence, Tuple

from fastscroll.applist.models.adapter_entry import AdapterEntry


class RowPacker:
    """
    Packs entries into rows of a fixed width.

    Section boundaries do not start a new row: entries flow through the
    grid continuously, every row holds ``row_width`` entries and only the
    last one may be shorter.

    A width of zero or less means the layout is not known yet. Packing is
    then skipped and entries come back without row data.

    Example:
        packed, num_rows = RowPacker().apply(entries, row_width=3)
    """

    def apply(self, entries: Sequence[AdapterEntry], row_width: int) -> Tuple[List[AdapterEntry], int]:
        """
        Assign row_index and row_column to every entry.

        Args:
            entries: Entries in display order
            row_width: Entries per row

        Returns:
            (packed entries, number of rows)
        """
        if row_width <= 0:
            return [replace(entry, row_index=None, row_column=None) for entry in entries], 0

        packed: List[AdapterEntry] = []
        num_items = 0
        num_in_row = 0
        row_index = -1
        for entry in entries:
            if num_items % row_width == 0:
                num_in_row = 0
                row_index += 1
            packed.append(replace(entry, row_index=row_index, row_column=num_in_row))
            num_items += 1
            num_in_row += 1

        return packed, row_index + 1
