"""
AppList Controllers Package.
"""
from fastscroll.applist.controllers.sort_controller import SortController
from fastscroll.applist.controllers.section_controller import SectionController
from fastscroll.applist.controllers.row_packer import RowPacker
from fastscroll.applist.controllers.fast_scroll_controller import FastScrollController

__all__ = ["SortController", "SectionController", "RowPacker", "FastScrollController"]
