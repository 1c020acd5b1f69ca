"""
List Options.

Enums selecting how the alphabetical list is ordered and how fast-scroll
touch fractions are distributed. Shared by the settings models and the
applist controllers.
"""
from enum import Enum

# Section name used when a title cannot be classified.
DEFAULT_FALLBACK_SECTION = "∙"


class SortMode(str, Enum):
    """How items are ordered before sectioning."""
    # Case-folded first character only; ties keep input order.
    FIRST_CHAR = "first_char"
    # Case-folded full title (true alphabetical order).
    FULL_TITLE = "full_title"


class FractionPolicy(str, Enum):
    """How touch fractions are assigned to fast-scroll sections."""
    DISTRIBUTE_BY_NUM_SECTIONS = "by_sections"
    DISTRIBUTE_BY_ROWS_FRACTION = "by_rows"
