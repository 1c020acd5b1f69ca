"""
AlphabeticIndex - default title classifier.

Maps a title to the label shown on the fast-scroll rail. Callers that
need full locale-aware bucketing can pass any ``Callable[[str], str]``
to the list instead.
"""
import unicodedata

from fastscroll.applist.models.app_item import DEFAULT_FALLBACK_SECTION

DIGIT_SECTION = "#"


class AlphabeticIndex:
    """
    Buckets titles by their first meaningful character.

    - Letters map to the upper-cased base letter ("é" -> "E").
    - Digits map to "#".
    - Any other character is its own section.
    - Blank titles map to the fallback section.

    Example:
        index = AlphabeticIndex()
        index.compute_section_name("  apple")  # "A"
        index.compute_section_name("7zip")     # "#"
    """

    def __init__(self, fallback_section: str = DEFAULT_FALLBACK_SECTION):
        self.fallback_section = fallback_section

    def compute_section_name(self, title: str) -> str:
        label = (title or "").lstrip()
        if not label:
            return self.fallback_section

        first = label[0]
        if first.isdigit():
            return DIGIT_SECTION
        if first.isalpha():
            # Strip combining marks so accented letters share a section.
            base = unicodedata.normalize("NFD", first)[0]
            return base.upper()
        return first

    def __call__(self, title: str) -> str:
        return self.compute_section_name(title)
