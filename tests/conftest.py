import pytest
from unittest.mock import MagicMock

from fastscroll.applist.models.app_item import AppItem


def first_char(title: str) -> str:
    """Classifier used by the examples: the title's first character as-is."""
    return title[:1]


@pytest.fixture
def classifier():
    """A first-character classifier that records its calls."""
    return MagicMock(side_effect=first_char)


@pytest.fixture
def make_items():
    """Build AppItems from titles; ids are derived from the position."""
    def _make(titles, prefix="app"):
        return [AppItem(id=f"{prefix}-{i}", title=title) for i, title in enumerate(titles)]
    return _make
