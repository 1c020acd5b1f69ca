"""
AppItem Data Model.

Pydantic model for the items shown in the alphabetical grid.
"""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from fastscroll.core.options import DEFAULT_FALLBACK_SECTION, FractionPolicy, SortMode

__all__ = ["AppItem", "DEFAULT_FALLBACK_SECTION", "FractionPolicy", "SortMode"]


class AppItem(BaseModel):
    """
    Data model for a single launchable item.

    Attributes:
        id: Unique identifier, used for update and removal
        title: Display title, used for sorting and sectioning
        data: Original data object for custom rendering

    Example:
        item = AppItem(id="com.example.mail", title="Mail")
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    id: str = Field(..., description="Unique identifier")
    title: str = Field(..., description="Display title")
    data: Optional[Any] = Field(None, description="Original data object")
