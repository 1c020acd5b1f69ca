"""
UI Models Package.
"""
from fastscroll.ui.models.apps_grid_model import AppsGridModel

__all__ = ["AppsGridModel"]
