"""
Event primitives.

Provides:
- Signal: synchronous observer used for dataset and config change notifications.

Usage:
    from fastscroll.core.events import Signal

    changed = Signal("DatasetChanged")
    changed.connect(on_changed)
    changed.emit(snapshot)
"""
from .observer import Signal


__all__ = ["Signal"]
