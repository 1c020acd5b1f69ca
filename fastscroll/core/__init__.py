"""
Core infrastructure: signals, logging setup and configuration.

Configuration lives in fastscroll.core.config and is imported from there
directly.
"""
from fastscroll.core.events import Signal
from fastscroll.core.logging import setup_logging

__all__ = ["Signal", "setup_logging"]
