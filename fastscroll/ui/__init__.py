"""
Qt bindings for the alphabetical list (PySide6).

Kept out of the fastscroll top-level imports so the core runs without Qt.
"""
