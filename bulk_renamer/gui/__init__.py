"""
gui - PySide6 front end for Bulk Renamer
"""

from .gui_entry import main

__all__ = ["main"]
