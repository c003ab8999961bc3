"""
cli - Command Line Interface for Bulk Renamer
"""

from .cli_entry import main, preview_main

__all__ = ["main", "preview_main"]
