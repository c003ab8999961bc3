"""
bulk_renamer - Rename the files of one directory in bulk

Modes: sequential numbering, modification-date prefix, literal
find/replace, ASCII lowercase. Every mode can be previewed first.
"""

__version__ = "1.0.0"
