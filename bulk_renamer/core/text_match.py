"""
text_match.py - Text Matching Tools

Provides literal replacement, ASCII case folding and filename validation
"""

from typing import Optional
import os

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def ascii_lower(text: str) -> str:
    """
    Map ASCII uppercase letters to lowercase, leave everything else untouched

    str.lower() is not used because it also folds non-ASCII letters.
    """
    return text.translate(_ASCII_LOWER)


def replace_text(text: str, old: str, new: str) -> str:
    """
    Replace every non-overlapping occurrence of a literal substring

    Args:
        text: Original text
        old: String to replace (literal, not a pattern)
        new: Replacement string

    Returns:
        Replaced text
    """
    if not old:
        return text
    return text.replace(old, new)


def is_valid_filename(name: str) -> tuple[bool, Optional[str]]:
    """
    Check if name is usable as a single path component

    Args:
        name: Filename

    Returns:
        (is_valid, error_reason)
    """
    if not name:
        return False, "Filename cannot be empty"

    if name in (".", ".."):
        return False, f"Filename cannot be '{name}'"

    for char in ("/", "\0", os.sep):
        if char in name:
            return False, f"Filename contains invalid character: {char!r}"

    if len(os.fsencode(name)) > 255:
        return False, "Filename exceeds 255 bytes"

    return True, None
