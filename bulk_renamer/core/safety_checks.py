"""
safety_checks.py - Safety Check Module

Checks run by the front ends before the engine touches a directory
"""

from pathlib import Path
from typing import Optional, Tuple
import os


def check_directory(path: Path) -> Tuple[bool, Optional[str]]:
    """
    Check that path is an existing, listable directory

    Args:
        path: Path to check

    Returns:
        (is_valid, error_reason)
    """
    if not path.exists():
        return False, f"Directory '{path}' does not exist"
    if not path.is_dir():
        return False, f"'{path}' is not a directory"
    if not os.access(path, os.R_OK | os.X_OK):
        return False, f"Directory '{path}' is not readable"
    return True, None


def check_writable(path: Path) -> Tuple[bool, Optional[str]]:
    """
    Check that entries can be renamed inside directory

    Args:
        path: Directory to check

    Returns:
        (is_writable, error_reason)
    """
    if not os.access(path, os.W_OK | os.X_OK):
        return False, f"Directory '{path}' is not writable"
    return True, None
