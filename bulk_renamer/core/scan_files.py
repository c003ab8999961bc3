"""
scan_files.py - File Scanning Module

Lists the regular, non-hidden files of a single directory (non-recursive)
"""

from pathlib import Path
from typing import List, Set
import logging
import os
import stat

from .errors import DirectoryUnreadable
from .models_fs import FileEntry

logger = logging.getLogger(__name__)


def name_sort_key(name: str) -> bytes:
    """Byte-wise sort key, independent of locale and platform"""
    return os.fsencode(name)


def scan_directory(directory: Path) -> List[FileEntry]:
    """
    Scan single directory (non-recursive)

    Only regular files are returned; symlinks, subdirectories and names
    starting with '.' are skipped.

    Args:
        directory: Target directory (existence is checked by the caller)

    Returns:
        File list, sorted byte-wise by name

    Raises:
        DirectoryUnreadable: the listing or an entry's stat failed
    """
    directory = Path(directory)

    try:
        items = list(directory.iterdir())
    except OSError as e:
        raise DirectoryUnreadable(directory, e) from e

    results: List[FileEntry] = []

    for item in items:
        # Skip hidden files
        if item.name.startswith('.'):
            continue

        try:
            st = item.lstat()
        except FileNotFoundError:
            # Removed between listing and stat
            logger.debug("Skipping vanished entry %s", item)
            continue
        except OSError as e:
            raise DirectoryUnreadable(directory, e) from e

        # Only process regular files, not directories or symlinks
        if not stat.S_ISREG(st.st_mode):
            continue

        results.append(FileEntry(name=item.name, path=item, mtime=st.st_mtime))

    results.sort(key=lambda f: name_sort_key(f.name))
    logger.debug("Scanned %s: %d file(s)", directory, len(results))
    return results


def get_existing_names(directory: Path) -> Set[str]:
    """
    Get every name present in directory, hidden entries and subdirectories included

    Args:
        directory: Target directory

    Returns:
        Name set

    Raises:
        DirectoryUnreadable: the listing itself failed
    """
    directory = Path(directory)
    try:
        return {item.name for item in directory.iterdir()}
    except OSError as e:
        raise DirectoryUnreadable(directory, e) from e
