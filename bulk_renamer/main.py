#!/usr/bin/env python3
"""
Bulk Renamer - Main Entry

Supports:
- CLI mode (default)
- GUI mode (--gui parameter, needs PySide6)

Usage:
    python -m bulk_renamer --mode seq --dir ./photos
    python -m bulk_renamer --mode lower --dir ./photos --dry-run
    python -m bulk_renamer --gui
"""

import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    if argv is None:
        argv = sys.argv[1:]

    if "--gui" not in argv:
        from .cli import main as cli_main
        return cli_main(argv)

    try:
        from .gui import main as gui_main
    except ImportError as e:
        print("Error: Unable to start GUI, please ensure PySide6 is installed", file=sys.stderr)
        print(f"Detailed error: {e}", file=sys.stderr)
        print("\nInstall command: pip install 'bulk-renamer[gui]'", file=sys.stderr)
        return 1
    return gui_main()


if __name__ == "__main__":
    sys.exit(main())
