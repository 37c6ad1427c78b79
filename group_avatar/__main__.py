"""
Allow running the package with ``python -m group_avatar``.
"""
import sys

from group_avatar.cli import main

if __name__ == "__main__":
    sys.exit(main())
