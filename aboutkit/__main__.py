"""Module entry point for aboutkit.

Run with: python -m aboutkit about
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
