"""Main entry point for the arcgraph package when run as a module.

This module enables running arcgraph directly using 'python -m arcgraph'.
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
