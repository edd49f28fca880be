"""
Main entry point for running the package directly.

    python -m idracctl query pwState
"""

import sys

from idracctl.cli import main

if __name__ == "__main__":
    sys.exit(main())
