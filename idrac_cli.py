#!/usr/bin/env python3
"""
iDRAC command-line client

Usage:
    python idrac_cli.py login -u root -p calvin -h 10.0.0.5
    python idrac_cli.py query pwState,temperatures -watch 10s
    python idrac_cli.py help
"""

import sys

from idracctl.cli import main


if __name__ == "__main__":
    sys.exit(main())
