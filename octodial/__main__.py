"""
Entry point for running octodial as a module.

Usage:
    python -m octodial table
    python -m octodial play
"""

import sys
from octodial.cli import main

if __name__ == "__main__":
    sys.exit(main())
