"""
Entry point for the Hold'em engine.
Starts a terminal game against AI opponents.
"""

import sys

from holdem.cli import main


if __name__ == "__main__":
    sys.exit(main())
