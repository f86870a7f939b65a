"""
Entry point for running as a module.

Usage: python -m browser_sim [gui|shell|resolve|history]
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
