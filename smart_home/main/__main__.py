"""
Main module entry point.

This allows running the simulator as: python -m smart_home.main
"""

import sys

from .runner import main

if __name__ == "__main__":
    sys.exit(main())
