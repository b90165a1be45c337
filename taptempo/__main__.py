"""
Entry point for running taptempo as a module.

Usage:
    python -m taptempo [args]
"""

import sys

from taptempo.main import main

if __name__ == '__main__':
    sys.exit(main())
