"""Main entry point for the fieldrules package when run as a module.

This module enables running fieldrules directly using 'python -m fieldrules'.
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
