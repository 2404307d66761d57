"""
Entry point for module execution (``python -m techmix``).

This module delegates execution to the CLI handler in ``techmix.cli.__main__``.
"""

import sys
from techmix.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
