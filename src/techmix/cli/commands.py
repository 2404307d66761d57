"""
CLI Command Handlers Facade.

Re-exports handlers from `techmix.cli.handlers` so the dispatcher (and test
patches) target a single module.
"""

from techmix.cli.handlers.check import handle_check
from techmix.cli.handlers.rules import handle_rules

__all__ = [
  "handle_check",
  "handle_rules",
]
