from .check import handle_check
from .rules import handle_rules

__all__ = [
  "handle_check",
  "handle_rules",
]
