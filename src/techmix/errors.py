"""
Exception types raised by techmix.

The analysis core itself never raises: unresolvable metadata degrades to
"no family". Errors only surface at the I/O boundary (loading symbol dumps).
"""

from pathlib import Path
from typing import Union


class TechmixError(Exception):
  """Base class for all techmix errors."""


class SymbolLoadError(TechmixError):
  """
  Raised when a symbol dump cannot be read or does not match the schema.

  Attributes:
      path (Path): The offending file.
      reason (str): Human readable cause.
  """

  def __init__(self, path: Union[str, Path], reason: str):
    self.path = Path(path)
    self.reason = reason
    super().__init__(f"{self.path}: {reason}")
