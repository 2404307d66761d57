"""
File Loading Logic for Symbol Dumps.

The host compiler exports the symbols of a compilation as JSON. A dump is
either an object with a ``types`` list or a bare list of type records:

.. code-block:: json

    {"types": [{"name": "HomeController",
                "interfaces": ["System.Web.Mvc.IController"],
                "attributes": [],
                "methods": [{"name": "Index", "attributes": []}]}]}

Records are validated against ``techmix.symbols.model`` and returned in file
order, which keeps interface ordering (and therefore classification) stable.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List

from pydantic import ValidationError

from techmix.errors import SymbolLoadError
from techmix.symbols.model import TypeSymbol

logger = logging.getLogger(__name__)


def parse_symbol_data(data: Any, origin: Path) -> List[TypeSymbol]:
  """
  Validates decoded JSON content into type records.

  Args:
      data: The decoded JSON document.
      origin: Path reported in errors.

  Returns:
      List[TypeSymbol]: Types in document order.

  Raises:
      SymbolLoadError: If the document shape or any record is invalid.
  """
  if isinstance(data, dict):
    if "types" not in data:
      raise SymbolLoadError(origin, "missing top-level 'types' key")
    records = data["types"]
  else:
    records = data

  if not isinstance(records, list):
    raise SymbolLoadError(origin, "'types' must be a list")

  types: List[TypeSymbol] = []
  for index, record in enumerate(records):
    try:
      types.append(TypeSymbol.model_validate(record))
    except ValidationError as e:
      raise SymbolLoadError(origin, f"invalid type record #{index}: {e.error_count()} validation error(s)\n{e}")
  return types


def load_symbol_file(path: Path) -> List[TypeSymbol]:
  """
  Reads a single JSON symbol dump.

  Args:
      path: File to read.

  Returns:
      List[TypeSymbol]: The types declared in the dump.

  Raises:
      SymbolLoadError: If the file is unreadable, not JSON, or off-schema.
  """
  try:
    with open(path, "r", encoding="utf-8") as f:
      data = json.load(f)
  except OSError as e:
    raise SymbolLoadError(path, f"cannot read file ({e.strerror or e})")
  except json.JSONDecodeError as e:
    raise SymbolLoadError(path, f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}")

  types = parse_symbol_data(data, path)
  logger.debug("Loaded %d type(s) from %s", len(types), path)
  return types


def collect_symbol_files(paths: Iterable[Path]) -> List[Path]:
  """
  Expands directories into the JSON files they contain.

  Directories are searched recursively and their files sorted by path.
  Explicit file arguments are kept as given, in order.

  Args:
      paths: Files and/or directories.

  Returns:
      List[Path]: Files to load, without duplicates.
  """
  files: List[Path] = []
  seen = set()
  for p in paths:
    candidates = sorted(p.rglob("*.json")) if p.is_dir() else [p]
    for candidate in candidates:
      key = candidate.resolve()
      if key in seen:
        continue
      seen.add(key)
      files.append(candidate)
  return files
