"""
Check Command Handler.

Loads symbol dumps, runs the controller analyzer over every type they
declare and reports the diagnostics in the configured format.
"""

from pathlib import Path
from typing import List, Optional

from techmix.analysis.controller import WrongAttributeOnControllerAnalyzer
from techmix.config import RuntimeConfig
from techmix.enums import OutputFormat
from techmix.errors import SymbolLoadError
from techmix.reporting.sinks import JsonSink, create_sink
from techmix.symbols.loader import collect_symbol_files, load_symbol_file
from techmix.symbols.model import TypeSymbol
from techmix.symbols.provider import ModelSymbolProvider
from techmix.utils.console import console, log_error, log_info, log_success, log_warning


def handle_check(
  paths: List[Path],
  output_format: Optional[str] = None,
  strict: Optional[bool] = None,
  jobs: Optional[int] = None,
  exclude_types: Optional[List[str]] = None,
  search_path: Optional[Path] = None,
) -> int:
  """
  Analyzes symbol dumps for controllers mixing MVC and WebApi attributes.

  Args:
      paths: Dump files or directories containing ``*.json`` dumps.
      output_format: Reporter override ('table', 'json', 'text').
      strict: If True, findings make the command fail.
      jobs: Worker thread override.
      exclude_types: Extra type-name patterns to skip.
      search_path: Where to start looking for ``pyproject.toml``.

  Returns:
      int: 0 on success, 1 if a dump failed to load, if a path is missing,
           or if findings were reported in strict mode.
  """
  try:
    config = RuntimeConfig.load(
      output_format=output_format,
      strict_mode=strict,
      jobs=jobs,
      exclude_types=exclude_types,
      search_path=search_path,
    )
  except ValueError as e:
    log_error(f"Invalid configuration: {e}")
    return 1

  json_mode = config.output_format == OutputFormat.JSON

  missing = [p for p in paths if not p.exists()]
  for p in missing:
    log_error(f"Path not found: {p}")
  if missing:
    return 1

  files = collect_symbol_files(paths)
  if not files:
    log_warning("No symbol dumps found.")
    if json_mode:
      JsonSink().flush()
    return 0

  if not json_mode:
    log_info(f"Loading {len(files)} symbol dump(s)...")

  types: List[TypeSymbol] = []
  failed = 0
  for f in files:
    try:
      types.extend(load_symbol_file(f))
    except SymbolLoadError as e:
      # Reported even in JSON mode; the logger writes to stderr.
      log_error(f"Failed to load {e.path.name}: {e.reason}")
      failed += 1

  analyzer = WrongAttributeOnControllerAnalyzer(exclude_types=config.exclude_types)
  sink = create_sink(config.output_format)
  diagnostics = analyzer.run(ModelSymbolProvider(types), sink, jobs=config.jobs)
  sink.flush()

  if not json_mode:
    console.print(f"[bold]Checked {len(types)} type(s) from {len(files) - failed} dump(s)[/bold]")
    if diagnostics:
      console.print(f"Findings: [red]{len(diagnostics)}[/red]")
    else:
      log_success("No controller technology conflicts found.")

  if failed:
    return 1
  if config.strict_mode and diagnostics:
    return 1
  return 0
