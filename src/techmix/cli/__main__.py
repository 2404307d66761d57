"""
Main Entry Point for techmix CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `techmix.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from techmix.cli import commands
from techmix.enums import OutputFormat
from techmix.utils.console import configure_logging
from techmix import __version__


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="techmix: detect MVC/WebApi attribute mixing on ASP.NET controllers")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CHECK ---
  cmd_check = subparsers.add_parser("check", help="Analyze symbol dumps for mixed controller attributes")
  cmd_check.add_argument("paths", type=Path, nargs="+", help="Symbol dump files or directories")
  cmd_check.add_argument(
    "--format",
    dest="output_format",
    choices=[f.value for f in OutputFormat],
    default=None,
    help="Output format (default: from toml, else table)",
  )
  cmd_check.add_argument(
    "--strict",
    action="store_true",
    default=None,
    help="Exit with status 1 when any finding is reported (Overrides config)",
  )
  cmd_check.add_argument("--jobs", type=int, default=None, help="Worker threads (default: from toml, else 1)")
  cmd_check.add_argument(
    "--exclude",
    nargs="*",
    default=None,
    metavar="GLOB",
    help="Type name patterns to skip (e.g. '*Base' 'Legacy*')",
  )

  # --- Command: RULES ---
  cmd_rules = subparsers.add_parser("rules", help="Describe the diagnostics and recognised namespaces")
  cmd_rules.add_argument(
    "--format",
    dest="output_format",
    choices=[OutputFormat.TABLE.value, OutputFormat.JSON.value],
    default=OutputFormat.TABLE.value,
    help="Output format (default: table)",
  )

  args = parser.parse_args(argv)

  configure_logging(verbose=args.verbose)

  if args.command == "check":
    return commands.handle_check(args.paths, args.output_format, args.strict, args.jobs, args.exclude)

  elif args.command == "rules":
    return commands.handle_rules(args.output_format == OutputFormat.JSON.value)

  return 0


if __name__ == "__main__":
  sys.exit(main())
