"""
Diagnostic Sinks.

A sink receives diagnostics one at a time from an analyzer and decides how
to present them. Analyzers only depend on the ``DiagnosticSink`` protocol.

Sinks:
- ``CollectingSink``: keeps diagnostics in memory (library use, tests).
- ``ConsoleSink``: renders a Rich table or compiler-style text lines.
- ``JsonSink``: prints a JSON array to stdout when flushed.
"""

import json
from typing import Any, Dict, List, Protocol

from rich.table import Table

from techmix.analysis.findings import Diagnostic
from techmix.enums import OutputFormat
from techmix.utils.console import console


class DiagnosticSink(Protocol):
  """
  Protocol definition for a diagnostic receiver.
  """

  def report(self, diagnostic: Diagnostic) -> None: ...

  def flush(self) -> None: ...


class CollectingSink:
  """
  Accumulates diagnostics in reporting order.
  """

  def __init__(self) -> None:
    self.diagnostics: List[Diagnostic] = []

  def report(self, diagnostic: Diagnostic) -> None:
    self.diagnostics.append(diagnostic)

  def flush(self) -> None:
    pass

  def __len__(self) -> int:
    return len(self.diagnostics)


class ConsoleSink(CollectingSink):
  """
  Renders diagnostics on the report console.

  In ``TEXT`` mode each diagnostic is printed as soon as it is reported, in
  the familiar ``path:line:col: severity ID: message`` form. In ``TABLE``
  mode they are buffered and rendered as one table on ``flush()``.
  """

  def __init__(self, output_format: OutputFormat = OutputFormat.TABLE) -> None:
    super().__init__()
    self.output_format = output_format

  def report(self, diagnostic: Diagnostic) -> None:
    super().report(diagnostic)
    if self.output_format == OutputFormat.TEXT:
      console.print(format_text_line(diagnostic), markup=False, highlight=False)

  def flush(self) -> None:
    if self.output_format != OutputFormat.TABLE or not self.diagnostics:
      return

    table = Table(title="Controller technology conflicts")
    table.add_column("Location", style="path")
    table.add_column("Controller", style="cyan")
    table.add_column("Member")
    table.add_column("Attribute", style="red")
    table.add_column("Conflict", style="family")

    for diag in self.diagnostics:
      finding = diag.finding
      table.add_row(
        str(finding.location) if finding.location else "-",
        finding.type_name,
        finding.member_name or "(type)",
        finding.attribute_name,
        f"{finding.attribute_family.value} on {finding.type_family.value}",
      )

    console.print(table)


class JsonSink(CollectingSink):
  """
  Emits every reported diagnostic as a single JSON array on ``flush()``.
  """

  def payload(self) -> List[Dict[str, Any]]:
    return [d.to_dict() for d in self.diagnostics]

  def flush(self) -> None:
    print(json.dumps(self.payload(), indent=2))


def format_text_line(diagnostic: Diagnostic) -> str:
  """
  Formats a diagnostic in compiler-style single-line form.

  Args:
      diagnostic: The diagnostic to format.

  Returns:
      str: e.g. ``Home.cs:4:18: warning WrongAttributeOnController: The attribute ...``
  """
  loc = diagnostic.finding.location
  prefix = f"{loc}: " if loc else f"{diagnostic.finding.subject}: "
  return f"{prefix}{diagnostic.severity.value} {diagnostic.id}: {diagnostic.message}"


def create_sink(output_format: OutputFormat) -> CollectingSink:
  """
  Builds the sink matching a CLI output format.

  Args:
      output_format: Requested rendering mode.

  Returns:
      CollectingSink: A sink that also keeps every diagnostic it saw.
  """
  if output_format == OutputFormat.JSON:
    return JsonSink()
  return ConsoleSink(output_format)
