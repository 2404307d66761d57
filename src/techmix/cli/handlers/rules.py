"""CLI handler for the 'rules' command."""

import json

from rich.table import Table

from techmix.analysis.descriptor import WRONG_ATTRIBUTE_ON_CONTROLLER
from techmix.analysis.classifier import FAMILY_PREFIXES
from techmix.utils.console import console

RULES = [WRONG_ATTRIBUTE_ON_CONTROLLER]


def handle_rules(json_mode: bool = False) -> int:
  """
  Describes the available diagnostics and the namespace prefixes they recognise.

  Args:
      json_mode: If True, print a JSON document instead of tables.

  Returns:
      int: Always 0.
  """
  if json_mode:
    payload = {
      "rules": [r.model_dump(mode="json") for r in RULES],
      "families": [{"prefix": prefix, "family": family.value} for prefix, family in FAMILY_PREFIXES],
    }
    print(json.dumps(payload, indent=2))
    return 0

  table = Table(title="Diagnostics")
  table.add_column("ID", style="cyan")
  table.add_column("Severity")
  table.add_column("Category")
  table.add_column("Title")
  for rule in RULES:
    table.add_row(rule.id, rule.severity.value, rule.category, rule.title)
  console.print(table)

  families = Table(title="Technology families")
  families.add_column("Namespace prefix", style="path")
  families.add_column("Family", style="family")
  for prefix, family in FAMILY_PREFIXES:
    families.add_row(prefix, family.value)
  console.print(families)
  return 0
