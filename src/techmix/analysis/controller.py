"""
Controller Technology Mixing Analysis.

This module provides the `WrongAttributeOnControllerAnalyzer`, which detects
attributes from one ASP.NET stack applied to a controller of the other stack.
The framework silently ignores such attributes (e.g. a WebApi ``[Authorize]``
on an MVC controller), so the protection they appear to add never happens.

Detection per type:
1.  Types without interfaces are skipped.
2.  The type is classified from its interfaces; unclassified types are skipped.
3.  Each type-level attribute of the other family yields one finding at the type.
4.  Each method yields at most one finding: its first conflicting attribute.

Each type is evaluated independently with no shared state, so batches may be
spread over worker threads.
"""

import fnmatch
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence

from techmix.analysis.classifier import classify_family, matching_families
from techmix.analysis.descriptor import WRONG_ATTRIBUTE_ON_CONTROLLER, DiagnosticDescriptor
from techmix.analysis.findings import ConflictFinding, Diagnostic
from techmix.enums import TechnologyFamily
from techmix.reporting.sinks import DiagnosticSink
from techmix.symbols.model import AttributeSymbol, TypeSymbol
from techmix.symbols.provider import ModelSymbolProvider, SymbolProvider

logger = logging.getLogger(__name__)


def _is_conflict(attr_family: TechnologyFamily, type_family: TechnologyFamily) -> bool:
  return attr_family is not TechnologyFamily.NONE and attr_family is not type_family


class WrongAttributeOnControllerAnalyzer:
  """
  Flags attributes whose technology family conflicts with their controller.

  Attributes:
      descriptor (DiagnosticDescriptor): Metadata attached to reported diagnostics.
      exclude_types (List[str]): fnmatch patterns of type names to skip.
  """

  def __init__(
    self,
    descriptor: DiagnosticDescriptor = WRONG_ATTRIBUTE_ON_CONTROLLER,
    exclude_types: Optional[Iterable[str]] = None,
  ):
    self.descriptor = descriptor
    self.exclude_types: List[str] = list(exclude_types or [])

  def is_excluded(self, type_name: str) -> bool:
    return any(fnmatch.fnmatchcase(type_name, pattern) for pattern in self.exclude_types)

  def attribute_family(self, attribute: AttributeSymbol) -> TechnologyFamily:
    """
    Classifies an attribute by the interfaces of its declaring class.

    Unresolved attributes have no family and never produce findings.
    """
    if not attribute.is_resolved:
      logger.debug("Attribute '%s' has no resolvable declaring type; ignoring.", attribute.name)
      return TechnologyFamily.NONE
    return classify_family(attribute.interfaces)

  def analyze_type(self, type_symbol: TypeSymbol, provider: Optional[SymbolProvider] = None) -> List[ConflictFinding]:
    """
    Evaluates a single type.

    Args:
        type_symbol: The candidate controller.
        provider: Symbol accessor. Defaults to reading the record directly.

    Returns:
        List[ConflictFinding]: Type-level findings first, then one per offending method.
    """
    provider = provider or ModelSymbolProvider()

    interfaces = provider.interfaces_of(type_symbol)
    if len(interfaces) == 0:
      return []

    type_family = classify_family(interfaces)
    if type_family is TechnologyFamily.NONE:
      return []

    families = matching_families(interfaces)
    if len(families) > 1:
      logger.warning(
        "Type '%s' implements interfaces from several stacks (%s); treating it as %s.",
        type_symbol.name,
        ", ".join(f.value for f in families),
        type_family.value,
      )

    findings: List[ConflictFinding] = []

    for attribute in provider.attributes_of(type_symbol):
      attr_family = self.attribute_family(attribute)
      if _is_conflict(attr_family, type_family):
        findings.append(
          ConflictFinding(
            location=type_symbol.location,
            attribute_name=attribute.name,
            attribute_family=attr_family,
            type_name=type_symbol.name,
            type_family=type_family,
          )
        )

    for method in provider.methods_of(type_symbol):
      for attribute in provider.attributes_of_method(method):
        attr_family = self.attribute_family(attribute)
        if _is_conflict(attr_family, type_family):
          findings.append(
            ConflictFinding(
              location=method.location,
              attribute_name=attribute.name,
              attribute_family=attr_family,
              type_name=type_symbol.name,
              type_family=type_family,
              member_name=method.name,
            )
          )
          break

    return findings

  def analyze(self, provider: SymbolProvider, jobs: int = 1) -> List[ConflictFinding]:
    """
    Evaluates every type exposed by the provider.

    Args:
        provider: Source of type symbols.
        jobs: Number of worker threads. Results are in provider order regardless.

    Returns:
        List[ConflictFinding]: All findings, grouped by type in input order.
    """
    all_types = provider.types()
    candidates: Sequence[TypeSymbol] = [t for t in all_types if not self.is_excluded(t.name)]
    skipped = len(all_types) - len(candidates)
    if skipped:
      logger.debug("Excluded %d type(s) by name pattern.", skipped)

    if jobs > 1 and len(candidates) > 1:
      with ThreadPoolExecutor(max_workers=jobs) as pool:
        per_type = list(pool.map(lambda t: self.analyze_type(t, provider), candidates))
    else:
      per_type = [self.analyze_type(t, provider) for t in candidates]

    return [finding for group in per_type for finding in group]

  def run(self, provider: SymbolProvider, sink: DiagnosticSink, jobs: int = 1) -> List[Diagnostic]:
    """
    Analyzes the provider's types and reports each finding to ``sink``.

    Args:
        provider: Source of type symbols.
        sink: Receiver of diagnostics.
        jobs: Number of worker threads.

    Returns:
        List[Diagnostic]: The diagnostics that were reported.
    """
    diagnostics = [Diagnostic.create(self.descriptor, f) for f in self.analyze(provider, jobs=jobs)]
    for diagnostic in diagnostics:
      sink.report(diagnostic)
    return diagnostics
