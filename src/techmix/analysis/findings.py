"""
Data structures representing the output of the controller analysis.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from techmix.analysis.descriptor import DiagnosticDescriptor
from techmix.enums import Severity, TechnologyFamily
from techmix.symbols.model import SourceLocation


class ConflictFinding(BaseModel):
  """
  One attribute whose technology family disagrees with its controller's.

  ``member_name`` is the method the attribute sits on, or ``None`` when the
  finding is anchored at the type declaration.
  """

  model_config = ConfigDict(frozen=True)

  location: Optional[SourceLocation] = None
  attribute_name: str
  attribute_family: TechnologyFamily
  type_name: str
  type_family: TechnologyFamily
  member_name: Optional[str] = None

  @property
  def message_args(self) -> Tuple[str, TechnologyFamily, str, TechnologyFamily]:
    """The positional payload for the diagnostic message template."""
    return (self.attribute_name, self.attribute_family, self.type_name, self.type_family)

  @property
  def subject(self) -> str:
    """``Type`` or ``Type.Method`` naming where the attribute was applied."""
    if self.member_name:
      return f"{self.type_name}.{self.member_name}"
    return self.type_name


class Diagnostic(BaseModel):
  """
  A finding bound to the descriptor of the rule that produced it.
  """

  model_config = ConfigDict(frozen=True)

  descriptor: DiagnosticDescriptor
  finding: ConflictFinding
  severity: Severity = Field(Severity.WARNING)

  @classmethod
  def create(cls, descriptor: DiagnosticDescriptor, finding: ConflictFinding) -> "Diagnostic":
    return cls(descriptor=descriptor, finding=finding, severity=descriptor.severity)

  @property
  def id(self) -> str:
    return self.descriptor.id

  @property
  def message(self) -> str:
    return self.descriptor.format_message(*self.finding.message_args)

  def to_dict(self) -> Dict[str, Any]:
    """
    Serializes the diagnostic for JSON reporting.

    Returns:
        Dict[str, Any]: Flat, JSON-compatible mapping.
    """
    loc = self.finding.location
    return {
      "id": self.id,
      "severity": self.severity.value,
      "message": self.message,
      "type": self.finding.type_name,
      "member": self.finding.member_name,
      "attribute": self.finding.attribute_name,
      "attribute_family": self.finding.attribute_family.value,
      "type_family": self.finding.type_family.value,
      "location": loc.model_dump() if loc else None,
    }
