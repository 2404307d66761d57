"""
Diagnostic Descriptors.

A descriptor is the static metadata of a rule (id, message template, severity).
It is a plain record handed to the analyzer, not a global registration.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from techmix.enums import Severity


class DiagnosticDescriptor(BaseModel):
  """
  Static description of a diagnostic a rule can produce.
  """

  model_config = ConfigDict(frozen=True)

  id: str = Field(description="Stable diagnostic identifier.")
  title: str = Field(description="One-line summary of the rule.")
  message_format: str = Field(description="str.format template with positional placeholders.")
  category: str = Field("Usage", description="Grouping shown by reporters.")
  severity: Severity = Field(Severity.WARNING, description="Default severity of reported diagnostics.")
  enabled_by_default: bool = True
  description: str = ""

  def format_message(self, *args: Any) -> str:
    """
    Renders the message template.

    Args:
        *args: Positional values for the ``{0}``, ``{1}``... placeholders.

    Returns:
        str: The formatted message.
    """
    return self.message_format.format(*(getattr(a, "value", a) for a in args))


WRONG_ATTRIBUTE_ON_CONTROLLER = DiagnosticDescriptor(
  id="WrongAttributeOnController",
  title="Do not mix MVC and WebApi attributes and controllers",
  message_format=(
    "The attribute '{0}' is part of the {1} and will not function on the controller '{2}' which uses {3}."
  ),
  category="Security",
  severity=Severity.WARNING,
  enabled_by_default=True,
  description=(
    "Mixing attributes from ASP.NET MVC or WebApi with controllers of the opposite technology stack are ignored."
  ),
)
