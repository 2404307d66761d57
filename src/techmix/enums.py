"""
Enumerations for techmix.

This module defines the closed vocabularies used across the codebase for
technology classification and diagnostic reporting.
"""

from enum import Enum


class TechnologyFamily(str, Enum):
  """
  Web technology stack a controller or attribute belongs to.

  The value is the display name interpolated into diagnostic messages.
  ``NONE`` doubles as the "not applicable" result of classification.
  """

  NONE = "None"
  WEB_API = "WebApi"
  MVC = "Mvc"

  def __str__(self) -> str:
    return self.value


class Severity(str, Enum):
  """
  Severity levels a diagnostic descriptor can carry.
  """

  HIDDEN = "hidden"
  INFO = "info"
  WARNING = "warning"
  ERROR = "error"


class OutputFormat(str, Enum):
  """
  Rendering modes for the CLI reporters.
  """

  TABLE = "table"
  JSON = "json"
  TEXT = "text"
