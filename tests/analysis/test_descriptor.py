"""
Tests for diagnostic descriptors and diagnostic rendering.
"""

import pytest
from pydantic import ValidationError

from techmix.analysis.descriptor import WRONG_ATTRIBUTE_ON_CONTROLLER, DiagnosticDescriptor
from techmix.analysis.findings import ConflictFinding, Diagnostic
from techmix.enums import Severity, TechnologyFamily
from techmix.symbols.model import SourceLocation


def make_finding(**overrides) -> ConflictFinding:
  values = dict(
    location=SourceLocation(path="Orders.cs", line=12, column=5),
    attribute_name="AuthorizeAttribute",
    attribute_family=TechnologyFamily.MVC,
    type_name="OrdersController",
    type_family=TechnologyFamily.WEB_API,
    member_name="Post",
  )
  values.update(overrides)
  return ConflictFinding(**values)


def test_default_descriptor_metadata():
  assert WRONG_ATTRIBUTE_ON_CONTROLLER.id == "WrongAttributeOnController"
  assert WRONG_ATTRIBUTE_ON_CONTROLLER.severity == Severity.WARNING
  assert WRONG_ATTRIBUTE_ON_CONTROLLER.category == "Security"
  assert WRONG_ATTRIBUTE_ON_CONTROLLER.enabled_by_default is True


def test_descriptor_is_immutable():
  with pytest.raises(ValidationError):
    WRONG_ATTRIBUTE_ON_CONTROLLER.severity = Severity.ERROR


def test_message_uses_family_display_names():
  diag = Diagnostic.create(WRONG_ATTRIBUTE_ON_CONTROLLER, make_finding())
  assert diag.message == (
    "The attribute 'AuthorizeAttribute' is part of the Mvc and will not function "
    "on the controller 'OrdersController' which uses WebApi."
  )


def test_custom_descriptor_is_passed_through():
  descriptor = DiagnosticDescriptor(
    id="Custom",
    title="t",
    message_format="{2}: {0} ({1}) vs {3}",
    severity=Severity.ERROR,
  )
  diag = Diagnostic.create(descriptor, make_finding())
  assert diag.severity == Severity.ERROR
  assert diag.message == "OrdersController: AuthorizeAttribute (Mvc) vs WebApi"


def test_to_dict():
  data = Diagnostic.create(WRONG_ATTRIBUTE_ON_CONTROLLER, make_finding()).to_dict()
  assert data["id"] == "WrongAttributeOnController"
  assert data["severity"] == "warning"
  assert data["type"] == "OrdersController"
  assert data["member"] == "Post"
  assert data["attribute_family"] == "Mvc"
  assert data["type_family"] == "WebApi"
  assert data["location"] == {"path": "Orders.cs", "line": 12, "column": 5}


def test_to_dict_without_location():
  data = Diagnostic.create(WRONG_ATTRIBUTE_ON_CONTROLLER, make_finding(location=None)).to_dict()
  assert data["location"] is None


def test_subject():
  assert make_finding().subject == "OrdersController.Post"
  assert make_finding(member_name=None).subject == "OrdersController"
