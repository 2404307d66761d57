"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so tests capturing report output do not leak into each other.
- Factories for synthetic symbol records.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'techmix' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from techmix.symbols.model import AttributeSymbol, MethodSymbol, SourceLocation, TypeSymbol  # noqa: E402
from techmix.utils.console import reset_console  # noqa: E402

WEBAPI_CONTROLLER = "System.Web.Http.Controllers.IHttpController"
MVC_CONTROLLER = "System.Web.Mvc.IController"
WEBAPI_FILTER = "System.Web.Http.Filters.IAuthorizationFilter"
MVC_FILTER = "System.Web.Mvc.IAuthorizationFilter"
NEUTRAL_INTERFACE = "System.Runtime.InteropServices._Attribute"


@pytest.fixture(autouse=True)
def isolate_console():
  """Restores the report console after each test."""
  yield
  reset_console()


@pytest.fixture
def webapi_attr():
  """Factory for attributes declared by the WebApi stack."""

  def _make(name: str = "AuthorizeAttribute") -> AttributeSymbol:
    return AttributeSymbol(
      name=name,
      full_name=f"System.Web.Http.{name}",
      interfaces=(NEUTRAL_INTERFACE, WEBAPI_FILTER),
    )

  return _make


@pytest.fixture
def mvc_attr():
  """Factory for attributes declared by the MVC stack."""

  def _make(name: str = "AuthorizeAttribute") -> AttributeSymbol:
    return AttributeSymbol(
      name=name,
      full_name=f"System.Web.Mvc.{name}",
      interfaces=(NEUTRAL_INTERFACE, MVC_FILTER),
    )

  return _make


@pytest.fixture
def neutral_attr():
  """Factory for attributes unrelated to either stack."""

  def _make(name: str = "ObsoleteAttribute") -> AttributeSymbol:
    return AttributeSymbol(name=name, full_name=f"System.{name}", interfaces=(NEUTRAL_INTERFACE,))

  return _make


@pytest.fixture
def controller():
  """
  Factory for type records.

  Methods are given as ``{name: [attributes]}``; locations are generated so
  tests can check where findings are anchored.
  """

  def _make(name="SampleController", interfaces=(), attributes=(), methods=None) -> TypeSymbol:
    method_symbols = []
    for offset, (method_name, method_attrs) in enumerate((methods or {}).items()):
      method_symbols.append(
        MethodSymbol(
          name=method_name,
          attributes=tuple(method_attrs),
          location=SourceLocation(path=f"{name}.cs", line=10 + offset * 5, column=5),
        )
      )
    return TypeSymbol(
      name=name,
      interfaces=tuple(interfaces),
      attributes=tuple(attributes),
      methods=tuple(method_symbols),
      location=SourceLocation(path=f"{name}.cs", line=3, column=18),
    )

  return _make
