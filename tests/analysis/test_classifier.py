"""
Tests for technology family classification.
"""

from techmix.analysis.classifier import FAMILY_PREFIXES, classify_family, family_of_name, matching_families
from techmix.enums import TechnologyFamily


def test_webapi_namespace():
  assert family_of_name("System.Web.Http.Controllers.IHttpController") == TechnologyFamily.WEB_API


def test_mvc_namespace():
  assert family_of_name("System.Web.Mvc.IController") == TechnologyFamily.MVC


def test_prefix_match_is_case_sensitive():
  assert family_of_name("system.web.mvc.IController") == TechnologyFamily.NONE
  assert family_of_name("SYSTEM.WEB.HTTP.IFilter") == TechnologyFamily.NONE


def test_prefix_must_be_at_start():
  assert family_of_name("Contoso.System.Web.Mvc.IController") == TechnologyFamily.NONE


def test_unrecognised_names():
  assert classify_family(["System.IDisposable", "System.Collections.IEnumerable"]) == TechnologyFamily.NONE


def test_empty_and_missing_input():
  assert classify_family([]) == TechnologyFamily.NONE
  assert classify_family(None) == TechnologyFamily.NONE


def test_first_match_wins():
  """
  Scenario: Interfaces from both stacks.
  Expectation: The first recognised name in iteration order decides.
  """
  mvc_first = ["System.IDisposable", "System.Web.Mvc.IController", "System.Web.Http.Filters.IFilter"]
  webapi_first = ["System.Web.Http.Filters.IFilter", "System.Web.Mvc.IController"]

  assert classify_family(mvc_first) == TechnologyFamily.MVC
  assert classify_family(webapi_first) == TechnologyFamily.WEB_API


def test_accepts_generators():
  names = (n for n in ["System.IDisposable", "System.Web.Http.IHttpController"])
  assert classify_family(names) == TechnologyFamily.WEB_API


def test_matching_families_lists_each_family_once():
  names = ["System.Web.Mvc.IController", "System.IDisposable", "System.Web.Http.IFilter", "System.Web.Mvc.IActionFilter"]
  assert matching_families(names) == [TechnologyFamily.MVC, TechnologyFamily.WEB_API]
  assert matching_families(None) == []


def test_prefix_table_order():
  assert [family for _, family in FAMILY_PREFIXES] == [TechnologyFamily.WEB_API, TechnologyFamily.MVC]


def test_family_display_names():
  assert TechnologyFamily.WEB_API.value == "WebApi"
  assert TechnologyFamily.MVC.value == "Mvc"
  assert str(TechnologyFamily.NONE) == "None"
