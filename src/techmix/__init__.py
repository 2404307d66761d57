"""
techmix Package.

A static analyzer for ASP.NET symbol dumps that detects controllers mixing
attributes from the MVC and WebApi stacks. Attributes from the other stack
are silently ignored at runtime, so e.g. an MVC ``[Authorize]`` on a WebApi
controller provides no protection.

Usage
-----

.. code-block:: python

    import techmix
    from techmix.symbols import AttributeSymbol, TypeSymbol

    controller = TypeSymbol(
      name="OrdersController",
      interfaces=("System.Web.Http.Controllers.IHttpController",),
      attributes=(
        AttributeSymbol(name="AuthorizeAttribute", interfaces=("System.Web.Mvc.IAuthorizationFilter",)),
      ),
    )
    for finding in techmix.analyze([controller]):
        print(finding.attribute_name, finding.attribute_family)
    # AuthorizeAttribute Mvc
"""

from typing import Iterable, List

from techmix.analysis.controller import WrongAttributeOnControllerAnalyzer
from techmix.analysis.findings import ConflictFinding, Diagnostic
from techmix.enums import TechnologyFamily
from techmix.symbols.model import TypeSymbol
from techmix.symbols.provider import ModelSymbolProvider

__version__ = "0.1.0"


def analyze(types: Iterable[TypeSymbol], jobs: int = 1) -> List[ConflictFinding]:
  """
  Runs the controller analysis over in-memory type records.

  Args:
      types (Iterable[TypeSymbol]): The types to inspect.
      jobs (int): Number of worker threads. Output order does not depend on it.

  Returns:
      List[ConflictFinding]: Findings in input order.
  """
  analyzer = WrongAttributeOnControllerAnalyzer()
  return analyzer.analyze(ModelSymbolProvider(types), jobs=jobs)


__all__ = [
  "ConflictFinding",
  "Diagnostic",
  "TechnologyFamily",
  "WrongAttributeOnControllerAnalyzer",
  "analyze",
  "__version__",
]
