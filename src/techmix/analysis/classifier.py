"""
Technology Family Classification.

Maps fully qualified interface names onto the ASP.NET stack they come from.
Recognition is a case-sensitive prefix match against a fixed table; adding a
family means adding a row to ``FAMILY_PREFIXES``, never touching callers.
"""

from typing import Iterable, List, Optional, Tuple

from techmix.enums import TechnologyFamily

# Checked in order for every name.
FAMILY_PREFIXES: Tuple[Tuple[str, TechnologyFamily], ...] = (
  ("System.Web.Http", TechnologyFamily.WEB_API),
  ("System.Web.Mvc", TechnologyFamily.MVC),
)


def family_of_name(full_name: str) -> TechnologyFamily:
  """
  Classifies a single fully qualified name.

  Args:
      full_name (str): e.g. ``"System.Web.Mvc.IController"``.

  Returns:
      TechnologyFamily: The matching family, or ``NONE``.
  """
  for prefix, family in FAMILY_PREFIXES:
    if full_name.startswith(prefix):
      return family
  return TechnologyFamily.NONE


def classify_family(names: Optional[Iterable[str]]) -> TechnologyFamily:
  """
  Returns the family of the first recognised name, scanning in iteration order.

  The function is total: ``None`` (unresolved metadata), empty input and
  unrecognised names all yield ``TechnologyFamily.NONE``.

  Args:
      names: Fully qualified interface names.

  Returns:
      TechnologyFamily: The first match, or ``NONE``.
  """
  if not names:
    return TechnologyFamily.NONE

  for name in names:
    family = family_of_name(str(name))
    if family is not TechnologyFamily.NONE:
      return family
  return TechnologyFamily.NONE


def matching_families(names: Optional[Iterable[str]]) -> List[TechnologyFamily]:
  """
  Lists every distinct family recognised in ``names``, in order of first appearance.

  Used to detect ambiguous inputs that implement interfaces from both stacks.

  Args:
      names: Fully qualified interface names.

  Returns:
      List[TechnologyFamily]: Distinct non-``NONE`` families.
  """
  found: List[TechnologyFamily] = []
  for name in names or ():
    family = family_of_name(str(name))
    if family is not TechnologyFamily.NONE and family not in found:
      found.append(family)
  return found
