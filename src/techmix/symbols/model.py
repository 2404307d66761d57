"""
Pydantic Schemas for Symbol Information.

This module defines the immutable records describing the parts of a compiled
type that the controller analyzers inspect: the interfaces a type implements,
the attributes applied to it and the attributes applied to its methods.

Locations are carried through to findings untouched; the analyzers never
interpret them.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class SourceLocation(BaseModel):
  """
  Position of a declaration in the original source.
  """

  model_config = ConfigDict(frozen=True)

  path: str = Field(description="Source file path as reported by the compiler.")
  line: int = Field(1, ge=1, description="1-based line number.")
  column: int = Field(1, ge=1, description="1-based column number.")

  def __str__(self) -> str:
    return f"{self.path}:{self.line}:{self.column}"


class AttributeSymbol(BaseModel):
  """
  An attribute application on a type or a method.

  ``interfaces`` lists every interface implemented by the attribute's class.
  ``None`` means the declaring class could not be resolved.
  """

  model_config = ConfigDict(frozen=True)

  name: str = Field(description="Short class name (e.g. 'AuthorizeAttribute').")
  full_name: Optional[str] = Field(None, description="Fully qualified class name.")
  interfaces: Optional[Tuple[str, ...]] = Field(
    default=(),
    description="Full names of all interfaces the attribute class implements.",
  )

  @property
  def is_resolved(self) -> bool:
    """True if the declaring class metadata is available."""
    return self.interfaces is not None


class MethodSymbol(BaseModel):
  """
  A method declared on an inspectable type.
  """

  model_config = ConfigDict(frozen=True)

  name: str
  attributes: Tuple[AttributeSymbol, ...] = Field(default_factory=tuple)
  location: Optional[SourceLocation] = None


class TypeSymbol(BaseModel):
  """
  A named type that may turn out to be a controller.
  """

  model_config = ConfigDict(frozen=True)

  name: str
  interfaces: Tuple[str, ...] = Field(default_factory=tuple, description="All implemented interface full names.")
  attributes: Tuple[AttributeSymbol, ...] = Field(default_factory=tuple)
  methods: Tuple[MethodSymbol, ...] = Field(default_factory=tuple)
  location: Optional[SourceLocation] = None
