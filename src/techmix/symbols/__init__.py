"""
Symbol Information Package.

Read-only views of compiled-program symbols consumed by the analyzers.

Modules:
    - ``model``: Frozen Pydantic records for types, methods and attributes.
    - ``provider``: The ``SymbolProvider`` protocol and an in-memory implementation.
    - ``loader``: Parsing of JSON symbol dumps exported by the host compiler.
"""

from techmix.symbols.model import AttributeSymbol, MethodSymbol, SourceLocation, TypeSymbol
from techmix.symbols.provider import ModelSymbolProvider, SymbolProvider

__all__ = [
  "AttributeSymbol",
  "MethodSymbol",
  "ModelSymbolProvider",
  "SourceLocation",
  "SymbolProvider",
  "TypeSymbol",
]
