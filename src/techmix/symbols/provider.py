"""
Symbol Provider Protocol.

Analyzers never touch a compiler's live symbol objects. They read metadata
through the narrow ``SymbolProvider`` interface, which lets tests feed
synthetic fixtures and lets the CLI feed JSON dumps.
"""

from typing import Iterable, List, Protocol, Sequence

from techmix.symbols.model import AttributeSymbol, MethodSymbol, TypeSymbol


class SymbolProvider(Protocol):
  """
  Protocol definition for a read-only symbol source.
  """

  def types(self) -> Sequence[TypeSymbol]: ...

  def interfaces_of(self, type_symbol: TypeSymbol) -> Sequence[str]: ...

  def attributes_of(self, type_symbol: TypeSymbol) -> Sequence[AttributeSymbol]: ...

  def methods_of(self, type_symbol: TypeSymbol) -> Sequence[MethodSymbol]: ...

  def attributes_of_method(self, method: MethodSymbol) -> Sequence[AttributeSymbol]: ...


class ModelSymbolProvider:
  """
  Serves symbols straight from ``TypeSymbol`` records.

  Iteration order of every accessor is the order the records were built
  with, so classification stays deterministic.
  """

  def __init__(self, type_symbols: Iterable[TypeSymbol] = ()):
    self._types: List[TypeSymbol] = list(type_symbols)

  def types(self) -> Sequence[TypeSymbol]:
    return tuple(self._types)

  def interfaces_of(self, type_symbol: TypeSymbol) -> Sequence[str]:
    return type_symbol.interfaces

  def attributes_of(self, type_symbol: TypeSymbol) -> Sequence[AttributeSymbol]:
    return type_symbol.attributes

  def methods_of(self, type_symbol: TypeSymbol) -> Sequence[MethodSymbol]:
    return type_symbol.methods

  def attributes_of_method(self, method: MethodSymbol) -> Sequence[AttributeSymbol]:
    return method.attributes
