"""Lookup from stable symbol ids to symbol records."""

import logging
from collections.abc import Iterable, Iterator

from symdoc.errors import SymbolNotFoundError
from symdoc.symbol import Symbol
from symdoc.symbol_kind import SymbolKind

logger = logging.getLogger(__name__)


class SymbolIndex:
    """Read-only index over a symbol graph, built once per render."""

    def __init__(self, symbols: Iterable[Symbol]) -> None:
        """Index symbols by id; later duplicates replace earlier ones."""
        by_id: dict[str, Symbol] = {}
        for symbol in symbols:
            if symbol.id in by_id:
                logger.debug("Duplicate symbol id %s, keeping last entry", symbol.id)
            by_id[symbol.id] = symbol
        self._by_id = by_id

        children: dict[str, list[Symbol]] = {}
        by_name: dict[str, Symbol] = {}
        for symbol in by_id.values():
            if symbol.container_id is not None:
                children.setdefault(symbol.container_id, []).append(symbol)
            if symbol.kind is SymbolKind.TYPE:
                # "T:Foo.Bar" -> "Foo.Bar"
                by_name[_strip_id_prefix(symbol.id)] = symbol
        self._children = {k: tuple(v) for k, v in children.items()}
        self._by_name = by_name

    def __getitem__(self, symbol_id: str) -> Symbol:
        """Return the symbol with this id or raise SymbolNotFoundError."""
        try:
            return self._by_id[symbol_id]
        except KeyError:
            raise SymbolNotFoundError(symbol_id) from None

    def __contains__(self, symbol_id: object) -> bool:
        """Check whether an id is indexed."""
        return symbol_id in self._by_id

    def __iter__(self) -> Iterator[Symbol]:
        """Iterate symbols in graph order."""
        return iter(self._by_id.values())

    def __len__(self) -> int:
        """Return the number of indexed symbols."""
        return len(self._by_id)

    def get(self, symbol_id: str | None) -> Symbol | None:
        """Return the symbol with this id, or None."""
        if symbol_id is None:
            return None
        return self._by_id.get(symbol_id)

    def children_of(self, symbol_id: str) -> tuple[Symbol, ...]:
        """Return the direct children of a symbol in graph order."""
        return self._children.get(symbol_id, ())

    def find_by_name(self, name: str) -> Symbol | None:
        """Resolve a qualified type name such as ``Foo.Bar`` to its symbol."""
        return self._by_name.get(name)


def _strip_id_prefix(symbol_id: str) -> str:
    if len(symbol_id) > 2 and symbol_id[1] == ":":
        return symbol_id[2:]
    return symbol_id
