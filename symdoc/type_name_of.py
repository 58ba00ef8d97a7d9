"""Logic for naming what kind of thing a symbol is, singular or plural."""

from symdoc.symbol import Symbol
from symdoc.symbol_kind import SymbolKind

IRREGULAR_PLURALS = {
    "Property": "Properties",
}


def pluralize(word: str) -> str:
    """Pluralize an English kind label (Class -> Classes, Property -> Properties)."""
    if word in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[word]
    if any(word.lower().endswith(s) for s in ("s", "ss", "x", "z", "ch", "sh")):
        return word + "es"
    return word + "s"


def type_name_of(symbol: Symbol, *, plural: bool = False) -> str:
    """Return a label such as ``Class``, ``Method`` or ``Properties`` for a symbol."""
    match symbol.kind:
        case SymbolKind.TYPE:
            label = (symbol.type_keyword or "Type").strip().capitalize()
        case SymbolKind.OTHER:
            label = "Item"
        case (
            SymbolKind.NAMESPACE
            | SymbolKind.METHOD
            | SymbolKind.PROPERTY
            | SymbolKind.FIELD
            | SymbolKind.EVENT
            | SymbolKind.CONSTRUCTOR
        ):
            label = symbol.kind.value
    return pluralize(label) if plural else label
