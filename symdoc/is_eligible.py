"""Predicates deciding which symbols are rendered and linked."""

from symdoc.symbol import Symbol
from symdoc.symbol_kind import Accessibility, SymbolKind, is_member_kind


def is_eligible_for_containment(symbol: Symbol) -> bool:
    """Check if a symbol may appear under its container at all."""
    return (
        symbol.kind is not SymbolKind.OTHER
        and symbol.accessibility is not Accessibility.PRIVATE
    )


def is_linkable(symbol: Symbol) -> bool:
    """Check if a symbol may be the target of a link."""
    return bool(symbol.anchor_name) and is_eligible_for_containment(symbol)


def has_own_document(symbol: Symbol, *, output_member_files: bool) -> bool:
    """Check if a symbol gets its own rendered document."""
    if not is_linkable(symbol):
        return False
    if is_member_kind(symbol.kind):
        return output_member_files
    return True
