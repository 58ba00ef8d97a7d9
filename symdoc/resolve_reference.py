"""Logic for resolving documentation cross-references (crefs) to symbols."""

import logging
import re

from symdoc.errors import MissingReferenceTargetError
from symdoc.markdown_link import normalize_type_name
from symdoc.render_config import RenderConfiguration
from symdoc.symbol import Symbol
from symdoc.symbol_index import SymbolIndex
from symdoc.symbol_kind import SymbolKind

logger = logging.getLogger(__name__)

# N:Foo, T:Foo.Bar`1, M:Foo.Bar.Baz(System.Int32), ...
CREF_RE = re.compile(r"^(?P<prefix>[NTMPFE!]):(?P<name>[^\s]+)$")


def is_external_reference(cref: str, config: RenderConfiguration) -> bool:
    """Check if a cref names something outside the documented graph."""
    m = CREF_RE.match(cref)
    if not m:
        return False
    if m.group("prefix") == "!":
        return True
    name = m.group("name")
    return any(
        name == ns or name.startswith(ns + ".") for ns in config.external_namespaces
    )


def external_symbol(cref: str) -> Symbol:
    """Build an unlinkable stand-in for an external cref."""
    name = cref[2:] if len(cref) > 2 and cref[1] == ":" else cref
    full = normalize_type_name(name.split("(", 1)[0])
    short = full.split("<", 1)[0].rsplit(".", 1)[-1]
    if "<" in full:
        short += full[full.index("<") :]
    return Symbol(
        id=cref,
        kind=SymbolKind.OTHER,
        display_name=short,
        full_display_name=full,
    )


def resolve_reference(
    cref: str,
    index: SymbolIndex,
    config: RenderConfiguration,
    referrer: str | None = None,
) -> Symbol:
    """Resolve a cref through the index.

    External crefs resolve to an unlinkable stand-in. Anything else that is
    missing raises MissingReferenceTargetError.
    """
    symbol = index.get(cref)
    if symbol is not None:
        return symbol
    if is_external_reference(cref, config):
        logger.debug("Treating %s as an external reference", cref)
        return external_symbol(cref)
    raise MissingReferenceTargetError(cref, referrer)
