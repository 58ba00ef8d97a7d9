"""Logic for formatting method titles with their generic and parameter lists."""

import re

from symdoc.markdown_link import type_link
from symdoc.render_config import RenderConfiguration
from symdoc.symbol import Symbol
from symdoc.symbol_index import SymbolIndex
from symdoc.symbol_kind import SymbolKind

CONSTRUCTOR_NAMES = {".ctor", "#ctor", ".cctor", "#cctor"}


def format_method_name(
    symbol: Symbol,
    parent: Symbol | None,
    index: SymbolIndex,
    config: RenderConfiguration,
) -> str:
    """Format ``Name\\<T\\>(Type arg, ...)`` for methods and constructors.

    Other kinds return their display name unchanged.
    """
    if symbol.kind not in (SymbolKind.METHOD, SymbolKind.CONSTRUCTOR):
        return symbol.display_name

    name = re.split(r"[(<]", symbol.display_name, maxsplit=1)[0]
    if name in CONSTRUCTOR_NAMES and parent is not None:
        name = parent.display_name

    if symbol.type_arguments:
        args = ", ".join(type_link(t, index, config) for t in symbol.type_arguments)
        name += f"\\<{args}\\>"

    params = ", ".join(
        f"{type_link(p.type_name, index, config)} {p.name}" for p in symbol.parameters
    )
    return f"{name}({params})"
