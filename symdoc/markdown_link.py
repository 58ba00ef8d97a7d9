"""Logic for turning symbols and type names into Markdown links."""

import re

from symdoc.escape_markdown import escape_markdown_characters
from symdoc.is_eligible import is_linkable
from symdoc.render_config import RenderConfiguration
from symdoc.symbol import Symbol
from symdoc.symbol_index import SymbolIndex

GENERIC_ARITY_RE = re.compile(r"``?\d+")

BUILTIN_TYPE_ALIASES = {
    "System.Boolean": "bool",
    "System.Byte": "byte",
    "System.Char": "char",
    "System.Decimal": "decimal",
    "System.Double": "double",
    "System.Int16": "short",
    "System.Int32": "int",
    "System.Int64": "long",
    "System.Object": "object",
    "System.SByte": "sbyte",
    "System.Single": "float",
    "System.String": "string",
    "System.UInt16": "ushort",
    "System.UInt32": "uint",
    "System.UInt64": "ulong",
    "System.Void": "void",
}


def symbol_href(symbol: Symbol, config: RenderConfiguration) -> str:
    """Return the link target of a symbol's own document."""
    return f"{config.path_prefix}/{symbol.anchor_name}{config.link_extension}"


def markdown_link(
    label: str,
    symbol: Symbol,
    config: RenderConfiguration,
    *,
    local_link: str | None = None,
    as_code: bool = False,
) -> str:
    """Link label to symbol, or return the escaped label if it cannot be linked."""
    label = escape_markdown_characters(label)
    if not is_linkable(symbol):
        return label
    text = f"`{label}`" if as_code else label
    return f"[{text}]({local_link or symbol_href(symbol, config)})"


def symbol_link(
    symbol: Symbol,
    config: RenderConfiguration,
    *,
    local_link: str | None = None,
    as_code: bool = False,
    use_full_display_name: bool = False,
) -> str:
    """Link to a symbol using its short or qualified display name."""
    label = symbol.full_display_name if use_full_display_name else symbol.display_name
    return markdown_link(label, symbol, config, local_link=local_link, as_code=as_code)


def normalize_type_name(type_name: str) -> str:
    """Make a metadata type name readable.

    ``System.Collections.Generic.List{System.String}`` becomes
    ``System.Collections.Generic.List<string>``.
    """
    name = GENERIC_ARITY_RE.sub("", type_name.strip())
    name = name.replace("{", "<").replace("}", ">")
    for full, alias in BUILTIN_TYPE_ALIASES.items():
        name = re.sub(rf"\b{re.escape(full)}\b", alias, name)
    return name


def type_link(type_name: str, index: SymbolIndex, config: RenderConfiguration) -> str:
    """Link a type name to its document when the graph defines it."""
    text = normalize_type_name(type_name)
    # Foo.Bar<T> and Foo.Bar(...) resolve through their bare name.
    bare = re.split(r"[<({]", type_name, maxsplit=1)[0]
    target = index.find_by_name(type_name) or index.find_by_name(bare)
    if target is not None and is_linkable(target):
        return markdown_link(text, target, config)
    return escape_markdown_characters(text)
