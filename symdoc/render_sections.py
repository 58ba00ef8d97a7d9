"""Logic for rendering the documentation sections shared by pages and inline members.

Each function returns a list of lines (empty when there is nothing to show) so
the caller can splice sections together without partial state.
"""

import xml.etree.ElementTree as ET

from symdoc.errors import MalformedMarkupError
from symdoc.escape_markdown import one_line, table_cell
from symdoc.markdown_blocks import md_table
from symdoc.markdown_link import markdown_link, normalize_type_name, symbol_link
from symdoc.render_config import RenderConfiguration
from symdoc.resolve_reference import resolve_reference
from symdoc.symbol_index import SymbolIndex
from symdoc.translate_markup import translate_markup


def render_remarks(
    docs: ET.Element,
    index: SymbolIndex,
    config: RenderConfiguration,
    referrer: str,
) -> list[str]:
    """Render the remarks paragraph."""
    remarks = translate_markup(docs.find("remarks"), index, config, referrer=referrer)
    if not remarks:
        return []
    return [f"**Remarks**: {remarks}", ""]


def _parameter_type(
    param: ET.Element,
    index: SymbolIndex,
    config: RenderConfiguration,
) -> str:
    type_id = param.get("typeID") or param.get("typeId")
    type_name = param.get("typeName")
    type_symbol = index.get(type_id)
    if type_symbol is not None:
        label = type_symbol.display_name
        if type_name:
            label = normalize_type_name(type_name)
        return markdown_link(label, type_symbol, config)
    if type_name:
        return f"`{normalize_type_name(type_name)}`"
    # No type symbol and no type name: nothing to show.
    return ""


def render_parameters(
    docs: ET.Element,
    index: SymbolIndex,
    config: RenderConfiguration,
    referrer: str,
    *,
    level: int = 2,
) -> list[str]:
    """Render parameters in documentation order as ``type name - description``."""
    params = docs.findall("param")
    if not params:
        return []
    parts = [f"{'#' * level} Parameters", ""]
    for param in params:
        ptype = _parameter_type(param, index, config)
        pname = param.get("name") or ""
        desc = one_line(translate_markup(param, index, config, referrer=referrer))
        head = f"{ptype} {pname}".strip()
        parts += [f"{head} - {desc}" if desc else head, ""]
    return parts


def render_type_parameters(
    docs: ET.Element,
    index: SymbolIndex,
    config: RenderConfiguration,
    referrer: str,
    *,
    level: int = 2,
) -> list[str]:
    """Render generic type parameters as ``name - description``."""
    type_params = docs.findall("typeparam")
    if not type_params:
        return []
    parts = [f"{'#' * level} Type Parameters", ""]
    for tp in type_params:
        name = tp.get("name") or ""
        desc = one_line(translate_markup(tp, index, config, referrer=referrer))
        parts += [f"{name} - {desc}" if desc else name, ""]
    return parts


def render_returns(
    docs: ET.Element,
    index: SymbolIndex,
    config: RenderConfiguration,
    referrer: str,
    *,
    level: int = 2,
) -> list[str]:
    """Render the returns section, only when the returns tag has content."""
    returns = translate_markup(docs.find("returns"), index, config, referrer=referrer)
    if not returns:
        return []
    return [f"{'#' * level} Returns", "", returns, ""]


def render_exceptions(
    docs: ET.Element,
    index: SymbolIndex,
    config: RenderConfiguration,
    referrer: str,
    *,
    level: int = 2,
) -> list[str]:
    """Render thrown exceptions as a ``Type | Description`` table."""
    exceptions = docs.findall("exception") + docs.findall("except")
    if not exceptions:
        return []
    rows: list[list[str]] = []
    for exc in exceptions:
        cref = exc.get("cref")
        if not cref:
            msg = f"<{exc.tag}> without a cref in the documentation of {referrer}"
            raise MalformedMarkupError(msg)
        exc_symbol = resolve_reference(cref, index, config, referrer)
        desc = translate_markup(exc, index, config, referrer=referrer)
        rows.append([symbol_link(exc_symbol, config), table_cell(desc)])
    return [
        f"{'#' * level} Exceptions",
        "",
        md_table(["Type", "Description"], rows),
        "",
    ]
