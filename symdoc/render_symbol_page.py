"""Logic for composing the full Markdown page of a single symbol."""

import xml.etree.ElementTree as ET

from symdoc.document import Document
from symdoc.escape_markdown import escape_markdown_characters, one_line
from symdoc.format_method_name import format_method_name
from symdoc.markdown_blocks import front_matter, join_slug, md_callout, md_codeblock
from symdoc.markdown_link import normalize_type_name, symbol_link
from symdoc.parse_documentation import parse_documentation
from symdoc.render_config import RenderConfiguration
from symdoc.render_member_groups import (
    group_children,
    render_inline_member_details,
    render_member_tables,
)
from symdoc.render_sections import (
    render_exceptions,
    render_parameters,
    render_remarks,
    render_returns,
    render_type_parameters,
)
from symdoc.resolve_reference import resolve_reference
from symdoc.symbol import Symbol
from symdoc.symbol_index import SymbolIndex
from symdoc.symbol_kind import SymbolKind
from symdoc.translate_markup import translate_markup
from symdoc.type_name_of import type_name_of


def page_title(symbol: Symbol, index: SymbolIndex, config: RenderConfiguration) -> str:
    """Return the title of a symbol's page."""
    match symbol.kind:
        case SymbolKind.NAMESPACE:
            return f"{symbol.full_display_name} Namespace"
        case SymbolKind.METHOD | SymbolKind.CONSTRUCTOR:
            parent = index.get(symbol.container_id)
            return format_method_name(symbol, parent, index, config)
        case _:
            return symbol.full_display_name


def render_symbol_page(
    symbol: Symbol,
    index: SymbolIndex,
    config: RenderConfiguration,
) -> Document:
    """Render the document for one symbol."""
    title = page_title(symbol, index, config)
    docs = parse_documentation(symbol.documentation_markup)
    sid = symbol.id

    parts: list[str] = []
    if config.output_front_matter:
        slug = join_slug(config.slug_prefix, str(symbol.anchor_name))
        parts.append(front_matter(title, slug))
    else:
        parts.append(f"# {title}")
    parts.append("")

    parts.extend(_render_container_line(symbol, index, config))
    parts.extend(_render_inheritance(symbol, index, config))

    if symbol.is_obsolete:
        parts += [_obsolete_callout(symbol, config), ""]

    summary = translate_markup(docs.find("summary"), index, config, referrer=sid)
    if summary:
        parts += [summary, ""]

    if symbol.kind is not SymbolKind.NAMESPACE and symbol.declaration_text:
        parts += [md_codeblock(config.code_language, symbol.declaration_text), ""]

    parts.extend(render_remarks(docs, index, config, sid))
    parts.extend(render_parameters(docs, index, config, sid))
    parts.extend(render_type_parameters(docs, index, config, sid))
    parts.extend(render_returns(docs, index, config, sid))
    parts.extend(render_exceptions(docs, index, config, sid))

    groups = group_children(symbol, index)
    parts.extend(render_member_tables(groups, index, config))
    parts.extend(_render_see_also(docs, symbol, index, config))
    if not config.output_member_files:
        parts.extend(render_inline_member_details(symbol, groups, index, config))

    content = "\n".join(parts).rstrip() + "\n"
    return Document(path=f"{symbol.anchor_name}.md", title=title, content=content)


def _render_container_line(
    symbol: Symbol,
    index: SymbolIndex,
    config: RenderConfiguration,
) -> list[str]:
    """Render "Method in Foo" for pages that sit below another page."""
    if not config.output_member_files or symbol.kind is SymbolKind.NAMESPACE:
        return []
    parent = index.get(symbol.container_id)
    if parent is None:
        return []
    return [f"{type_name_of(symbol)} in {symbol_link(parent, config)}", ""]


def _render_inheritance(
    symbol: Symbol,
    index: SymbolIndex,
    config: RenderConfiguration,
) -> list[str]:
    """Render the base type line."""
    if not symbol.base_type_id:
        return []
    base = index.get(symbol.base_type_id)
    if base is not None:
        name = symbol_link(base, config, as_code=True)
    else:
        raw = symbol.base_type_id
        raw = raw[2:] if len(raw) > 2 and raw[1] == ":" else raw
        if raw.startswith(tuple(config.hidden_base_type_prefixes)):
            return []
        name = escape_markdown_characters(normalize_type_name(raw))
    return [f"Inherits from {name}", ""]


def _obsolete_callout(symbol: Symbol, config: RenderConfiguration) -> str:
    where = f" of {config.product_name}" if config.product_name else ""
    return md_callout(
        "warning",
        f"This {type_name_of(symbol).lower()} is **obsolete** and may be removed "
        f"from a future version{where}.",
    )


def _render_see_also(
    docs: ET.Element,
    symbol: Symbol,
    index: SymbolIndex,
    config: RenderConfiguration,
) -> list[str]:
    """Render the See Also list from top-level seealso tags."""
    entries = docs.findall("seealso")
    if not entries:
        return []
    parts = ["## See Also", ""]
    for entry in entries:
        cref = entry.get("cref")
        href = entry.get("href")
        if cref:
            target = resolve_reference(cref, index, config, symbol.id)
            line = "* " + symbol_link(target, config, use_full_display_name=True)
            if not target.is_external_marker:
                target_docs = parse_documentation(target.documentation_markup)
                summary = one_line(
                    translate_markup(
                        target_docs.find("summary"), index, config, referrer=target.id
                    )
                )
                if summary:
                    line += f": {summary}"
            parts.append(line)
        elif href:
            text = " ".join("".join(entry.itertext()).split()) or href
            parts.append(f"* [{text}]({href})")
    parts.append("")
    return parts
