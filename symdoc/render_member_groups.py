"""Logic for rendering a symbol's children as grouped tables and inline details."""

from symdoc.escape_markdown import escape_markdown_characters, one_line, table_cell
from symdoc.format_method_name import format_method_name
from symdoc.is_eligible import has_own_document, is_eligible_for_containment
from symdoc.markdown_blocks import md_table
from symdoc.markdown_link import symbol_link, type_link
from symdoc.parse_documentation import parse_documentation
from symdoc.render_config import RenderConfiguration
from symdoc.render_sections import (
    render_exceptions,
    render_parameters,
    render_remarks,
    render_returns,
    render_type_parameters,
)
from symdoc.symbol import Symbol
from symdoc.symbol_index import SymbolIndex
from symdoc.symbol_kind import SymbolKind
from symdoc.translate_markup import translate_markup
from symdoc.type_name_of import type_name_of

MemberGroup = tuple[str, list[Symbol]]


def group_children(symbol: Symbol, index: SymbolIndex) -> list[MemberGroup]:
    """Group a symbol's eligible children by plural kind label.

    Groups come back in ascending label order, members in ascending id order.
    """
    groups: dict[str, list[Symbol]] = {}
    for child in index.children_of(symbol.id):
        if not is_eligible_for_containment(child):
            continue
        groups.setdefault(type_name_of(child, plural=True), []).append(child)
    return [
        (label, sorted(members, key=lambda m: m.id))
        for label, members in sorted(groups.items())
    ]


def _has_type_column(label: str) -> bool:
    return label.upper() != "CONSTRUCTORS"


def summary_sentence(
    symbol: Symbol,
    index: SymbolIndex,
    config: RenderConfiguration,
) -> str:
    """Render a symbol's summary as a single line for tables and lists."""
    docs = parse_documentation(symbol.documentation_markup)
    summary = translate_markup(docs.find("summary"), index, config, referrer=symbol.id)
    out = ""
    for raw in summary.splitlines():
        line = raw.strip()
        if not line:
            continue
        if out:
            out += " " if out.endswith((".", ":", "!", "?")) else ". "
        out += line
    return out


def _child_link(
    child: Symbol,
    config: RenderConfiguration,
) -> str:
    if has_own_document(child, output_member_files=config.output_member_files):
        return symbol_link(child, config)
    return symbol_link(child, config, local_link=f"#{child.anchor_name}")


def render_member_tables(
    groups: list[MemberGroup],
    index: SymbolIndex,
    config: RenderConfiguration,
) -> list[str]:
    """Render one summary table per group."""
    parts: list[str] = []
    for label, members in groups:
        with_type = _has_type_column(label)
        rows: list[list[str]] = []
        for child in members:
            row = [
                _child_link(child, config),
                table_cell(summary_sentence(child, index, config)),
            ]
            if with_type:
                tname = child.type_name
                row.insert(0, type_link(tname, index, config) if tname else "")
            rows.append(row)
        headers = ["Type", "Name", "Summary"] if with_type else ["Name", "Summary"]
        parts += [f"## {label}", "", md_table(headers, rows), ""]
    return parts


def _render_member_detail(
    child: Symbol,
    index: SymbolIndex,
    config: RenderConfiguration,
) -> list[str]:
    docs = parse_documentation(child.documentation_markup)
    parts = []
    summary = one_line(
        translate_markup(docs.find("summary"), index, config, referrer=child.id)
    )
    if summary:
        parts += [summary, ""]
    parts.extend(render_remarks(docs, index, config, child.id))
    parts.extend(render_parameters(docs, index, config, child.id, level=4))
    parts.extend(render_type_parameters(docs, index, config, child.id, level=4))
    parts.extend(render_returns(docs, index, config, child.id, level=4))
    parts.extend(render_exceptions(docs, index, config, child.id, level=4))
    return parts


def _member_heading(
    child: Symbol,
    parent: Symbol,
    label: str,
    index: SymbolIndex,
    config: RenderConfiguration,
) -> str:
    tname = ""
    if _has_type_column(label) and child.type_name:
        tname = type_link(child.type_name, index, config)
    if child.kind in (SymbolKind.METHOD, SymbolKind.CONSTRUCTOR):
        name = format_method_name(child, parent, index, config)
    else:
        name = escape_markdown_characters(child.display_name)
    anchor = f"<a id='{child.anchor_name}'/>" if child.anchor_name else ""
    lead = anchor + tname
    return f"### {lead} {name}" if lead else f"### {name}"


def render_inline_member_details(
    symbol: Symbol,
    groups: list[MemberGroup],
    index: SymbolIndex,
    config: RenderConfiguration,
) -> list[str]:
    """Render full detail blocks for members that have no document of their own."""
    parts: list[str] = []
    for label, members in groups:
        inline = [
            m
            for m in members
            if not has_own_document(m, output_member_files=config.output_member_files)
        ]
        if not inline:
            continue
        parts += [f"## <a id='{label}-detail' /> {label}", ""]
        for i, child in enumerate(inline):
            parts += [_member_heading(child, symbol, label, index, config), ""]
            parts.extend(_render_member_detail(child, index, config))
            if i + 1 < len(inline):
                parts += ["", "---", ""]
        parts.append("")
    return parts
