"""Logic for rendering the nested outline of all namespaces and their contents."""

from symdoc.is_eligible import is_eligible_for_containment
from symdoc.markdown_blocks import front_matter, join_slug
from symdoc.markdown_link import markdown_link
from symdoc.render_config import RenderConfiguration
from symdoc.symbol import Symbol
from symdoc.symbol_index import SymbolIndex
from symdoc.symbol_kind import SymbolKind


def _line_item(symbol: Symbol, depth: int, config: RenderConfiguration) -> str:
    indent = " " * config.summary_indent_level
    level_indent = " " * (depth * 2)
    label = symbol.display_name
    if symbol.kind is SymbolKind.NAMESPACE:
        label += " Namespace"
    return f"{indent}{level_indent}* {markdown_link(label, symbol, config)}"


def _outline_children(symbol: Symbol, index: SymbolIndex) -> list[Symbol]:
    """Children shown under a node; namespaces only ever appear as roots."""
    return [
        c
        for c in index.children_of(symbol.id)
        if c.kind is not SymbolKind.NAMESPACE and is_eligible_for_containment(c)
    ]


def render_table_of_contents(index: SymbolIndex, config: RenderConfiguration) -> str:
    """Render a depth-first outline rooted at every namespace.

    Traversal uses an explicit stack. Children are pushed in descending id
    order, so siblings are emitted in ascending id order.
    """
    lines: list[str] = []
    if config.output_front_matter:
        lines.append(front_matter("Summary", join_slug(config.slug_prefix, "summary")))

    namespaces = [
        s
        for s in index
        if s.kind is SymbolKind.NAMESPACE and is_eligible_for_containment(s)
    ]
    for namespace in namespaces:
        stack: list[tuple[Symbol, int]] = [(namespace, 0)]
        while stack:
            symbol, depth = stack.pop()
            lines.append(_line_item(symbol, depth, config))
            children = sorted(
                _outline_children(symbol, index), key=lambda c: c.id, reverse=True
            )
            stack.extend((child, depth + 1) for child in children)

    return "\n".join(lines) + "\n" if lines else ""
