"""Logic for translating XML documentation markup into Markdown."""

import re
import textwrap
import xml.etree.ElementTree as ET

from symdoc.escape_markdown import (
    escape_markdown_characters,
    strip_leading_whitespace,
    table_cell,
)
from symdoc.markdown_blocks import md_callout, md_codeblock, md_table
from symdoc.markdown_link import markdown_link
from symdoc.render_config import RenderConfiguration
from symdoc.resolve_reference import resolve_reference
from symdoc.symbol_index import SymbolIndex

FENCE_RE = re.compile(r"(^```.*?^```$)", flags=re.MULTILINE | re.DOTALL)
BLANK_LINES_RE = re.compile(r"\n{3,}")


def translate_markup(
    element: ET.Element | None,
    index: SymbolIndex,
    config: RenderConfiguration,
    *,
    referrer: str | None = None,
) -> str:
    """Translate a documentation element's content into Markdown.

    The element's own tag (``summary``, ``remarks``, ``param``...) is not
    rendered, only what it contains. Leading whitespace is stripped from every
    line outside fenced code blocks.
    """
    if element is None:
        return ""
    translator = _Translator(index, config, referrer)
    return _normalize(translator.children(element))


def _normalize(markdown: str) -> str:
    pieces = FENCE_RE.split(markdown)
    # Odd indices are fenced code blocks captured by the split.
    out = [p if i % 2 else strip_leading_whitespace(p) for i, p in enumerate(pieces)]
    return BLANK_LINES_RE.sub("\n\n", "".join(out)).strip()


def _inline_code(text: str) -> str:
    text = " ".join(text.split())
    if "`" in text:
        return f"`` {text} ``"
    return f"`{text}`"


def _raw_text(element: ET.Element) -> str:
    return "".join(element.itertext())


class _Translator:
    """Walks one markup tree; holds the lookups shared by every node."""

    def __init__(
        self,
        index: SymbolIndex,
        config: RenderConfiguration,
        referrer: str | None,
    ) -> None:
        self.index = index
        self.config = config
        self.referrer = referrer

    def children(self, element: ET.Element) -> str:
        parts = [escape_markdown_characters(element.text or "")]
        for child in element:
            parts.append(self.node(child))
            parts.append(escape_markdown_characters(child.tail or ""))
        return "".join(parts)

    def node(self, element: ET.Element) -> str:
        match element.tag:
            case "see" | "seealso":
                return self._reference(element)
            case "paramref" | "typeparamref":
                return _inline_code(element.get("name") or _raw_text(element))
            case "c":
                return _inline_code(_raw_text(element))
            case "code":
                lang = element.get("lang") or element.get("language")
                code = textwrap.dedent(_raw_text(element)).strip("\n")
                block = md_codeblock(lang or self.config.code_language, code)
                return "\n\n" + block + "\n\n"
            case "para" | "p":
                return self._paragraph(element)
            case "list":
                return "\n\n" + self._list(element) + "\n\n"
            case "b" | "strong":
                return f"**{self.children(element).strip()}**"
            case "i" | "em":
                return f"*{self.children(element).strip()}*"
            case "br":
                return "\n"
            case "a":
                href = element.get("href")
                text = self.children(element).strip()
                if not href:
                    return text
                return f"[{text or escape_markdown_characters(href)}]({href})"
            case "inheritdoc":
                return ""
            case _:
                return self.children(element)

    def _reference(self, element: ET.Element) -> str:
        label = " ".join(_raw_text(element).split())
        cref = element.get("cref")
        if cref:
            symbol = resolve_reference(cref, self.index, self.config, self.referrer)
            return markdown_link(label or symbol.display_name, symbol, self.config)
        href = element.get("href")
        if href:
            return f"[{escape_markdown_characters(label or href)}]({href})"
        langword = element.get("langword")
        if langword:
            return _inline_code(langword)
        # Display name only, nothing to resolve.
        name = element.get("name") or label
        return _inline_code(name) if name else ""

    def _paragraph(self, element: ET.Element) -> str:
        body = self.children(element).strip()
        style = element.get("style")
        if style:
            return "\n" + md_callout(style, body) + "\n"
        return "\n\n" + body + "\n\n"

    def _item_text(self, item: ET.Element) -> tuple[str, str]:
        term = item.find("term")
        description = item.find("description")
        if term is None and description is None:
            return "", self._flat(item)
        return (
            self._flat(term) if term is not None else "",
            self._flat(description) if description is not None else "",
        )

    def _flat(self, element: ET.Element) -> str:
        """Collapse an item's text to one line, keeping fenced code as blocks."""
        pieces = FENCE_RE.split(self.children(element))
        out = []
        for i, piece in enumerate(pieces):
            # Odd indices are fenced code blocks captured by the split.
            text = piece.strip("\n") if i % 2 else " ".join(piece.split())
            if text:
                out.append(text)
        return "\n".join(out)

    def _list(self, element: ET.Element) -> str:
        kind = (element.get("type") or "bullet").lower()
        items = [self._item_text(item) for item in element.findall("item")]
        if kind == "table":
            header = element.find("listheader")
            headers = ["Term", "Description"]
            if header is not None:
                term, description = self._item_text(header)
                headers = [term or "Term", description or "Description"]
            rows = [[table_cell(t), table_cell(d)] for t, d in items]
            return md_table(headers, rows)
        lines = []
        for n, (term, description) in enumerate(items, start=1):
            marker = f"{n}." if kind == "number" else "-"
            if term and description:
                text = f"**{term}** - {description}"
            else:
                text = term or description
            lines.append(f"{marker} {text}")
        return "\n".join(lines)
