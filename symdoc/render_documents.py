"""Logic for rendering every eligible symbol of a graph into documents."""

import logging
from collections import Counter
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from symdoc.document import Document
from symdoc.errors import ConfigurationInconsistencyError
from symdoc.is_eligible import has_own_document, is_eligible_for_containment
from symdoc.render_config import RenderConfiguration
from symdoc.render_symbol_page import render_symbol_page
from symdoc.symbol import Symbol
from symdoc.symbol_index import SymbolIndex

logger = logging.getLogger(__name__)


def render_documents(
    symbols: Iterable[Symbol] | SymbolIndex,
    config: RenderConfiguration,
    *,
    max_workers: int | None = None,
) -> list[Document]:
    """Render one document per eligible symbol, in graph order.

    Namespaces and types always get a document; members only when
    ``config.output_member_files`` is set. With ``max_workers`` > 1 pages are
    rendered on a thread pool; the result order does not change.
    """
    index = symbols if isinstance(symbols, SymbolIndex) else SymbolIndex(symbols)
    pages = [
        s
        for s in index
        if has_own_document(s, output_member_files=config.output_member_files)
    ]
    _check_collisions(pages, index, config)

    if max_workers and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            documents = list(
                executor.map(lambda s: render_symbol_page(s, index, config), pages)
            )
    else:
        documents = [render_symbol_page(s, index, config) for s in pages]

    logger.info("Rendered %d documents from %d symbols", len(documents), len(index))
    return documents


def _check_collisions(
    pages: list[Symbol],
    index: SymbolIndex,
    config: RenderConfiguration,
) -> None:
    """Fail when two outputs would share a path, slug or in-page anchor."""
    counts = Counter(s.anchor_name for s in pages)
    dupes = sorted(str(a) for a, n in counts.items() if n > 1)
    if dupes:
        msg = f"Multiple symbols render to the same document: {', '.join(dupes)}"
        raise ConfigurationInconsistencyError(msg)

    if config.output_member_files or not config.output_front_matter:
        return
    # Inline members are addressed as slug#anchor; an anchor equal to a page
    # slug makes the route ambiguous.
    page_anchors = set(counts)
    clashes = sorted(
        str(s.anchor_name)
        for s in index
        if s.anchor_name in page_anchors
        and is_eligible_for_containment(s)
        and not has_own_document(s, output_member_files=False)
    )
    if clashes:
        msg = (
            "Inline member anchors collide with front matter slugs: "
            + ", ".join(clashes)
        )
        raise ConfigurationInconsistencyError(msg)
