"""Logic for parsing a symbol's XML documentation markup."""

import xml.etree.ElementTree as ET
from functools import lru_cache

from symdoc.errors import MalformedMarkupError


@lru_cache(maxsize=4096)
def parse_documentation(markup: str) -> ET.Element:
    """Parse documentation XML into an element tree.

    Empty markup yields an empty ``<doc/>`` element. The returned element is
    shared between callers and must not be modified.
    """
    if not markup or not markup.strip():
        return ET.Element("doc")
    try:
        return ET.fromstring(markup.strip())
    except ET.ParseError as e:
        msg = f"Malformed documentation markup: {e}"
        raise MalformedMarkupError(msg) from e
