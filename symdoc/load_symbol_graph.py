"""Logic for loading the extractor's symbol graph from a YAML file."""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from symdoc.symbol import ParameterInfo, Symbol
from symdoc.symbol_kind import Accessibility, SymbolKind

YAML_MIME_PREFIX = "### YamlMime:"


def strip_yaml_mime_header(text: str) -> str:
    """Remove a ``### YamlMime:`` header line from the content."""
    lines = text.splitlines()
    if lines and lines[0].startswith(YAML_MIME_PREFIX):
        return "\n".join(lines[1:]).lstrip("\n")
    return text


def as_text(v: object) -> str:
    """Convert a value to a string, handling lists and None."""
    if v is None:
        return ""
    if isinstance(v, list):
        return "\n".join(as_text(x) for x in v if as_text(x))
    return str(v).strip()


def _optional(v: object) -> str | None:
    text = as_text(v)
    return text or None


def _parameters(raw: object) -> tuple[ParameterInfo, ...]:
    params = []
    for p in raw or []:
        if isinstance(p, dict):
            params.append(
                ParameterInfo(
                    name=as_text(p.get("name")),
                    type_name=as_text(p.get("typeName") or p.get("type")),
                )
            )
    return tuple(params)


def symbol_from_mapping(it: dict[str, Any]) -> Symbol:
    """Build a Symbol from one ``symbols:`` entry."""
    sid = str(it["id"])
    name = it.get("displayName") or it.get("fullDisplayName") or sid
    full_name = it.get("fullDisplayName") or it.get("displayName") or sid
    return Symbol(
        id=sid,
        kind=SymbolKind.parse(it.get("kind")),
        display_name=str(name),
        full_display_name=str(full_name),
        container_id=_optional(it.get("containerId")),
        base_type_id=_optional(it.get("baseTypeId")),
        anchor_name=_optional(it.get("anchorName")),
        accessibility=Accessibility.parse(it.get("accessibility")),
        # Declarations keep their indentation; only trailing space goes.
        declaration_text=str(it.get("declaration") or "").rstrip(),
        documentation_markup=str(it.get("documentation") or ""),
        is_obsolete=bool(it.get("obsolete", False)),
        type_keyword=_optional(it.get("typeKeyword")),
        type_name=_optional(it.get("typeName")),
        parameters=_parameters(it.get("parameters")),
        type_arguments=tuple(as_text(t) for t in it.get("typeArguments") or []),
    )


def iter_symbol_entries(doc: dict[str, Any]) -> Iterable[dict[str, Any]]:
    """Iterate over the symbol entries in a graph document."""
    for it in doc.get("symbols") or []:
        if isinstance(it, dict) and it.get("id"):
            yield it


def load_symbol_graph(path: Path) -> list[Symbol]:
    """Load and parse a symbol graph YAML file."""
    raw = strip_yaml_mime_header(path.read_text(encoding="utf-8"))
    doc = yaml.safe_load(raw) or {}
    return [symbol_from_mapping(it) for it in iter_symbol_entries(doc)]
