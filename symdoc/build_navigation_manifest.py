"""Logic for building the navigation manifest consumed by the documentation site."""

import json
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from symdoc.document import Document

DEFAULT_NAVIGATION_GROUP = "API Documentation"


def build_navigation_manifest(
    documents: Iterable[Document],
    *,
    group: str = DEFAULT_NAVIGATION_GROUP,
    extra_sections: Sequence[Mapping[str, Any]] = (),
) -> dict[str, Any]:
    """Build ``{"navigation": [{"group": ..., "pages": [{"title", "path"}]}]}``.

    The generated API pages form one section. ``extra_sections`` are
    hand-written sections (guides etc.) appended as given.
    """
    pages = [{"title": d.title, "path": d.path} for d in documents]
    navigation: list[dict[str, Any]] = [{"group": group, "pages": pages}]
    for section in extra_sections:
        navigation.append(
            {
                "group": str(section.get("group") or ""),
                "pages": [
                    {
                        "title": str(p.get("title") or ""),
                        "path": str(p.get("path") or ""),
                    }
                    for p in section.get("pages") or []
                ],
            }
        )
    return {"navigation": navigation}


def dump_navigation_manifest(manifest: Mapping[str, Any]) -> str:
    """Serialize a manifest as indented JSON."""
    return json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
