"""Tests for loading symbol graph files."""

from pathlib import Path

import pytest

from symdoc.errors import InvalidSymbolGraphError
from symdoc.load_symbol_graph import (
    as_text,
    load_symbol_graph,
    strip_yaml_mime_header,
    symbol_from_mapping,
)
from symdoc.symbol import ParameterInfo
from symdoc.symbol_kind import Accessibility, SymbolKind


def test_strip_yaml_mime_header() -> None:
    """Test stripping the YamlMime header."""
    content = "### YamlMime:SymbolGraph\nsymbols:\n  - id: N:Foo"
    expected = "symbols:\n  - id: N:Foo"
    assert strip_yaml_mime_header(content) == expected

    content_no_header = "symbols:\n  - id: N:Foo"
    assert strip_yaml_mime_header(content_no_header) == content_no_header


def test_as_text() -> None:
    """Test text conversion utility."""
    assert as_text(None) == ""
    assert as_text(" Hello ") == "Hello"
    assert as_text([" A ", None, " B "]) == "A\nB"
    assert as_text(123) == "123"


def test_symbol_from_mapping() -> None:
    """Verify camelCase keys map onto the symbol record."""
    symbol = symbol_from_mapping(
        {
            "id": "M:Demo.Foo.Add(System.Int32)",
            "kind": "method",
            "displayName": "Add(int)",
            "fullDisplayName": "Demo.Foo.Add(int)",
            "containerId": "T:Demo.Foo",
            "anchorName": "demo-foo-add",
            "accessibility": "protectedInternal",
            "declaration": "protected internal void Add(int value)\n",
            "documentation": "<member><summary>Adds.</summary></member>",
            "obsolete": True,
            "typeName": "System.Void",
            "parameters": [{"name": "value", "typeName": "System.Int32"}],
        }
    )
    assert symbol.kind is SymbolKind.METHOD
    assert symbol.accessibility is Accessibility.PROTECTED_INTERNAL
    assert symbol.container_id == "T:Demo.Foo"
    assert symbol.declaration_text == "protected internal void Add(int value)"
    assert symbol.is_obsolete
    assert symbol.parameters == (ParameterInfo("value", "System.Int32"),)
    assert symbol.base_type_id is None


def test_symbol_from_mapping_defaults() -> None:
    """Verify missing fields fall back to safe defaults."""
    symbol = symbol_from_mapping({"id": "X:Odd", "kind": "Delegate"})
    assert symbol.kind is SymbolKind.OTHER
    assert symbol.display_name == "X:Odd"
    assert symbol.accessibility is Accessibility.PUBLIC
    assert symbol.anchor_name is None


def test_unknown_accessibility_is_rejected() -> None:
    """Verify accessibility values outside the known set are errors."""
    with pytest.raises(InvalidSymbolGraphError, match="friend"):
        symbol_from_mapping({"id": "T:Foo", "accessibility": "friend"})


def test_load_symbol_graph(tmp_path: Path) -> None:
    """Verify a graph file loads in file order, skipping entries without id."""
    graph = tmp_path / "graph.yml"
    graph.write_text(
        "### YamlMime:SymbolGraph\n"
        "symbols:\n"
        "  - id: N:Demo\n"
        "    kind: Namespace\n"
        "    displayName: Demo\n"
        "    anchorName: demo\n"
        "  - kind: Type\n"
        "    displayName: NoId\n"
        "  - id: T:Demo.Foo\n"
        "    kind: Type\n"
        "    displayName: Foo\n"
        "    fullDisplayName: Demo.Foo\n"
        "    containerId: N:Demo\n"
        "    typeKeyword: Struct\n"
        "    documentation: |\n"
        "      <member>\n"
        "        <summary>A foo.</summary>\n"
        "      </member>\n",
        encoding="utf-8",
    )
    symbols = load_symbol_graph(graph)
    assert [s.id for s in symbols] == ["N:Demo", "T:Demo.Foo"]
    assert symbols[0].full_display_name == "Demo"
    assert symbols[1].type_keyword == "Struct"
    assert "<summary>A foo.</summary>" in symbols[1].documentation_markup


def test_load_empty_graph(tmp_path: Path) -> None:
    """Verify an empty file yields no symbols."""
    graph = tmp_path / "graph.yml"
    graph.write_text("### YamlMime:SymbolGraph\n", encoding="utf-8")
    assert load_symbol_graph(graph) == []
