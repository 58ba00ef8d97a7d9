"""Tests for rendering a whole symbol graph into documents."""

import random

import pytest

from symdoc.errors import ConfigurationInconsistencyError, MissingReferenceTargetError
from symdoc.render_config import RenderConfiguration
from symdoc.render_documents import render_documents
from symdoc.symbol import Symbol
from symdoc.symbol_kind import Accessibility, SymbolKind


def _graph() -> list[Symbol]:
    return [
        Symbol(
            id="T:Foo",
            kind=SymbolKind.TYPE,
            display_name="Foo",
            full_display_name="Foo",
            anchor_name="foo",
            type_keyword="Class",
            documentation_markup="<member><summary>A foo.</summary></member>",
        ),
        Symbol(
            id="M:Foo.Bar",
            kind=SymbolKind.METHOD,
            display_name="Bar",
            full_display_name="Foo.Bar",
            container_id="T:Foo",
            anchor_name="foo-bar",
            type_name="System.Int32",
            documentation_markup=(
                "<member><summary>Bars.</summary>"
                '<returns>The <see cref="T:Foo"/>.</returns></member>'
            ),
        ),
        Symbol(
            id="P:Foo.Size",
            kind=SymbolKind.PROPERTY,
            display_name="Size",
            full_display_name="Foo.Size",
            container_id="T:Foo",
            anchor_name="foo-size",
            type_name="System.Int32",
        ),
        Symbol(
            id="M:Foo.Baz",
            kind=SymbolKind.METHOD,
            display_name="Baz",
            full_display_name="Foo.Baz",
            container_id="T:Foo",
            anchor_name="foo-baz",
            accessibility=Accessibility.PRIVATE,
        ),
        Symbol(
            id="T:Foo.Nested",
            kind=SymbolKind.OTHER,
            display_name="Nested",
            full_display_name="Foo.Nested",
            container_id="T:Foo",
            anchor_name="foo-nested",
        ),
    ]


def test_documents_for_eligible_symbols_only() -> None:
    """Verify one document per public symbol with an anchor, in graph order."""
    docs = render_documents(_graph(), RenderConfiguration())
    assert [d.path for d in docs] == ["foo.md", "foo-bar.md", "foo-size.md"]
    assert all("Baz" not in d.content for d in docs)
    assert all("Nested" not in d.content for d in docs)


def test_inline_mode_renders_types_only() -> None:
    """Verify members fold into their parent when member files are off."""
    docs = render_documents(_graph(), RenderConfiguration(output_member_files=False))
    assert [d.path for d in docs] == ["foo.md"]
    content = docs[0].content
    assert "### <a id='foo-bar'/>int Bar()" in content
    assert "### <a id='foo-size'/>int Size" in content
    assert "#### Returns\n\nThe [Foo](/foo.md)." in content


def test_groups_are_ordered() -> None:
    """Verify member groups are ordered by label whatever the graph order."""
    content = render_documents(_graph(), RenderConfiguration())[0].content
    assert content.index("## Methods") < content.index("## Properties")


def test_rendering_is_deterministic() -> None:
    """Verify shuffled input, repeated runs and threads give identical output."""
    config = RenderConfiguration()
    expected = {d.path: d.content for d in render_documents(_graph(), config)}

    shuffled = _graph()
    random.Random(7).shuffle(shuffled)
    assert {d.path: d.content for d in render_documents(shuffled, config)} == expected
    threaded = render_documents(_graph(), config, max_workers=4)
    assert [d.path for d in threaded] == list(expected)
    assert {d.path: d.content for d in threaded} == expected


def test_missing_reference_target_fails() -> None:
    """Verify a broken cross-reference stops rendering."""
    graph = _graph()
    graph.append(
        Symbol(
            id="T:Broken",
            kind=SymbolKind.TYPE,
            display_name="Broken",
            full_display_name="Broken",
            anchor_name="broken",
            documentation_markup=(
                '<member><summary><see cref="T:Gone"/></summary></member>'
            ),
        )
    )
    with pytest.raises(MissingReferenceTargetError) as exc:
        render_documents(graph, RenderConfiguration())
    assert exc.value.referrer == "T:Broken"


def test_duplicate_anchors_are_inconsistent() -> None:
    """Verify two documents may not share a path."""
    graph = _graph()
    graph.append(
        Symbol(
            id="T:Other",
            kind=SymbolKind.TYPE,
            display_name="Other",
            full_display_name="Other",
            anchor_name="foo",
        )
    )
    with pytest.raises(ConfigurationInconsistencyError):
        render_documents(graph, RenderConfiguration())


def test_inline_anchor_colliding_with_slug_is_inconsistent() -> None:
    """Verify inline anchors may not shadow page slugs under front matter."""
    graph = _graph()
    graph.append(
        Symbol(
            id="F:Foo.Clash",
            kind=SymbolKind.FIELD,
            display_name="Clash",
            full_display_name="Foo.Clash",
            container_id="T:Foo",
            anchor_name="foo",
        )
    )
    config = RenderConfiguration(output_front_matter=True, output_member_files=False)
    with pytest.raises(ConfigurationInconsistencyError):
        render_documents(graph, config)
    # Without front matter the same graph renders.
    assert render_documents(graph, RenderConfiguration(output_member_files=False))


def test_negative_indent_is_inconsistent() -> None:
    """Verify a negative outline indent is rejected."""
    with pytest.raises(ConfigurationInconsistencyError):
        RenderConfiguration(summary_indent_level=-1)


def _summary(text: str) -> str:
    return f"<member><summary>{text}</summary></member>"


def test_namespace_type_method_round_trip() -> None:
    """Verify three distinct documents, each carrying its own summary."""
    graph = [
        Symbol(
            id="N:Shop",
            kind=SymbolKind.NAMESPACE,
            display_name="Shop",
            full_display_name="Shop",
            anchor_name="shop",
            documentation_markup=_summary("Shop namespace text."),
        ),
        Symbol(
            id="T:Shop.Cart",
            kind=SymbolKind.TYPE,
            display_name="Cart",
            full_display_name="Shop.Cart",
            container_id="N:Shop",
            anchor_name="shop-cart",
            documentation_markup=_summary("Cart type text."),
        ),
        Symbol(
            id="M:Shop.Cart.Checkout",
            kind=SymbolKind.METHOD,
            display_name="Checkout",
            full_display_name="Shop.Cart.Checkout",
            container_id="T:Shop.Cart",
            anchor_name="shop-cart-checkout",
            documentation_markup=_summary("Checkout method text."),
        ),
    ]
    docs = render_documents(graph, RenderConfiguration(output_member_files=True))
    assert len(docs) == 3
    assert len({d.path for d in docs}) == 3
    namespace, cart, checkout = (d.content for d in docs)
    assert "Shop namespace text." in namespace
    assert "Checkout method text." not in namespace
    assert "Cart type text." in cart
    assert "Shop namespace text." not in cart
    assert "Checkout method text." in checkout
    assert "Cart type text." not in checkout
    assert "Shop namespace text." not in checkout


def test_members_are_ordered_by_id_within_groups() -> None:
    """Verify two methods and a property come out grouped and id-ordered."""
    graph = [
        Symbol(
            id="T:Box",
            kind=SymbolKind.TYPE,
            display_name="Box",
            full_display_name="Box",
            anchor_name="box",
        ),
        Symbol(
            id="P:Box.Width",
            kind=SymbolKind.PROPERTY,
            display_name="Width",
            full_display_name="Box.Width",
            container_id="T:Box",
            anchor_name="box-width",
        ),
        Symbol(
            id="M:Box.Open",
            kind=SymbolKind.METHOD,
            display_name="Open",
            full_display_name="Box.Open",
            container_id="T:Box",
            anchor_name="box-open",
        ),
        Symbol(
            id="M:Box.Close",
            kind=SymbolKind.METHOD,
            display_name="Close",
            full_display_name="Box.Close",
            container_id="T:Box",
            anchor_name="box-close",
        ),
    ]
    content = render_documents(graph, RenderConfiguration())[0].content
    methods = content.index("## Methods")
    properties = content.index("## Properties")
    assert methods < content.index("[Close]") < content.index("[Open]") < properties
    assert properties < content.index("[Width]")
