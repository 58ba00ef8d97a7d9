"""Tests for links, type names and method titles."""

from symdoc.format_method_name import format_method_name
from symdoc.markdown_link import (
    markdown_link,
    normalize_type_name,
    symbol_link,
    type_link,
)
from symdoc.render_config import RenderConfiguration
from symdoc.symbol import ParameterInfo, Symbol
from symdoc.symbol_index import SymbolIndex
from symdoc.symbol_kind import SymbolKind
from symdoc.type_name_of import pluralize, type_name_of

WIDGET = Symbol(
    id="T:Demo.Widget",
    kind=SymbolKind.TYPE,
    display_name="Widget",
    full_display_name="Demo.Widget",
    anchor_name="demo-widget",
    type_keyword="struct",
)
INDEX = SymbolIndex([WIDGET])


def test_markdown_link() -> None:
    """Verify link targets follow the path prefix and extension settings."""
    config = RenderConfiguration(path_prefix="/api")
    assert markdown_link("Widget", WIDGET, config) == "[Widget](/api/demo-widget.md)"
    assert markdown_link("W", WIDGET, config, as_code=True) == (
        "[`W`](/api/demo-widget.md)"
    )
    assert markdown_link("W", WIDGET, config, local_link="#w") == "[W](#w)"
    stripped = RenderConfiguration(strip_extension_from_links=True)
    assert symbol_link(WIDGET, stripped, use_full_display_name=True) == (
        "[Demo.Widget](/demo-widget)"
    )


def test_markdown_link_escapes_label() -> None:
    """Verify labels are escaped whether or not they link."""
    config = RenderConfiguration()
    assert markdown_link("List<T>", WIDGET, config) == "[List\\<T\\>](/demo-widget.md)"
    unlinked = Symbol(
        id="T:Nowhere",
        kind=SymbolKind.TYPE,
        display_name="Nowhere",
        full_display_name="Nowhere",
    )
    assert markdown_link("Map[K]", unlinked, config) == "Map\\[K\\]"


def test_normalize_type_name() -> None:
    """Verify generic arity, braces and builtin aliases are cleaned up."""
    assert normalize_type_name("System.Int32") == "int"
    assert normalize_type_name("System.Int32[]") == "int[]"
    assert normalize_type_name("System.Collections.Generic.List{System.String}") == (
        "System.Collections.Generic.List<string>"
    )
    assert normalize_type_name("Demo.Box`1") == "Demo.Box"
    assert normalize_type_name("System.Int32Ex") == "System.Int32Ex"


def test_type_link() -> None:
    """Verify type names link when the graph defines the type."""
    config = RenderConfiguration()
    assert type_link("Demo.Widget", INDEX, config) == "[Demo.Widget](/demo-widget.md)"
    assert type_link("Demo.Widget{System.Int32}", INDEX, config) == (
        "[Demo.Widget\\<int\\>](/demo-widget.md)"
    )
    assert type_link("System.String", INDEX, config) == "string"


def test_type_name_of() -> None:
    """Verify kind labels and their plurals."""
    assert type_name_of(WIDGET) == "Struct"
    assert type_name_of(WIDGET, plural=True) == "Structs"
    prop = Symbol(
        id="P:Demo.Widget.Size",
        kind=SymbolKind.PROPERTY,
        display_name="Size",
        full_display_name="Demo.Widget.Size",
    )
    assert type_name_of(prop, plural=True) == "Properties"
    assert pluralize("Class") == "Classes"
    assert pluralize("Method") == "Methods"
    assert pluralize("Interface") == "Interfaces"


def test_format_method_name() -> None:
    """Verify method titles list generic arguments and typed parameters."""
    config = RenderConfiguration()
    method = Symbol(
        id="M:Demo.Widget.Fit``1(Demo.Widget,System.Int32)",
        kind=SymbolKind.METHOD,
        display_name="Fit<T>(Widget, int)",
        full_display_name="Demo.Widget.Fit<T>(Demo.Widget, int)",
        parameters=(
            ParameterInfo("other", "Demo.Widget"),
            ParameterInfo("count", "System.Int32"),
        ),
        type_arguments=("T",),
    )
    assert format_method_name(method, WIDGET, INDEX, config) == (
        "Fit\\<T\\>([Demo.Widget](/demo-widget.md) other, int count)"
    )
    assert format_method_name(WIDGET, None, INDEX, config) == "Widget"
