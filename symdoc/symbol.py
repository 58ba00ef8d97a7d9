"""Data models for representing documented symbols."""

from dataclasses import dataclass, field

from symdoc.symbol_kind import Accessibility, SymbolKind


@dataclass(frozen=True)
class ParameterInfo:
    """A declared parameter of a method or constructor."""

    name: str
    type_name: str


@dataclass(frozen=True)
class Symbol:
    """Represents a documented symbol (namespace, type or member)."""

    id: str
    kind: SymbolKind
    display_name: str
    full_display_name: str
    container_id: str | None = None
    base_type_id: str | None = None
    anchor_name: str | None = None
    accessibility: Accessibility = Accessibility.PUBLIC
    declaration_text: str = ""
    documentation_markup: str = ""  # raw XML, e.g. <member><summary>...</member>
    is_obsolete: bool = False
    type_keyword: str | None = None  # Class/Struct/Interface/... for Type symbols
    type_name: str | None = None  # value or return type of a member
    parameters: tuple[ParameterInfo, ...] = field(default_factory=tuple)
    type_arguments: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_external_marker(self) -> bool:
        """True for ids the compiler could not resolve (``!:`` prefix)."""
        return self.id.startswith("!:")
