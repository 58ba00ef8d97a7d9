"""Closed enumerations describing what a documented symbol is."""

from enum import Enum

from symdoc.errors import InvalidSymbolGraphError


class SymbolKind(Enum):
    """The kind of a documented symbol."""

    NAMESPACE = "Namespace"
    TYPE = "Type"
    METHOD = "Method"
    PROPERTY = "Property"
    FIELD = "Field"
    EVENT = "Event"
    CONSTRUCTOR = "Constructor"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: object) -> "SymbolKind":
        """Parse a kind name case-insensitively, falling back to OTHER."""
        text = str(value or "").strip().lower()
        for kind in cls:
            if kind.value.lower() == text:
                return kind
        return cls.OTHER


class Accessibility(Enum):
    """Declared visibility of a symbol."""

    PUBLIC = "Public"
    PROTECTED = "Protected"
    PROTECTED_INTERNAL = "ProtectedInternal"
    INTERNAL = "Internal"
    PRIVATE_PROTECTED = "PrivateProtected"
    PRIVATE = "Private"

    @classmethod
    def parse(cls, value: object) -> "Accessibility":
        """Parse an accessibility name, ignoring case and separators."""
        text = str(value or "public").replace(" ", "").replace("_", "").lower()
        for acc in cls:
            if acc.value.lower() == text:
                return acc
        msg = f"Unknown accessibility: {value!r}"
        raise InvalidSymbolGraphError(msg)


MEMBER_KINDS = frozenset(
    {
        SymbolKind.METHOD,
        SymbolKind.PROPERTY,
        SymbolKind.FIELD,
        SymbolKind.EVENT,
        SymbolKind.CONSTRUCTOR,
    }
)


def is_member_kind(kind: SymbolKind) -> bool:
    """Check if the kind represents a member (method, property, etc.)."""
    return kind in MEMBER_KINDS
