"""Errors raised while rendering a symbol graph."""


class SymdocError(Exception):
    """Base class for rendering failures."""


class SymbolNotFoundError(SymdocError, KeyError):
    """A symbol id was looked up that is not in the index."""

    def __init__(self, symbol_id: str) -> None:
        """Record the missing id."""
        super().__init__(symbol_id)
        self.symbol_id = symbol_id

    def __str__(self) -> str:
        """Describe the missing id without KeyError's repr quoting."""
        return f"Unknown symbol id: {self.symbol_id}"


class MissingReferenceTargetError(SymbolNotFoundError):
    """A documentation cross-reference points at a symbol that does not exist."""

    def __init__(self, symbol_id: str, referrer: str | None = None) -> None:
        """Record the missing target and the symbol whose docs refer to it."""
        super().__init__(symbol_id)
        self.referrer = referrer

    def __str__(self) -> str:
        """Describe the broken reference."""
        where = f" (referenced from {self.referrer})" if self.referrer else ""
        return f"Missing reference target: {self.symbol_id}{where}"


class MalformedMarkupError(SymdocError, ValueError):
    """Documentation markup is not well-formed XML."""


class ConfigurationInconsistencyError(SymdocError, ValueError):
    """The render configuration cannot produce valid output for this graph."""


class InvalidSymbolGraphError(SymdocError, ValueError):
    """A symbol graph entry carries a value outside the known vocabulary."""
