"""Immutable options consumed throughout rendering."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from symdoc.errors import ConfigurationInconsistencyError

DEFAULT_EXTERNAL_NAMESPACES = ("System", "Microsoft")
DEFAULT_HIDDEN_BASE_TYPE_PREFIXES = ("System.",)


@dataclass(frozen=True)
class RenderConfiguration:
    """Options controlling links, headers and document layout."""

    path_prefix: str = ""
    slug_prefix: str = ""
    output_front_matter: bool = False
    output_member_files: bool = True
    strip_extension_from_links: bool = False
    summary_indent_level: int = 0
    code_language: str = "csharp"
    product_name: str | None = None
    external_namespaces: tuple[str, ...] = DEFAULT_EXTERNAL_NAMESPACES
    hidden_base_type_prefixes: tuple[str, ...] = DEFAULT_HIDDEN_BASE_TYPE_PREFIXES
    navigation_group: str = "API Documentation"

    def __post_init__(self) -> None:
        """Reject options that cannot produce valid output."""
        if self.summary_indent_level < 0:
            msg = f"summary_indent_level must be >= 0, got {self.summary_indent_level}"
            raise ConfigurationInconsistencyError(msg)

    @property
    def link_extension(self) -> str:
        """Extension appended to document links."""
        return "" if self.strip_extension_from_links else ".md"


def _names(
    options: Mapping[str, Any], key: str, default: tuple[str, ...]
) -> tuple[str, ...]:
    """Read a list option; an absent or null key keeps the default."""
    value = options.get(key)
    if value is None:
        return default
    return tuple(str(v) for v in value)


def render_config_from_mapping(options: Mapping[str, Any]) -> RenderConfiguration:
    """Build a RenderConfiguration from the ``render`` section of a config file."""
    return RenderConfiguration(
        path_prefix=str(options.get("path_prefix") or "").rstrip("/"),
        slug_prefix=str(options.get("slug_prefix") or "").rstrip("/"),
        output_front_matter=bool(options.get("output_front_matter", False)),
        output_member_files=bool(options.get("output_member_files", True)),
        strip_extension_from_links=bool(
            options.get("strip_extension_from_links", False)
        ),
        summary_indent_level=int(options.get("summary_indent_level") or 0),
        code_language=str(options.get("code_language") or "csharp"),
        product_name=options.get("product_name") or None,
        external_namespaces=_names(
            options, "external_namespaces", DEFAULT_EXTERNAL_NAMESPACES
        ),
        hidden_base_type_prefixes=_names(
            options, "hidden_base_type_prefixes", DEFAULT_HIDDEN_BASE_TYPE_PREFIXES
        ),
        navigation_group=str(options.get("navigation_group") or "API Documentation"),
    )
