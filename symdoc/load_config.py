"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from symdoc.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "render": {
        "path_prefix": "",
        "slug_prefix": "",
        "output_front_matter": False,
        "output_member_files": True,
        "strip_extension_from_links": False,
        "summary_indent_level": 0,
        "code_language": "csharp",
        "product_name": None,
        "external_namespaces": ["Microsoft", "System"],
        "hidden_base_type_prefixes": ["System."],
        "navigation_group": "API Documentation",
    },
    "navigation": {
        "extra_sections": [],
    },
    "output": {
        "summary_file": "SUMMARY.md",
        "manifest_file": "index.json",
    },
    "max_workers": 1,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
            logger.info("Loaded configuration from %s", p)
        else:
            logger.warning("Configuration file %s not found, using defaults", p)
    return config
