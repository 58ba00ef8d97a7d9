"""Convert a documented-symbol graph to cross-linked Markdown.

Reads the YAML symbol graph produced by the extractor and writes one Markdown
document per namespace, type and (optionally) member, plus a ``SUMMARY.md``
outline and an ``index.json`` navigation manifest.
"""

import argparse
import logging
from pathlib import Path

from symdoc.run_conversion import run_conversion


def main() -> int:
    """Run the conversion process."""
    ap = argparse.ArgumentParser(
        description="Convert a documented-symbol graph to cross-linked Markdown.",
    )
    ap.add_argument(
        "graph_file",
        type=Path,
        help="YAML file containing the extracted symbol graph",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for the generated documents",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--path-prefix",
        default=None,
        help="Base path for links between documents (default: from config)",
    )
    ap.add_argument(
        "--slug-prefix",
        default=None,
        help="Routing prefix for front matter slugs (default: from config)",
    )
    ap.add_argument(
        "--front-matter",
        action="store_true",
        help="Emit a title/slug metadata header instead of a plain heading",
    )
    ap.add_argument(
        "--inline-members",
        action="store_true",
        help="Inline member details on their parent page instead of member files",
    )
    ap.add_argument(
        "--strip-extension",
        action="store_true",
        help="Leave the .md extension off document links",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Render everything but write no files",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log rendering details",
    )
    args = ap.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    return run_conversion(args)


if __name__ == "__main__":
    raise SystemExit(main())
