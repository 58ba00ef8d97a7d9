"""Orchestration logic for converting a symbol graph to Markdown."""

import argparse
import dataclasses
from pathlib import Path
from typing import Any

from symdoc.build_navigation_manifest import (
    build_navigation_manifest,
    dump_navigation_manifest,
)
from symdoc.errors import SymdocError
from symdoc.load_config import load_config
from symdoc.load_symbol_graph import load_symbol_graph
from symdoc.render_config import RenderConfiguration, render_config_from_mapping
from symdoc.render_documents import render_documents
from symdoc.render_table_of_contents import render_table_of_contents
from symdoc.symbol_index import SymbolIndex
from symdoc.write_documents import output_file_for_document, write_documents


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the full conversion pipeline."""
    graph_file: Path = args.graph_file
    if not graph_file.exists():
        msg = f"Symbol graph not found: {graph_file}"
        raise SystemExit(msg)

    config = load_config(args.config)
    try:
        render_config = _render_config(config, args)
        symbols = load_symbol_graph(graph_file)
    except SymdocError as e:
        msg = f"Invalid input: {e}"
        raise SystemExit(msg) from e
    if not symbols:
        msg = f"No symbols found in: {graph_file}"
        raise SystemExit(msg)

    index = SymbolIndex(symbols)
    try:
        documents = render_documents(
            index, render_config, max_workers=int(config.get("max_workers") or 1)
        )
        summary = render_table_of_contents(index, render_config)
    except SymdocError as e:
        msg = f"Rendering failed: {e}"
        raise SystemExit(msg) from e

    navigation = config.get("navigation") or {}
    manifest = build_navigation_manifest(
        documents,
        group=render_config.navigation_group,
        extra_sections=navigation.get("extra_sections") or [],
    )

    if args.dry_run:
        print(f"Dry run: would write {len(documents)} documents")
        return 0

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)
    written = write_documents(documents, out_root)

    output = config.get("output") or {}
    summary_file = output.get("summary_file") or "SUMMARY.md"
    manifest_file = output.get("manifest_file") or "index.json"
    output_file_for_document(out_root, summary_file).write_text(
        summary, encoding="utf-8"
    )
    output_file_for_document(out_root, manifest_file).write_text(
        dump_navigation_manifest(manifest), encoding="utf-8"
    )

    print(f"Generated {written} Markdown documents into: {out_root}")
    return 0


def _render_config(
    config: dict[str, Any], args: argparse.Namespace
) -> RenderConfiguration:
    """Build the render configuration, letting command line flags win."""
    render_config = render_config_from_mapping(config.get("render") or {})
    overrides: dict[str, Any] = {}
    if args.path_prefix is not None:
        overrides["path_prefix"] = args.path_prefix.rstrip("/")
    if args.slug_prefix is not None:
        overrides["slug_prefix"] = args.slug_prefix.rstrip("/")
    if args.front_matter:
        overrides["output_front_matter"] = True
    if args.inline_members:
        overrides["output_member_files"] = False
    if args.strip_extension:
        overrides["strip_extension_from_links"] = True
    return dataclasses.replace(render_config, **overrides)
