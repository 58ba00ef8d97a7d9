"""Main orchestration script for generating Markdown documentation."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full documentation generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate Markdown documentation from an extracted symbol graph."
    )
    parser.add_argument(
        "--graph",
        default="api/symbols.yml",
        help="Symbol graph produced by the extractor (default: api/symbols.yml)",
    )
    parser.add_argument(
        "--out",
        default="docs_out",
        help="Output directory (default: docs_out)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before generating documentation",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Render documents without writing files",
    )
    parser.add_argument(
        "--inline-members",
        action="store_true",
        help="Inline member details on their parent page",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Generating documentation.\n")

    print("--- Converting symbol graph to Markdown ---")
    cmd = [
        sys.executable,
        "-m",
        "symdoc.symdoc_to_markdown",
        str(root_dir / args.graph),
        str(root_dir / args.out),
        "--front-matter",
        "--path-prefix",
        "/api",
        "--slug-prefix",
        "/api",
    ]

    if args.dry_run:
        cmd.append("--dry-run")
    if args.inline_members:
        cmd.append("--inline-members")
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd, cwd=root_dir)

    print(f"\nSUCCESS: Documentation generated in {root_dir / args.out}")


if __name__ == "__main__":
    main()
