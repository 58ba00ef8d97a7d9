"""Developer checks for symdoc: formatting, lint, tests and a sample render."""

import argparse
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).parent

FIX_STEPS = [
    ("Ruff Formatting", ["ruff", "format", "symdoc", "tests"]),
    ("Ruff Fixes", ["ruff", "check", "--fix", "symdoc", "tests"]),
]

GATE_STEPS = [
    ("Ruff Format Check", ["ruff", "format", "--check", "symdoc", "tests"]),
    ("Ruff Lint", ["ruff", "check", "symdoc", "tests"]),
    ("Tests", ["pytest", "-q"]),
]


def run_step(step_name: str, command: list[str]) -> None:
    """Run one tool through uv, stopping the script on failure."""
    full = ["uv", "run", *command]
    print(f"\n--- {step_name} ---")
    print(f"$ {' '.join(full)}")
    result = subprocess.run(full, cwd=ROOT, check=False)
    if result.returncode != 0:
        print(f"\nFailed: {step_name} (exit {result.returncode})")
        sys.exit(result.returncode)


def run_gate() -> None:
    """Run the checks that must pass before anything is generated."""
    for step_name, command in GATE_STEPS:
        run_step(step_name, command)


def render_sample(graph: Path) -> None:
    """Render a symbol graph without writing files to catch rendering errors."""
    run_step(
        f"Sample Render ({graph.name})",
        [
            "python",
            "-m",
            "symdoc.symdoc_to_markdown",
            str(graph),
            str(ROOT / "docs_out"),
            "--dry-run",
        ],
    )


def main() -> None:
    """Run the developer checks, optionally fixing style and rendering a sample."""
    parser = argparse.ArgumentParser(description="Run symdoc developer checks.")
    parser.add_argument(
        "--ci",
        action="store_true",
        help="Only verify; never rewrite files",
    )
    parser.add_argument(
        "--sample",
        type=Path,
        help="Symbol graph to dry-run render after the checks pass",
    )
    args = parser.parse_args()

    if not args.ci:
        for step_name, command in FIX_STEPS:
            run_step(step_name, command)

    run_gate()

    if args.sample:
        render_sample(args.sample)

    print("\nAll checks passed.")


if __name__ == "__main__":
    main()
