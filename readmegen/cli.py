"""CLI entrypoint for readmegen."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .logging import configure_logging
from .orchestrator import README_FILENAME, Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description="Generate a README.md from a project's manifests and layout.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help=f"Overwrite an existing {README_FILENAME} without asking.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated README instead of writing it.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for readmegen."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    orchestrator = Orchestrator()

    try:
        result = orchestrator.generate(args.path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"Error: {exc}\n")
    except Exception as exc:  # pragma: no cover
        parser.exit(1, f"readmegen failed: {exc}\nRun with --verbose for more details.\n")

    if args.dry_run:
        sys.stdout.write(result.content)
        return

    if result.readme_path.exists() and not args.force:
        if not _confirm_overwrite(result.readme_path):
            print(f"{README_FILENAME} left unchanged")
            return

    try:
        readme_path = orchestrator.write(result, overwrite=True)
    except OSError as exc:
        parser.exit(1, f"Failed to write {README_FILENAME}: {exc}\n")

    print(f"{README_FILENAME} generated at {_relativize(readme_path)}")


def _confirm_overwrite(readme_path: Path) -> bool:
    try:
        answer = input(f"{readme_path.name} already exists. Overwrite? (y/n) ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
