from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Sequence

from .document import read
from .errors import FramingError

_DIAGNOSTIC_LIMIT = 10


def _package_version() -> str:
    try:
        return version("ezschdoc")
    except PackageNotFoundError:
        return "0.0.0"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ezschdoc", description="Inspect schematic documents.")
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_package_version()}",
    )
    subparsers = parser.add_subparsers(dest="command")

    inspect_parser = subparsers.add_parser("inspect", help="Show record and object counts.")
    inspect_parser.add_argument("path", help="Path to schematic document.")
    inspect_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show every diagnostic and enable debug logging.",
    )
    return parser


def _run_inspect(path: str, *, verbose: bool = False) -> int:
    file_path = Path(path)
    if not file_path.exists():
        print(f"error: file not found: {file_path}", file=sys.stderr)
        return 2

    try:
        doc = read(str(file_path))
    except FramingError as exc:
        print(f"error: corrupt record stream: {exc}", file=sys.stderr)
        return 2
    except (OSError, ValueError) as exc:
        print(f"error: failed to read document: {exc}", file=sys.stderr)
        return 2

    counts: Counter[str] = Counter()
    unknown_kinds: Counter[int] = Counter()
    for obj in doc.objects:
        if obj.is_unknown_type:
            unknown_kinds[obj.kind] += 1
            continue
        counts[obj.NAME] += 1

    print(f"file: {file_path}")
    print(f"records: {len(doc.records)}")
    if doc.sheet is not None:
        print(f"sheet: {doc.sheet.width}x{doc.sheet.height}")
    for name, count in sorted(counts.items()):
        print(f"{name}: {count}")
    for kind, count in sorted(unknown_kinds.items()):
        print(f"unknown[{kind}]: {count}")

    print(f"diagnostics: {len(doc.diagnostics)}")
    shown = doc.diagnostics if verbose else doc.diagnostics[:_DIAGNOSTIC_LIMIT]
    for item in shown:
        print(f"  {item}")
    hidden = len(doc.diagnostics) - len(shown)
    if hidden > 0:
        print(f"  ... {hidden} more (use --verbose)")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "inspect":
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
        return _run_inspect(args.path, verbose=bool(args.verbose))

    parser.print_help()
    return 0
