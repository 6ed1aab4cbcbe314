from __future__ import annotations

import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env", override=False)

from renamer.container import build_services
from renamer.domain.errors import RenamerError
from renamer.domain.models import DiffKind, DiffSegment, RenamePlanEntry
from renamer.settings import DEFAULT_TEMPLATE, LOG_LEVEL


def _render_segments(segments: list[DiffSegment]) -> str:
    parts = []
    for segment in segments:
        if segment.kind is DiffKind.DELETE:
            parts.append(f"[-{segment.text}-]")
        elif segment.kind is DiffKind.INSERT:
            parts.append(f"{{+{segment.text}+}}")
        else:
            parts.append(segment.text)
    return "".join(parts)


def _print_plan(plan: list[RenamePlanEntry]) -> None:
    for entry in plan:
        if entry.new_name == entry.original_name:
            print(f"  {entry.original_name} (unchanged)")
            continue
        tag = "  CONFLICT" if entry.conflict else ""
        old = _render_segments(entry.original_diff)
        new = _render_segments(entry.new_diff)
        print(f"  {old} -> {new}{tag}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Preview and apply a batch rename inside one directory."
    )
    parser.add_argument("directory", help="Directory whose files are renamed.")
    parser.add_argument("--pattern", default="", help="Regex or shortcut filter on stems.")
    naming = parser.add_mutually_exclusive_group()
    naming.add_argument("--template", help=f"Name template (default: {DEFAULT_TEMPLATE}).")
    naming.add_argument("--find", help="Regex applied to every stem.")
    naming.add_argument("--names-file", help="Text file with one new name per line.")
    naming.add_argument("--name", action="append", help="New name; repeat once per file.")
    parser.add_argument("--replace", default="", help="Replacement used with --find.")
    parser.add_argument("--apply", action="store_true", help="Execute the rename plan.")
    return parser


def main() -> int:
    args = _build_parser().parse_args()
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    services = build_services()
    scanner = services["scanner_service"]
    pattern_service = services["pattern_service"]
    naming = services["naming_service"]
    renamer = services["rename_service"]

    try:
        files = pattern_service.filter_files(scanner.scan(args.directory), args.pattern)
        if not files:
            print("No matching files.")
            return 0

        if args.find is not None:
            names = naming.find_replace(files, args.find, args.replace)
        elif args.names_file:
            names = naming.load_names_file(args.names_file)
        elif args.name:
            names = args.name
        else:
            names = naming.expand_template(files, args.template or DEFAULT_TEMPLATE)

        plan = renamer.preview(files, names)
    except RenamerError as exc:
        print(f"Error: {exc}")
        return 1

    print(f"Rename plan for {args.directory} ({len(plan)} files):")
    _print_plan(plan)
    conflicts = sum(1 for entry in plan if entry.conflict)
    if conflicts:
        print(f"{conflicts} conflicting entries will be skipped.")

    if not args.apply:
        print("Dry run only. Pass --apply to rename.")
        return 0

    outcome = renamer.execute(plan)
    print(outcome.message)
    for error in outcome.errors + outcome.rollback_errors:
        print(f"  - {error}")
    return 0 if outcome.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
