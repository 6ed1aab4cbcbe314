from __future__ import annotations

import os
from collections import Counter

from .diff import compute_diff
from .errors import InvalidFileNameError, MismatchedNamesError
from .models import FileEntry, RenamePlanEntry

FORBIDDEN_NAME_PARTS = ("..", "/", "\\")


def resolve_new_name(entry: FileEntry, desired: str) -> str:
    """
    Turn a user supplied name into the final file name for ``entry``.

    Blank input keeps the original name; otherwise the file's extension is
    appended unless the name already ends with it (case-insensitively).

    Examples:
        >>> entry = FileEntry("old.txt", "/d/old.txt", ".txt")
        >>> resolve_new_name(entry, "  new ")
        'new.txt'
        >>> resolve_new_name(entry, "new.TXT")
        'new.TXT'
        >>> resolve_new_name(entry, "   ")
        'old.txt'
    """
    name = desired.strip()
    if not name:
        return entry.name
    if entry.extension and not name.lower().endswith(entry.extension.lower()):
        name += entry.extension
    return name


def validate_new_name(name: str) -> None:
    if any(part in name for part in FORBIDDEN_NAME_PARTS):
        raise InvalidFileNameError(name)
    if any(ord(ch) < 32 or ord(ch) == 127 for ch in name):
        raise InvalidFileNameError(name)


def mark_conflicts(entries: list[RenamePlanEntry]) -> None:
    """Flag every entry whose new name is shared (case-insensitively) with another one."""
    counts = Counter(entry.new_name.lower() for entry in entries)
    for entry in entries:
        entry.conflict = counts[entry.new_name.lower()] > 1


def build_plan(files: list[FileEntry], desired_names: list[str]) -> list[RenamePlanEntry]:
    """
    Build a conflict-annotated rename plan, one entry per file, in input order.

    Raises MismatchedNamesError when the two lists differ in length and
    InvalidFileNameError when a changed name contains a path component.
    Nothing is returned unless every name is valid.
    """
    if len(files) != len(desired_names):
        raise MismatchedNamesError(len(files), len(desired_names))

    entries: list[RenamePlanEntry] = []
    for entry, desired in zip(files, desired_names):
        new_name = resolve_new_name(entry, desired)
        if new_name != entry.name:
            validate_new_name(new_name)
        directory = os.path.dirname(entry.path)
        entries.append(
            RenamePlanEntry(
                original_name=entry.name,
                new_name=new_name,
                original_path=entry.path,
                new_path=os.path.join(directory, new_name),
            )
        )

    mark_conflicts(entries)

    for plan_entry in entries:
        if plan_entry.new_name != plan_entry.original_name:
            plan_entry.original_diff, plan_entry.new_diff = compute_diff(
                plan_entry.original_name, plan_entry.new_name
            )
    return entries


def reverse_plan(plan: list[RenamePlanEntry]) -> list[RenamePlanEntry]:
    """
    Build the plan that undoes ``plan``.

    Names, paths and diffs are swapped and the order is reversed so that
    chained renames unwind last-first.
    """
    return [
        RenamePlanEntry(
            original_name=entry.new_name,
            new_name=entry.original_name,
            original_path=entry.new_path,
            new_path=entry.original_path,
            conflict=entry.conflict,
            original_diff=list(entry.new_diff),
            new_diff=list(entry.original_diff),
        )
        for entry in reversed(plan)
    ]


def parse_names_text(text: str) -> list[str]:
    """
    Parse a names file: one desired name per line, trimmed, blank lines dropped.

    Example:
        >>> parse_names_text("alpha\\n\\n  beta \\r\\n")
        ['alpha', 'beta']
    """
    names: list[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if stripped:
            names.append(stripped)
    return names
