from __future__ import annotations

import logging

from renamer.domain.models import FileEntry, RenameOutcome, RenamePlanEntry
from renamer.domain.rename_logic import build_plan, reverse_plan
from renamer.ports.filesystem_port import FileSystemPort

logger = logging.getLogger(__name__)


class RenameService:
    def __init__(self, filesystem: FileSystemPort) -> None:
        self._filesystem = filesystem

    def preview(self, files: list[FileEntry], desired_names: list[str]) -> list[RenamePlanEntry]:
        plan = build_plan(files, desired_names)
        logger.debug(
            "Previewed %d entries, %d conflicting",
            len(plan),
            sum(1 for entry in plan if entry.conflict),
        )
        return plan

    def execute(self, plan: list[RenamePlanEntry]) -> RenameOutcome:
        """
        Apply ``plan`` in order, all or nothing.

        Conflicting and no-op entries are skipped. The first failed rename
        stops the batch and every rename already done is reverted in reverse
        order; failures while reverting are collected, not raised.
        """
        completed: list[RenamePlanEntry] = []
        for entry in plan:
            if entry.conflict or entry.is_noop:
                continue
            try:
                self._filesystem.rename(entry.original_path, entry.new_path)
            except (OSError, ValueError) as exc:
                error = f"failed to rename {entry.original_name!r}: {exc}"
                logger.error("%s; rolling back %d renames", error, len(completed))
                rollback_errors = self._rollback(completed)
                return RenameOutcome(
                    success=False,
                    renamed_count=0,
                    message=_failure_message(len(completed), rollback_errors),
                    errors=[error],
                    rolled_back=True,
                    rollback_errors=rollback_errors,
                )
            completed.append(entry)

        logger.info("Renamed %d files", len(completed))
        return RenameOutcome(
            success=True,
            renamed_count=len(completed),
            message=f"Successfully renamed {len(completed)} files",
        )

    def undo(self, plan: list[RenamePlanEntry]) -> RenameOutcome:
        """Revert a plan previously applied with ``execute``."""
        return self.execute(reverse_plan(plan))

    def _rollback(self, completed: list[RenamePlanEntry]) -> list[str]:
        errors: list[str] = []
        for entry in reversed(completed):
            try:
                self._filesystem.rename(entry.new_path, entry.original_path)
            except (OSError, ValueError) as exc:
                message = f"failed to restore {entry.new_name!r} to {entry.original_name!r}: {exc}"
                logger.error(message)
                errors.append(message)
        return errors


def _failure_message(completed: int, rollback_errors: list[str]) -> str:
    if rollback_errors:
        return (
            f"Rename failed; {len(rollback_errors)} of {completed} completed renames "
            "could not be restored, inspect the directory manually"
        )
    return f"Rename failed; rolled back {completed} completed renames"
