"""Executor: previews, confirms, backs up and applies a sequenced change plan.

Applying is not transactional. The first failing change stops the run and
raises ApplyError listing what was already applied; nothing is rolled
back, which is what the optional backup is for.
"""

import errno
import logging
import os
import shutil
from dataclasses import dataclass, field
from enum import Enum

import click

from fest.festival.backup import create_backup
from fest.festival.changes import Change, ChangePlan, ChangeType
from fest.festival.errors import ApplyError, CancelledError
from fest.festival.options import RenumberOptions
from fest.festival.report import render_report


logger = logging.getLogger(__name__)

_PAST_TENSE = {
    ChangeType.RENAME: "Renamed",
    ChangeType.CREATE: "Created",
    ChangeType.REMOVE: "Removed",
}


class ExecutionStatus(Enum):
    NO_CHANGES = "no_changes"
    DECLINED = "declined"
    APPLIED = "applied"


@dataclass
class ExecutionResult:
    status: ExecutionStatus
    plan: ChangePlan
    applied: list[Change] = field(default_factory=list)
    backup_path: str | None = None

    @property
    def applied_count(self) -> int:
        return len(self.applied)


def check_cancelled(cancel_event, applied=()) -> None:
    if cancel_event is not None and cancel_event.is_set():
        done = len(applied)
        suffix = f" after {done} applied change(s)" if done else ""
        raise CancelledError(f"operation cancelled{suffix}")


def _confirm(prompt: str) -> bool:
    return click.confirm(prompt, default=False)


def apply_change(change: Change, plan: ChangePlan) -> None:
    """Apply a single change to the filesystem, raising OSError on failure."""
    if change.type is ChangeType.RENAME:
        if os.path.lexists(change.new_path):
            raise FileExistsError(errno.EEXIST, "destination already exists", change.new_path)
        os.rename(change.old_path, change.new_path)
    elif change.type is ChangeType.CREATE:
        if plan.kind.is_directory:
            os.makedirs(change.new_path)
        else:
            os.makedirs(os.path.dirname(change.new_path) or ".", exist_ok=True)
            with open(change.new_path, "x", encoding="utf-8"):
                pass
    elif os.path.isdir(change.old_path) and not os.path.islink(change.old_path):
        shutil.rmtree(change.old_path)
    else:
        os.remove(change.old_path)


class Executor:
    """Runs one sequenced plan through preview, confirmation, backup and apply."""

    def __init__(self, options: RenumberOptions | None = None, confirm=None, echo=None,
                 cancel_event=None):
        self.options = options or RenumberOptions()
        self._confirm = confirm or _confirm
        self._echo = echo or click.echo
        self._cancel_event = cancel_event

    def _say(self, message: str) -> None:
        if not self.options.quiet:
            self._echo(message)

    def execute(self, plan: ChangePlan) -> ExecutionResult:
        if plan.is_empty:
            self._say("No changes needed.")
            return ExecutionResult(ExecutionStatus.NO_CHANGES, plan)

        self._say("\n" + render_report(plan))
        if not self._approved():
            self._say("Operation cancelled.")
            return ExecutionResult(ExecutionStatus.DECLINED, plan)

        check_cancelled(self._cancel_event)
        backup_path = None
        if self.options.backup:
            self._say("Creating backup...")
            backup_path = create_backup(
                plan.directory, self.options.backup_dir,
                reason=f"before {plan.operation.value}", changes=plan.changes,
            )
            self._say(f"Backup written to {backup_path}")
        elif not self.options.dry_run:
            self._say("Warning: no backup requested; a failed run is not rolled back.")

        applied = self._apply(plan)
        self._say(f"\n✓ Successfully applied {len(applied)} changes.")
        return ExecutionResult(ExecutionStatus.APPLIED, plan, applied, backup_path)

    def _approved(self) -> bool:
        if self.options.dry_run:
            self._say("\nDRY RUN - Preview complete.")
            if not self.options.auto_approve and not self._confirm("Apply these changes?"):
                return False
            self._say("\nApplying changes...")
            return True
        if self.options.auto_approve:
            return True
        return self._confirm("Proceed with renumbering?")

    def _apply(self, plan: ChangePlan) -> list[Change]:
        applied = []
        for change in plan.changes:
            check_cancelled(self._cancel_event, applied)
            try:
                apply_change(change, plan)
            except OSError as e:
                path = change.old_path or change.new_path
                logger.error("%s failed for %s after %d change(s): %s",
                             change.type, path, len(applied), e)
                raise ApplyError(
                    f"failed to {change.type.value.lower()} {path}: {e}", change, applied
                ) from e
            applied.append(change)
            logger.debug("%s %s", _PAST_TENSE[change.type], change.describe())
            if self.options.verbose:
                self._say(f"{_PAST_TENSE[change.type]}: {change.describe()}")
        return applied
