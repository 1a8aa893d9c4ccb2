"""Renumberer: scan, plan, sequence and execute one structural edit per call."""

import logging

import click

from fest.festival.changes import ChangeType
from fest.festival.errors import ValidationError
from fest.festival.executor import ExecutionResult, Executor, check_cancelled
from fest.festival.options import RenumberOptions
from fest.festival.planner import plan_insert, plan_remove, plan_renumber, plan_reorder
from fest.festival.sequencer import find_collisions, sequence, snapshot


logger = logging.getLogger(__name__)


class Renumberer:
    """Entry point for renumber, insert, remove and reorder edits.

    Every call re-scans the directory; nothing is cached between calls.
    """

    def __init__(self, options: RenumberOptions | None = None, confirm=None, echo=None,
                 cancel_event=None):
        self.options = options or RenumberOptions()
        self._echo = echo or click.echo
        self._cancel_event = cancel_event
        self._executor = Executor(self.options, confirm=confirm, echo=self._echo,
                                  cancel_event=cancel_event)

    def renumber(self, directory: str, kind, start_from: int = 1) -> ExecutionResult:
        check_cancelled(self._cancel_event)
        return self._run(plan_renumber(directory, kind, start_from))

    def insert(self, directory: str, kind, after: int, label: str) -> ExecutionResult:
        check_cancelled(self._cancel_event)
        return self._run(plan_insert(directory, kind, after, label))

    def remove(self, path: str) -> ExecutionResult:
        check_cancelled(self._cancel_event)
        return self._run(plan_remove(path))

    def reorder(self, directory: str, kind, from_number: int, to_number: int) -> ExecutionResult:
        check_cancelled(self._cancel_event)
        return self._run(plan_reorder(directory, kind, from_number, to_number))

    def _run(self, plan) -> ExecutionResult:
        if plan.parallel_numbers and not self.options.quiet:
            numbers = ", ".join(str(n) for n in plan.parallel_numbers)
            self._echo(f"Parallel {plan.kind.value}s detected at {numbers}; each group keeps one number.")
        plan = sequence(plan)
        if not plan.is_empty:
            collisions = find_collisions(plan.changes, snapshot(plan.directory))
            if collisions:
                details = "; ".join(str(c) for c in collisions)
                raise ValidationError(f"refusing a plan that would collide: {details}")
        check_cancelled(self._cancel_event)
        logger.info("%s %s in %s: %d rename(s), %d create(s), %d remove(s)",
                    plan.operation.value, plan.kind.value, plan.directory,
                    plan.count(ChangeType.RENAME), plan.count(ChangeType.CREATE),
                    plan.count(ChangeType.REMOVE))
        return self._executor.execute(plan)
