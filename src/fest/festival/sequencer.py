"""Execution sequencer: orders planned changes so no rename hits an occupied name.

Shifts are ordered by direction of travel. Renames that lower a number
run lowest-first, renames that raise a number run highest-first, so each
destination is vacated before it is written. Removes run before any
rename and creates run after all of them.

A move cannot be ordered that way because its destination may be held by
an element that has to shift into the vacated source slot. Moves are
therefore staged: the moving elements are renamed to temporary names,
the shifts run, and the temporaries are renamed to their final names.
"""

import os
import uuid
from dataclasses import dataclass, replace

from fest.festival.changes import Change, ChangePlan, ChangeType


TEMP_PREFIX = "_tmp_reorder_"


@dataclass(frozen=True)
class Collision:
    index: int
    change: Change
    reason: str

    def __str__(self) -> str:
        return f"step {self.index + 1} ({self.change.type}: {self.change.describe()}): {self.reason}"


def order_shifts(renames: list[Change]) -> list[Change]:
    down = sorted((c for c in renames if c.shift <= 0), key=lambda c: c.element.number)
    up = sorted((c for c in renames if c.shift > 0), key=lambda c: c.element.number, reverse=True)
    return down + up


def temporary_path(change: Change, token: str) -> str:
    directory = os.path.dirname(change.old_path)
    return os.path.join(directory, f"{TEMP_PREFIX}{token}_{change.element.full_name}")


def _stage_moves(plan: ChangePlan) -> list[Change]:
    token = uuid.uuid4().hex[:8]
    to_temp, from_temp, shifts = [], [], []
    for change in plan.changes:
        if change.old_path in plan.staged_paths:
            tmp_path = temporary_path(change, token)
            to_temp.append(change.redirect(new_path=tmp_path))
            from_temp.append(change.redirect(old_path=tmp_path))
        else:
            shifts.append(change)
    return to_temp + order_shifts(shifts) + from_temp


def _order_by_travel(changes: list[Change]) -> list[Change]:
    removes = [c for c in changes if c.type is ChangeType.REMOVE]
    renames = [c for c in changes if c.type is ChangeType.RENAME]
    creates = [c for c in changes if c.type is ChangeType.CREATE]
    return removes + order_shifts(renames) + creates


def sequence(plan: ChangePlan) -> ChangePlan:
    """Return a copy of ``plan`` whose changes are safe to apply in order."""
    if plan.sequenced:
        return plan
    if plan.staged_paths:
        ordered = _stage_moves(plan)
    else:
        ordered = _order_by_travel(plan.changes)
    return replace(plan, changes=ordered, sequenced=True)


def snapshot(directory: str) -> set[str]:
    """Paths currently present in ``directory``."""
    return {os.path.join(directory, name) for name in os.listdir(directory)}


def find_collisions(changes: list[Change], occupied: set[str]) -> list[Collision]:
    """Simulate applying ``changes`` in order against the ``occupied`` paths."""
    present = set(occupied)
    collisions = []
    for index, change in enumerate(changes):
        if change.type in (ChangeType.RENAME, ChangeType.REMOVE):
            if change.old_path not in present:
                collisions.append(Collision(index, change, f"{change.old_name} does not exist"))
            present.discard(change.old_path)
        if change.type in (ChangeType.RENAME, ChangeType.CREATE):
            if change.new_path in present:
                collisions.append(Collision(index, change, f"{change.new_name} already exists"))
            present.add(change.new_path)
    return collisions
