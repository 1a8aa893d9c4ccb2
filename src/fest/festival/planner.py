"""Change planner: computes the renames, creates and removes for one edit.

Plans are computed from a fresh scan of the directory and describe the
final numbering only. Ordering the changes so that no rename lands on an
occupied name is the sequencer's job (see ``fest.festival.sequencer``).
Parallel task groups are the planning unit for tasks: every member of a
group is renumbered, moved or removed together. Phases and sequences are
always planned one element at a time.
"""

import logging
import os

from fest.festival.changes import Change, ChangePlan, Operation
from fest.festival.errors import NotFoundError, ValidationError
from fest.festival.groups import parallel_groups, units
from fest.festival.naming import ElementKind, detect_kind, encode, normalize_label
from fest.festival.scanner import OrderedElement, scan


logger = logging.getLogger(__name__)


def _max_number(kind: ElementKind) -> int:
    return 10 ** kind.width - 1


def _check_number(number: int, kind: ElementKind) -> None:
    if number < 1 or number > _max_number(kind):
        raise ValidationError(
            f"{kind.value} number {number} does not fit in {kind.width} digits"
        )


def _renumbered(element: OrderedElement, new_number: int) -> Change:
    _check_number(new_number, element.kind)
    new_name = encode(new_number, element.label, element.kind)
    return Change.rename(element, os.path.join(element.directory, new_name), new_number)


def _new_plan(operation, kind, directory, elements, changes, staged=()) -> ChangePlan:
    return ChangePlan(
        operation=operation,
        kind=kind,
        directory=directory,
        changes=changes,
        staged_paths=frozenset(staged),
        parallel_numbers=tuple(parallel_groups(elements)) if kind is ElementKind.TASK else (),
    )


def plan_renumber(directory: str, kind, start_from: int = 1) -> ChangePlan:
    """Compact numbers to a contiguous run beginning at ``start_from``."""
    kind = ElementKind.parse(kind)
    directory = os.path.normpath(directory)
    if start_from < 1:
        raise ValidationError(f"start number must be at least 1, got {start_from}")
    elements = scan(directory, kind)
    if not elements:
        raise NotFoundError(f"no {kind.value} elements found in {directory}")

    changes = []
    for new_number, unit in enumerate(units(elements, kind), start=start_from):
        if unit.number == new_number:
            continue
        changes.extend(_renumbered(member, new_number) for member in unit.members)

    logger.debug("renumber %s from %d: %d change(s)", directory, start_from, len(changes))
    return _new_plan(Operation.RENUMBER, kind, directory, elements, changes)


def plan_insert(directory: str, kind, after: int, label: str) -> ChangePlan:
    """Create a new element at ``after + 1`` and shift later elements up by one."""
    kind = ElementKind.parse(kind)
    directory = os.path.normpath(directory)
    if after < 0:
        raise ValidationError(f"insert position must be 0 or greater, got {after}")
    if not label or not normalize_label(label, kind):
        raise ValidationError("a name is required for the new element")
    elements = scan(directory, kind)

    insert_at = after + 1
    _check_number(insert_at, kind)
    new_path = os.path.join(directory, encode(insert_at, label, kind))
    changes = [Change.create(new_path, insert_at)]
    changes.extend(
        _renumbered(element, element.number + 1)
        for element in elements
        if element.number >= insert_at
    )

    logger.debug("insert %s at %d in %s", os.path.basename(new_path), insert_at, directory)
    return _new_plan(Operation.INSERT, kind, directory, elements, changes)


def plan_remove(path: str) -> ChangePlan:
    """Remove the element at ``path`` and close the gap it leaves.

    Removing one member of a parallel task group removes the whole group.
    A phase or sequence sharing its number with another is removed alone.
    """
    path = os.path.abspath(path)
    directory, name = os.path.split(path)
    kind = detect_kind(name, os.path.isdir(path))
    if kind is None:
        raise ValidationError(f"unable to determine element type for {path}")
    elements = scan(directory, kind)

    target = next((e for e in elements if e.path == path), None)
    if target is None:
        raise NotFoundError(f"element not found: {path}")

    removed = next(u for u in units(elements, kind) if target in u.members)
    changes = [Change.remove(member) for member in removed.members]
    changes.extend(
        _renumbered(element, element.number - 1)
        for element in elements
        if element.number > target.number
    )

    logger.debug("remove %s (%d member(s)) from %s", name, len(removed.members), directory)
    return _new_plan(Operation.REMOVE, kind, directory, elements, changes)


def plan_reorder(directory: str, kind, from_number: int, to_number: int) -> ChangePlan:
    """Move the element (or task group) at ``from_number`` to ``to_number``.

    When phases or sequences share ``from_number`` only the first in name
    order moves.

    Elements between the two positions shift one step toward the vacated
    slot. The moved elements are listed in ``staged_paths`` so that the
    sequencer routes them through a temporary name.
    """
    kind = ElementKind.parse(kind)
    directory = os.path.normpath(directory)
    if from_number == to_number:
        return ChangePlan(Operation.REORDER, kind, directory)

    elements = scan(directory, kind)
    if not elements:
        raise NotFoundError(f"no {kind.value} elements found in {directory}")
    planned = units(elements, kind)
    source = next((u for u in planned if u.number == from_number), None)
    if source is None:
        raise NotFoundError(f"{kind.value} at position {from_number} not found")
    lowest, highest = planned[0].number, planned[-1].number
    if not lowest <= to_number <= highest:
        raise NotFoundError(
            f"destination position {to_number} is out of range [{lowest}, {highest}]"
        )

    moving = source.members
    changes = [_renumbered(member, to_number) for member in moving]
    if from_number < to_number:
        shifting, step = [u for u in planned if from_number < u.number <= to_number], -1
    else:
        shifting, step = [u for u in planned if to_number <= u.number < from_number], 1
    for unit in shifting:
        changes.extend(_renumbered(member, unit.number + step) for member in unit.members)

    logger.debug("reorder %s %d -> %d in %s", kind.value, from_number, to_number, directory)
    return _new_plan(
        Operation.REORDER, kind, directory, elements, changes,
        staged=(member.path for member in moving),
    )
