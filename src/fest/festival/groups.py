"""Parallel groups: tasks sharing one number move as a single unit."""

from dataclasses import dataclass

from fest.festival.naming import ElementKind
from fest.festival.scanner import OrderedElement


@dataclass(frozen=True)
class ElementGroup:
    number: int
    members: tuple[OrderedElement, ...]

    @property
    def is_parallel(self) -> bool:
        return len(self.members) > 1


def group(elements: list[OrderedElement]) -> dict[int, ElementGroup]:
    """Map each number to its group, in ascending number order."""
    members_by_number: dict[int, list[OrderedElement]] = {}
    for element in sorted(elements, key=lambda e: e.number):
        members_by_number.setdefault(element.number, []).append(element)
    return {
        number: ElementGroup(number, tuple(members))
        for number, members in members_by_number.items()
    }


def parallel_groups(elements: list[OrderedElement]) -> dict[int, ElementGroup]:
    return {number: g for number, g in group(elements).items() if g.is_parallel}


def units(elements: list[OrderedElement], kind: ElementKind) -> list[ElementGroup]:
    """Planning units in ascending order.

    Tasks sharing a number form one unit. Phases and sequences never group,
    so a duplicated phase or sequence number yields one unit per element.
    """
    if kind is ElementKind.TASK:
        return list(group(elements).values())
    ordered = sorted(elements, key=lambda e: e.number)
    return [ElementGroup(element.number, (element,)) for element in ordered]
