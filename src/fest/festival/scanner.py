"""Directory scanner: reads numbered elements of one kind from a directory."""

import logging
import os
from dataclasses import dataclass

from fest.festival.errors import FestIOError, NotFoundError
from fest.festival.naming import ElementKind, decode


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderedElement:
    kind: ElementKind
    number: int
    label: str
    path: str
    full_name: str

    @property
    def directory(self) -> str:
        return os.path.dirname(self.path)


def scan(directory: str, kind: ElementKind) -> list[OrderedElement]:
    """Return the directory's elements of ``kind`` sorted by number.

    Entries that do not match the kind's naming pattern or entry type are
    skipped. Elements sharing a number keep their listing (name) order.
    """
    kind = ElementKind.parse(kind)
    if not os.path.isdir(directory):
        raise NotFoundError(f"directory not found: {directory}")
    try:
        names = sorted(os.listdir(directory))
    except OSError as e:
        raise FestIOError(f"cannot read {directory}: {e}") from e

    elements = []
    for name in names:
        path = os.path.join(directory, name)
        if os.path.isdir(path) != kind.is_directory:
            continue
        decoded = decode(name, kind)
        if decoded is None:
            continue
        number, label = decoded
        elements.append(OrderedElement(kind, number, label, path, name))

    elements.sort(key=lambda e: e.number)
    logger.debug("scanned %d %s element(s) in %s", len(elements), kind.value, directory)
    return elements


def find_element(directory: str, number: int, kind: ElementKind) -> OrderedElement:
    """Return the first element carrying ``number``."""
    kind = ElementKind.parse(kind)
    for element in scan(directory, kind):
        if element.number == number:
            return element
    raise NotFoundError(f"{kind.value} {number} not found in {directory}")
