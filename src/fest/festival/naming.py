"""Naming codec: numeric-prefix filenames for phases, sequences and tasks."""

import re
from enum import Enum

from fest.festival.errors import ValidationError


TASK_SUFFIX = ".md"
_SEPARATORS = "_- "


class ElementKind(Enum):
    PHASE = "phase"
    SEQUENCE = "sequence"
    TASK = "task"

    @property
    def width(self) -> int:
        return 3 if self is ElementKind.PHASE else 2

    @property
    def is_directory(self) -> bool:
        return self is not ElementKind.TASK

    @property
    def pattern(self) -> re.Pattern:
        return _PATTERNS[self]

    @classmethod
    def parse(cls, value) -> "ElementKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"unrecognized element kind: {value!r}") from None


_PATTERNS = {kind: re.compile(rf"^(\d{{{kind.width}}})_(.+)$") for kind in ElementKind}


def format_number(number: int, kind: ElementKind) -> str:
    return f"{number:0{kind.width}d}"


def _strip_numeric_prefix(name: str, width: int) -> str:
    """Drop a leading width-digit number followed by a separator.

    Names that are only digits, or whose remainder is empty, are kept.
    """
    if len(name) <= width or not name[:width].isdigit():
        return name
    if name[width] not in _SEPARATORS:
        return name
    remainder = name[width + 1:].strip().lstrip(_SEPARATORS)
    return remainder or name


def normalize_label(raw_label: str, kind: ElementKind) -> str:
    """Apply the kind's case convention to a user-supplied label."""
    label = raw_label.strip()
    if kind is ElementKind.TASK and label.lower().endswith(TASK_SUFFIX):
        label = label[:-len(TASK_SUFFIX)]
    label = _strip_numeric_prefix(label, kind.width).replace(" ", "_")
    if kind is ElementKind.PHASE:
        return label.upper()
    return label.lower()


def encode(number: int, raw_label: str, kind: ElementKind) -> str:
    """Build the on-disk name for an element, e.g. ``003_REVIEW`` or ``02_setup.md``."""
    name = f"{format_number(number, kind)}_{normalize_label(raw_label, kind)}"
    if kind is ElementKind.TASK:
        name += TASK_SUFFIX
    return name


def decode(full_name: str, kind: ElementKind):
    """Return ``(number, label)`` for a name matching the kind, otherwise None."""
    name = full_name
    if kind is ElementKind.TASK:
        if not name.endswith(TASK_SUFFIX):
            return None
        name = name[:-len(TASK_SUFFIX)]
    match = kind.pattern.match(name)
    if match is None:
        return None
    return int(match.group(1)), match.group(2)


def detect_kind(name: str, is_directory: bool):
    """Infer the element kind from a bare name; None when it has no numeric prefix."""
    if re.match(r"^\d{3}_", name):
        return ElementKind.PHASE
    if re.match(r"^\d{2}_", name):
        if name.endswith(TASK_SUFFIX) and not is_directory:
            return ElementKind.TASK
        return ElementKind.SEQUENCE
    return None
