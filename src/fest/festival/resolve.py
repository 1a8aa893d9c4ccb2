"""Resolve phase and sequence references given on the command line.

A reference may be an absolute path, a numeric shortcut (``1``, ``01``,
``001``), a path relative to the parent directory, or, for phases, a
label such as ``PLANNING`` matching ``001_PLANNING``.
"""

import os

from fest.festival.errors import FestIOError, NotFoundError, ValidationError
from fest.festival.naming import ElementKind, format_number


def is_numeric_shortcut(value: str, max_digits: int) -> bool:
    return 0 < len(value) <= max_digits and value.isdigit()


def _list_dirs(parent_dir: str, kind: ElementKind) -> list[str]:
    try:
        names = sorted(os.listdir(parent_dir))
    except OSError as e:
        raise FestIOError(f"cannot read {parent_dir}: {e}") from e
    return [
        name for name in names
        if os.path.isdir(os.path.join(parent_dir, name)) and kind.pattern.match(name)
    ]


def _not_found(kind: ElementKind, reference: str, available: list[str]) -> NotFoundError:
    listing = ", ".join(available) if available else "none"
    return NotFoundError(f"{kind.value} {reference!r} not found (available: {listing})")


def _resolve(reference: str, parent_dir: str, kind: ElementKind, match_label: bool) -> str:
    if not reference:
        raise ValidationError(f"{kind.value} reference is required")

    if os.path.isabs(reference):
        if os.path.isdir(reference):
            return reference
        raise NotFoundError(f"{kind.value} not found: {reference}")

    available = _list_dirs(parent_dir, kind)
    if is_numeric_shortcut(reference, kind.width):
        prefix = format_number(int(reference), kind) + "_"
        for name in available:
            if name.startswith(prefix):
                return os.path.join(parent_dir, name)
        raise _not_found(kind, reference, available)

    candidate = os.path.join(parent_dir, reference)
    if os.path.isdir(candidate):
        return candidate

    if match_label:
        for name in available:
            if name == reference or name.endswith("_" + reference):
                return os.path.join(parent_dir, name)
    raise _not_found(kind, reference, available)


def resolve_phase(reference: str, festival_dir: str) -> str:
    return _resolve(reference, festival_dir, ElementKind.PHASE, match_label=True)


def resolve_sequence(reference: str, phase_dir: str) -> str:
    return _resolve(reference, phase_dir, ElementKind.SEQUENCE, match_label=False)
