"""Change and ChangePlan: the abstract filesystem edits of one operation."""

import os
from dataclasses import dataclass, field, replace
from enum import Enum

from fest.festival.naming import ElementKind
from fest.festival.scanner import OrderedElement


class ChangeType(Enum):
    RENAME = "Rename"
    CREATE = "Create"
    REMOVE = "Remove"

    def __str__(self) -> str:
        return self.value


class Operation(Enum):
    RENUMBER = "renumber"
    INSERT = "insert"
    REMOVE = "remove"
    REORDER = "reorder"


@dataclass(frozen=True)
class Change:
    type: ChangeType
    old_path: str | None = None
    new_path: str | None = None
    element: OrderedElement | None = None
    new_number: int | None = None

    @classmethod
    def rename(cls, element: OrderedElement, new_path: str, new_number: int) -> "Change":
        return cls(ChangeType.RENAME, element.path, new_path, element, new_number)

    @classmethod
    def create(cls, new_path: str, new_number: int) -> "Change":
        return cls(ChangeType.CREATE, new_path=new_path, new_number=new_number)

    @classmethod
    def remove(cls, element: OrderedElement) -> "Change":
        return cls(ChangeType.REMOVE, old_path=element.path, element=element)

    @property
    def old_name(self) -> str | None:
        return os.path.basename(self.old_path) if self.old_path else None

    @property
    def new_name(self) -> str | None:
        return os.path.basename(self.new_path) if self.new_path else None

    @property
    def shift(self) -> int:
        """Signed distance travelled by a rename; 0 for creates and removes."""
        if self.type is not ChangeType.RENAME or self.element is None:
            return 0
        return self.new_number - self.element.number

    def redirect(self, old_path=None, new_path=None) -> "Change":
        """Copy of this change with a different source or destination."""
        return replace(
            self,
            old_path=old_path if old_path is not None else self.old_path,
            new_path=new_path if new_path is not None else self.new_path,
        )

    def describe(self) -> str:
        if self.type is ChangeType.RENAME:
            return f"{self.old_name} → {self.new_name}"
        if self.type is ChangeType.CREATE:
            return self.new_name
        return self.old_name


@dataclass
class ChangePlan:
    operation: Operation
    kind: ElementKind
    directory: str
    changes: list[Change] = field(default_factory=list)
    staged_paths: frozenset[str] = frozenset()
    parallel_numbers: tuple[int, ...] = ()
    sequenced: bool = False

    def __len__(self) -> int:
        return len(self.changes)

    def __iter__(self):
        return iter(self.changes)

    @property
    def is_empty(self) -> bool:
        return not self.changes

    def count(self, change_type: ChangeType) -> int:
        return sum(1 for c in self.changes if c.type is change_type)
