"""Error taxonomy for structural edits of a festival tree."""


class RenumberError(Exception):
    """Base class for every failure raised by the renumbering engine."""


class NotFoundError(RenumberError, ValueError):
    """A directory, an element at a position, or a destination is missing."""


class ValidationError(RenumberError, ValueError):
    """Input that cannot describe a valid structural edit."""


class CancelledError(RenumberError):
    """The caller's cancellation event was set before the edit finished."""


class FestIOError(RenumberError):
    """A filesystem read or write failed."""


class BackupError(FestIOError):
    """The pre-operation backup could not be written; nothing was changed."""


class ApplyError(FestIOError):
    """A change failed mid-apply.

    Changes in ``applied`` are real filesystem mutations that were not
    rolled back.
    """

    def __init__(self, message, change, applied):
        super().__init__(message)
        self.change = change
        self.applied = list(applied)
