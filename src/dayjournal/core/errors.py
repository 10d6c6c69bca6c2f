"""Journal error taxonomy."""


class JournalError(Exception):
    """Base class for all journal failures."""

    pass


class PersistenceError(JournalError):
    """Raised when the underlying storage cannot be read or written."""

    pass


class NotFoundError(JournalError):
    """Raised when an update targets a date with no entry."""

    pass


class ValidationError(JournalError):
    """Raised when an entry is malformed or its content is empty."""

    pass


class DuplicateEntryError(JournalError):
    """Raised when a second entry is saved for a date that already has one."""

    pass


class EditNotAllowedError(JournalError):
    """Raised when a past entry is edited."""

    pass
