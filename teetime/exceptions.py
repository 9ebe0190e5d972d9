class TeeTimeError(Exception):
    """Base for all tee time engine errors."""


class StateNotInitializedError(TeeTimeError):
    """No course state has been initialized."""


class MissingGroupIdError(TeeTimeError):
    """A command was issued without the group identifier it needs."""


class InvalidCourseConfigError(TeeTimeError, ValueError):
    """Course configuration values out of range."""


class DuplicateGroupError(TeeTimeError):
    """Group id already held by the course state."""


class InvalidGroupError(TeeTimeError, ValueError):
    """Group details rejected on admission (blank name, empty party)."""
