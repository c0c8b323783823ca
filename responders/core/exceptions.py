"""Exception types raised by the responders package."""


class ResponderError(Exception):
    """Base class for errors raised by responders."""


class CodecError(ResponderError):
    """Raised when a codec cannot encode a converted output tree."""


class NullableMismatch(ResponderError):
    """Raised internally when a struct does not follow the nullable wrapper convention.

    The struct builder catches this and falls back to regular field handling,
    so callers of ``Response.output()`` never see it.
    """
