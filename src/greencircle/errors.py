# src/greencircle/errors.py


class GreenCircleError(Exception):
    """Base class for every error raised by the bot."""


class ProtocolError(GreenCircleError, ValueError):
    """A turn block could not be parsed (bad token count, non-numeric field, ...)."""

    def __init__(self, message: str, line: str = "") -> None:
        self.line = line
        if line:
            message = f"{message}: {line!r}"
        super().__init__(message)


class NotApplicableError(GreenCircleError):
    """
    A decision helper was called outside its precondition (e.g. no
    applications to rank, no release candidates to pick from).
    Callers are expected to branch before calling.
    """
