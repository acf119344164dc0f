"""Failure types raised by the backend collaborators."""


class ConsoleError(Exception):
    """Base class for every failure a collaborator can report.

    ``message`` is the human readable text supplied by the backend, if any.
    """

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message or self.__class__.__name__)
        self.message = message
        self.status_code = status_code


class TransportFailure(ConsoleError):
    """Backend unreachable, or a non-2xx response without a structured body."""


class ValidationFailure(ConsoleError):
    """Non-2xx response carrying a message explaining the rejection."""


class NotFoundFailure(ConsoleError):
    """The referenced entity does not exist."""


def failure_message(exc: BaseException, default: str) -> str:
    """
    Extract the text to show for a failed operation.

    Args:
        exc: The exception raised by a collaborator
        default: Per-operation fallback, e.g. "Failed to load students"

    Returns:
        The failure's own message, or the default when it carries none
    """
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message.strip():
        return message
    return default
