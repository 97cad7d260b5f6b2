class PopupError(Exception):
    """Base class for failures while locating or driving the sheet popup."""


class NotFoundError(PopupError):
    """No scope held a matching element within its wait budget."""


class SurfaceTimeoutError(NotFoundError):
    """No dialog surface became visible before the timeout."""


class ClickFailedError(PopupError):
    """A located control could not be clicked."""
