"""Exceptions raised by the conversion pipeline."""


class AdviceUnavailable(Exception):
    """The advice command timed out, exited non-zero, or could not be started."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class RenderError(Exception):
    """The browser could not navigate to or print the requested page."""
