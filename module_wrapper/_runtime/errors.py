"""
Errors raised by the wrapper itself.

Failures coming from the wrapped module (import errors, missing
attributes, exceptions thrown by native functions) are never wrapped in
these types; they propagate to the caller unchanged.
"""


class WrapperError(Exception):
    """Base class for errors raised by module_wrapper."""


class ListenerStateError(WrapperError):
    """An event listener was started while already registered."""

    def __init__(self, event_name: str, message: str = ""):
        self.event_name = event_name
        self.message = message or f"Listener for '{event_name}' is already started"
        super().__init__(self.message)
