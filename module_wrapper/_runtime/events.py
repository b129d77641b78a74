"""
Event listener bridging.

Native emitters register listeners with ``on(event, fn)`` and remove
them by identity.  An :class:`EventListener` turns that into a
start/stop object: ``start()`` registers a trampoline that forwards the
event payload to the caller's callback, ``stop()`` removes exactly that
trampoline.

Nothing stops a listener automatically.  A listener that is started and
never stopped stays registered for as long as the emitter lives.
"""

from typing import Any, Callable, Optional
import logging

from .errors import ListenerStateError
from .handle import NativeRef

logger = logging.getLogger(__name__)

_REMOVE_METHODS = ("remove_listener", "removeListener", "off")


def _remover(emitter: Any) -> Callable:
    for name in _REMOVE_METHODS:
        method = getattr(emitter, name, None)
        if method is not None:
            return method
    raise AttributeError(
        f"{type(emitter).__name__} has none of {', '.join(_REMOVE_METHODS)}"
    )


class EventListener:
    """
    Controller for one listener registration on a native emitter.

    While started, ``_trampoline`` holds the function registered with
    the emitter; it is None otherwise.  Can be used as a context
    manager, which stops the listener on exit.
    """

    def __init__(self, emitter: Any, event_name: str, callback: Callable):
        self.event_name = event_name
        self.callback = callback
        self._emitter = emitter
        self._trampoline: Optional[Callable] = None

    @property
    def is_started(self) -> bool:
        return self._trampoline is not None

    def _dispatch(self, *values: Any) -> None:
        # Only the first payload value is forwarded
        if values:
            self.callback(values[0])
        else:
            self.callback()

    def start(self) -> "EventListener":
        """Register with the emitter.  Raises ListenerStateError if already started."""
        if self._trampoline is not None:
            raise ListenerStateError(self.event_name)

        def trampoline(*values: Any) -> None:
            self._dispatch(*values)

        self._emitter.on(self.event_name, trampoline)
        self._trampoline = trampoline
        logger.debug("Started listener for %r", self.event_name)
        return self

    def stop(self) -> None:
        """Remove the registration made by :meth:`start`.  No-op if not started."""
        trampoline = self._trampoline
        if trampoline is None:
            return
        _remover(self._emitter)(self.event_name, trampoline)
        self._trampoline = None
        logger.debug("Stopped listener for %r", self.event_name)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.stop()

    def __repr__(self):
        state = "started" if self.is_started else "stopped"
        return f"<EventListener {self.event_name!r} {state}>"


def add_listener_to_handle(
    handle: NativeRef, event_name: str, callback: Callable
) -> EventListener:
    """
    Create a listener for ``event_name`` on the emitter behind ``handle``.

    The handle is resolved immediately.  The returned listener is not
    started.
    """
    return EventListener(handle.resolve(), event_name, callback)
