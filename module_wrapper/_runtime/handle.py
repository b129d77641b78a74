"""
Opaque handles to native values.

A handle is the only thing the caller ever holds.  The native value
behind it sits in a private slot and is reached through ``resolve()``.
"""

from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from .context import Bridge
    from .events import EventListener

logger = logging.getLogger(__name__)


# Marks a handle that has not produced a value yet
_UNRESOLVED = object()


class NativeRef:
    """
    Base class for handles.

    Subclasses implement ``_load()``.  It runs at most once per handle;
    its result (or the exception it raised) is cached for the handle's
    lifetime.  Not thread-safe.
    """

    __slots__ = ("_bridge", "_value", "_failure", "__weakref__")

    def __init__(self, bridge: Optional["Bridge"] = None):
        if bridge is None:
            from .context import get_default_bridge

            bridge = get_default_bridge()
        self._bridge = bridge
        self._value: Any = _UNRESOLVED
        self._failure: Optional[Exception] = None

    @property
    def bridge(self) -> "Bridge":
        return self._bridge

    @property
    def is_resolved(self) -> bool:
        """True once ``resolve()`` has produced a value."""
        return self._value is not _UNRESOLVED

    def _load(self) -> Any:
        raise NotImplementedError

    def resolve(self) -> Any:
        """Return the native value, performing resolution on first use."""
        if self._value is not _UNRESOLVED:
            return self._value
        if self._failure is not None:
            raise self._failure.with_traceback(None)

        try:
            value = self._load()
        except Exception as e:
            self._failure = e
            raise
        self._value = value
        return value

    # Invocation shortcuts

    def call_function(
        self,
        function_name: str,
        args: Optional[List[Any]] = None,
        unwrap_args: bool = False,
        kwargs: Optional[Dict[str, Any]] = None,
    ) -> Any:
        from .facade import call_function

        return call_function(self, function_name, args, unwrap_args, kwargs)

    def call_constructor(
        self,
        constructor_name: str,
        args: Optional[List[Any]] = None,
        unwrap_args: bool = False,
        kwargs: Optional[Dict[str, Any]] = None,
    ) -> Any:
        from .facade import call_constructor

        return call_constructor(self, constructor_name, args, unwrap_args, kwargs)

    def get_property(self, property_name: str) -> Any:
        from .facade import get_property

        return get_property(self, property_name)

    def set_property(self, property_name: str, value: Any) -> None:
        from .facade import set_property

        set_property(self, property_name, value)

    def wrap_property(self, property_name: str) -> Optional["ValueHandle"]:
        from .facade import wrap_property

        return wrap_property(self, property_name)

    def call_function_and_wrap(
        self,
        function_name: str,
        args: Optional[List[Any]] = None,
        unwrap_args: bool = False,
        kwargs: Optional[Dict[str, Any]] = None,
    ) -> Optional["ValueHandle"]:
        from .facade import call_function_and_wrap

        return call_function_and_wrap(self, function_name, args, unwrap_args, kwargs)

    def call_constructor_and_wrap(
        self,
        constructor_name: str,
        args: Optional[List[Any]] = None,
        unwrap_args: bool = False,
        kwargs: Optional[Dict[str, Any]] = None,
    ) -> Optional["ValueHandle"]:
        from .facade import call_constructor_and_wrap

        return call_constructor_and_wrap(
            self, constructor_name, args, unwrap_args, kwargs
        )

    def add_listener(self, event_name: str, callback: Callable) -> "EventListener":
        from .events import add_listener_to_handle

        return add_listener_to_handle(self, event_name, callback)


class ModuleHandle(NativeRef):
    """Handle to a module, loaded by name on first resolution."""

    __slots__ = ("_module_name",)

    def __init__(self, module_name: str, bridge: Optional["Bridge"] = None):
        super().__init__(bridge)
        self._module_name = module_name

    @property
    def module_name(self) -> str:
        return self._module_name

    def _load(self) -> Any:
        logger.debug("Resolving module %r", self._module_name)
        module = self._bridge.loader(self._module_name)
        logger.debug("Resolved module %r", self._module_name)
        return module

    def __repr__(self):
        state = "resolved" if self.is_resolved else "pending"
        return f"<ModuleHandle {self._module_name!r} {state}>"


class ValueHandle(NativeRef):
    """Handle created around a value that is already known."""

    __slots__ = ()

    def __init__(self, value: Any, bridge: Optional["Bridge"] = None):
        super().__init__(bridge)
        self._value = value

    def _load(self) -> Any:
        raise RuntimeError("ValueHandle has no value")

    def __repr__(self):
        return f"<ValueHandle {type(self._value).__name__}>"


def is_handle(obj: Any) -> bool:
    """Check if object is a handle."""
    return isinstance(obj, NativeRef)
