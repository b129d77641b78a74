"""
Translation of values crossing the wrapper boundary.

Arguments going in are unwrapped: handles become the native values they
stand for.  Return values coming out are wrapped: every non-None native
value becomes a :class:`ValueHandle`.
"""

from typing import Any, Dict, List, Optional, TYPE_CHECKING

from .handle import NativeRef, ValueHandle, is_handle
from .refs import visit_embedded_refs

if TYPE_CHECKING:
    from .context import Bridge


def _resolve_ref(ref: NativeRef) -> Any:
    return ref.resolve()


def unwrap_value(value: Any) -> Any:
    """Return the native value for a handle, or ``value`` itself."""
    if is_handle(value):
        return value.resolve()
    return value


def unwrap_arguments(args: List[Any]) -> List[Any]:
    """
    Unwrap handles in an argument list, in place.

    Handles are replaced by their resolved values.  Other arguments that
    declare embedded references have those properties unwrapped; nested
    structures below them are left alone.
    """
    for i, arg in enumerate(args):
        if is_handle(arg):
            args[i] = arg.resolve()
        elif arg is not None:
            visit_embedded_refs(arg, _resolve_ref)
    return args


def unwrap_keyword_arguments(kwargs: Dict[str, Any]) -> Dict[str, Any]:
    """Keyword counterpart of :func:`unwrap_arguments`, also in place."""
    for name, arg in kwargs.items():
        if is_handle(arg):
            kwargs[name] = arg.resolve()
        elif arg is not None:
            visit_embedded_refs(arg, _resolve_ref)
    return kwargs


def wrap_value(value: Any, bridge: Optional["Bridge"] = None) -> Optional[ValueHandle]:
    """
    Wrap a native value in a resolved handle.

    None is returned as-is; it is the "no value" result.
    """
    if value is None:
        return None
    return ValueHandle(value, bridge)
