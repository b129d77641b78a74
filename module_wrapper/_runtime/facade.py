"""
Operations on handles.

Every operation resolves the target handle, performs the plain Python
operation on the native value and hands back either the raw result or,
for the ``*_and_wrap`` variants, a handle around it.  Names are not
checked beforehand: a missing attribute raises AttributeError from the
native object, and anything the native code raises propagates as-is.
"""

from typing import Any, Dict, Optional, Sequence

from .handle import NativeRef, ValueHandle
from .translator import (
    unwrap_arguments,
    unwrap_keyword_arguments,
    unwrap_value,
    wrap_value,
)


def _prepare(
    args: Optional[Sequence[Any]],
    kwargs: Optional[Dict[str, Any]],
    unwrap_args: bool,
):
    if args is None:
        args = []
    elif not isinstance(args, list):
        args = list(args)
    kwargs = kwargs if kwargs is not None else {}
    if unwrap_args:
        unwrap_arguments(args)
        unwrap_keyword_arguments(kwargs)
    return args, kwargs


def call_function(
    handle: NativeRef,
    function_name: str,
    args: Optional[Sequence[Any]] = None,
    unwrap_args: bool = False,
    kwargs: Optional[Dict[str, Any]] = None,
) -> Any:
    """
    Call ``function_name`` on the value behind ``handle``.

    With ``unwrap_args``, handles in ``args`` are replaced by their
    native values before the call; a list is updated in place, any other
    sequence is copied first.  Returns the raw result.
    """
    args, kwargs = _prepare(args, kwargs, unwrap_args)
    target = handle.resolve()
    return getattr(target, function_name)(*args, **kwargs)


def call_constructor(
    handle: NativeRef,
    constructor_name: str,
    args: Optional[Sequence[Any]] = None,
    unwrap_args: bool = False,
    kwargs: Optional[Dict[str, Any]] = None,
) -> Any:
    """
    Construct an instance with the constructor named ``constructor_name``.

    A factory registered under that name on the handle's bridge takes
    precedence; otherwise the class found on the native value is called
    directly, so the instance is a genuine instance of that class.
    """
    args, kwargs = _prepare(args, kwargs, unwrap_args)
    target = handle.resolve()
    factory = handle.bridge.constructors.resolve(target, constructor_name)
    return factory(*args, **kwargs)


def get_property(handle: NativeRef, property_name: str) -> Any:
    return getattr(handle.resolve(), property_name)


def set_property(handle: NativeRef, property_name: str, value: Any) -> None:
    """Set a property on the native value; a handle ``value`` is unwrapped."""
    setattr(handle.resolve(), property_name, unwrap_value(value))


def get_native_property(obj: Any, property_name: str) -> Any:
    """Read a property from a raw native object that is not behind a handle."""
    return getattr(obj, property_name)


def wrap_property(handle: NativeRef, property_name: str) -> Optional[ValueHandle]:
    return wrap_value(get_property(handle, property_name), handle.bridge)


def call_function_and_wrap(
    handle: NativeRef,
    function_name: str,
    args: Optional[Sequence[Any]] = None,
    unwrap_args: bool = False,
    kwargs: Optional[Dict[str, Any]] = None,
) -> Optional[ValueHandle]:
    """Like :func:`call_function`, but returns a handle (or None)."""
    value = call_function(handle, function_name, args, unwrap_args, kwargs)
    return wrap_value(value, handle.bridge)


def call_constructor_and_wrap(
    handle: NativeRef,
    constructor_name: str,
    args: Optional[Sequence[Any]] = None,
    unwrap_args: bool = False,
    kwargs: Optional[Dict[str, Any]] = None,
) -> Optional[ValueHandle]:
    """Like :func:`call_constructor`, but returns a handle (or None)."""
    value = call_constructor(handle, constructor_name, args, unwrap_args, kwargs)
    return wrap_value(value, handle.bridge)
