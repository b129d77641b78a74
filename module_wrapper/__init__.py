"""
module-wrapper: Call into Python modules through opaque handles.

Usage:
    from module_wrapper import load_module, call_function_and_wrap

    fs = load_module("some.native.module")
    result = call_function_and_wrap(fs, "open", ["data.bin"])
    size = result.get_property("size")
"""

from ._runtime import (
    Bridge,
    create_bridge,
    get_default_bridge,
    ConstructorRegistry,
    WrapperError,
    ListenerStateError,
    NativeRef,
    ModuleHandle,
    ValueHandle,
    is_handle,
    HasEmbeddedRefs,
    TAG_LIST_NAME,
    unwrap_arguments,
    wrap_value,
    call_function,
    call_constructor,
    get_property,
    set_property,
    get_native_property,
    wrap_property,
    call_function_and_wrap,
    call_constructor_and_wrap,
    EventListener,
    add_listener_to_handle,
)

__version__ = "0.1.0"

__all__ = [
    "load_module",
    "Bridge",
    "create_bridge",
    "get_default_bridge",
    "ConstructorRegistry",
    "WrapperError",
    "ListenerStateError",
    "NativeRef",
    "ModuleHandle",
    "ValueHandle",
    "is_handle",
    "HasEmbeddedRefs",
    "TAG_LIST_NAME",
    "unwrap_arguments",
    "wrap_value",
    "call_function",
    "call_constructor",
    "get_property",
    "set_property",
    "get_native_property",
    "wrap_property",
    "call_function_and_wrap",
    "call_constructor_and_wrap",
    "EventListener",
    "add_listener_to_handle",
]


def load_module(name: str) -> ModuleHandle:
    """
    Get a handle to a module on the default bridge.

    Args:
        name: Dotted module name, or path to a .py file

    Returns:
        A handle; the module is loaded on first use
    """
    return get_default_bridge().load_module(name)
