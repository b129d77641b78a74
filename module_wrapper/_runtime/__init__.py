"""Runtime components for module wrapping."""

from .context import Bridge, create_bridge, get_default_bridge
from .constructors import ConstructorRegistry
from .errors import WrapperError, ListenerStateError
from .handle import NativeRef, ModuleHandle, ValueHandle, is_handle
from .refs import HasEmbeddedRefs, TAG_LIST_NAME
from .translator import (
    unwrap_arguments,
    unwrap_keyword_arguments,
    unwrap_value,
    wrap_value,
)
from .facade import (
    call_function,
    call_constructor,
    get_property,
    set_property,
    get_native_property,
    wrap_property,
    call_function_and_wrap,
    call_constructor_and_wrap,
)
from .events import EventListener, add_listener_to_handle

__all__ = [
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
    "unwrap_keyword_arguments",
    "unwrap_value",
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
