"""
Bridge configuration.

A :class:`Bridge` bundles the collaborators the wrapper needs: the module
loader and the constructor registry.  Handles remember the bridge that
created them.
"""

from typing import Any, Callable, Optional
import logging

from .constructors import ConstructorRegistry
from .handle import ModuleHandle

logger = logging.getLogger(__name__)

ModuleLoader = Callable[[str], Any]


class Bridge:
    """
    Configuration shared by the handles it creates.

    Manages:
    - Module loading by name
    - Constructor factories
    """

    def __init__(
        self,
        loader: Optional[ModuleLoader] = None,
        constructors: Optional[ConstructorRegistry] = None,
    ):
        if loader is None:
            from .._loader import load_module_by_name

            loader = load_module_by_name
        self.loader: ModuleLoader = loader
        self.constructors = constructors if constructors is not None else ConstructorRegistry()

    def load_module(self, module_name: str) -> ModuleHandle:
        """
        Create a handle for ``module_name``.

        Nothing is loaded until the handle is first resolved.
        """
        logger.debug("Creating handle for module %r", module_name)
        return ModuleHandle(module_name, self)

    def wrap(self, value: Any):
        """Wrap a native value in a handle bound to this bridge."""
        from .translator import wrap_value

        return wrap_value(value, self)

    def __repr__(self):
        return f"<Bridge constructors={list(self.constructors)}>"


# Global default bridge
_default_bridge: Optional[Bridge] = None


def get_default_bridge() -> Bridge:
    """Get or create the default bridge."""
    global _default_bridge
    if _default_bridge is None:
        _default_bridge = Bridge()
    return _default_bridge


def create_bridge(
    loader: Optional[ModuleLoader] = None,
    constructors: Optional[ConstructorRegistry] = None,
) -> Bridge:
    """Create a new bridge."""
    return Bridge(loader, constructors)
