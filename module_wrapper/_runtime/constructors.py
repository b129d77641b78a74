"""
Registry of constructor factories.

``call_constructor`` looks a constructor name up here before falling back
to the attribute of that name on the target.  Registering a factory lets
a bridge decide at configuration time how an instance is built, for
example to supply default arguments or pick a subclass.
"""

from typing import Any, Callable, Dict, Iterator, Optional
import logging

logger = logging.getLogger(__name__)

Factory = Callable[..., Any]


class ConstructorRegistry:
    """Maps constructor names to factories."""

    def __init__(self):
        self._factories: Dict[str, Factory] = {}

    def register(self, name: str, factory: Factory) -> Factory:
        """Register ``factory`` under ``name``, replacing any previous one."""
        if not callable(factory):
            raise TypeError(f"Factory for '{name}' is not callable")
        self._factories[name] = factory
        return factory

    def constructor(self, name: Optional[str] = None) -> Callable[[Factory], Factory]:
        """Decorator form of :meth:`register`; defaults to the factory's name."""

        def decorator(factory: Factory) -> Factory:
            return self.register(name or factory.__name__, factory)

        return decorator

    def unregister(self, name: str) -> None:
        self._factories.pop(name, None)

    def get(self, name: str) -> Optional[Factory]:
        return self._factories.get(name)

    def resolve(self, target: Any, name: str) -> Factory:
        """
        Return the factory for ``name``.

        Falls back to ``getattr(target, name)``, so an unknown name raises
        AttributeError from the target.
        """
        factory = self._factories.get(name)
        if factory is not None:
            logger.debug("Using registered factory for %r", name)
            return factory
        return getattr(target, name)

    def __contains__(self, name: str) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)
