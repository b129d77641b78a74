"""
Arguments that carry handles inside them.

A caller may pass its own structured objects as call arguments.  Such an
object names the properties that can hold handles, either by
implementing :class:`HasEmbeddedRefs` or by carrying a
``__wrapped_properties__`` tag list (an attribute on objects, a key on
dicts).  Only named properties are inspected, and only one level deep.
"""

from abc import ABC
from collections.abc import MutableMapping
from typing import Any, Callable, Iterable, Optional, Tuple

from .handle import is_handle

TAG_LIST_NAME = "__wrapped_properties__"

RefVisitor = Callable[[Any], Any]


def _visit_attributes(obj: Any, names: Iterable[str], visitor: RefVisitor) -> None:
    for name in names:
        value = getattr(obj, name, None)
        if is_handle(value):
            setattr(obj, name, visitor(value))


def _visit_items(obj: MutableMapping, names: Iterable[str], visitor: RefVisitor) -> None:
    for name in names:
        value = obj.get(name)
        if is_handle(value):
            obj[name] = visitor(value)


class HasEmbeddedRefs(ABC):
    """
    Capability for arguments whose properties may hold handles.

    Subclasses list the properties in ``wrapped_properties``.  Override
    ``for_each_ref`` when the properties are not plain attributes.
    """

    wrapped_properties: Tuple[str, ...] = ()

    def for_each_ref(self, visitor: RefVisitor) -> None:
        """Replace each named property holding a handle with ``visitor(handle)``."""
        _visit_attributes(self, self.wrapped_properties, visitor)


def tag_list(obj: Any) -> Optional[Tuple[str, ...]]:
    """Return the tag list declared on ``obj``, or None if it has none."""
    if isinstance(obj, MutableMapping):
        names = obj.get(TAG_LIST_NAME)
    else:
        names = getattr(obj, TAG_LIST_NAME, None)
    if not names:
        return None
    return tuple(names)


def visit_embedded_refs(obj: Any, visitor: RefVisitor) -> bool:
    """
    Apply ``visitor`` to every handle embedded in ``obj``.

    Returns False when ``obj`` declares no embedded references.
    """
    if isinstance(obj, HasEmbeddedRefs):
        obj.for_each_ref(visitor)
        return True

    names = tag_list(obj)
    if names is None:
        return False
    if isinstance(obj, MutableMapping):
        _visit_items(obj, names, visitor)
    else:
        _visit_attributes(obj, names, visitor)
    return True
