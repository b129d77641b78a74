"""Test argument unwrapping and return value wrapping."""

import types

import pytest

from module_wrapper import (
    HasEmbeddedRefs,
    ValueHandle,
    TAG_LIST_NAME,
    create_bridge,
    unwrap_arguments,
    wrap_value,
)
from conftest import CountingLoader


class Options(HasEmbeddedRefs):
    wrapped_properties = ("target", "label")

    def __init__(self, target=None, label=None, extra=None):
        self.target = target
        self.label = label
        self.extra = extra


# =============================================================================
# unwrap_arguments
# =============================================================================


def test_unwrap_replaces_handles_in_place():
    native = object()
    args = [ValueHandle(native), 3, "x"]
    result = unwrap_arguments(args)
    assert result is args, "Arguments should be unwrapped in place"
    assert args == [native, 3, "x"]


def test_unwrap_resolves_pending_module_handle():
    module = types.SimpleNamespace()
    loader = CountingLoader({"mod": module})
    args = [create_bridge(loader=loader).load_module("mod")]
    unwrap_arguments(args)
    assert args[0] is module
    assert loader.calls == ["mod"]


def test_unwrap_tagged_object_attributes():
    native = object()
    obj = types.SimpleNamespace(a=ValueHandle(native), b=ValueHandle(native))
    setattr(obj, TAG_LIST_NAME, ["a"])

    unwrap_arguments([obj])

    assert obj.a is native, "Tagged handle property should be unwrapped"
    assert isinstance(obj.b, ValueHandle), "Untagged property must pass through"


def test_unwrap_tagged_plain_value_is_skipped():
    obj = types.SimpleNamespace(a=5, b=None)
    setattr(obj, TAG_LIST_NAME, ["a", "b", "missing"])
    unwrap_arguments([obj])
    assert obj.a == 5
    assert obj.b is None
    assert not hasattr(obj, "missing")


def test_unwrap_tagged_dict_items():
    native = object()
    options = {
        TAG_LIST_NAME: ["emitter"],
        "emitter": ValueHandle(native),
        "other": ValueHandle(native),
    }
    unwrap_arguments([options])
    assert options["emitter"] is native
    assert isinstance(options["other"], ValueHandle)


def test_unwrap_has_embedded_refs():
    native = object()
    options = Options(target=ValueHandle(native), label="plain", extra=ValueHandle(native))
    unwrap_arguments([options])
    assert options.target is native
    assert options.label == "plain"
    assert isinstance(options.extra, ValueHandle)


def test_unwrap_is_one_level_deep():
    native = object()
    inner = types.SimpleNamespace(ref=ValueHandle(native))
    setattr(inner, TAG_LIST_NAME, ["ref"])
    outer = types.SimpleNamespace(inner=inner)
    setattr(outer, TAG_LIST_NAME, ["inner"])

    unwrap_arguments([outer])

    assert outer.inner is inner
    assert isinstance(inner.ref, ValueHandle), "Nested tags must not be followed"


def test_unwrap_leaves_untagged_containers_alone():
    handle = ValueHandle(object())
    nested = [handle]
    args = [nested, {"k": handle}, None]
    unwrap_arguments(args)
    assert args[0][0] is handle
    assert args[1]["k"] is handle
    assert args[2] is None


# =============================================================================
# wrap_value
# =============================================================================


@pytest.mark.parametrize("value", [0, "", False, [], object(), len])
def test_wrap_value_wraps_everything_but_none(value):
    handle = wrap_value(value)
    assert isinstance(handle, ValueHandle)
    assert handle.resolve() is value


def test_wrap_none_is_no_value():
    assert wrap_value(None) is None


def test_wrap_uses_given_bridge():
    bridge = create_bridge()
    assert wrap_value(1, bridge).bridge is bridge
    assert bridge.wrap(1).bridge is bridge


def test_wrapped_value_round_trips_through_arguments():
    native = object()
    handle = wrap_value(native)
    args = [handle]
    unwrap_arguments(args)
    assert args[0] is native, "Unwrapping a wrapped value should give back the original"
