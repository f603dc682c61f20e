from __future__ import annotations

import pytest

from log_stack.domain import HookName, HookRegistry
from log_stack.errors import InvalidHook, LogStackError
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_callbacks_fire_in_registration_order() -> None:
    registry = HookRegistry()
    calls: list[tuple[str, object]] = []
    registry.register([("init", lambda owner: calls.append(("first", owner)))])
    registry.register([("init", lambda owner: calls.append(("second", owner)))])

    owner = object()
    registry.fire("init", owner)

    assert calls == [("first", owner), ("second", owner)]


def test_enum_and_string_names_are_interchangeable() -> None:
    registry = HookRegistry()
    calls: list[str] = []
    registry.register([(HookName.CLEANUP, lambda owner: calls.append("enum"))])
    registry.register([("cleanup", lambda owner: calls.append("str"))])

    registry.fire(HookName.CLEANUP, None)

    assert calls == ["enum", "str"]
    assert registry.names() == ("cleanup",)


def test_unknown_names_are_stored() -> None:
    registry = HookRegistry()
    registry.register([("on_rotate", print)])
    assert registry.callbacks("on_rotate") == (print,)


def test_firing_unregistered_name_is_a_no_op() -> None:
    HookRegistry().fire("before", None)


@pytest.mark.parametrize("callback", [None, "print", 42])
def test_non_callable_callback_is_rejected(callback: object) -> None:
    registry = HookRegistry()
    with pytest.raises(InvalidHook, match="must be callable"):
        registry.register([("init", callback)])  # type: ignore[list-item]


def test_rejected_call_registers_nothing() -> None:
    registry = HookRegistry()
    with pytest.raises(InvalidHook):
        registry.register([("init", print), ("after", None)])  # type: ignore[list-item]
    assert registry.names() == ()


def test_invalid_hook_is_a_type_error() -> None:
    assert issubclass(InvalidHook, TypeError)
    assert issubclass(InvalidHook, LogStackError)


def test_callback_registered_during_fire_waits_for_next_occurrence() -> None:
    registry = HookRegistry()
    calls: list[str] = []

    def late(owner: object) -> None:
        calls.append("late")

    def registering(owner: object) -> None:
        calls.append("registering")
        registry.register([("before", late)])

    registry.register([("before", registering)])
    registry.fire("before", None)
    assert calls == ["registering"]

    registry.fire("before", None)
    assert calls == ["registering", "registering", "late"]


def test_failing_callback_stops_remaining_callbacks() -> None:
    registry = HookRegistry()
    calls: list[str] = []

    def broken(owner: object) -> None:
        raise RuntimeError("hook failed")

    registry.register([("after", broken), ("after", lambda owner: calls.append("never"))])
    with pytest.raises(RuntimeError, match="hook failed"):
        registry.fire("after", None)
    assert calls == []
