from __future__ import annotations

import pytest

from log_stack.domain import Computed, Constant, DefaultRegistry, as_default
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_as_default_wraps_callables_as_computed() -> None:
    def factory(level, message):
        return level

    assert as_default(factory) == Computed(factory)
    assert as_default("static") == Constant("static")
    assert as_default(None) == Constant(None)


def test_as_default_keeps_explicit_variants() -> None:
    marker = Constant(len)
    assert as_default(marker) is marker


def test_constant_callable_is_stored_verbatim() -> None:
    registry = DefaultRegistry({"formatter": Constant(str.upper)})
    assert registry.resolve("info", "msg", {}) == {"formatter": str.upper}


def test_resolve_never_overrides_explicit_fields() -> None:
    calls = []

    def factory(level, message):
        calls.append((level, message))
        return "computed"

    registry = DefaultRegistry({"id": 1, "tag": factory})
    merged = registry.resolve("error", "disk full", {"id": 7, "tag": "explicit"})

    assert merged == {"id": 7, "tag": "explicit"}
    assert calls == []


def test_resolve_invokes_computed_defaults_per_call() -> None:
    calls = []

    def factory(level, message):
        calls.append((level, message))
        return len(calls)

    registry = DefaultRegistry({"seq": factory})

    first = registry.resolve("info", "a", {})
    second = registry.resolve("warn", "b", {})

    assert first == {"seq": 1}
    assert second == {"seq": 2}
    assert calls == [("info", "a"), ("warn", "b")]


def test_resolve_does_not_mutate_supplied_fields() -> None:
    supplied = {"user": "alice"}
    DefaultRegistry({"id": 1}).resolve("info", "msg", supplied)
    assert supplied == {"user": "alice"}


def test_update_overwrites_and_remove_forgets() -> None:
    registry = DefaultRegistry({"id": 1, "app": "billing"})
    registry.update({"id": 2})
    registry.remove("app", "missing")

    assert dict(registry.view()) == {"id": 2}
    assert "app" not in registry
    assert len(registry) == 1


def test_view_is_read_only() -> None:
    registry = DefaultRegistry({"id": 1})
    view = registry.view()
    with pytest.raises(TypeError):
        view["id"] = 2  # type: ignore[index]


def test_failing_computed_default_propagates() -> None:
    def broken(level, message):
        raise LookupError("no request bound")

    registry = DefaultRegistry({"request_id": broken})
    with pytest.raises(LookupError, match="no request bound"):
        registry.resolve("info", "msg", {})
