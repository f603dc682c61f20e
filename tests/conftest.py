from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from log_stack import LogStack, RecordingTarget


@pytest.fixture
def record_console() -> Console:
    """Rich console writing into memory so tests can export the rendered text."""

    return Console(file=StringIO(), record=True, width=120, color_system=None)


@pytest.fixture
def recording_target() -> RecordingTarget:
    return RecordingTarget()


@pytest.fixture
def stack(recording_target: RecordingTarget) -> LogStack:
    return LogStack(recording_target)


class HookRecorder:
    """Collect ``(hook_name, pending_count, initialized)`` snapshots as hooks fire."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, int, bool]] = []

    def attach(self, stack: LogStack, *names: str) -> None:
        for name in names or ("init", "before", "after", "cleanup"):
            stack.hook(name, self._callback(name))

    def _callback(self, name: str):
        def record(owner: LogStack) -> None:
            self.calls.append((name, len(owner), owner.initialized))

        return record

    @property
    def names(self) -> list[str]:
        return [name for name, _, _ in self.calls]


@pytest.fixture
def hook_recorder() -> HookRecorder:
    return HookRecorder()
