from __future__ import annotations

from typing import Any, List, Optional, Set, Tuple

import pytest

from errors import AutomationLaunchError
from models import KeyName


class FakeBackend:
    """Records every automation action instead of touching the OS."""

    def __init__(self, fail_on: Optional[Set[str]] = None) -> None:
        self.calls: List[Tuple[Any, ...]] = []
        self.fail_on = fail_on or set()

    def _record(self, *call: Any) -> None:
        if call[0] in self.fail_on:
            raise AutomationLaunchError(f"{call[0]} could not launch")
        self.calls.append(call)

    async def write_clipboard(self, text: str) -> None:
        self._record("clipboard", text)

    async def press_paste(self) -> None:
        self._record("paste")

    async def press_key(self, key: KeyName) -> None:
        self._record("key", key)

    async def type_character(self, char: str) -> None:
        self._record("type", char)

    async def sleep(self, seconds: float) -> None:
        self.calls.append(("pause", seconds))

    def actions(self) -> List[Tuple[Any, ...]]:
        return [call for call in self.calls if call[0] != "pause"]


class FakeSettings:
    def __init__(self, auto_paste: bool = True, editor_file_tagging: bool = True) -> None:
        self.auto_paste = auto_paste
        self.editor_file_tagging = editor_file_tagging

    def get_auto_paste(self) -> bool:
        return self.auto_paste

    def get_editor_file_tagging(self) -> bool:
        return self.editor_file_tagging


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def make_backend():  # noqa: ANN201
    return FakeBackend


@pytest.fixture
def settings() -> FakeSettings:
    return FakeSettings()
