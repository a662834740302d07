"""Protocol interfaces used by the delivery core and DeliveryController."""

from __future__ import annotations

from typing import Protocol

from models import KeyName


class AutomationBackend(Protocol):
    async def write_clipboard(self, text: str) -> None: ...

    async def press_paste(self) -> None: ...

    async def press_key(self, key: KeyName) -> None: ...

    async def type_character(self, char: str) -> None: ...


class ConfigStore(Protocol):
    def get_auto_paste(self) -> bool: ...

    def get_editor_file_tagging(self) -> bool: ...
