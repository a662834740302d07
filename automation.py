"""Automation backends: clipboard writes and synthetic key events."""

from __future__ import annotations

import asyncio
import logging
import platform
import sys

import pyperclip

from errors import AutomationLaunchError
from interfaces import AutomationBackend
from models import KeyName

try:
    from pynput.keyboard import Controller, Key
except Exception:  # pragma: no cover
    Controller = None  # type: ignore
    Key = None  # type: ignore

LOGGER = logging.getLogger(__name__)

OSASCRIPT = "osascript"

APPLE_KEY_CODES: dict[KeyName, int] = {
    KeyName.RETURN: 36,
    KeyName.TAB: 48,
}


async def _write_clipboard(text: str) -> None:
    try:
        await asyncio.to_thread(pyperclip.copy, text)
    except pyperclip.PyperclipException as exc:
        raise AutomationLaunchError(f"clipboard unavailable: {exc}") from exc


def _quote_applescript(char: str) -> str:
    return '"' + char.replace("\\", "\\\\").replace('"', '\\"') + '"'


class OsaScriptBackend:
    """macOS backend that runs System Events scripts through osascript.

    A script that starts but fails (no Accessibility permission, nothing
    focused) still counts as done: only the launch itself can fail.
    """

    def __init__(self, executable: str = OSASCRIPT) -> None:
        self._executable = executable

    async def write_clipboard(self, text: str) -> None:
        await _write_clipboard(text)

    async def press_paste(self) -> None:
        await self._run_system_events('keystroke "v" using command down')

    async def press_key(self, key: KeyName) -> None:
        await self._run_system_events(f"key code {APPLE_KEY_CODES[key]}")

    async def type_character(self, char: str) -> None:
        await self._run_system_events(f"keystroke {_quote_applescript(char)}")

    async def _run_system_events(self, command: str) -> None:
        script = f'tell application "System Events" to {command}'
        await self._run([self._executable, "-e", script])

    async def _run(self, argv: list[str]) -> None:
        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as exc:
            LOGGER.error("could not launch %s: %s", argv[0], exc)
            raise AutomationLaunchError(f"{argv[0]} failed to launch: {exc}") from exc
        returncode = await proc.wait()
        if returncode:
            LOGGER.debug("%s exited with %s, ignored", argv[0], returncode)


class PynputBackend:
    def __init__(self, use_command_key: bool | None = None) -> None:
        if use_command_key is None:
            use_command_key = sys.platform == "darwin"
        self._use_command_key = use_command_key
        self._keyboard = None

    async def write_clipboard(self, text: str) -> None:
        await _write_clipboard(text)

    async def press_paste(self) -> None:
        keyboard = self._controller()
        modifier = Key.cmd if self._use_command_key else Key.ctrl
        self._send(keyboard.press, modifier)
        self._send(keyboard.press, "v")
        self._send(keyboard.release, "v")
        self._send(keyboard.release, modifier)

    async def press_key(self, key: KeyName) -> None:
        keyboard = self._controller()
        target = Key.enter if key is KeyName.RETURN else Key.tab
        self._send(keyboard.press, target)
        self._send(keyboard.release, target)

    async def type_character(self, char: str) -> None:
        keyboard = self._controller()
        self._send(keyboard.type, char)

    @staticmethod
    def _send(action, key) -> None:  # noqa: ANN001
        try:
            action(key)
        except Exception as exc:
            LOGGER.error("pynput could not send %r: %s", key, exc)
            raise AutomationLaunchError(f"keyboard event failed: {exc}") from exc

    def _controller(self):  # noqa: ANN202
        if Controller is None or Key is None:
            raise AutomationLaunchError("keyboard dependency missing")
        if self._keyboard is None:
            try:
                self._keyboard = Controller()
            except Exception as exc:
                raise AutomationLaunchError(f"keyboard unavailable: {exc}") from exc
        return self._keyboard


def create_backend(name: str = "auto") -> AutomationBackend:
    if name == "auto":
        name = "osascript" if platform.system() == "Darwin" else "pynput"
    if name == "osascript":
        return OsaScriptBackend()
    if name == "pynput":
        return PynputBackend()
    raise ValueError(f"Unsupported automation backend: {name}")
