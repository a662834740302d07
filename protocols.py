"""Delivery protocols: the key and clipboard choreography per target surface.

Nothing here can observe the target application. Every step is followed
by a fixed settle pause instead, and a step that launched but did nothing
in the target (picker never opened, focus moved away) goes unnoticed. The
only failure that surfaces is an AutomationLaunchError from the backend,
which aborts the rest of the sequence where it stands.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Sequence

from interfaces import AutomationBackend
from models import KeyName, ProtocolKind, SegmentKind, TextSegment

LOGGER = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class Timings:
    clipboard_settle: float = 0.04
    paste_settle: float = 0.08
    picker_open: float = 0.25
    picker_filter: float = 0.35
    confirm_settle: float = 0.1
    keystroke_interval: float = 0.015


DEFAULT_TIMINGS = Timings()


@dataclass(frozen=True)
class MentionProtocol:
    kind: ProtocolKind
    trigger: str
    confirm_key: KeyName
    type_filename: bool


MENTION_PROTOCOLS: Dict[ProtocolKind, MentionProtocol] = {
    ProtocolKind.MENTION_WITH_ENTER_CONFIRM: MentionProtocol(
        kind=ProtocolKind.MENTION_WITH_ENTER_CONFIRM,
        trigger="@",
        confirm_key=KeyName.RETURN,
        type_filename=False,
    ),
    # Return submits the whole chat input here, and the picker only
    # filters on live keystrokes.
    ProtocolKind.MENTION_WITH_TAB_CONFIRM: MentionProtocol(
        kind=ProtocolKind.MENTION_WITH_TAB_CONFIRM,
        trigger="#",
        confirm_key=KeyName.TAB,
        type_filename=True,
    ),
}


async def run_generic_paste(
    text: str,
    backend: AutomationBackend,
    auto_paste: bool = True,
    timings: Timings = DEFAULT_TIMINGS,
    sleep: Sleep = asyncio.sleep,
) -> None:
    """Put the whole text on the clipboard and paste it once."""
    await backend.write_clipboard(text)
    if not auto_paste:
        return
    await sleep(timings.clipboard_settle)
    await backend.press_paste()


async def run_mention(
    protocol: MentionProtocol,
    segments: Sequence[TextSegment],
    backend: AutomationBackend,
    timings: Timings = DEFAULT_TIMINGS,
    sleep: Sleep = asyncio.sleep,
) -> None:
    """Deliver segments one after another, turning file references into mentions."""
    for seg in segments:
        if seg.kind is SegmentKind.FILE_REFERENCE:
            LOGGER.debug("%s: mention %r", protocol.kind.value, seg.value)
            await _deliver_mention(protocol, seg.value, backend, timings, sleep)
        elif seg.value:
            LOGGER.debug("%s: paste %d chars", protocol.kind.value, len(seg.value))
            await backend.write_clipboard(seg.value)
            await sleep(timings.clipboard_settle)
            await backend.press_paste()
            await sleep(timings.paste_settle)


async def _deliver_mention(
    protocol: MentionProtocol,
    file_name: str,
    backend: AutomationBackend,
    timings: Timings,
    sleep: Sleep,
) -> None:
    await backend.type_character(protocol.trigger)
    await sleep(timings.picker_open)

    if protocol.type_filename:
        for index, char in enumerate(file_name):
            if index:
                await sleep(timings.keystroke_interval)
            await backend.type_character(char)
    else:
        await backend.write_clipboard(file_name)
        await sleep(timings.clipboard_settle)
        await backend.press_paste()

    await sleep(timings.picker_filter)
    await backend.press_key(protocol.confirm_key)
    await sleep(timings.confirm_settle)
