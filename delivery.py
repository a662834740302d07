"""Entry point: pick a delivery protocol for the focused app and run it."""

from __future__ import annotations

import asyncio
import logging
from typing import Dict

from interfaces import AutomationBackend
from models import DeliveryOptions, ProtocolKind
from protocols import DEFAULT_TIMINGS, MENTION_PROTOCOLS, Sleep, Timings, run_generic_paste, run_mention
from segmenter import has_file_reference, segment

LOGGER = logging.getLogger(__name__)

CURSOR_APP_ID = "com.todesktop.230313mzl4w4u92"
VSCODE_APP_ID = "com.microsoft.VSCode"

TARGET_PROTOCOLS: Dict[str, ProtocolKind] = {
    CURSOR_APP_ID: ProtocolKind.MENTION_WITH_ENTER_CONFIRM,
    VSCODE_APP_ID: ProtocolKind.MENTION_WITH_TAB_CONFIRM,
}


def select_protocol(options: DeliveryOptions) -> ProtocolKind:
    if not options.auto_paste or not options.file_references:
        return ProtocolKind.GENERIC_PASTE
    if options.target_app_id is None:
        return ProtocolKind.GENERIC_PASTE
    return TARGET_PROTOCOLS.get(options.target_app_id, ProtocolKind.GENERIC_PASTE)


async def deliver(
    text: str,
    options: DeliveryOptions,
    backend: AutomationBackend,
    timings: Timings = DEFAULT_TIMINGS,
    sleep: Sleep = asyncio.sleep,
) -> None:
    """Deliver ``text`` into the focused application.

    With auto-paste off the text only lands on the clipboard. Unknown
    targets and text without file references use a single plain paste;
    neither case is an error. Raises AutomationLaunchError when the
    backend cannot start an action, possibly after part of the text was
    already typed.
    """
    if not options.auto_paste:
        LOGGER.debug("auto paste disabled, copying to clipboard only")
        await run_generic_paste(text, backend, auto_paste=False, timings=timings, sleep=sleep)
        return

    kind = select_protocol(options)
    protocol = MENTION_PROTOCOLS.get(kind)
    if protocol is not None:
        segments = segment(text, options.file_references)
        if has_file_reference(segments):
            LOGGER.debug("target %s uses %s (%d segments)", options.target_app_id, kind.value, len(segments))
            await run_mention(protocol, segments, backend, timings=timings, sleep=sleep)
            return
        LOGGER.debug("no file reference found in text, falling back to plain paste")

    await run_generic_paste(text, backend, timings=timings, sleep=sleep)
