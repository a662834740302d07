from __future__ import annotations

import pytest

import delivery
from delivery import CURSOR_APP_ID, VSCODE_APP_ID, deliver, select_protocol
from models import DeliveryOptions, KeyName, ProtocolKind
from protocols import Timings

NO_PAUSE = Timings(0, 0, 0, 0, 0, 0)


def test_select_protocol_by_target() -> None:
    refs = ["header.tsx"]
    assert select_protocol(DeliveryOptions(True, refs, CURSOR_APP_ID)) is ProtocolKind.MENTION_WITH_ENTER_CONFIRM
    assert select_protocol(DeliveryOptions(True, refs, VSCODE_APP_ID)) is ProtocolKind.MENTION_WITH_TAB_CONFIRM
    assert select_protocol(DeliveryOptions(True, refs, "com.apple.TextEdit")) is ProtocolKind.GENERIC_PASTE
    assert select_protocol(DeliveryOptions(True, refs, None)) is ProtocolKind.GENERIC_PASTE


def test_select_protocol_falls_back_without_references_or_auto_paste() -> None:
    assert select_protocol(DeliveryOptions(True, [], CURSOR_APP_ID)) is ProtocolKind.GENERIC_PASTE
    assert select_protocol(DeliveryOptions(False, ["a.ts"], CURSOR_APP_ID)) is ProtocolKind.GENERIC_PASTE


def test_target_match_is_case_sensitive() -> None:
    options = DeliveryOptions(True, ["a.ts"], CURSOR_APP_ID.upper())
    assert select_protocol(options) is ProtocolKind.GENERIC_PASTE


def test_options_freeze_reference_list() -> None:
    refs = ["a.ts"]
    options = DeliveryOptions(True, refs, None)
    refs.append("b.ts")

    assert options.file_references == ("a.ts",)


@pytest.mark.asyncio
@pytest.mark.parametrize("target", [CURSOR_APP_ID, VSCODE_APP_ID, None])
async def test_auto_paste_off_only_copies(backend, target) -> None:  # noqa: ANN001
    options = DeliveryOptions(auto_paste=False, file_references=["header.tsx"], target_app_id=target)

    await deliver("check header.tsx please", options, backend, timings=NO_PAUSE)

    assert backend.calls == [("clipboard", "check header.tsx please")]


@pytest.mark.asyncio
async def test_generic_scenario(backend) -> None:  # noqa: ANN001
    await deliver("Call me later", DeliveryOptions(), backend, timings=NO_PAUSE)

    assert backend.calls == [("clipboard", "Call me later"), ("paste",)]


@pytest.mark.asyncio
async def test_cursor_mention_scenario(backend) -> None:  # noqa: ANN001
    options = DeliveryOptions(True, ["header.tsx"], CURSOR_APP_ID)

    await deliver("check header.tsx please", options, backend, timings=NO_PAUSE)

    assert backend.calls == [
        ("clipboard", "check "),
        ("paste",),
        ("type", "@"),
        ("clipboard", "header.tsx"),
        ("paste",),
        ("key", KeyName.RETURN),
        ("clipboard", " please"),
        ("paste",),
    ]


@pytest.mark.asyncio
async def test_vscode_mention_scenario(backend) -> None:  # noqa: ANN001
    options = DeliveryOptions(True, ["header.tsx"], VSCODE_APP_ID)

    await deliver("check header.tsx please", options, backend, timings=NO_PAUSE)

    assert backend.calls == [
        ("clipboard", "check "),
        ("paste",),
        ("type", "#"),
        *[("type", char) for char in "header.tsx"],
        ("key", KeyName.TAB),
        ("clipboard", " please"),
        ("paste",),
    ]


@pytest.mark.asyncio
async def test_unknown_target_pastes_whole_text(backend) -> None:  # noqa: ANN001
    options = DeliveryOptions(True, ["header.tsx"], "com.apple.Notes")

    await deliver("check header.tsx please", options, backend, timings=NO_PAUSE)

    assert backend.calls == [("clipboard", "check header.tsx please"), ("paste",)]


@pytest.mark.asyncio
async def test_references_not_in_text_use_plain_paste(backend) -> None:  # noqa: ANN001
    options = DeliveryOptions(True, ["footer.tsx"], CURSOR_APP_ID)

    await deliver("check header.tsx please", options, backend, timings=NO_PAUSE)

    assert backend.calls == [("clipboard", "check header.tsx please"), ("paste",)]


@pytest.mark.asyncio
async def test_mention_protocol_is_dispatched(monkeypatch, backend) -> None:  # noqa: ANN001
    seen = []

    async def fake_run_mention(protocol, segments, backend, timings, sleep):  # noqa: ANN001, ANN202
        seen.append(protocol.kind)

    monkeypatch.setattr(delivery, "run_mention", fake_run_mention)

    await deliver("open a.ts", DeliveryOptions(True, ["a.ts"], VSCODE_APP_ID), backend, timings=NO_PAUSE)
    await deliver("open a.ts", DeliveryOptions(True, ["a.ts"], CURSOR_APP_ID), backend, timings=NO_PAUSE)

    assert seen == [ProtocolKind.MENTION_WITH_TAB_CONFIRM, ProtocolKind.MENTION_WITH_ENTER_CONFIRM]
    assert backend.calls == []
