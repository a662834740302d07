"""Core data models for text delivery."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class DeliveryState(str, Enum):
    IDLE = "IDLE"
    DELIVERING = "DELIVERING"
    ERROR = "ERROR"


class SegmentKind(str, Enum):
    PLAIN_TEXT = "plain_text"
    FILE_REFERENCE = "file_reference"


class ProtocolKind(str, Enum):
    GENERIC_PASTE = "generic_paste"
    MENTION_WITH_ENTER_CONFIRM = "mention_with_enter_confirm"
    MENTION_WITH_TAB_CONFIRM = "mention_with_tab_confirm"


class KeyName(str, Enum):
    RETURN = "return"
    TAB = "tab"


@dataclass(frozen=True)
class TextSegment:
    kind: SegmentKind
    value: str


@dataclass(frozen=True)
class DeliveryOptions:
    auto_paste: bool = True
    file_references: Tuple[str, ...] = field(default_factory=tuple)
    target_app_id: Optional[str] = None

    def __post_init__(self) -> None:
        # Callers hand in lists; freeze them so the options stay immutable.
        object.__setattr__(self, "file_references", tuple(self.file_references))
