"""Shared error codes, user-facing messages and delivery exceptions."""

from __future__ import annotations

AUTOMATION_LAUNCH_FAILED = "AUTOMATION_LAUNCH_FAILED"
DELIVERY_IN_PROGRESS = "DELIVERY_IN_PROGRESS"
NO_ACTIVE_TARGET = "NO_ACTIVE_TARGET"

ERROR_MESSAGES = {
    AUTOMATION_LAUNCH_FAILED: "Could not drive the keyboard or clipboard, check Accessibility permissions.",
    DELIVERY_IN_PROGRESS: "Still typing the previous result, try again in a moment.",
    NO_ACTIVE_TARGET: "No active input target, result kept in clipboard.",
}


class DeliveryError(Exception):
    code = ""

    @property
    def user_message(self) -> str:
        return ERROR_MESSAGES.get(self.code, str(self))


class AutomationLaunchError(DeliveryError):
    """The clipboard or key-synthesis command could not be started."""

    code = AUTOMATION_LAUNCH_FAILED


class DeliveryInProgressError(DeliveryError):
    code = DELIVERY_IN_PROGRESS
