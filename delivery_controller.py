"""State-machine based delivery orchestration."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Iterable, Optional

from delivery import deliver
from errors import AutomationLaunchError, DeliveryInProgressError
from interfaces import AutomationBackend, ConfigStore
from models import DeliveryOptions, DeliveryState
from protocols import DEFAULT_TIMINGS, Sleep, Timings

LOGGER = logging.getLogger(__name__)

StateCallback = Callable[[DeliveryState, DeliveryState], None]
ErrorCallback = Callable[[str, str], None]


class DeliveryController:
    """Runs one delivery at a time against a single automation backend.

    A request that arrives while another is still typing raises
    DeliveryInProgressError; requests are never queued, since both would
    fight over the same clipboard and keyboard focus.
    """

    def __init__(
        self,
        backend: AutomationBackend,
        config_store: ConfigStore,
        timings: Timings = DEFAULT_TIMINGS,
        sleep: Sleep = asyncio.sleep,
        on_state_change: Optional[StateCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        self._backend = backend
        self._config_store = config_store
        self._timings = timings
        self._sleep = sleep
        self._on_state_change = on_state_change
        self._on_error = on_error
        self._state = DeliveryState.IDLE

    @property
    def state(self) -> DeliveryState:
        return self._state

    def build_options(
        self,
        file_references: Iterable[str] = (),
        target_app_id: Optional[str] = None,
    ) -> DeliveryOptions:
        references = tuple(file_references) if self._config_store.get_editor_file_tagging() else ()
        return DeliveryOptions(
            auto_paste=self._config_store.get_auto_paste(),
            file_references=references,
            target_app_id=target_app_id,
        )

    async def deliver_text(
        self,
        text: str,
        file_references: Iterable[str] = (),
        target_app_id: Optional[str] = None,
    ) -> None:
        if self._state != DeliveryState.IDLE:
            raise DeliveryInProgressError("a delivery is already running")
        if not text.strip():
            LOGGER.info("Skipping empty text")
            return

        options = self.build_options(file_references, target_app_id)
        self._transition(DeliveryState.DELIVERING)
        try:
            await deliver(text, options, self._backend, timings=self._timings, sleep=self._sleep)
        except AutomationLaunchError as exc:
            self._fail(exc.code, str(exc))
            raise
        finally:
            self._transition(DeliveryState.IDLE)
        LOGGER.info("Delivered %d chars to %s", len(text), target_app_id or "focused app")

    def _fail(self, code: str, message: str) -> None:
        LOGGER.error("Delivery aborted: %s", message)
        self._transition(DeliveryState.ERROR)
        if self._on_error:
            self._on_error(code, message)

    def _transition(self, to_state: DeliveryState) -> None:
        from_state = self._state
        if from_state == to_state:
            return
        self._state = to_state
        if self._on_state_change:
            self._on_state_change(from_state, to_state)
