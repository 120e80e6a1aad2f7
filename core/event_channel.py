"""Best-effort event delivery and suggestion refresh.

Every interaction is reported with ``send``: the event is stamped with the
session id, POSTed to ``{base}/event`` and, only when that succeeds, the
suggestion list is re-fetched from ``{base}/suggest/{session_id}``.

Delivery failures never reach the caller. They degrade the desktop to its
last known suggestion list and are reported as a ``SendResult`` on the event
bus for logging.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum

import httpx
from pydantic import ValidationError

from core.event_bus import EventBus
from core.session import SessionIdentity
from core.state_manager import StateManager
from world_model.types import AppDescriptor, Event, EventDraft, SuggestionResponse

logger = logging.getLogger("learnos.event_channel")

DEFAULT_BASE_URL = "http://localhost:8000"


class DeliveryStatus(str, Enum):
    """Outcome of one ``send``."""

    DROPPED = "dropped"
    DELIVERED = "delivered"
    REFRESHED = "refreshed"


@dataclass(frozen=True)
class SendResult:
    """Internal outcome record, consumed by logging only."""

    event: Event
    status: DeliveryStatus
    error: str | None = None

    @property
    def topic(self) -> str:
        if self.status is DeliveryStatus.REFRESHED:
            return "suggestions_refreshed"
        return f"event_{self.status.value}"


class EventChannel:
    """Reports interactions to the backend and refreshes the suggestion list."""

    TOPICS = ("event_dropped", "event_delivered", "suggestions_refreshed")

    def __init__(
        self,
        state: StateManager,
        identity: SessionIdentity,
        base_url: str = DEFAULT_BASE_URL,
        event_bus: EventBus | None = None,
        timeout_seconds: float | None = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.state = state
        self.identity = identity
        self.event_bus = event_bus or EventBus()
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout_seconds),
            transport=transport,
        )
        self._pending: set[asyncio.Task[SendResult]] = set()

    @property
    def pending(self) -> int:
        """Number of deliveries still in flight."""
        return len(self._pending)

    def send(self, draft: EventDraft) -> None:
        """Schedule delivery of an event and return immediately.

        Without a running event loop the event is dropped and reported like
        any other failed delivery.
        """
        event = draft.stamp(self.identity.session_id)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("Event %s/%s dropped: no running event loop", event.app, event.type.value)
            self._publish(SendResult(event, DeliveryStatus.DROPPED, error="no running event loop"))
            return
        task = loop.create_task(self._deliver(event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def deliver(self, draft: EventDraft) -> SendResult:
        """Deliver an event and refresh suggestions, awaiting the outcome."""
        return await self._deliver(draft.stamp(self.identity.session_id))

    async def drain(self) -> None:
        """Wait for every in-flight delivery to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    async def aclose(self) -> None:
        await self.drain()
        await self._client.aclose()

    async def _deliver(self, event: Event) -> SendResult:
        try:
            response = await self._client.post("/event", json=event.to_wire())
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Event %s/%s dropped: %s", event.app, event.type.value, exc)
            return self._publish(SendResult(event, DeliveryStatus.DROPPED, error=str(exc)))

        try:
            suggestions = await self._fetch_suggestions(event.session_id)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Suggestion refresh failed, keeping current list: %s", exc)
            return self._publish(SendResult(event, DeliveryStatus.DELIVERED, error=str(exc)))

        if suggestions is None:
            logger.debug("Suggestion response carried no suggestions; list unchanged.")
            return self._publish(
                SendResult(event, DeliveryStatus.DELIVERED, error="no suggestions in response")
            )

        self.state.replace_suggestions(suggestions)
        logger.info("Suggestions refreshed after %s/%s", event.app, event.type.value)
        return self._publish(SendResult(event, DeliveryStatus.REFRESHED))

    async def _fetch_suggestions(self, session_id: str) -> list[AppDescriptor] | None:
        response = await self._client.get(f"/suggest/{session_id}")
        response.raise_for_status()
        try:
            body = SuggestionResponse.model_validate(response.json())
        except ValidationError as exc:
            raise ValueError(f"malformed suggestion response: {exc.error_count()} error(s)") from exc
        return body.suggestions

    def _publish(self, result: SendResult) -> SendResult:
        self.event_bus.emit(result.topic, result)
        return result
